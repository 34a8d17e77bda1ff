"""Script package.

`InclusionScript` renders a Merkle inclusion claim as a pair of Bitcoin scripts built with `tx_engine`: a locking
script, fixed by the depth of the tree and the expected root, and an unlocking script carrying the leaf digest and the
inclusion path. Executing `unlock + lock` with `tx_engine.Context` folds the leaf through the path with `OP_SHA256`
and compares the result with the root, independently of the trace builder and of the AIR.

Usage example:

    >>> from tx_engine import Context
    >>> from merkle_air.script.inclusion_script import InclusionScript, InclusionScriptUnlockingKey
    >>> from merkle_air.types.inclusion_path import InclusionPath
    >>> from merkle_air.util.hash_functions import sha256
    >>> path = InclusionPath.from_pairs([(0, sha256(bytes([8])))])
    >>> root = sha256(sha256(bytes([26])) + sha256(bytes([8])))
    >>> lock = InclusionScript(root=root, depth=1).locking_script()
    >>> unlock = InclusionScriptUnlockingKey(leaf_digest=sha256(bytes([26])), path=path).to_unlocking_script()
    >>> Context(script=unlock + lock).evaluate()
    True
"""
