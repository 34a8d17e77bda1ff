from tx_engine import Script

from merkle_air.types.inclusion_path import InclusionPath
from merkle_air.util.hash_functions import DIGEST_SIZE, is_digest


class InclusionScript:
    """Class implementing methods to generate locking scripts verifying a Merkle inclusion path with SHA-256."""

    def __init__(self, root: bytes, depth: int):
        """Initialise an InclusionScript instance.

        Args:
            root (bytes): The expected root of the Merkle tree.
            depth (int): The number of steps of the inclusion path.

        Raises:
            ValueError: If `root` is not a 32-byte digest or `depth` is not positive.
        """
        if not is_digest(root):
            msg = f"The root must be a {DIGEST_SIZE}-byte digest: root: {root!r}"
            raise ValueError(msg)
        if depth <= 0:
            msg = f"The depth must be a positive integer: depth: {depth}"
            raise ValueError(msg)

        self.root = bytes(root)
        self.depth = depth

    def locking_script(self, is_equal_verify: bool = False) -> Script:
        """Generate the locking script verifying an inclusion path.

        Stack input:
            - stack:    [sibling_{depth}, bit_{depth}, ..., sibling_1, bit_1, leaf_digest]
            - altstack: []

        Stack output:
            - stack:    ([1] if not is_equal_verify, else []) if the path folds to `self.root`
                        ([0] if not is_equal_verify, else stack evaluation error) otherwise
            - altstack: []

        Args:
            is_equal_verify (bool): If `True`, use `OP_EQUALVERIFY` in the final verification step, otherwise
                `OP_EQUAL`. Default to `False`.

        Returns:
            Locking script for verifying an inclusion path where `bit_i == 0` means `hash(current || sibling_i)` and
            `bit_i == 1` means `hash(sibling_i || current)`.
        """
        out = Script()

        # stack in: [... sibling_i bit_i current]
        # stack out: [... sibling_{i+1} bit_{i+1} hash(left || right)]
        out += Script.parse_string(" ".join(["OP_SWAP OP_NOTIF OP_SWAP OP_ENDIF OP_CAT OP_SHA256"] * self.depth))

        # stack in: [<purported root>]
        # stack out: [fail if <purported root> != self.root else 1]
        out.append_pushdata(self.root)
        out += Script.parse_string("OP_EQUALVERIFY") if is_equal_verify else Script.parse_string("OP_EQUAL")

        return out


class InclusionScriptUnlockingKey:
    """Class implementing methods to generate unlocking scripts for `InclusionScript`."""

    def __init__(self, leaf_digest: bytes, path: InclusionPath):
        """Initialise an InclusionScriptUnlockingKey instance.

        Args:
            leaf_digest (bytes): The digest of the leaf.
            path (InclusionPath): The inclusion path, ordered from the leaf to the root.

        Raises:
            ValueError: If `leaf_digest` is not a 32-byte digest.
        """
        if not is_digest(leaf_digest):
            msg = f"The leaf must be a {DIGEST_SIZE}-byte digest: leaf_digest: {leaf_digest!r}"
            raise ValueError(msg)

        self.leaf_digest = bytes(leaf_digest)
        self.path = path

    def to_unlocking_script(self, inclusion_script: InclusionScript | None = None) -> Script:
        """Generate the unlocking script for `InclusionScript.locking_script`.

        Stack input:
            - stack:    []
            - altstack: []

        Stack output:
            - stack:    [sibling_{depth}, bit_{depth}, ..., sibling_1, bit_1, leaf_digest]
            - altstack: []

        Args:
            inclusion_script (InclusionScript | None): If given, check that its depth matches the length of the path.

        Returns:
            The unlocking script.
        """
        if inclusion_script is not None:
            assert (
                inclusion_script.depth == len(self.path)
            ), f"The path must be of length {inclusion_script.depth}: len(path): {len(self.path)}"

        out = Script()
        for step in reversed(self.path.steps):
            out.append_pushdata(step.sibling)
            out += Script.parse_string("OP_1" if step.direction else "OP_0")
        out.append_pushdata(self.leaf_digest)

        return out
