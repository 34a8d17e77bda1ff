"""Types package.

- `InclusionStep`: a direction bit and the digest of the sibling node at one level of the Merkle tree.
- `InclusionPath`: the non-empty sequence of steps from the leaf to the root.

Direction bit `0` means the current node is hashed first (`hash(current || sibling)`), direction bit `1` means the
sibling is hashed first (`hash(sibling || current)`).
"""
