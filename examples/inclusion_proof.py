import argparse
import json
import logging
import sys
from pathlib import Path

import tomllib
from tx_engine import Context

from merkle_air.air.inclusion_air import InclusionAir
from merkle_air.backend.errors import BackendError
from merkle_air.backend.interface import ProvingBackend
from merkle_air.backend.proof import Proof
from merkle_air.backend.transparent import TransparentBackend
from merkle_air.script.inclusion_script import InclusionScript, InclusionScriptUnlockingKey
from merkle_air.trace.trace_builder import generate_inclusion_trace, merkle_root
from merkle_air.types.inclusion_path import InclusionPath
from merkle_air.util.hash_functions import sha256
from merkle_air.util.log import configure_logging

logger = logging.getLogger("merkle_air.examples")


def load_claim(claim_path: Path | None, leaf: int, sibling: int, direction: int) -> tuple[bytes, InclusionPath]:
    """Return the leaf digest and the inclusion path of the claim.

    If `claim_path` is given, it must be a TOML file of the form:

        leaf = "1a"
        steps = [
            { direction = 0, sibling = "<32-byte hex digest>" },
        ]

    where `leaf` is the hexadecimal raw leaf value. Otherwise the claim is a single step built from the raw bytes
    `leaf` and `sibling`.
    """
    if claim_path is None:
        return sha256(bytes([leaf])), InclusionPath.from_pairs([(direction, sha256(bytes([sibling])))])

    with Path.open(claim_path, "rb") as f:
        claim = tomllib.load(f)
    leaf_digest = sha256(bytes.fromhex(claim["leaf"]))
    path = InclusionPath.from_pairs((step["direction"], bytes.fromhex(step["sibling"])) for step in claim["steps"])
    return leaf_digest, path


def save_data_to_file(data: dict, filename: str):
    data_dir = Path(__file__).resolve().parent / "outputs"
    data_dir.mkdir(parents=True, exist_ok=True)
    with Path.open(data_dir / f"{filename}.json", "w") as f:
        f.write(json.dumps(data, indent=4))


parser = argparse.ArgumentParser(
    description="Build the trace of a Merkle inclusion claim, prove it against the root it folds to and verify the \
        proof with an independently constructed AIR."
)
parser.add_argument("--leaf", type=int, default=26, help="Raw leaf byte, hashed with SHA-256 to get the leaf digest")
parser.add_argument("--sibling", type=int, default=8, help="Raw sibling byte, hashed with SHA-256")
parser.add_argument("--direction", type=int, choices=[0, 1], default=0, help="Direction bit of the single step")
parser.add_argument("--claim", type=str, help="TOML file describing the claim, overrides the byte arguments")
parser.add_argument("--root", type=str, help="Hex root the verifier expects. Defaults to the true root")
parser.add_argument("--save", action="store_true", help="Save the proof to examples/outputs/proof.json")
parser.add_argument("--log-level", type=str, default=None, help="Logging level, defaults to $MERKLE_AIR_LOG or INFO")

if __name__ == "__main__":
    args = parser.parse_args()
    configure_logging(args.log_level)

    leaf_digest, path = load_claim(
        Path(args.claim) if args.claim is not None else None, args.leaf, args.sibling, args.direction
    )
    root = merkle_root(leaf_digest, path)
    expected_root = bytes.fromhex(args.root) if args.root is not None else root
    logger.info("Leaf %s, depth %d, root %s", leaf_digest.hex(), len(path), root.hex())

    # Independent check of the fold in Bitcoin Script
    lock = InclusionScript(root=expected_root, depth=len(path)).locking_script()
    unlock = InclusionScriptUnlockingKey(leaf_digest=leaf_digest, path=path).to_unlocking_script()
    logger.info("Script evaluation: %s", Context(script=unlock + lock).evaluate())

    trace = generate_inclusion_trace(leaf_digest, path)
    backend: ProvingBackend = TransparentBackend()

    try:
        proof = backend.prove(InclusionAir(expected_root=root), trace, [])
        if args.save:
            save_data_to_file(proof.serialise(), "proof")
            proof = Proof.deserialise(proof.serialise())
        backend.verify(InclusionAir(expected_root=expected_root), proof, [])
    except BackendError as e:
        logger.error("Verification failed: %s", e)
        sys.exit(1)

    logger.info("Proof accepted")
