import json
from dataclasses import dataclass
from pathlib import Path

import pytest
from tx_engine import Context

from merkle_air.script.inclusion_script import InclusionScript, InclusionScriptUnlockingKey
from merkle_air.trace.trace_builder import generate_inclusion_trace, merkle_root
from merkle_air.types.inclusion_path import InclusionPath
from merkle_air.util.hash_functions import sha256


def save_scripts(lock, unlock, save_to_json_folder, filename, test_name):
    output_dir = Path("data") / save_to_json_folder / "script"
    output_dir.mkdir(parents=True, exist_ok=True)
    json_file = output_dir / f"{filename}.json"

    data = {}
    if json_file.exists():
        with json_file.open("r") as f:
            data = json.load(f)

    data[test_name] = {"lock": lock, "unlock": unlock}

    with json_file.open("w") as f:
        json.dump(data, f, indent=4)


@dataclass
class InclusionScriptData:
    filename = "inclusion_script"
    test_data = {
        "test_inclusion_script": [
            {
                "root": "7e452279e3119ef55e2a60b7b7191373f05ae231527a2325d95099c430d5d9a1",
                "leaf": "58f7b0780592032e4d8602a3e8690fb2c701b2e1dd546e703445aabd6469734d",
                "sibling": ["beead77994cf573341ec17b58bbf7eb34d2711c993c1d976b128b3188dc1829a"],
                "bit": [0],
            },
            {
                "root": "9e8230e21847fe097713f3c88a96a10675ea094a5418a21935711a8aaf52c82b",
                "leaf": "58f7b0780592032e4d8602a3e8690fb2c701b2e1dd546e703445aabd6469734d",
                "sibling": ["beead77994cf573341ec17b58bbf7eb34d2711c993c1d976b128b3188dc1829a"],
                "bit": [1],
            },
            {
                "root": "cd53a2ce68e6476c29512ea53c395c7f5d8fbcb4614d89298db14e2a5bdb5456",
                "leaf": "6b86b273ff34fce19d6b804eff5a3f5747ada4eaa22f1d49c01e52ddb7875b4b",
                "sibling": [
                    "d4735e3a265e16eee03f59718b9b5d03019c07d8b6c51f90da3a666eec13ab35",
                    "20ab747d45a77938a5b84c2944b8f5355c49f21db0c549451c6281c91ba48d0d",
                ],
                "bit": [0, 0],
            },
        ],
    }


@pytest.mark.parametrize(
    ("root", "leaf", "sibling", "bit"),
    [
        (test_case["root"], test_case["leaf"], test_case["sibling"], test_case["bit"])
        for test_case in InclusionScriptData.test_data["test_inclusion_script"]
    ],
)
def test_inclusion_script(root, leaf, sibling, bit, save_to_json_folder):
    path = InclusionPath.from_pairs((b, bytes.fromhex(s)) for b, s in zip(bit, sibling))
    inclusion_script = InclusionScript(root=bytes.fromhex(root), depth=len(path))
    unlocking_key = InclusionScriptUnlockingKey(leaf_digest=bytes.fromhex(leaf), path=path)

    lock = inclusion_script.locking_script()
    unlock = unlocking_key.to_unlocking_script(inclusion_script)

    context = Context(script=unlock + lock)
    assert context.evaluate()
    assert len(context.get_stack()) == 1
    assert len(context.get_altstack()) == 0

    # The script and the trace builder agree on the root
    trace = generate_inclusion_trace(bytes.fromhex(leaf), path)
    assert merkle_root(bytes.fromhex(leaf), path).hex() == root
    assert trace.result_word(trace.height - 1) == bytes.fromhex(root)[:4]

    if save_to_json_folder:
        save_scripts(str(lock), str(unlock), save_to_json_folder, InclusionScriptData.filename, "inclusion_script")


@pytest.mark.parametrize("depth", [1, 3, 6])
def test_inclusion_script_matches_fold(depth):
    leaf = sha256(b"leaf")
    path = InclusionPath.from_pairs([((i + 1) % 2, sha256(bytes([i]))) for i in range(depth)])

    lock = InclusionScript(root=merkle_root(leaf, path), depth=depth).locking_script()
    unlock = InclusionScriptUnlockingKey(leaf_digest=leaf, path=path).to_unlocking_script()

    context = Context(script=unlock + lock)
    assert context.evaluate()
    assert len(context.get_stack()) == 1


def test_inclusion_script_rejects_wrong_root():
    leaf = sha256(bytes([26]))
    path = InclusionPath.from_pairs([(0, sha256(bytes([8])))])

    lock = InclusionScript(root=sha256(bytes([9])), depth=1).locking_script(is_equal_verify=True)
    unlock = InclusionScriptUnlockingKey(leaf_digest=leaf, path=path).to_unlocking_script()

    context = Context(script=unlock + lock)
    assert not context.evaluate()


@pytest.mark.parametrize(
    ("root", "depth", "msg"),
    [
        (bytes(31), 1, r"The root must be a 32-byte digest"),
        (bytes(32), 0, r"The depth must be a positive integer: depth: 0"),
    ],
)
def test_inclusion_script_errors(root, depth, msg):
    with pytest.raises(ValueError, match=msg):
        InclusionScript(root=root, depth=depth)


def test_unlocking_key_depth_mismatch():
    path = InclusionPath.from_pairs([(0, sha256(bytes([8])))])
    unlocking_key = InclusionScriptUnlockingKey(leaf_digest=sha256(bytes([26])), path=path)

    with pytest.raises(AssertionError, match=r"The path must be of length 2"):
        unlocking_key.to_unlocking_script(InclusionScript(root=bytes(32), depth=2))
