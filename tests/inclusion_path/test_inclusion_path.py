import pytest

from merkle_air.types.inclusion_path import InclusionPath, InclusionStep
from merkle_air.util.hash_functions import sha256

SIBLING = sha256(bytes([8]))


def test_from_pairs_round_trip():
    pairs = [(0, sha256(b"a")), (1, sha256(b"b")), (0, sha256(b"c"))]
    path = InclusionPath.from_pairs(pairs)

    assert path.depth == 3
    assert len(path) == 3
    assert path.to_pairs() == pairs
    assert [step.direction for step in path] == [0, 1, 0]
    assert path[1] == InclusionStep(1, sha256(b"b"))


@pytest.mark.parametrize(
    ("direction", "expected"),
    [
        (0, (b"\x01" * 32, SIBLING)),
        (1, (SIBLING, b"\x01" * 32)),
    ],
)
def test_step_order(direction, expected):
    assert InclusionStep(direction, SIBLING).order(b"\x01" * 32) == expected


def test_step_accepts_bool_direction():
    step = InclusionStep(True, SIBLING)
    assert step.direction == 1
    assert type(step.direction) is int


@pytest.mark.parametrize(
    ("direction", "sibling", "msg"),
    [
        (2, SIBLING, r"The direction bit must be 0 or 1: direction: 2"),
        (-1, SIBLING, r"The direction bit must be 0 or 1: direction: -1"),
        (0, SIBLING[:31], r"The sibling must be a 32-byte digest"),
        (0, SIBLING.hex(), r"The sibling must be a 32-byte digest"),
    ],
)
def test_step_errors(direction, sibling, msg):
    with pytest.raises(ValueError, match=msg):
        InclusionStep(direction, sibling)


def test_empty_path_is_rejected():
    with pytest.raises(ValueError, match=r"The inclusion path must contain at least one step."):
        InclusionPath(())


def test_path_is_immutable():
    path = InclusionPath([InclusionStep(0, SIBLING)])
    assert isinstance(path.steps, tuple)
    with pytest.raises(AttributeError):
        path.steps = ()
