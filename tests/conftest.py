import pytest

from merkle_air.types.inclusion_path import InclusionPath
from merkle_air.util.hash_functions import sha256


def pytest_addoption(parser):
    parser.addoption(
        "--save-to-json",
        action="store",
        nargs="?",
        const="scripts_json",
        help="Save the lock/unlock scripts of inclusion claims to JSON files in the specified directory",
    )


@pytest.fixture
def save_to_json_folder(request):
    return request.config.getoption("--save-to-json")


@pytest.fixture
def single_step_claim():
    """Leaf `sha256(26)` with the single sibling `sha256(8)` hashed on its right."""
    leaf = sha256(bytes([26]))
    sibling = sha256(bytes([8]))
    return leaf, InclusionPath.from_pairs([(0, sibling)]), sha256(leaf + sibling)
