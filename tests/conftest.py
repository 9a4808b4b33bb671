import os
import sys

import pytest

# Add src to the Python path to allow imports without installing the package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from couponcode.alphabet import ALPHABET  # noqa: E402

ENV_VARS = (
    "COUPONCODE_PARTS",
    "COUPONCODE_PART_LENGTH",
    "COUPONCODE_BAD_WORDS",
    "COUPONCODE_LOG_LEVEL",
)


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: Large generation samples")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keeps COUPONCODE_* settings from the outer environment out of the tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def index_map():
    return {ch: i for i, ch in enumerate(ALPHABET)}
