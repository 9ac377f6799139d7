import sys
from pathlib import Path
import importlib
import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture()
def m():
    """Lazily import the main module for tests to avoid module-level import."""
    return importlib.import_module("main")


@pytest.fixture()
def classic_table():
    """The six-symbol alphabet used throughout Huffman coding textbooks."""
    symbols = ["a", "b", "c", "d", "e", "f"]
    frequencies = [5, 9, 12, 13, 16, 45]
    return symbols, frequencies


def is_prefix_free(codes):
    """Return ``True`` if no code in ``codes`` is a prefix of another."""
    for i, a in enumerate(codes):
        for j, b in enumerate(codes):
            if i != j and b[:len(a)] == a:
                return False
    return True


@pytest.fixture()
def is_prefix_free_fn():
    """
    Fixture that provides the is_prefix_free helper without importing conftest.
    """
    return is_prefix_free
