"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add the parent directory to the path so we can import hashiter modules
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from hashiter import DoubleHashBuilder, U32, U64, U128


@pytest.fixture(params=[U32, U64, U128], ids=str)
def uint(request):
    """Every supported width."""
    return request.param


@pytest.fixture(params=[U32, U64], ids=str)
def numpy_uint(request):
    """Widths with a native numpy dtype."""
    return request.param


@pytest.fixture
def default_builder():
    """A builder with the default configuration."""
    return DoubleHashBuilder()


@pytest.fixture
def sample_keys():
    """A mix of key types accepted by the hash functions."""
    return [
        'hello',
        '',
        'a somewhat longer key with spaces and ünïcödé',
        b'raw bytes',
        0,
        42,
        2**64 - 1,
        -1,
        True,
        ('title', 7),
    ]


@pytest.fixture
def sample_string_list():
    """Create a sample list of strings for testing."""
    return ['apple', 'banana', 'cherry', 'date', 'elderberry']
