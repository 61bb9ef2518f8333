"""
Tests for hashiter.utils.traits module.

Callers can be written against the capabilities and run with any
implementation.
"""
import pytest
from hashiter import DoubleHashBuilder
from hashiter.numeric import U32, U128
from hashiter.utils.traits import HashIterHasher, BuildHashIterHasher


class ModuloHasher(HashIterHasher):
    """A toy hasher: i-th value is (len(key) + i) mod n."""

    def __init__(self, n):
        self.n = n

    def hash_iter(self, key, count):
        return ((len(key) + i) % self.n for i in range(count))


class ModuloHasherBuilder(BuildHashIterHasher):

    def __init__(self, n):
        self.n = n

    def build_hash_iter_hasher(self):
        return ModuloHasher(self.n)


def positions(builder: BuildHashIterHasher, key, count):
    """Caller side code that only knows about the capabilities."""
    hasher = builder.build_hash_iter_hasher()
    return sorted(set(hasher.hash_iter(key, count)))


@pytest.mark.unit
class TestTraits:
    """Tests for HashIterHasher and BuildHashIterHasher."""

    def test_abstract(self):
        """The capabilities cannot be instantiated."""
        with pytest.raises(TypeError):
            HashIterHasher()
        with pytest.raises(TypeError):
            BuildHashIterHasher()

    def test_missing_method(self):
        """Subclasses must implement the abstract method."""
        class Incomplete(HashIterHasher):
            pass

        with pytest.raises(TypeError):
            Incomplete()

    def test_substitute_implementation(self):
        """The same caller runs with a custom implementation."""
        assert positions(ModuloHasherBuilder(10), 'abc', 3) == [3, 4, 5]

    def test_substitute_width(self):
        """The same caller runs with any width of the double hasher."""
        for uint in (U32, U128):
            result = positions(DoubleHashBuilder(uint=uint).with_n(64), 'abc', 5)
            assert 1 <= len(result) <= 5
            assert all(0 <= p < 64 for p in result)
