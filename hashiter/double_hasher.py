import numpy as np
from numbers import Integral
from typing import Any, Iterable, Optional
from hashiter.hashes import Hashes
from hashiter.kernels import hash_points
from hashiter.numeric import UIntType, U64
from hashiter.utils.traits import HashIterHasher
from hashiter.utils.funcs import type_check_call, get_logger

logger = get_logger(__name__)


class DoubleHasher(HashIterHasher):
    """
    Enhanced double hashing hasher.

    Hashes a key with two independently seeded hash functions and turns the
    two digests into a `Hashes` iterator. The hasher only holds configuration,
    every call to `hash_iter` gets its own iterator state.

    The hash functions can be any objects with a `hash(key) -> int` method
    returning a 64 bit digest, see `hashiter.utils.HashFunction`. Digests are
    truncated to `uint` before use, so the same key yields different (but
    equally valid) sequences for different widths.
    """

    @type_check_call
    def __init__(self, hash_function1: Any, hash_function2: Any, n: Optional[int]=None, uint: UIntType=U64):
        """
        Parameters
        ----------
        hash_function1 : Any
            the hash function producing the first base hash
        hash_function2 : Any
            the hash function producing the second base hash, must be seeded
            differently than `hash_function1`
        n : Optional[int] = None
            the size of the hash table, defaults to `uint.max`
        uint : UIntType = U64
            the width of the generated hash values

        Raises
        ------
        ValueError
            if `n` is not in [1, uint.max]
        """
        if n is None:
            n = uint.max
        if not 1 <= n <= uint.max:
            raise ValueError(f'n must be in [1, {uint.max}] for {uint} (got {n})')

        self._hash_function1 = hash_function1
        self._hash_function2 = hash_function2
        self._n = n
        self._uint = uint

    @classmethod
    def with_hash_builders(cls, hash_function1, hash_function2, n: Optional[int]=None, uint: UIntType=U64) -> 'DoubleHasher':
        """
        construct a hasher from two already configured hash functions
        """
        return cls(hash_function1, hash_function2, n, uint)

    @classmethod
    def new(cls, uint: UIntType=U64) -> 'DoubleHasher':
        """
        construct a hasher with the default seeds and table size
        """
        from hashiter.builder import DoubleHashBuilder
        return DoubleHashBuilder(uint=uint).build_hash_iter_hasher()

    @property
    def n(self) -> int:
        return self._n

    @property
    def uint(self) -> UIntType:
        return self._uint

    @property
    def hash_functions(self) -> tuple:
        return (self._hash_function1, self._hash_function2)

    def __repr__(self):
        return (f'{type(self).__name__}({self._hash_function1!r}, {self._hash_function2!r}, '
                f'n={self._n}, uint={self._uint})')

    def __eq__(self, o):
        return type(self) == type(o) and\
                self._hash_function1 == o._hash_function1 and\
                self._hash_function2 == o._hash_function2 and\
                self._n == o._n and\
                self._uint == o._uint

    def __hash__(self):
        return hash((type(self), self._hash_function1, self._hash_function2, self._n, self._uint))

    def _check_count(self, count) -> int:
        if not isinstance(count, Integral) or isinstance(count, bool):
            raise TypeError(f'count must be an int (got {type(count)})')
        if count < 0:
            raise ValueError(f'count must be non negative (got {count})')
        return self._uint.truncate(count)

    def hash_iter(self, key, count: int) -> Hashes:
        """
        generate `count` hash points for `key`

        Parameters
        ----------
        key : Any
            the key to hash, must be accepted by the hash functions
        count : int
            the number of hash points, truncated to `uint` like the digests

        Returns
        -------
        Hashes
            a lazy iterator over `count` values in [0, n)

        Raises
        ------
        TypeError
            if `count` is not an int
        ValueError
            if `count` is negative
        """
        count = self._check_count(count)
        hash1 = self._uint.truncate(self._hash_function1.hash(key))
        hash2 = self._uint.truncate(self._hash_function2.hash(key))

        return Hashes(hash1, hash2, self._n, count, self._uint)

    def hash_iter_many(self, keys: Iterable, count: int) -> np.ndarray:
        """
        generate `count` hash points for each of `keys` in one pass

        Parameters
        ----------
        keys : Iterable
            the keys to hash
        count : int
            the number of hash points per key

        Returns
        -------
        np.ndarray
            array of shape (len(keys), count) with `uint.numpy_dtype`, row i
            equals `list(self.hash_iter(keys[i], count))`

        Raises
        ------
        TypeError
            if `uint` has no numpy dtype
        """
        dtype = self._uint.numpy_dtype
        if dtype is None:
            raise TypeError(f'{self._uint} values cannot be stored in a numpy array, use hash_iter')
        count = self._check_count(count)
        keys = list(keys)
        mask = np.uint64(self._uint.mask)

        hash1s = np.fromiter((self._hash_function1.hash(k) for k in keys), dtype=np.uint64, count=len(keys)) & mask
        hash2s = np.fromiter((self._hash_function2.hash(k) for k in keys), dtype=np.uint64, count=len(keys)) & mask

        logger.debug(f'generating {count} hash points for {len(keys)} keys')
        return hash_points(hash1s, hash2s, self._n, count).astype(dtype, copy=False)
