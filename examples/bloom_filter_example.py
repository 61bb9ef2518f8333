import sys
sys.path.append('.')
import logging
import numpy as np

from hashiter import DoubleHashBuilder, BuildHashIterHasher, U32


class BloomFilter:
    """
    a minimal bloom filter written against the hasher capabilities,
    `add_many` additionally needs the batch api of `DoubleHasher`
    """

    def __init__(self, nbits: int, nhashes: int, builder: BuildHashIterHasher):
        self._bits = np.zeros(nbits, dtype=np.bool_)
        self._nhashes = nhashes
        self._hasher = builder.build_hash_iter_hasher()

    def add(self, key):
        for i in self._hasher.hash_iter(key, self._nhashes):
            self._bits[i] = True

    def add_many(self, keys):
        self._bits[self._hasher.hash_iter_many(keys, self._nhashes).ravel()] = True

    def __contains__(self, key):
        return all(self._bits[i] for i in self._hasher.hash_iter(key, self._nhashes))


logging.basicConfig(level=logging.DEBUG)

nbits = 1 << 16
builder = DoubleHashBuilder()\
            .with_n(nbits)\
            .with_uint(U32)

bloom = BloomFilter(nbits, 7, builder)
bloom.add_many([f'key-{i}' for i in range(5000)])
bloom.add('hello')

print('hello' in bloom)
print('key-42' in bloom)
false_positives = sum(f'missing-{i}' in bloom for i in range(10000))
print(f'false positive rate : {false_positives / 10000:.4f}')
