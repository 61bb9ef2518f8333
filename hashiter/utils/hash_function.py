import numpy as np
from xxhash import xxh3_64_intdigest
from numbers import Integral

_U64_MAX = 2**64 - 1
# terminator appended to strings so that ("ab", "c") and ("a", "bc") differ
_STR_TERMINATOR = b'\xff'


def encode_key(key) -> bytes:
    """
    encode `key` into the bytes fed to the hash function

    Parameters
    ----------
    key : bytes, bytearray, memoryview, str, bool, int or tuple
        the key to encode, tuples are encoded item by item. numpy bools and
        ints are encoded like their python counterparts. ints outside
        [-2**63, 2**64) are encoded as an 8 byte length followed by their
        signed little endian bytes

    Returns
    -------
    bytes

    Raises
    ------
    TypeError
        if `key` (or an item of a tuple key) has an unsupported type
    """
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    elif isinstance(key, str):
        return key.encode('utf-8') + _STR_TERMINATOR
    elif isinstance(key, (bool, np.bool_)):
        return b'\x01' if key else b'\x00'
    elif isinstance(key, Integral):
        key = int(key)
        if -2**63 <= key <= _U64_MAX:
            return (key & _U64_MAX).to_bytes(8, 'little')
        nbytes = key.bit_length() // 8 + 1
        return nbytes.to_bytes(8, 'little') + key.to_bytes(nbytes, 'little', signed=True)
    elif isinstance(key, tuple):
        return b''.join(encode_key(k) for k in key)
    else:
        raise TypeError(f'unsupported key type {type(key)}')


class HashFunction:
    """
    a simple wrapper class for the 64 bit XXHash3 with a fixed seed
    """

    def __init__(self, seed: int):
        if not isinstance(seed, Integral) or isinstance(seed, bool):
            raise TypeError(f'seed must be an int (got {type(seed)})')
        if not 0 <= seed <= _U64_MAX:
            raise ValueError(f'seed must fit in 64 bits (got {seed})')
        self._seed = int(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def __repr__(self):
        return f'{type(self).__name__}(seed={self._seed})'

    def __eq__(self, o):
        return type(self) == type(o) and self._seed == o._seed

    def __hash__(self):
        return hash((type(self), self._seed))

    def hash(self, key) -> int:
        """
        hash `key` and return the 64 bit digest as an unsigned int
        """
        return xxh3_64_intdigest(encode_key(key), self._seed)

