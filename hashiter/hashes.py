from numbers import Integral
from hashiter.numeric import UIntType, U64


def add_mod(a: int, b: int, n: int) -> int:
    """
    compute (a + b) mod n without ever exceeding n

    both operands must already be reduced, i.e. 0 <= a, b < n. Under that
    precondition neither branch can leave the range of the width n lives in,
    which a plain wrapping add followed by a remainder does not guarantee
    once n is close to the maximum of the width.

    Parameters
    ----------
    a : int
        first operand, < n
    b : int
        second operand, < n
    n : int
        the modulus

    Returns
    -------
    int
    """
    d = n - b
    if a >= d:
        return a - d
    return a + b


def hash_point(i: int, hash1: int, hash2: int, n: int) -> int:
    """
    evaluate the enhanced double hashing polynomial directly

    h(i) = (h1 + i * h2 + (i^3 - i) / 6) mod n
    """
    return (hash1 % n + i * (hash2 % n) + (i**3 - i) // 6) % n


def _as_uint(v, name: str, uint: UIntType) -> int:
    if not isinstance(v, Integral) or isinstance(v, bool):
        raise TypeError(f'{name} must be an int (got {type(v)})')
    v = int(v)
    if not uint.contains(v):
        raise ValueError(f'{name} = {v} does not fit in {uint}')
    return v


class Hashes:
    """
    Iterator over hash points generated with enhanced double hashing.

    Implements the technique described in section 5.1 of "Bloom Filters in
    Probabilistic Verification" (Dillinger & Manolios), where the i-th hash
    point is

        h(i) = (h1 + i * h2 + (i^3 - i) / 6) mod n

    The polynomial is evaluated with forward differencing: two accumulators
    are kept reduced mod n and each step costs two modular additions.

    Instances are plain values. `copy.copy` (or `copy()`) yields an
    independent cursor that continues from the same point.
    """
    __slots__ = ('_hash1', '_hash2', '_n', '_k', '_cnt', '_uint')

    def __init__(self, hash1: int, hash2: int, n: int, k: int, uint: UIntType=U64):
        """
        Parameters
        ----------
        hash1 : int
            the first base hash value, need not be reduced
        hash2 : int
            the second base hash value, need not be reduced
        n : int
            the size of the hash table, all points are in [0, n)
        k : int
            the number of hash points to generate
        uint : UIntType = U64
            the width all the values live in

        Raises
        ------
        TypeError
            if any of the values is not an int
        ValueError
            if any of the values does not fit in `uint` or `n` is 0
        """
        self._uint = uint
        self._hash1 = _as_uint(hash1, 'hash1', uint)
        self._hash2 = _as_uint(hash2, 'hash2', uint)
        self._n = _as_uint(n, 'n', uint)
        self._k = _as_uint(k, 'k', uint)
        if self._n == 0:
            raise ValueError('n must be non zero')
        self._cnt = 0

    @property
    def n(self) -> int:
        return self._n

    @property
    def k(self) -> int:
        return self._k

    @property
    def uint(self) -> UIntType:
        return self._uint

    def __repr__(self):
        return (f'{type(self).__name__}(hash1={self._hash1}, hash2={self._hash2}, '
                f'n={self._n}, k={self._k}, cnt={self._cnt}, uint={self._uint})')

    def __iter__(self):
        return self

    def __next__(self) -> int:
        if self._cnt == self._k:
            raise StopIteration

        n = self._n
        if self._cnt == 0:
            # reduce on first touch, add_mod relies on both being < n
            self._hash1 %= n
            self._hash2 %= n
            self._cnt = 1
            return self._hash1

        self._hash1 = add_mod(self._hash1, self._hash2, n)
        self._hash2 = add_mod(self._hash2, self._cnt % n, n)
        self._cnt += 1

        return self._hash1

    def __len__(self) -> int:
        return self._k - self._cnt

    def __length_hint__(self) -> int:
        return len(self)

    def __copy__(self) -> 'Hashes':
        other = Hashes.__new__(Hashes)
        for attr in Hashes.__slots__:
            setattr(other, attr, getattr(self, attr))
        return other

    def __deepcopy__(self, memo) -> 'Hashes':
        return self.__copy__()

    def copy(self) -> 'Hashes':
        """
        return an independent cursor positioned where this one is
        """
        return self.__copy__()
