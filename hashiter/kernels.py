import numba as nb
import numpy as np

njit_kwargs = {
        'nogil' : True,
        'fastmath' : True,
        'parallel' : False,
        'cache' : False
}

# every value inside the kernels is kept as uint64, mixing in signed
# ints makes numba promote the arithmetic to float64

@nb.njit(**njit_kwargs)
def _add_mod(a, b, n):
    d = n - b
    if a >= d:
        return a - d
    return a + b

@nb.njit(**njit_kwargs)
def _fill_hash_points(hash1s, hash2s, n, out):
    one = np.uint64(1)
    k = out.shape[1]
    for r in range(hash1s.size):
        a = hash1s[r] % n
        b = hash2s[r] % n
        cnt = np.uint64(0)
        for j in range(k):
            if j > 0:
                a = _add_mod(a, b, n)
                b = _add_mod(b, cnt % n, n)
            out[r, j] = a
            cnt += one

def hash_points(hash1s, hash2s, n: int, k: int) -> np.ndarray:
    """
    generate `k` enhanced double hashing points for each pair of base hashes

    Parameters
    ----------
    hash1s : np.ndarray
        the first base hash of each key, unsigned ints of at most 64 bits
    hash2s : np.ndarray
        the second base hash of each key, same length as `hash1s`
    n : int
        the size of the hash table, 0 < n < 2**64
    k : int
        the number of points per key

    Returns
    -------
    np.ndarray
        uint64 array of shape (len(hash1s), k), row i equals the
        sequence produced by `Hashes(hash1s[i], hash2s[i], n, k)`

    Raises
    ------
    ValueError
        if n is out of range, k is negative or the inputs differ in length
    """
    hash1s = np.asarray(hash1s, dtype=np.uint64)
    hash2s = np.asarray(hash2s, dtype=np.uint64)
    if hash1s.ndim != 1 or hash1s.shape != hash2s.shape:
        raise ValueError(f'hash1s and hash2s must be 1d arrays of the same length ({hash1s.shape} != {hash2s.shape})')
    if not 0 < n < 2**64:
        raise ValueError(f'n must be in (0, 2**64) (got {n})')
    if k < 0:
        raise ValueError(f'k must be non negative (got {k})')

    out = np.empty((hash1s.size, k), dtype=np.uint64)
    _fill_hash_points(hash1s, hash2s, np.uint64(n), out)
    return out
