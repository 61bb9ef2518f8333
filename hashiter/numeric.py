"""
unsigned integer widths the hash point generator can run over

python ints never overflow, so a width is carried around as a value and
applied explicitly wherever fixed width semantics matter: truncating the
64 bit digests, bounding the modulus and wrapping additions.
"""
import numpy as np
from pydantic.dataclasses import dataclass

_NUMPY_DTYPES = {
        32 : np.uint32,
        64 : np.uint64,
}

@dataclass(frozen=True)
class UIntType:
    """
    an unsigned integer width
    """
    bits : int

    def __post_init__(self):
        if self.bits not in SUPPORTED_BITS:
            raise ValueError(f'unsupported width {self.bits}, must be one of {SUPPORTED_BITS}')

    def __str__(self):
        return f'u{self.bits}'

    @classmethod
    def from_bits(cls, bits: int) -> 'UIntType':
        return cls(bits)

    @property
    def max(self) -> int:
        return (1 << self.bits) - 1

    @property
    def mask(self) -> int:
        return self.max

    @property
    def numpy_dtype(self):
        """
        the matching numpy dtype, None if numpy has no native type this wide
        """
        return _NUMPY_DTYPES.get(self.bits)

    def contains(self, v: int) -> bool:
        return 0 <= v <= self.max

    def truncate(self, v: int) -> int:
        """
        keep the low `bits` bits of `v` (two's complement truncation)
        """
        return int(v) & self.mask

    def wrapping_add(self, a: int, b: int) -> int:
        return (a + b) & self.mask


SUPPORTED_BITS = (32, 64, 128)

U32 = UIntType(32)
U64 = UIntType(64)
U128 = UIntType(128)
