import dataclasses
from typing import Optional
from pydantic import NonNegativeInt, PositiveInt
from pydantic.dataclasses import dataclass
from hashiter.double_hasher import DoubleHasher
from hashiter.numeric import UIntType, U64
from hashiter.utils.hash_function import HashFunction
from hashiter.utils.traits import BuildHashIterHasher
from hashiter.utils.funcs import get_logger

logger = get_logger(__name__)

# any seeds work, these just avoid the all zero default of XXH3
DEFAULT_SEED1 = 12345
DEFAULT_SEED2 = 67890

_SEED_MAX = 2**64 - 1


@dataclass(frozen=True)
class DoubleHashBuilder(BuildHashIterHasher):
    """
    Configuration for an enhanced double hashing hasher.

    Updates return a new builder, the original is never modified:

        hasher = DoubleHashBuilder()\\
                    .with_seed1(1)\\
                    .with_n(1 << 20)\\
                    .build_hash_iter_hasher()

    Parameters
    ----------
    seed1 : int = 12345
        seed of the hash function producing the first base hash
    seed2 : int = 67890
        seed of the hash function producing the second base hash
    n : Optional[int] = None
        the size of the hash table, None means `uint.max`
    uint : UIntType = U64
        the width of the generated hash values
    """
    seed1 : NonNegativeInt = DEFAULT_SEED1
    seed2 : NonNegativeInt = DEFAULT_SEED2
    n : Optional[PositiveInt] = None
    uint : UIntType = U64

    def __post_init__(self):
        for name in ('seed1', 'seed2'):
            seed = getattr(self, name)
            if seed > _SEED_MAX or not self.uint.contains(seed):
                raise ValueError(f'{name} = {seed} does not fit in {self.uint} and 64 bits')
        if self.n is not None and not self.uint.contains(self.n):
            raise ValueError(f'n = {self.n} does not fit in {self.uint}')

    @property
    def modulus(self) -> int:
        """
        the table size the built hashers reduce by
        """
        return self.uint.max if self.n is None else self.n

    def with_seed1(self, seed1: int) -> 'DoubleHashBuilder':
        return dataclasses.replace(self, seed1=seed1)

    def with_seed2(self, seed2: int) -> 'DoubleHashBuilder':
        return dataclasses.replace(self, seed2=seed2)

    def with_n(self, n: int) -> 'DoubleHashBuilder':
        return dataclasses.replace(self, n=n)

    def with_uint(self, uint: UIntType) -> 'DoubleHashBuilder':
        return dataclasses.replace(self, uint=uint)

    def build_hash_iter_hasher(self) -> DoubleHasher:
        """
        build a hasher backed by two fresh XXH3 hash functions

        Returns
        -------
        DoubleHasher
        """
        logger.debug(f'building hasher {self}')
        return DoubleHasher.with_hash_builders(
                HashFunction(self.seed1),
                HashFunction(self.seed2),
                self.modulus,
                self.uint
        )

    def build(self) -> DoubleHasher:
        return self.build_hash_iter_hasher()
