from .numeric import UIntType, U32, U64, U128
from .hashes import Hashes, add_mod, hash_point
from .kernels import hash_points
from .double_hasher import DoubleHasher
from .builder import DoubleHashBuilder, DEFAULT_SEED1, DEFAULT_SEED2
from .utils import HashFunction, HashIterHasher, BuildHashIterHasher
