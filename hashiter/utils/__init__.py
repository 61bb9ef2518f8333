from .hash_function import HashFunction, encode_key
from .traits import HashIterHasher, BuildHashIterHasher
from .funcs import get_logger, type_check_call
