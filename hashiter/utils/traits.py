from abc import ABC, abstractmethod
from typing import Iterator


class HashIterHasher(ABC):
    """
    something that produces a sequence of hash values for a key
    """

    @abstractmethod
    def hash_iter(self, key, count: int) -> Iterator[int]:
        """
        return an iterator over `count` hash values for `key`
        """
        pass


class BuildHashIterHasher(ABC):
    """
    something that builds a `HashIterHasher`
    """

    @abstractmethod
    def build_hash_iter_hasher(self) -> HashIterHasher:
        """
        build a new, independent hasher from this configuration
        """
        pass
