# citypop/caching/cache_base.py
from abc import ABC, abstractmethod
from numbers import Integral
from typing import List, Optional, Tuple

from citypop.keys import CityKey


class InvalidCapacityError(ValueError):
    """Raised when a cache is constructed with a capacity below 1."""


class CacheBase(ABC):
    def __init__(self, capacity: int):
        if isinstance(capacity, bool) or not isinstance(capacity, Integral) or capacity < 1:
            raise InvalidCapacityError(f"capacity must be a positive integer, got {capacity!r}")
        self.capacity = int(capacity)

    def __contains__(self, key: CityKey) -> bool:
        """Membership check only, no bookkeeping."""
        return key in self.store

    def __len__(self):
        return len(self.store)

    def is_full(self) -> bool:
        return len(self) >= self.capacity

    def stats(self):
        return {"policy": self.name, "capacity": self.capacity, "size": len(self)}

    @property
    @abstractmethod
    def store(self):
        """Mapping of the cached keys (used for membership and size)."""
        pass

    @abstractmethod
    def get(self, key: CityKey) -> Optional[float]:
        """Return the cached population or None. Never inserts."""
        pass

    @abstractmethod
    def put(self, key: CityKey, population: float):
        """Insert or update an entry, evicting one entry if full."""
        pass

    @abstractmethod
    def snapshot(self) -> List[Tuple]:
        """Ordered read-only view of the cache contents."""
        pass

    @abstractmethod
    def clear(self):
        """Clear cache contents."""
        pass
