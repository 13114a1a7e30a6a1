# citypop/caching/dynamic_cache.py
import logging
from collections import OrderedDict, deque

import numpy as np

from citypop.caching.cache_base import CacheBase

logger = logging.getLogger(__name__)


class LRUCache(CacheBase):
    """
    Recency policy. The OrderedDict runs from least to most recently used,
    so the head is always the eviction victim.
    """
    name = "lru"

    def __init__(self, capacity):
        super().__init__(capacity)
        self.cache = OrderedDict()

    @property
    def store(self):
        return self.cache

    def get(self, key):
        if key not in self.cache:
            return None
        self.cache.move_to_end(key)  # mark as recently used
        return self.cache[key]

    def put(self, key, population):
        if key in self.cache:
            self.cache[key] = population
            self.cache.move_to_end(key)
            return
        if self.is_full():
            victim, _ = self.cache.popitem(last=False)  # remove least recently used
            logger.debug("lru evicted %s", victim)
        self.cache[key] = population

    def snapshot(self):
        """Entries from most to least recently used."""
        return [(key, value) for key, value in reversed(self.cache.items())]

    def clear(self):
        self.cache.clear()


class LFUCache(CacheBase):
    """
    Frequency policy. Each entry keeps [population, access count].
    Ties on the minimum count go to the oldest inserted entry, which is
    the first one in dict order because updates never reinsert.
    """
    name = "lfu"

    def __init__(self, capacity):
        super().__init__(capacity)
        self.entries = {}

    @property
    def store(self):
        return self.entries

    def get(self, key):
        entry = self.entries.get(key)
        if entry is None:
            return None
        entry[1] += 1
        return entry[0]

    def put(self, key, population):
        entry = self.entries.get(key)
        if entry is not None:
            entry[0] = population
            entry[1] += 1
            return
        if self.is_full():
            # evict least frequently used
            lfu_key = min(self.entries, key=lambda k: self.entries[k][1])
            del self.entries[lfu_key]
            logger.debug("lfu evicted %s", lfu_key)
        self.entries[key] = [population, 1]

    def frequency(self, key):
        entry = self.entries.get(key)
        return entry[1] if entry is not None else 0

    def snapshot(self):
        """(key, population, count), highest count first, ties in insertion order."""
        items = [(key, value, count) for key, (value, count) in self.entries.items()]
        # sorted() is stable so equal counts keep insertion order
        return sorted(items, key=lambda x: -x[2])

    def clear(self):
        self.entries.clear()


class FIFOCache(CacheBase):
    """
    Insertion-order policy. A repeated put for a cached key is a no-op:
    neither the value nor the queue position changes.
    """
    name = "fifo"

    def __init__(self, capacity):
        super().__init__(capacity)
        self.queue = deque()
        self.values = {}

    @property
    def store(self):
        return self.values

    def get(self, key):
        return self.values.get(key)

    def put(self, key, population):
        if key in self.values:
            return
        if self.is_full():
            oldest = self.queue.popleft()
            del self.values[oldest]
            logger.debug("fifo evicted %s", oldest)
        self.queue.append(key)
        self.values[key] = population

    def snapshot(self):
        """Entries from oldest to newest arrival."""
        return [(key, self.values[key]) for key in self.queue]

    def clear(self):
        self.queue.clear()
        self.values.clear()


class RandomCache(CacheBase):
    """
    Uniform-random policy. Keys live in a list for index sampling and
    in a key -> slot map so a victim is removed by swapping with the
    last slot. A repeated put for a cached key is a no-op.
    """
    name = "random"

    def __init__(self, capacity, seed=None, rng=None):
        super().__init__(capacity)
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.keys = []
        self.slots = {}
        self.values = {}

    @property
    def store(self):
        return self.values

    def get(self, key):
        return self.values.get(key)

    def put(self, key, population):
        if key in self.values:
            return
        if self.is_full():
            self._evict(int(self.rng.integers(len(self.keys))))
        self.slots[key] = len(self.keys)
        self.keys.append(key)
        self.values[key] = population

    def _evict(self, idx):
        victim = self.keys[idx]
        last = self.keys.pop()
        if last != victim:
            self.keys[idx] = last
            self.slots[last] = idx
        del self.slots[victim]
        del self.values[victim]
        logger.debug("random evicted %s", victim)

    def snapshot(self):
        """Entries in slot order."""
        return [(key, self.values[key]) for key in self.keys]

    def clear(self):
        self.keys.clear()
        self.slots.clear()
        self.values.clear()


POLICIES = {
    "lru": LRUCache,
    "lfu": LFUCache,
    "fifo": FIFOCache,
    "random": RandomCache,
}


def build_cache(policy, capacity, seed=None):
    """Construct the eviction policy named by `policy`."""
    if policy == "random":
        return RandomCache(capacity, seed=seed)
    if policy in POLICIES:
        return POLICIES[policy](capacity)
    raise ValueError(f"Unknown CACHE_POLICY: {policy}")
