import pytest

from citypop.caching.dynamic_cache import FIFOCache, LFUCache, LRUCache, RandomCache
from citypop.index.trie import CityTrie
from citypop.keys import CityKey
from citypop.service.lookup_service import LookupService


class CountingIndex:
    """Wraps an index and records every search call."""

    def __init__(self, index):
        self.index = index
        self.calls = []

    def search(self, city, country):
        self.calls.append((city, country))
        return self.index.search(city, country)


@pytest.fixture
def spec_index():
    return CountingIndex(CityTrie([("us", "springfield", 25000), ("us", "shelbyville", 8000)]))


def test_example_lookups(spec_index):
    service = LookupService(LRUCache(10), spec_index)
    assert service.lookup("us", "springfield") == 25000
    assert service.lookup("fr", "springfield") is None


@pytest.mark.parametrize("cls", [LRUCache, LFUCache, FIFOCache, RandomCache])
def test_index_hit_is_cached(cls, spec_index):
    cache = cls(4)
    service = LookupService(cache, spec_index)
    first = service.find(CityKey("us", "springfield"))
    second = service.find(CityKey("us", "springfield"))
    assert first.source == "index"
    assert second.source == "cache"
    assert second.population == 25000
    assert spec_index.calls == [("springfield", "us")]
    assert CityKey("us", "springfield") in cache


def test_index_miss_is_not_cached(spec_index):
    cache = LRUCache(4)
    service = LookupService(cache, spec_index)
    assert service.lookup("fr", "springfield") is None
    assert service.lookup("fr", "springfield") is None
    assert len(cache) == 0
    assert len(spec_index.calls) == 2
    assert service.not_found == 2


def test_cache_hit_skips_index(spec_index):
    cache = LRUCache(4)
    cache.put(CityKey("xx", "nowhere"), 7.0)
    service = LookupService(cache, spec_index)
    assert service.lookup("xx", "nowhere") == 7.0
    assert spec_index.calls == []


def test_not_found_result():
    service = LookupService(LRUCache(1), CityTrie())
    result = service.find(CityKey("us", "atlantis"))
    assert not result.found
    assert result.source is None


def test_zero_population_is_found():
    service = LookupService(LRUCache(2), CityTrie([("us", "ghost town", 0)]))
    assert service.lookup("us", "ghost town") == 0
    assert service.find(CityKey("us", "ghost town")).source == "cache"


def test_stats(spec_index):
    service = LookupService(LRUCache(4), spec_index)
    service.lookup("us", "springfield")
    service.lookup("us", "springfield")
    service.lookup("us", "shelbyville")
    service.lookup("fr", "paris")
    assert service.stats() == {
        "lookups": 4,
        "hits": 1,
        "index_lookups": 3,
        "not_found": 1,
        "hit_rate": 0.25,
    }


def test_hit_rate_without_lookups():
    assert LookupService(LRUCache(1), CityTrie()).hit_rate() == 0
