# citypop/service/lookup_service.py
from typing import NamedTuple, Optional

from citypop.keys import CityKey


class LookupResult(NamedTuple):
    population: Optional[float]
    source: Optional[str]  # "cache", "index" or None when not found

    @property
    def found(self):
        return self.population is not None


class LookupService:
    """
    Cache in front of an index. The cache is consulted first; an index hit
    is copied into the cache, an index miss leaves the cache untouched.
    """

    def __init__(self, cache, index):
        self.cache = cache
        self.index = index
        self.lookups = 0
        self.hits = 0
        self.index_lookups = 0
        self.not_found = 0

    def find(self, key: CityKey) -> LookupResult:
        self.lookups += 1
        population = self.cache.get(key)
        if population is not None:
            self.hits += 1
            return LookupResult(population, "cache")

        self.index_lookups += 1
        population = self.index.search(key.city_name, key.country_code)
        if population is None:
            self.not_found += 1
            return LookupResult(None, None)

        self.cache.put(key, population)
        return LookupResult(population, "index")

    def lookup(self, country: str, city: str) -> Optional[float]:
        return self.find(CityKey(country, city)).population

    def hit_rate(self):
        return self.hits / self.lookups if self.lookups > 0 else 0

    def stats(self):
        return {
            "lookups": self.lookups,
            "hits": self.hits,
            "index_lookups": self.index_lookups,
            "not_found": self.not_found,
            "hit_rate": self.hit_rate(),
        }
