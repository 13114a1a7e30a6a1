# citypop/index/trie.py
"""
Prefix tree over city names.

Every node owns its children; a terminal node maps country code to
population, since one city name can exist in several countries.
Lookups cost one step per character of the city name regardless of how
many records were loaded.
"""
import logging
from typing import Dict, Iterable, Optional

from citypop.store.csv_store import MalformedRecordError, parse_population

logger = logging.getLogger(__name__)


class TrieNode:
    __slots__ = ("children", "is_city", "populations")

    def __init__(self):
        self.children: Dict[str, "TrieNode"] = {}
        self.is_city = False
        self.populations: Dict[str, float] = {}


class CityTrie:
    def __init__(self, records: Optional[Iterable] = None):
        self.root = TrieNode()
        self.num_nodes = 1
        self.num_records = 0
        if records is not None:
            self.build(records)

    def __len__(self):
        return self.num_records

    def insert(self, country: str, city: str, population: float):
        """Add one record. A repeated (country, city) pair overwrites."""
        node = self.root
        for ch in city:
            child = node.children.get(ch)
            if child is None:
                child = TrieNode()
                node.children[ch] = child
                self.num_nodes += 1
            node = child
        node.is_city = True
        if country not in node.populations:
            self.num_records += 1
        node.populations[country] = population

    def build(self, records: Iterable) -> int:
        """
        Insert every (country, city, population) record.
        Records with a missing or non-text name or an unusable population are skipped
        with a warning. Returns the number of records inserted.
        """
        inserted = 0
        skipped = 0
        for record in records:
            try:
                country, city, population = record
                if not isinstance(country, str) or not isinstance(city, str):
                    raise MalformedRecordError(f"country and city must be text: {record!r}")
                if not country or not city:
                    raise MalformedRecordError(f"empty country or city: {record!r}")
                population = parse_population(population)
            except (MalformedRecordError, TypeError, ValueError) as exc:
                skipped += 1
                logger.warning("skipping record %r: %s", record, exc)
                continue
            self.insert(country, city, population)
            inserted += 1
        logger.info("Trie built: %d records inserted, %d skipped, %d nodes",
                    inserted, skipped, self.num_nodes)
        return inserted

    def _find_node(self, city: str) -> Optional[TrieNode]:
        node = self.root
        for ch in city:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def search(self, city: str, country: str) -> Optional[float]:
        """Exact-match lookup; None when the pair was never inserted."""
        node = self._find_node(city)
        if node is None or not node.is_city:
            return None
        return node.populations.get(country)

    def countries(self, city: str) -> Dict[str, float]:
        """All countries recorded for `city`, with their populations."""
        node = self._find_node(city)
        if node is None or not node.is_city:
            return {}
        return dict(node.populations)
