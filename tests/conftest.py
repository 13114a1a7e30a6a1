import pytest

from citypop.index.trie import CityTrie
from citypop.keys import CityKey

RECORDS = [
    ("us", "springfield", 25000.0),
    ("us", "shelbyville", 8000.0),
    ("ad", "canillo", 3292.0),
    ("fr", "canillo", 10.0),
    ("ad", "encamp", 11224.0),
]


@pytest.fixture
def records():
    return list(RECORDS)


@pytest.fixture
def trie(records):
    return CityTrie(records)


@pytest.fixture
def keys():
    return [CityKey("us", f"city{i}") for i in range(10)]
