from citypop.keys import CityKey
from citypop.utils import format_population, format_snapshot, make_rng, normalize, sample_queries


def test_normalize():
    assert normalize("  La Massana ") == "la massana"


def test_sample_queries_uniform():
    queries = sample_queries(["a", "b"], ["x", "y", "z"], 50, make_rng(1))
    assert len(queries) == 50
    assert all(c in ("x", "y", "z") and city in ("a", "b") for c, city in queries)


def test_sample_queries_repeatable():
    args = (["a", "b", "c"], ["x"], 20)
    assert sample_queries(*args, make_rng(3)) == sample_queries(*args, make_rng(3))


def test_sample_queries_zipf_favours_first_city():
    queries = sample_queries(["a", "b", "c", "d"], ["x"], 2000, make_rng(0), alpha=1.5)
    cities = [city for _, city in queries]
    assert cities.count("a") > cities.count("d")


def test_format_population():
    assert format_population(25000.0) == "25000"
    assert format_population(12.5) == "12.5"


def test_format_snapshot():
    snapshot = [(CityKey("us", "springfield"), 25000.0), (CityKey("ad", "encamp"), 11224.0, 3)]
    assert format_snapshot(snapshot) == [
        "us, springfield => 25000",
        "ad, encamp => 11224 (freq=3)",
    ]
