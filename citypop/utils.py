# citypop/utils.py
import numpy as np


def make_rng(seed=None):
    """Explicitly owned random source; pass the same seed for a repeatable run."""
    return np.random.default_rng(seed)


def normalize(text: str) -> str:
    """Case-fold user input the same way the store loader does."""
    return text.strip().lower()


def sample_queries(cities, countries, size, rng, alpha=None):
    """
    Sample `size` (country, city) queries.

    Args:
        cities (list): candidate city names
        countries (list): candidate country codes
        size (int): number of queries to generate
        rng (np.random.Generator): random source
        alpha (float): Zipf skew over cities (>0), or None for uniform draws

    Returns:
        list[tuple[str, str]]: (country, city) pairs
    """
    if alpha is None:
        city_idx = rng.integers(len(cities), size=size)
    else:
        # ranks 1..N, weight ~ 1/r^alpha
        ranks = np.arange(1, len(cities) + 1)
        weights = 1.0 / np.power(ranks, alpha)
        probs = weights / weights.sum()
        city_idx = rng.choice(len(cities), size=size, p=probs)
    country_idx = rng.integers(len(countries), size=size)
    return [(countries[c], cities[k]) for c, k in zip(country_idx, city_idx)]


def format_population(population):
    population = float(population)
    return str(int(population)) if population.is_integer() else str(population)


def format_snapshot(snapshot):
    """One display line per snapshot entry, frequency appended when present."""
    lines = []
    for entry in snapshot:
        key, population = entry[0], entry[1]
        line = f"{key.country_code}, {key.city_name} => {format_population(population)}"
        if len(entry) > 2:
            line += f" (freq={entry[2]})"
        lines.append(line)
    return lines
