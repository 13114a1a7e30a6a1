"""Lookup cache configuration parameters."""

# Random seed for reproducibility
RANDOM_SEED = 2025

# ------------------------------
# Backing store
# ------------------------------
DATA_FILE = "data/city_population.csv"   # header row + country,city,population rows

# ------------------------------
# Cache
# ------------------------------
CACHE_SIZE = 10         # entries held in front of the trie

# Caching policy options: "lru", "lfu", "fifo", "random"
CACHE_POLICY = "lru"

# ------------------------------
# Synthetic query stream (load test)
# ------------------------------
NUM_QUERIES = 1000      # lookups per run
QUERY_CITIES = ["andorra la vella", "canillo", "encamp", "la massana"]
QUERY_COUNTRIES = ["ad", "us", "gb", "fr"]
QUERY_ZIPF_ALPHA = None  # None = uniform city draws, >0 = Zipf-skewed cities

# ------------------------------
# Monte Carlo runs
# ------------------------------
NUM_RUNS = 5            # repeat load test for averaging

# ------------------------------
# Logging
# ------------------------------
LOG_LEVEL = "INFO"
