# citypop/experiments/run_experiments.py
import time

import numpy as np
import pandas as pd
import matplotlib
import matplotlib.pyplot as plt

from citypop import config as cfg
from citypop.index.trie import CityTrie
from citypop.logging_config import setup_logging
from citypop.simulation import load_test
from citypop.store.csv_store import LinearScanIndex, load_records
from citypop.utils import make_rng, sample_queries

matplotlib.use("Agg")


def sweep_cache_sizes(sizes, cfg, index):
    original_size = cfg.CACHE_SIZE
    results = []
    try:
        for csize in sizes:
            cfg.CACHE_SIZE = csize
            df = load_test.run_mc_runs(cfg, index)
            results.append({
                "cache_size": csize,
                "hit_rate": df["hit_rate"].mean(),
                "lookup_time": df["avg_lookup_time"].mean()
            })
    finally:
        cfg.CACHE_SIZE = original_size
    return pd.DataFrame(results)


def sweep_zipf_alpha(alphas, cfg, index):
    original_alpha = cfg.QUERY_ZIPF_ALPHA
    results = []
    try:
        for a in alphas:
            cfg.QUERY_ZIPF_ALPHA = a
            df = load_test.run_mc_runs(cfg, index)
            results.append({
                "zipf_alpha": a,
                "hit_rate": df["hit_rate"].mean(),
                "lookup_time": df["avg_lookup_time"].mean()
            })
    finally:
        cfg.QUERY_ZIPF_ALPHA = original_alpha
    return pd.DataFrame(results)


def compare_index_backends(records, cfg):
    """Time raw index lookups (no cache) for the trie and a linear scan."""
    queries = sample_queries(cfg.QUERY_CITIES, cfg.QUERY_COUNTRIES, cfg.NUM_QUERIES,
                             make_rng(cfg.RANDOM_SEED))
    results = []
    for name, index in (("trie", CityTrie(records)), ("linear_scan", LinearScanIndex(records))):
        times = np.empty(len(queries))
        found = 0
        for i, (country, city) in enumerate(queries):
            t0 = time.perf_counter()
            if index.search(city, country) is not None:
                found += 1
            times[i] = time.perf_counter() - t0
        results.append({
            "index": name,
            "found": found,
            "mean_time": times.mean(),
            "p99_time": np.percentile(times, 99),
        })
    return pd.DataFrame(results)


def plot_results(df, x, y, ylabel, title, filename):
    plt.figure()
    plt.plot(df[x], df[y], marker="o")
    plt.xlabel(x)
    plt.ylabel(ylabel)
    plt.title(title)
    plt.grid(True)
    plt.savefig(filename)
    plt.close()
    print(f"Saved plot: {filename}")


if __name__ == "__main__":
    setup_logging(cfg.LOG_LEVEL)
    records = load_records(cfg.DATA_FILE)
    index = CityTrie(records)

    cache_sizes = [1, 2, 4, 8, 12, 16]
    zipf_alphas = [0.6, 0.8, 1.0, 1.2, 1.4]

    print("Running cache size sweep...")
    df_cache = sweep_cache_sizes(cache_sizes, cfg, index)
    plot_results(df_cache, "cache_size", "hit_rate", "Hit Rate", "Cache Size vs Hit Rate", "cache_vs_hit.png")

    print("Running Zipf alpha sweep...")
    df_zipf = sweep_zipf_alpha(zipf_alphas, cfg, index)
    plot_results(df_zipf, "zipf_alpha", "hit_rate", "Hit Rate", "Zipf Alpha vs Hit Rate", "zipf_vs_hit.png")

    print("Comparing index backends...")
    print(compare_index_backends(records, cfg).to_string(index=False))
