import pandas as pd
import matplotlib
import matplotlib.pyplot as plt

from citypop import config
from citypop.logging_config import setup_logging
from citypop.simulation import load_test

matplotlib.use("Agg")

POLICIES = ["lru", "lfu", "fifo", "random"]


def summarize(combined, policies=POLICIES):
    summary = combined.groupby("policy").agg(
        mean_hit_rate=("hit_rate", "mean"),
        std_hit_rate=("hit_rate", "std"),
        mean_lookup_time=("avg_lookup_time", "mean"),
        std_lookup_time=("avg_lookup_time", "std"),
    ).reset_index()

    summary = summary.fillna(0)  # single run gives NaN std
    present = [p for p in policies if p in set(summary["policy"])]
    return summary.set_index("policy").loc[present].reset_index()  # preserve order


def run_all_policies(cfg=config, policies=POLICIES, save=True):
    index = load_test.build_index(cfg)
    original_policy = cfg.CACHE_POLICY
    all_results = []

    try:
        for pol in policies:
            print(f"\n=== Running policy: {pol} ===")
            cfg.CACHE_POLICY = pol
            df = load_test.run_mc_runs(cfg, index)
            df["run_idx"] = range(1, len(df) + 1)
            if save:
                df.to_csv(f"results_{pol}.csv", index=False)
            all_results.append(df)
    finally:
        cfg.CACHE_POLICY = original_policy

    combined = pd.concat(all_results, ignore_index=True)
    summary = summarize(combined, policies)
    print(summary)

    best_hit = summary.loc[summary["mean_hit_rate"].idxmax()]
    best_time = summary.loc[summary["mean_lookup_time"].idxmin()]
    print("\nBest Policies:")
    print(f"   - Highest Hit Rate: {best_hit['policy']} "
          f"(avg={best_hit['mean_hit_rate']:.4f}, std={best_hit['std_hit_rate']:.4f})")
    print(f"   - Fastest Lookup: {best_time['policy']} "
          f"(avg={best_time['mean_lookup_time'] * 1e6:.2f}us)")

    if save:
        combined.to_csv("results_all_policies.csv", index=False)
        summary.to_csv("policy_summary.csv", index=False)
        plot_summary(summary)
        print("\nResults saved to results_all_policies.csv and policy_summary.csv")
    return combined, summary


def plot_summary(summary):
    plt.figure(figsize=(8, 5))
    plt.bar(summary["policy"], summary["mean_hit_rate"],
            yerr=summary["std_hit_rate"], capsize=5)
    plt.title("Average Hit Rate per Policy")
    plt.ylabel("Hit Rate")
    plt.savefig("avg_hit_rate.png", dpi=300)
    plt.close()

    plt.figure(figsize=(8, 5))
    plt.bar(summary["policy"], summary["mean_lookup_time"] * 1e6,
            yerr=summary["std_lookup_time"] * 1e6, capsize=5, color="orange")
    plt.title("Average Lookup Time per Policy")
    plt.ylabel("Lookup Time (us)")
    plt.savefig("avg_lookup_time.png", dpi=300)
    plt.close()

    print("\nPlots saved: avg_hit_rate.png, avg_lookup_time.png")


if __name__ == "__main__":
    setup_logging(config.LOG_LEVEL)
    run_all_policies()
