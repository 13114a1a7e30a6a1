# citypop/main.py
import sys

from citypop import config
from citypop.caching.dynamic_cache import build_cache
from citypop.index.trie import CityTrie
from citypop.keys import CityKey
from citypop.logging_config import setup_logging
from citypop.service.lookup_service import LookupService
from citypop.store.csv_store import load_records
from citypop.utils import format_population, format_snapshot, normalize


def run_repl(service, read=input, write=print):
    """Prompt for country/city pairs until `exit` or end of input."""
    while True:
        try:
            country = normalize(read("\nEnter country code or exit to quit: "))
            if country == "exit":
                break
            city = normalize(read("Enter city name: "))
        except EOFError:
            break

        result = service.find(CityKey(country, city))
        if result.source == "cache":
            write(f"Population (from cache): {format_population(result.population)}")
        elif result.found:
            write(f"Population (from file): {format_population(result.population)}")
        else:
            write("City not found.")

        write(f"Cache contents ({service.cache.name}):")
        for line in format_snapshot(service.cache.snapshot()):
            write(line)


def main(cfg=config):
    setup_logging(cfg.LOG_LEVEL)
    try:
        records = load_records(cfg.DATA_FILE)
    except FileNotFoundError:
        print(f"Error opening file: {cfg.DATA_FILE}", file=sys.stderr)
        return 1
    cache = build_cache(cfg.CACHE_POLICY, cfg.CACHE_SIZE, seed=cfg.RANDOM_SEED)
    run_repl(LookupService(cache, CityTrie(records)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
