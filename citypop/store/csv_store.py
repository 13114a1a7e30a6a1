# citypop/store/csv_store.py
"""
Backing store access: the authoritative `country,city,population` CSV.

The trie is built once from `load_records`; `LinearScanIndex` and
`scan_csv` are the slow paths the trie replaces, kept for comparison.
"""
import logging
import math
from typing import Iterable, List, Optional, Tuple

import pandas as pd

from citypop.keys import CityKey

logger = logging.getLogger(__name__)

Record = Tuple[str, str, float]


class MalformedRecordError(ValueError):
    """A backing-store row that cannot be turned into a valid record."""


def parse_population(value) -> float:
    try:
        population = float(value)
    except (TypeError, ValueError):
        raise MalformedRecordError(f"population is not a number: {value!r}") from None
    if math.isnan(population) or math.isinf(population) or population < 0:
        raise MalformedRecordError(f"population out of range: {value!r}")
    return population


def parse_record(row) -> Record:
    """
    Turn one `(country, city, population)` row into a record.
    Country and city are stripped and lower-cased.
    """
    if len(row) != 3:
        raise MalformedRecordError(f"expected 3 fields, got {len(row)}: {row!r}")
    country, city, population = row
    if not isinstance(country, str) or not isinstance(city, str):
        raise MalformedRecordError(f"country and city must be text: {row!r}")
    country = country.strip().lower()
    city = city.strip().lower()
    if not country or not city:
        raise MalformedRecordError(f"empty country or city: {row!r}")
    return country, city, parse_population(population)


def load_records(path) -> List[Record]:
    """
    Read every valid record from the CSV at `path` (header row skipped).
    Rows that fail to parse are logged and dropped.
    """
    skipped = 0

    def skip_bad_line(fields):
        nonlocal skipped
        skipped += 1
        logger.warning("%s: skipped row with %d fields, expected 3: %r", path, len(fields), fields)
        return None

    df = pd.read_csv(path, header=0, names=["country", "city", "population"],
                     dtype=str, keep_default_na=False, skipinitialspace=True,
                     on_bad_lines=skip_bad_line, engine="python")
    records = []
    for line_no, row in enumerate(df.itertuples(index=False, name=None), start=2):
        try:
            records.append(parse_record(row))
        except MalformedRecordError as exc:
            skipped += 1
            logger.warning("%s:%d skipped: %s", path, line_no, exc)
    logger.info("Loaded %d records from %s (%d skipped)", len(records), path, skipped)
    return records


class LinearScanIndex:
    """Scans every record per query. First matching record wins."""

    def __init__(self, records: Iterable[Record]):
        self.records = list(records)

    def __len__(self):
        return len(self.records)

    def search(self, city: str, country: str) -> Optional[float]:
        for rec_country, rec_city, population in self.records:
            if rec_country == country and rec_city == city:
                return population
        return None


def scan_csv(path, key: CityKey) -> Optional[float]:
    """Re-read the file and return the first population matching `key`."""
    for record in load_records(path):
        if record[0] == key.country_code and record[1] == key.city_name:
            return record[2]
    return None
