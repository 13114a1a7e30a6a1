# citypop/keys.py
from typing import NamedTuple


class CityKey(NamedTuple):
    """
    Compound (country code, city name) identifier of a population record.
    Both fields are expected lower-cased by the caller; equality and
    hashing are structural over the pair.
    """
    country_code: str
    city_name: str

    def __str__(self):
        return f"{self.country_code}, {self.city_name}"
