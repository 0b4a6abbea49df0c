"""
Country Record Model

Immutable data classes for one country entry of the REST Countries dataset
and the validation that turns decoded JSON into them.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple


class SchemaError(ValueError):
    """Raised when a decoded payload does not match the country schema."""


@dataclass(frozen=True)
class CountryName:
    """Common (short) and official (formal) name of a country."""
    common: str
    official: str


@dataclass(frozen=True)
class Country:
    """Data class representing one country record."""
    name: CountryName
    capital: Optional[Tuple[str, ...]] = None
    population: Optional[int] = None
    region: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Country":
        """Build a country from one decoded JSON object."""
        if not isinstance(data, dict):
            raise SchemaError(f"expected an object, got {type(data).__name__}")

        name = data.get("name")
        if not isinstance(name, dict):
            raise SchemaError("missing required field 'name'")
        common = name.get("common")
        official = name.get("official")
        if not isinstance(common, str):
            raise SchemaError("missing or invalid required field 'name.common'")
        if not isinstance(official, str):
            raise SchemaError("missing or invalid required field 'name.official'")

        capital = data.get("capital")
        if capital is not None:
            if not isinstance(capital, list) or not all(isinstance(c, str) for c in capital):
                raise SchemaError("field 'capital' must be a list of strings")
            capital = tuple(capital)

        population = data.get("population")
        if population is not None:
            # bool is an int subclass; JSON true/false is not a population
            if isinstance(population, bool) or not isinstance(population, int) or population < 0:
                raise SchemaError("field 'population' must be a non-negative integer")

        region = data.get("region")
        if region is not None and not isinstance(region, str):
            raise SchemaError("field 'region' must be a string")

        return cls(
            name=CountryName(common=common, official=official),
            capital=capital,
            population=population,
            region=region,
        )


def parse_countries(payload: Any) -> List[Country]:
    """Parse a decoded JSON array into country records."""
    if not isinstance(payload, list):
        raise SchemaError(f"expected a JSON array, got {type(payload).__name__}")

    countries = []
    for index, item in enumerate(payload):
        try:
            countries.append(Country.from_dict(item))
        except SchemaError as e:
            raise SchemaError(f"record {index}: {e}") from e
    return countries
