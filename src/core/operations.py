"""
Search and sort operations over the in-memory country dataset.

Neither operation mutates its input: both return a new list, so the
dataset fetched at startup stays the baseline for every command.
"""

import logging
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, TypeVar

from src.core.models import Country

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SortFieldError(ValueError):
    """Base class for rejected sort field input."""


class EmptySortField(SortFieldError):
    """Raised when the sort field input is blank."""

    def __init__(self):
        super().__init__("Invalid input, please enter a valid field.")


class InvalidSortField(SortFieldError):
    """Raised when the sort field is not one of the supported fields."""

    def __init__(self, value: str):
        self.value = value
        valid = ", ".join(f.value for f in SortField)
        super().__init__(f"Invalid field! Choose from: {valid}.")


def _missing_as(default: T) -> Callable[[Optional[T]], T]:
    """Total order over an optional value: missing takes the place of `default`."""
    def key(value: Optional[T]) -> T:
        return default if value is None else value
    return key


_population_key = _missing_as(0)
_region_key = _missing_as("")


class SortField(Enum):
    """The fields a country listing can be ordered by."""
    NAME = "name"
    POPULATION = "population"
    REGION = "region"

    @classmethod
    def parse(cls, text: str) -> "SortField":
        """Parse user input into a sort field, rejecting blank or unknown values."""
        value = text.strip() if text else ""
        if not value:
            raise EmptySortField()
        try:
            return cls(value.lower())
        except ValueError:
            raise InvalidSortField(value) from None

    def key(self, country: Country):
        """Sort key for a country; missing population is 0, missing region is ''."""
        return _SORT_KEYS[self](country)


_SORT_KEYS: Dict[SortField, Callable[[Country], object]] = {
    SortField.NAME: lambda c: c.name.common,
    SortField.POPULATION: lambda c: _population_key(c.population),
    SortField.REGION: lambda c: _region_key(c.region),
}


def search_countries(countries: Sequence[Country], term: str) -> List[Country]:
    """Return countries whose common name contains `term`, ignoring case and
    surrounding whitespace. Dataset order is preserved."""
    needle = term.strip().lower()
    matches = [c for c in countries if needle in c.name.common.lower()]
    logger.debug(f"Search '{needle}' matched {len(matches)} of {len(countries)} countries")
    return matches


def sort_countries(countries: Sequence[Country], field: SortField) -> List[Country]:
    """Return a stably sorted copy of `countries` ordered by `field`."""
    logger.debug(f"Sorting {len(countries)} countries by {field.value}")
    return sorted(countries, key=field.key)
