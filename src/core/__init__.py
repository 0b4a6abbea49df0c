"""
Core module - Country records and search/sort logic.
"""

from .models import Country, CountryName, SchemaError, parse_countries
from .operations import (
    SortField,
    SortFieldError,
    EmptySortField,
    InvalidSortField,
    search_countries,
    sort_countries
)

__all__ = [
    'Country',
    'CountryName',
    'SchemaError',
    'parse_countries',
    'SortField',
    'SortFieldError',
    'EmptySortField',
    'InvalidSortField',
    'search_countries',
    'sort_countries'
]
