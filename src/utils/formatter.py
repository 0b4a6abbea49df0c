"""Console rendering of country records."""

import sys
from typing import Optional, Sequence, TextIO

from src.core.models import Country

SEPARATOR = "-" * 34
NOT_AVAILABLE = "N/A"


def format_country(country: Country) -> str:
    """Render one country as a block of labelled lines."""
    capital = ", ".join(country.capital) if country.capital else NOT_AVAILABLE
    population = country.population if country.population is not None else 0
    region = country.region if country.region is not None else NOT_AVAILABLE

    return (
        f"Common Name: {country.name.common}\n"
        f"Official Name: {country.name.official}\n"
        f"Capital: {capital}\n"
        f"Population: {population}\n"
        f"Region: {region}\n"
    )


def display_countries(countries: Sequence[Country], file: Optional[TextIO] = None):
    """Print every country followed by a separator line."""
    out = file or sys.stdout
    for country in countries:
        print(format_country(country), file=out)
        print(SEPARATOR, file=out)
