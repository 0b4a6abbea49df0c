"""
Data module - Retrieval of the country dataset.
"""

from .fetcher import CountryFetcher, FetchError, fetch_countries

__all__ = [
    'CountryFetcher',
    'FetchError',
    'fetch_countries'
]
