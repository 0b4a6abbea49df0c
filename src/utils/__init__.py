"""
Utils module - Console rendering helpers.
"""

from .formatter import (
    format_country,
    display_countries,
    SEPARATOR
)

__all__ = [
    'format_country',
    'display_countries',
    'SEPARATOR'
]
