import logging
from typing import List, Optional

import requests

from config.settings import get_settings
from src.core.models import Country, SchemaError, parse_countries

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when the country dataset cannot be retrieved or parsed."""


class CountryFetcher:
    """
    Retrieves the country dataset from the REST Countries API.
    One GET per call, no retries.
    """

    def __init__(self, url: Optional[str] = None, timeout: Optional[float] = None):
        settings = get_settings()
        self.url = url or settings.api_url
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.user_agent = settings.user_agent

    def fetch(self) -> List[Country]:
        """
        Fetches and parses the full dataset.

        Raises:
            FetchError: on transport failure, non-success status,
                an undecodable body or a schema mismatch.
        """
        logger.info(f"Fetching countries from {self.url}")

        try:
            headers = {'User-Agent': self.user_agent}
            response = requests.get(self.url, headers=headers, timeout=self.timeout)
            response.raise_for_status()
        except (requests.RequestException, ValueError) as e:
            # urllib3 raises a plain ValueError for a non-positive timeout
            logger.error(f"Request to {self.url} failed: {e}")
            raise FetchError(str(e)) from e

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(f"Response from {self.url} is not valid JSON: {e}")
            raise FetchError(f"invalid JSON in response: {e}") from e

        try:
            countries = parse_countries(payload)
        except SchemaError as e:
            logger.error(f"Response from {self.url} does not match the country schema: {e}")
            raise FetchError(f"unexpected response format: {e}") from e

        logger.info(f"Fetched {len(countries)} countries")
        return countries


def fetch_countries(url: Optional[str] = None) -> List[Country]:
    """Fetch the dataset with a one-off fetcher."""
    return CountryFetcher(url=url).fetch()
