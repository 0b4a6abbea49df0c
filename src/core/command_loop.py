"""
Command Loop - Interactive Console Session

Fetches the dataset once, then reads commands line by line and dispatches
them to search or sort. Single-threaded; blocking line reads are the only
suspension points.
"""

import logging
import sys
from enum import Enum
from typing import List, Optional, TextIO

from src.core.models import Country
from src.core.operations import (
    SortField, SortFieldError, InvalidSortField,
    search_countries, sort_countries
)
from src.data.fetcher import CountryFetcher, FetchError
from src.utils.formatter import display_countries

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FETCH_FAILURE = 1

MENU = "Options: \n1. Search Country \n2. Sort Countries \n3. Exit"
SEARCH_PROMPT = "Enter the country name to search: "
SORT_PROMPT = "Enter the field to sort by (name, population, region): "
LISTING_HEADER = "--- List of Countries ---"


class LoopState(Enum):
    FETCH_PENDING = "fetch_pending"
    READY = "ready"
    AWAITING_SEARCH_TERM = "awaiting_search_term"
    AWAITING_SORT_FIELD = "awaiting_sort_field"
    TERMINATED = "terminated"


class CommandLoop:
    """
    Interactive session over the country dataset.

    Handles the full lifecycle:
    1. Fetch the dataset (fatal on failure)
    2. Show the initial listing
    3. Read and dispatch commands until exit or end of input
    """

    def __init__(
        self,
        fetcher: Optional[CountryFetcher] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        show_initial_listing: bool = True
    ):
        self.fetcher = fetcher or CountryFetcher()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.show_initial_listing = show_initial_listing
        self.state = LoopState.FETCH_PENDING
        self.countries: List[Country] = []

    def _print(self, message: str = ""):
        print(message, file=self.stdout)

    def _read_line(self) -> Optional[str]:
        """Read one line; None means end of input."""
        self.stdout.flush()
        line = self.stdin.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")

    def run(self) -> int:
        """Run the session and return the process exit code."""
        try:
            self.countries = self.fetcher.fetch()
        except FetchError as e:
            self._print(f"Error fetching countries: {e}")
            return EXIT_FETCH_FAILURE

        self.state = LoopState.READY

        if self.show_initial_listing:
            self._print(LISTING_HEADER)
            display_countries(self.countries, file=self.stdout)

        while self.state is not LoopState.TERMINATED:
            self._print(MENU)
            command = self._read_line()
            if command is None:
                logger.info("End of input, exiting")
                self.state = LoopState.TERMINATED
                break
            self.handle_command(command)

        return EXIT_OK

    def handle_command(self, command: str):
        """Dispatch one menu command read in the READY state."""
        choice = command.strip()
        if choice == "1":
            self.state = LoopState.AWAITING_SEARCH_TERM
            self._search()
        elif choice == "2":
            self.state = LoopState.AWAITING_SORT_FIELD
            self._sort()
        elif choice == "3":
            self.state = LoopState.TERMINATED
            return
        else:
            self._print("Invalid option, please choose again.")

        if self.state is not LoopState.TERMINATED:
            self.state = LoopState.READY

    def _search(self):
        self._print(SEARCH_PROMPT)
        line = self._read_line()
        if line is None:
            self.state = LoopState.TERMINATED
            return

        term = line.strip()
        matches = search_countries(self.countries, term)
        if not matches:
            self._print(f"No country found with the name: {term}")
        else:
            display_countries(matches, file=self.stdout)

    def _sort(self):
        self._print(SORT_PROMPT)
        line = self._read_line()
        if line is None:
            self.state = LoopState.TERMINATED
            return

        try:
            field = SortField.parse(line)
        except InvalidSortField as e:
            # Unknown field: report it and show the baseline order unchanged
            logger.info(f"Rejected sort field '{e.value}'")
            self._print(str(e))
            display_countries(self.countries, file=self.stdout)
            return
        except SortFieldError as e:
            self._print(str(e))
            return

        display_countries(sort_countries(self.countries, field), file=self.stdout)
