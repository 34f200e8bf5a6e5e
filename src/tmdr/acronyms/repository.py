"""In-memory acronym repository loaded from a CSV file."""

import csv
import logging
import random as _random
from collections.abc import Iterable, Sequence
from pathlib import Path
from types import MappingProxyType

from tmdr.acronyms.errors import (
    AcronymNotFoundError,
    DatasetLoadError,
    NoFuzzyMatchError,
)
from tmdr.acronyms.matcher import AcronymMatcher, ascii_upper
from tmdr.acronyms.models import Acronym

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = "–"

# En dash as written by tools that decoded UTF-8 as cp1252
MISDECODED_DELIMITER = "â€“"


def split_definition(text: str, delimiter: str = DEFAULT_DELIMITER) -> tuple[str, str]:
    """
    Split a combined definition column into full form and definition.

    Args:
        text: Column text, e.g. "Arterial Blood Gas – A blood test..."
        delimiter: Separator between the two parts

    Returns:
        Tuple of (full_form, definition); definition is "" when absent
    """
    for sep in (delimiter, MISDECODED_DELIMITER):
        if sep and sep in text:
            full_form, definition = text.split(sep, 1)
            return full_form.strip(), definition.strip()
    return text.strip(), ""


class AcronymRepository:
    """
    Read-only acronym store with exact and fuzzy lookup.

    Holds two views over the same entries: a dict keyed by uppercase
    code for exact lookup and a tuple in load order for iteration.
    Neither is mutated after construction.
    """

    DEFAULT_MAX_RESULTS = 3

    def __init__(
        self,
        entries: Iterable[Acronym],
        matcher: AcronymMatcher | None = None,
    ) -> None:
        """
        Initialize the repository.

        Args:
            entries: Acronyms in load order; later duplicates replace earlier ones
            matcher: Matcher used for fuzzy lookup
        """
        data: dict[str, Acronym] = {}

        for entry in entries:
            if entry.acronym in data:
                logger.debug(f"Duplicate acronym {entry.acronym!r}, keeping last definition")
            data[entry.acronym] = entry

        # A replaced code keeps the position of its first occurrence
        self._data = MappingProxyType(data)
        self._list: tuple[Acronym, ...] = tuple(data.values())
        self._matcher = matcher or AcronymMatcher()

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Sequence[str]],
        delimiter: str = DEFAULT_DELIMITER,
        matcher: AcronymMatcher | None = None,
    ) -> "AcronymRepository":
        """
        Build a repository from CSV rows, header included.

        Rows with fewer than two columns or an empty code are skipped.

        Args:
            rows: Parsed CSV rows; the first row is the header
            delimiter: Separator inside the definition column
            matcher: Matcher used for fuzzy lookup

        Returns:
            Populated repository

        Raises:
            DatasetLoadError: If there is no header row
        """
        iterator = iter(rows)
        if next(iterator, None) is None:
            raise DatasetLoadError("failed to read CSV header: dataset is empty")

        entries: list[Acronym] = []
        for line_no, record in enumerate(iterator, start=2):
            if len(record) < 2 or not record[0].strip():
                logger.debug(f"Skipping malformed row {line_no}: {record!r}")
                continue

            full_form, definition = split_definition(record[1], delimiter)
            entries.append(
                Acronym(
                    acronym=ascii_upper(record[0].strip()),
                    full_form=full_form,
                    definition=definition,
                )
            )

        return cls(entries, matcher=matcher)

    @classmethod
    def from_csv(
        cls,
        path: Path | str,
        delimiter: str = DEFAULT_DELIMITER,
        matcher: AcronymMatcher | None = None,
    ) -> "AcronymRepository":
        """
        Load a repository from a CSV file.

        Args:
            path: Path to the CSV file
            delimiter: Separator inside the definition column
            matcher: Matcher used for fuzzy lookup

        Returns:
            Populated repository

        Raises:
            DatasetLoadError: If the file cannot be opened or parsed
        """
        path = Path(path)
        try:
            with path.open(newline="", encoding="utf-8-sig") as f:
                repo = cls.from_rows(csv.reader(f), delimiter=delimiter, matcher=matcher)
        except OSError as e:
            raise DatasetLoadError(f"failed to open CSV file {path}: {e}") from e
        except (csv.Error, UnicodeDecodeError) as e:
            raise DatasetLoadError(f"failed to read CSV record in {path}: {e}") from e

        logger.info(f"Loaded {len(repo)} acronyms from {path}")
        return repo

    def find(self, acronym: str) -> Acronym:
        """
        Look up an acronym by its exact code (case-insensitive).

        Raises:
            AcronymNotFoundError: If the code is not in the repository
        """
        try:
            return self._data[ascii_upper(acronym.strip())]
        except KeyError:
            raise AcronymNotFoundError(acronym) from None

    def find_fuzzy(self, acronym: str, max_results: int = DEFAULT_MAX_RESULTS) -> list[Acronym]:
        """
        Find acronyms similar to a code that has no exact match.

        Args:
            acronym: Query code
            max_results: Maximum results; values <= 0 use the default of 3

        Returns:
            Matching acronyms, best match first

        Raises:
            NoFuzzyMatchError: If the query is blank or nothing scores above zero
        """
        if max_results <= 0:
            max_results = self.DEFAULT_MAX_RESULTS

        # An empty string is a substring of every code
        if not acronym.strip():
            raise NoFuzzyMatchError(acronym)

        matches = self._matcher.rank(acronym, self._list, max_results)
        if not matches:
            raise NoFuzzyMatchError(acronym)
        return matches

    def random(self, rng: _random.Random | None = None) -> Acronym:
        """
        Return a random acronym.

        Raises:
            AcronymNotFoundError: If the repository is empty
        """
        if not self._list:
            raise AcronymNotFoundError("", "no acronyms available")
        return (rng or _random).choice(self._list)

    def all(self) -> list[Acronym]:
        """Return all acronyms in load order."""
        return list(self._list)

    def filter(self, text: str) -> list[Acronym]:
        """
        Filter acronyms whose code or full form contains the text.

        Matching is ASCII case-insensitive; an empty text matches everything.
        """
        needle = ascii_upper(text.strip())
        if not needle:
            return self.all()
        return [
            a for a in self._list
            if needle in a.acronym or needle in ascii_upper(a.full_form)
        ]

    def __len__(self) -> int:
        return len(self._list)

    def __contains__(self, acronym: object) -> bool:
        return isinstance(acronym, str) and ascii_upper(acronym.strip()) in self._data
