"""Errors raised by acronym lookups and dataset loading."""


class AcronymError(Exception):
    """Base class for acronym lookup errors."""

    pass


class AcronymNotFoundError(AcronymError):
    """Raised when an acronym is not present in the repository."""

    def __init__(self, acronym: str, message: str | None = None) -> None:
        self.acronym = acronym
        super().__init__(message or f"acronym '{acronym}' not found")


class NoFuzzyMatchError(AcronymNotFoundError):
    """Raised when fuzzy search finds no candidate above threshold."""

    def __init__(self, acronym: str) -> None:
        super().__init__(acronym, f"no fuzzy matches found for '{acronym}'")


class DatasetLoadError(AcronymError):
    """Raised when the acronym dataset cannot be read or parsed."""

    pass
