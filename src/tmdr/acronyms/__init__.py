"""Acronym lookup package: repository, fuzzy matcher and errors."""

from tmdr.acronyms.errors import (
    AcronymError,
    AcronymNotFoundError,
    DatasetLoadError,
    NoFuzzyMatchError,
)
from tmdr.acronyms.matcher import AcronymMatcher
from tmdr.acronyms.models import Acronym, ScoredCandidate
from tmdr.acronyms.repository import AcronymRepository

__all__ = [
    "Acronym",
    "ScoredCandidate",
    "AcronymMatcher",
    "AcronymRepository",
    "AcronymError",
    "AcronymNotFoundError",
    "NoFuzzyMatchError",
    "DatasetLoadError",
]
