"""Data types for acronym records and ranked candidates."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Acronym:
    """A medical acronym with its full form and definition."""

    acronym: str
    """Uppercase short code, unique within a repository."""

    full_form: str
    """Expanded form, e.g. 'Arterial Blood Gas'."""

    definition: str = ""
    """Free-text explanation, empty when the dataset has none."""

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    def __str__(self) -> str:
        return f"{self.acronym} → {self.full_form}"


@dataclass
class ScoredCandidate:
    """An acronym paired with its similarity score for one search."""

    entry: Acronym
    score: int

    def __repr__(self) -> str:
        return f"ScoredCandidate({self.entry.acronym!r}, score={self.score})"
