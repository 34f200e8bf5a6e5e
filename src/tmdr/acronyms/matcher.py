"""Fuzzy acronym matching using Levenshtein distance."""

import logging
from collections.abc import Iterable

from tmdr.acronyms.models import Acronym, ScoredCandidate

logger = logging.getLogger(__name__)


def ascii_upper(text: str) -> str:
    """Uppercase ASCII letters only, leaving other characters untouched."""
    return "".join(chr(ord(c) - 32) if "a" <= c <= "z" else c for c in text)


class AcronymMatcher:
    """
    Ranks acronyms by similarity to a (possibly misspelled) query.

    Scores are integers: 100 for an exact match, 0 for a rejected
    candidate. Substring and shared-prefix bonuses are added on top of
    the distance-based score, so near matches can exceed 100.
    """

    EXACT_SCORE = 100
    SUBSTRING_BONUS = 20
    PREFIX_BONUS = 5
    PREFIX_LENGTH = 3

    # Strings up to SHORT_LENGTH characters tolerate fewer edits
    SHORT_LENGTH = 4
    SHORT_MAX_DISTANCE = 2
    LONG_MAX_DISTANCE = 3

    @staticmethod
    def levenshtein_distance(s1: str, s2: str) -> int:
        """
        Calculate Levenshtein edit distance between two strings.

        Args:
            s1: First string
            s2: Second string

        Returns:
            Number of edits (insertions, deletions, substitutions)
        """
        if not s1:
            return len(s2)
        if not s2:
            return len(s1)

        rows, cols = len(s1) + 1, len(s2) + 1
        matrix = [[0] * cols for _ in range(rows)]
        for i in range(rows):
            matrix[i][0] = i
        for j in range(cols):
            matrix[0][j] = j

        for i in range(1, rows):
            for j in range(1, cols):
                cost = 0 if s1[i - 1] == s2[j - 1] else 1
                matrix[i][j] = min(
                    matrix[i - 1][j] + 1,  # deletion
                    matrix[i][j - 1] + 1,  # insertion
                    matrix[i - 1][j - 1] + cost,  # substitution
                )

        return matrix[-1][-1]

    @classmethod
    def max_distance(cls, max_len: int) -> int:
        """Get the largest edit distance accepted for strings of this length."""
        if max_len <= cls.SHORT_LENGTH:
            return cls.SHORT_MAX_DISTANCE
        return cls.LONG_MAX_DISTANCE

    def similarity_score(self, query: str, candidate: str) -> int:
        """
        Calculate the similarity score between a query and a candidate code.

        Both strings are expected to be case-normalized by the caller.

        Args:
            query: Search string
            candidate: Acronym code to compare against

        Returns:
            Score >= 0; 0 means the candidate is not a match
        """
        if query == candidate:
            return self.EXACT_SCORE

        distance = self.levenshtein_distance(query, candidate)
        max_len = max(len(query), len(candidate))

        if distance > self.max_distance(max_len):
            return 0

        score = self.EXACT_SCORE - (distance * 100 // max_len)

        if query in candidate or candidate in query:
            score += self.SUBSTRING_BONUS

        # Leading characters only; stops at the first mismatch
        for a, b in zip(query[: self.PREFIX_LENGTH], candidate[: self.PREFIX_LENGTH]):
            if a != b:
                break
            score += self.PREFIX_BONUS

        return score

    def score_all(
        self,
        query: str,
        entries: Iterable[Acronym],
    ) -> list[ScoredCandidate]:
        """
        Score every entry against a query, keeping non-zero scores.

        Args:
            query: Search string (ASCII-uppercased here)
            entries: Acronyms to score, in iteration order

        Returns:
            Candidates sorted by score (highest first); ties keep entry order
        """
        normalized = ascii_upper(query)
        candidates: list[ScoredCandidate] = []

        for entry in entries:
            score = self.similarity_score(normalized, entry.acronym)
            if score > 0:
                candidates.append(ScoredCandidate(entry=entry, score=score))

        # list.sort is stable, so equal scores stay in dataset order
        candidates.sort(key=lambda c: c.score, reverse=True)

        logger.debug(f"Scored {len(candidates)} candidates for {normalized!r}")
        return candidates

    def rank(
        self,
        query: str,
        entries: Iterable[Acronym],
        max_results: int,
    ) -> list[Acronym]:
        """
        Find the best matching acronyms for a query.

        Args:
            query: Search string
            entries: Acronyms to search
            max_results: Maximum number of results to return

        Returns:
            Up to max_results acronyms, best match first
        """
        return [c.entry for c in self.score_all(query, entries)[:max_results]]
