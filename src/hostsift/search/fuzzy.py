"""Fuzzy relevance scoring for short, human-typed queries.

A candidate only matches when every character of the query appears in it in
order (a subsequence match). Matching candidates are scored with rapidfuzz
similarity plus bonuses for contiguous and prefix matches.
"""

from __future__ import annotations

from typing import Optional

from rapidfuzz import fuzz

CONTIGUOUS_BONUS = 50
PREFIX_BONUS = 25


def _is_subsequence(needle: str, haystack: str) -> bool:
    it = iter(haystack)
    return all(ch in it for ch in needle)


class FuzzyRanker:
    """Scores a candidate string against a query.

    Matching is smart-case: case-insensitive unless the query contains an
    uppercase character.
    """

    def score(self, candidate: str, query: str) -> Optional[int]:
        """Return a non-negative score (higher is better) or None for no match."""
        if not query:
            return 0
        if not any(ch.isupper() for ch in query):
            candidate = candidate.lower()
            query = query.lower()
        if not _is_subsequence(query, candidate):
            return None

        points = round(fuzz.partial_ratio(query, candidate)) + round(fuzz.ratio(query, candidate))
        if query in candidate:
            points += CONTIGUOUS_BONUS
            if candidate.startswith(query):
                points += PREFIX_BONUS
        return int(points)
