"""Shared types for searchable collections.

Defines the minimal surface an item needs to take part in fuzzy filtering,
plus the predicate signature used to gate inclusion before scoring.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Protocol, TypeVar


class SearchableItem(Protocol):
    """Minimal protocol for items that can be fuzzy-filtered."""

    def search_text(self) -> str:
        """Return the text the fuzzy ranker scores against."""
        ...


T = TypeVar("T", bound=SearchableItem)

# Decides whether an item is kept for a (non-empty) query
IncludePredicate = Callable[[T, str], bool]


@dataclass(slots=True)
class FilteredEntry(Generic[T]):
    """A copy of a canonical item together with where it came from."""

    index: int
    item: T
