"""Fuzzy search over in-memory collections."""

from .base_search import IncludePredicate, SearchableItem
from .fuzzy import FuzzyRanker
from .searchable import Searchable

__all__ = ["FuzzyRanker", "IncludePredicate", "Searchable", "SearchableItem"]
