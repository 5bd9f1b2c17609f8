"""Fuzzy-filtered view over an ordered collection.

`Searchable` owns the canonical list of items and a filtered view derived
from it. The view is rebuilt from scratch on every `search()` call; it is
never patched incrementally. Entries in the view are copies of the canonical
items and remember the canonical index they came from, so a selection made
in the view can be mapped back onto the canonical list.
"""

from __future__ import annotations

import copy
import logging
from typing import Generic, Iterable, Iterator, List, Optional, Tuple

from .base_search import FilteredEntry, IncludePredicate, T
from .fuzzy import FuzzyRanker

logger = logging.getLogger(__name__)


class Searchable(Generic[T]):
    """An ordered collection with an incrementally searched, ranked view.

    Parameters
    ----------
    sort_by_score:
        If True, non-empty queries order the view by descending fuzzy score.
        Equal scores keep their canonical order.
    items:
        The canonical items, in persisted order.
    search_value:
        Initial query used to build the first view.
    predicate:
        ``predicate(item, query)`` decides inclusion for non-empty queries.
        The fuzzy score only orders items; it never excludes them.
    ranker:
        Optional scorer; defaults to a `FuzzyRanker`.
    """

    def __init__(
        self,
        sort_by_score: bool,
        items: Iterable[T],
        search_value: str,
        predicate: IncludePredicate[T],
        *,
        ranker: Optional[FuzzyRanker] = None,
    ) -> None:
        self.sort_by_score = sort_by_score
        self._items: List[T] = list(items)
        self._predicate = predicate
        self._ranker = ranker or FuzzyRanker()
        self._query = ""
        self._filtered: List[FilteredEntry[T]] = []
        self.search(search_value)

    @property
    def query(self) -> str:
        """The query the current view was built from."""
        return self._query

    def search(self, value: str) -> None:
        """Rebuild the filtered view for ``value``."""
        self._query = value
        if not value:
            # Empty query shows everything, untouched order
            self._filtered = [
                FilteredEntry(index=i, item=copy.copy(item)) for i, item in enumerate(self._items)
            ]
            return

        scored: List[Tuple[int, FilteredEntry[T]]] = []
        for i, item in enumerate(self._items):
            if not self._predicate(item, value):
                continue
            score = self._ranker.score(item.search_text(), value) or 0
            scored.append((score, FilteredEntry(index=i, item=copy.copy(item))))

        if self.sort_by_score:
            # sorted() is stable, also with reverse=True
            scored = sorted(scored, key=lambda pair: pair[0], reverse=True)

        self._filtered = [entry for _, entry in scored]
        logger.debug(
            "Search %r kept %d of %d items", value, len(self._filtered), len(self._items)
        )

    def reset(self, items: Iterable[T]) -> None:
        """Replace the canonical items and re-run the current query."""
        self._items = list(items)
        self.search(self._query)

    def __len__(self) -> int:
        return len(self._filtered)

    def is_empty(self) -> bool:
        return not self._filtered

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    def iter(self) -> Iterator[T]:
        """Iterate the filtered view as it is now; later searches do not affect it."""
        return iter([entry.item for entry in self._filtered])

    def non_filtered_iter(self) -> Iterator[T]:
        """Iterate the canonical items, ignoring the current query."""
        return iter(list(self._items))

    def items(self) -> List[T]:
        """Return a copy of the canonical items."""
        return [copy.copy(item) for item in self._items]

    def _entry(self, index: int) -> FilteredEntry[T]:
        if index < 0 or index >= len(self._filtered):
            raise IndexError(
                f"filtered index {index} out of range for view of length {len(self._filtered)}"
            )
        return self._filtered[index]

    def __getitem__(self, index: int) -> T:
        return self._entry(index).item

    def canonical_index(self, index: int) -> int:
        """Map a position in the filtered view to its position in the canonical list."""
        return self._entry(index).index
