"""Confirmation popup guarding deletion of a single record.

The window captures the canonical index, the targeted item and a snapshot of
the whole canonical collection when it is shown. Confirming removes the
target from that snapshot and hands the result to the save callback; the
live collection is never re-read while the prompt is pending.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Iterable, List, Optional, Tuple

from hostsift.exceptions import HostsiftError, PersistenceError, WorkflowError
from hostsift.search.base_search import T

from .base import PopupWindow

logger = logging.getLogger(__name__)


class Choice(Enum):
    """Button under the cursor."""

    CONFIRM = "yes"
    CANCEL = "no"


@dataclass(slots=True)
class ShowData(Generic[T]):
    """What the caller passes to `DeletePopupWindow.show`.

    ``index`` must be valid against ``collection``, which is the canonical
    collection as it is at the moment of the call.
    """

    index: int
    item: T
    collection: Iterable[T]


@dataclass(frozen=True, slots=True)
class PendingDeletion(Generic[T]):
    """Target captured at show time."""

    index: int
    item: T
    snapshot: Tuple[T, ...]

    def without_target(self) -> List[T]:
        return [copy.copy(item) for i, item in enumerate(self.snapshot) if i != self.index]


class DeletePopupWindow(PopupWindow[ShowData[T]]):
    """Yes/No prompt that deletes one record and persists the result.

    Parameters
    ----------
    save:
        Called with the complete post-deletion collection. Any exception it
        raises aborts the deletion.
    confirm_by_default:
        Pre-select "Yes" when shown. Defaults to "No".
    name_of:
        Returns the display name used in the prompt; defaults to the item's
        search text.
    """

    def __init__(
        self,
        save: Callable[[List[T]], None],
        *,
        confirm_by_default: bool = False,
        name_of: Optional[Callable[[T], str]] = None,
    ) -> None:
        self._save = save
        self._default = Choice.CONFIRM if confirm_by_default else Choice.CANCEL
        self._name_of = name_of or (lambda item: item.search_text())
        self._pending: Optional[PendingDeletion[T]] = None
        self.cursor = self._default

    @property
    def is_active(self) -> bool:
        return self._pending is not None

    @property
    def target(self) -> Optional[PendingDeletion[T]]:
        return self._pending

    def show(self, data: ShowData[T]) -> None:
        if self._pending is not None:
            raise WorkflowError("Delete prompt is already showing")
        snapshot = tuple(copy.copy(item) for item in data.collection)
        if not 0 <= data.index < len(snapshot):
            raise WorkflowError(
                f"Index {data.index} is out of range for a collection of {len(snapshot)} items"
            )
        if snapshot[data.index] != data.item:
            raise WorkflowError(
                f"Item {data.item!r} is not at index {data.index} of the collection"
            )
        self._pending = PendingDeletion(
            index=data.index, item=snapshot[data.index], snapshot=snapshot
        )
        self.cursor = self._default

    def close(self) -> None:
        self._pending = None

    dismiss = close

    def previous(self) -> None:
        """Move the cursor to "Yes"."""
        if self._pending is not None:
            self.cursor = Choice.CONFIRM

    def next(self) -> None:
        """Move the cursor to "No"."""
        if self._pending is not None:
            self.cursor = Choice.CANCEL

    def prompt(self) -> str:
        """Question text shown above the buttons; empty while inactive."""
        if self._pending is None:
            return ""
        return f"Delete `{self._name_of(self._pending.item)}` record?"

    def accept(self) -> Optional[List[T]]:
        """Apply the current choice.

        Returns the new canonical collection after a confirmed and saved
        deletion, otherwise None. If saving fails a `PersistenceError` is
        raised and the prompt stays open on the same target.
        """
        pending = self._pending
        if pending is None:
            return None
        if self.cursor is Choice.CANCEL:
            self.close()
            return None

        remaining = pending.without_target()
        try:
            self._save(list(remaining))
        except (HostsiftError, OSError) as exc:
            logger.exception("Saving after deleting %r failed", self._name_of(pending.item))
            raise PersistenceError(
                f"Could not delete {self._name_of(pending.item)!r}: {exc}"
            ) from exc

        logger.info(
            "Deleted %r at index %d (%d remain)",
            self._name_of(pending.item),
            pending.index,
            len(remaining),
        )
        self.close()
        return remaining
