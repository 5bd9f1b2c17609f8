"""Base interface for modal popup windows.

A popup owns its own state and is driven by the coordinating layer; drawing
is left to whatever renderer consumes the exposed state.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

D = TypeVar("D")


class PopupWindow(ABC, Generic[D]):
    """Abstract popup window parameterised by the data it is shown with."""

    @property
    @abstractmethod
    def is_active(self) -> bool:
        """Return True while the popup is visible and capturing input."""

    @abstractmethod
    def show(self, data: D) -> None:
        """Activate the popup for ``data``."""
        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        """Deactivate the popup without side effects."""
        raise NotImplementedError

    def toggle(self, data: D) -> None:
        """Close when active, otherwise show for ``data``."""
        if self.is_active:
            self.close()
        else:
            self.show(data)
