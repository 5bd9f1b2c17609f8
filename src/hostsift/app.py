"""Application state for the hostsift terminal UI.

`AppState` ties the searchable host list, the current selection and the
delete prompt together and routes discrete input actions between them. A
renderer draws from this state; nothing here draws.
"""
from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Optional

from hostsift.config import Settings, load_settings
from hostsift.exceptions import PersistenceError
from hostsift.hosts import Host, predicate_for
from hostsift.search import Searchable
from hostsift.storage import HostStore, SqlHostStore
from hostsift.windows import DeletePopupWindow, ShowData

logger = logging.getLogger(__name__)


class Action(Enum):
    """Input events understood by `AppState.handle`."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    DELETE = auto()


class AppState:
    """State shared by the list view and its popups."""

    def __init__(self, settings: Settings, store: HostStore, hosts: list[Host]) -> None:
        self.settings = settings
        self.store = store
        self.hosts: Searchable[Host] = Searchable(
            settings.app.sort_by_score,
            hosts,
            "",
            predicate_for(settings.app.search_mode),
        )
        self.selected = 0
        self.delete_window: DeletePopupWindow[Host] = DeletePopupWindow(
            store.save,
            confirm_by_default=settings.app.confirm_by_default,
            name_of=lambda host: host.name,
        )
        self.last_error: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: Settings, store: Optional[HostStore] = None) -> "AppState":
        """Load hosts from ``store`` (or the configured database) and build the state."""
        store = store or SqlHostStore.from_settings(settings)
        return cls(settings, store, store.load())

    # ----- List -----

    def _clamp_selection(self) -> None:
        self.selected = max(0, min(self.selected, len(self.hosts) - 1))

    def set_query(self, query: str) -> None:
        self.hosts.search(query)
        self._clamp_selection()

    def select_next(self) -> None:
        self.selected += 1
        self._clamp_selection()

    def select_previous(self) -> None:
        self.selected -= 1
        self._clamp_selection()

    def selected_host(self) -> Optional[Host]:
        if self.hosts.is_empty():
            return None
        return self.hosts[self.selected]

    # ----- Deletion -----

    def request_delete(self) -> bool:
        """Open the delete prompt for the selected host.

        The filtered selection is resolved to its canonical index and the
        prompt is shown in the same call, so the canonical list cannot change
        in between.
        """
        if self.hosts.is_empty():
            return False
        canonical = self.hosts.items()
        index = self.hosts.canonical_index(self.selected)
        self.delete_window.show(ShowData(index=index, item=canonical[index], collection=canonical))
        return True

    def _accept_delete(self) -> None:
        try:
            remaining = self.delete_window.accept()
        except PersistenceError as exc:
            # Already logged by the window
            self.last_error = str(exc)
            return
        self.last_error = None
        if remaining is not None:
            self.hosts.reset(remaining)
            self._clamp_selection()

    # ----- Input -----

    def handle(self, action: Action) -> bool:
        """Apply ``action``; return True if it was consumed."""
        window = self.delete_window
        if window.is_active:
            if action is Action.LEFT:
                window.previous()
            elif action is Action.RIGHT:
                window.next()
            elif action is Action.ENTER:
                self._accept_delete()
            elif action is Action.ESCAPE:
                window.dismiss()
                self.last_error = None
            else:
                return False
            return True

        if action is Action.UP:
            self.select_previous()
        elif action is Action.DOWN:
            self.select_next()
        elif action is Action.DELETE:
            return self.request_delete()
        else:
            return False
        return True


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def main() -> None:
    """Startup check: load settings and the host list, log the count and exit.

    No terminal UI ships with this package; a renderer builds an `AppState`
    the same way and feeds it `Action` values.
    """
    settings = load_settings()
    configure_logging(settings.app.log_level)
    state = AppState.from_settings(settings)
    logger.info("%s loaded %d hosts", settings.app.name, len(state.hosts))


if __name__ == "__main__":  # pragma: no cover
    main()
