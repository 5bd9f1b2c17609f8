"""SSH host records and the predicates used to filter them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from hostsift.exceptions import ConfigError


@dataclass(frozen=True, slots=True)
class Host:
    """A single SSH host entry.

    Attributes
    ----------
    name: str
        The ``Host`` pattern as written in the config; used for display and search.
    aliases: str
        Additional space-separated patterns from the same ``Host`` line.
    user: str | None
        Login user, if configured.
    destination: str
        ``HostName`` value; empty when the name itself is the destination.
    port: str | None
        Port, kept as text as it appears in the config.
    proxy_command: str | None
        ``ProxyCommand`` value, if any.
    """

    name: str
    aliases: str = ""
    user: Optional[str] = None
    destination: str = ""
    port: Optional[str] = None
    proxy_command: Optional[str] = None

    def search_text(self) -> str:
        return self.name


def name_contains(host: Host, query: str) -> bool:
    """Case-insensitive substring match on the host name."""
    return query.lower() in host.name.lower()


def any_field_contains(host: Host, query: str) -> bool:
    """Case-insensitive substring match on name, aliases, user or destination."""
    q = query.lower()
    fields = (host.name, host.aliases, host.user or "", host.destination)
    return any(q in f.lower() for f in fields)


_PREDICATES: dict[str, Callable[[Host, str], bool]] = {
    "name": name_contains,
    "all": any_field_contains,
}


def predicate_for(mode: str) -> Callable[[Host, str], bool]:
    """Return the host predicate configured by ``search_mode``."""
    try:
        return _PREDICATES[mode]
    except KeyError:
        raise ConfigError(
            f"Unknown search mode {mode!r}; expected one of {sorted(_PREDICATES)}"
        ) from None
