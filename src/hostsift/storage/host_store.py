"""Persistence for the canonical host list.

A `HostStore` loads the whole list at startup and overwrites the whole list
on save; there are no partial updates.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterable, List

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from hostsift.config import Settings
from hostsift.exceptions import StorageError
from hostsift.hosts import Host

from .database import get_engine, init_db, make_session_factory, session_scope
from .models import HostRecord

logger = logging.getLogger(__name__)


class HostStore(ABC):
    """Abstract load/save interface for the host list."""

    @abstractmethod
    def load(self) -> List[Host]:
        """Return all hosts in persisted order."""
        raise NotImplementedError

    @abstractmethod
    def save(self, hosts: Iterable[Host]) -> None:
        """Replace the persisted list with ``hosts``, keeping their order.

        Implementations should raise `hostsift.exceptions.StorageError` on failure.
        """
        raise NotImplementedError


def _to_record(position: int, host: Host) -> HostRecord:
    return HostRecord(
        position=position,
        name=host.name,
        aliases=host.aliases,
        user=host.user,
        destination=host.destination,
        port=host.port,
        proxy_command=host.proxy_command,
    )


def _to_host(record: HostRecord) -> Host:
    return Host(
        name=record.name,
        aliases=record.aliases or "",
        user=record.user,
        destination=record.destination or "",
        port=record.port,
        proxy_command=record.proxy_command,
    )


class SqlHostStore(HostStore):
    """Host store backed by a SQLAlchemy database."""

    def __init__(self, factory: sessionmaker[Session]) -> None:
        self._factory = factory

    @classmethod
    def from_settings(cls, settings: Settings) -> "SqlHostStore":
        """Create the engine and tables from configuration."""
        engine = get_engine(settings.database.url)
        init_db(engine)
        return cls(make_session_factory(engine))

    def load(self) -> List[Host]:
        try:
            with session_scope(self._factory) as session:
                rows = session.scalars(select(HostRecord).order_by(HostRecord.position)).all()
                hosts = [_to_host(r) for r in rows]
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to load hosts: {exc}") from exc
        logger.debug("Loaded %d hosts", len(hosts))
        return hosts

    def save(self, hosts: Iterable[Host]) -> None:
        records = [_to_record(i, h) for i, h in enumerate(hosts)]
        try:
            with session_scope(self._factory) as session:
                session.execute(delete(HostRecord))
                session.add_all(records)
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to save hosts: {exc}") from exc
        logger.info("Saved %d hosts", len(records))
