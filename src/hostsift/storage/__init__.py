"""Storage layer: SQLAlchemy models, engine helpers and the host store."""

from .host_store import HostStore, SqlHostStore

__all__ = ["HostStore", "SqlHostStore"]
