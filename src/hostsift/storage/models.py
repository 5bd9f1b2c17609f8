"""SQLAlchemy models for hostsift storage.

A single table holds the host list; ``position`` carries the canonical order.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """SQLAlchemy declarative base."""


class HostRecord(Base):
    """Persisted form of a `hostsift.hosts.Host`."""

    __tablename__ = "hosts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    position: Mapped[int] = mapped_column(Integer, index=True)

    name: Mapped[str] = mapped_column(String(512))
    aliases: Mapped[str] = mapped_column(String(1024), default="")
    user: Mapped[Optional[str]] = mapped_column(String(255), default=None)
    destination: Mapped[str] = mapped_column(String(1024), default="")
    port: Mapped[Optional[str]] = mapped_column(String(16), default=None)
    proxy_command: Mapped[Optional[str]] = mapped_column(Text, default=None)

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow
    )
