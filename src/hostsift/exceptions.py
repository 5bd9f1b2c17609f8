"""Custom exception hierarchy for hostsift.

These exceptions allow callers to discriminate error categories
and handle them appropriately while preserving the original context.
"""

from __future__ import annotations


class HostsiftError(Exception):
    """Base class for all hostsift exceptions."""


class ConfigError(HostsiftError):
    """Raised when configuration loading or validation fails."""


class StorageError(HostsiftError):
    """Raised when the storage layer encounters an error (DB, filesystem, etc.)."""


class PersistenceError(StorageError):
    """Raised when a confirmed mutation could not be written back to storage."""


class WorkflowError(HostsiftError):
    """Raised for invalid transitions of a popup workflow."""
