"""Fuzzy-searchable SSH host list with confirmed deletion."""

__version__ = "0.1.0"
