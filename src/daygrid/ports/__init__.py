"""Ports - interfaces/protocols for external dependencies."""

from .record_source import RecordSource

__all__ = [
    "RecordSource",
]
