"""Adapters - I/O implementations of ports."""

from .json_file import JsonFileSource, SourceError

__all__ = [
    "JsonFileSource",
    "SourceError",
]
