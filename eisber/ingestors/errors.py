"""Failure kinds raised by the data source clients."""

from __future__ import annotations


class DataSourceError(RuntimeError):
    """Base error for a data source that could not deliver usable data."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source


class SourceUnavailable(DataSourceError):
    """Transport failure, timeout, or non-success HTTP status."""


class MalformedResponse(DataSourceError):
    """Payload could not be decoded or had an unexpected shape."""


__all__ = ["DataSourceError", "MalformedResponse", "SourceUnavailable"]
