"""In-memory record of aircraft that have already been announced."""

from __future__ import annotations


class DedupLedger:
    """Insert-only set of ICAO identifiers for the process lifetime.

    Nothing is ever evicted, so an aircraft is announced once even if it
    leaves the radius and comes back later. Access is expected from one
    pipeline cycle at a time.
    """

    def __init__(self) -> None:
        self._seen: set[str] = set()

    def has_been_seen(self, icao: str) -> bool:
        return icao in self._seen

    def mark_seen(self, icao: str) -> None:
        self._seen.add(icao)

    def __contains__(self, icao: object) -> bool:
        return icao in self._seen

    def __len__(self) -> int:
        return len(self._seen)


__all__ = ["DedupLedger"]
