"""Narrator interface for delivering announcements."""

from __future__ import annotations

import logging
from typing import Protocol, Sequence

logger = logging.getLogger("eisber.narration")


class Narrator(Protocol):
    """Anything that can speak or display a sequence of text fragments."""

    async def say(self, parts: Sequence[str]) -> None:
        """Deliver the fragments in order."""


class LoggingNarrator:
    """Write each fragment to the log instead of a speaker."""

    async def say(self, parts: Sequence[str]) -> None:
        for text in parts:
            logger.info('---> "%s"', text)


__all__ = ["LoggingNarrator", "Narrator"]
