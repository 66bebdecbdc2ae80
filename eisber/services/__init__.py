"""Service-layer helpers for EisBER."""

from .announcer import DEFAULT_PHRASES, PhraseSource, build_announcement
from .enricher import Enricher, compute_co2_tons, simplify_model
from .ledger import DedupLedger
from .narration import LoggingNarrator, Narrator
from .pipeline import DetectionPipeline, DetectionPoller
from .selector import MIN_AIRBORNE_SPEED_KT, select_nearest

__all__ = [
    "DEFAULT_PHRASES",
    "DedupLedger",
    "DetectionPipeline",
    "DetectionPoller",
    "Enricher",
    "LoggingNarrator",
    "MIN_AIRBORNE_SPEED_KT",
    "Narrator",
    "PhraseSource",
    "build_announcement",
    "compute_co2_tons",
    "select_nearest",
    "simplify_model",
]
