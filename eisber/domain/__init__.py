"""Domain constants for EisBER."""

from .radius import DEFAULT_RADIUS, RadiusClass

__all__ = ["DEFAULT_RADIUS", "RadiusClass"]
