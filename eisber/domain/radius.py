"""Search radius classes accepted by the ADS-B Exchange proximity endpoint."""

from __future__ import annotations

from enum import IntEnum


class RadiusClass(IntEnum):
    """Supported search radii in nautical miles."""

    NM_1 = 1
    NM_5 = 5
    NM_10 = 10
    NM_25 = 25
    NM_100 = 100
    NM_250 = 250

    @classmethod
    def parse(cls, raw: str | int) -> "RadiusClass":
        try:
            return cls(int(raw))
        except ValueError:
            allowed = ", ".join(str(member.value) for member in cls)
            raise ValueError(
                f"Unsupported search radius {raw!r}; expected one of {allowed}"
            ) from None


DEFAULT_RADIUS: RadiusClass = RadiusClass.NM_5

__all__ = ["RadiusClass", "DEFAULT_RADIUS"]
