"""Pick the nearest airborne aircraft out of a nearby-contacts list."""

from __future__ import annotations

from typing import Iterable, Optional

from eisber.models.aircraft import ObservedObject

MIN_AIRBORNE_SPEED_KT = 50.0


def is_candidate(observed: ObservedObject, min_speed_kt: float = MIN_AIRBORNE_SPEED_KT) -> bool:
    """Airborne, fast enough to not be a ground vehicle, and registered."""

    if observed.on_ground:
        return False
    if observed.ground_speed_kt < min_speed_kt:
        return False
    return bool(observed.registration)


def select_nearest(
    objects: Iterable[ObservedObject], min_speed_kt: float = MIN_AIRBORNE_SPEED_KT
) -> Optional[ObservedObject]:
    """Return the closest candidate, or ``None`` when nothing qualifies.

    Ties on distance go to whichever candidate came first.
    """

    candidates = [obj for obj in objects if is_candidate(obj, min_speed_kt)]
    if not candidates:
        return None
    return min(candidates, key=lambda obj: obj.distance_nm)


__all__ = ["MIN_AIRBORNE_SPEED_KT", "is_candidate", "select_nearest"]
