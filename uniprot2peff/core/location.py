"""
Span resolution for feature locations.
"""

from typing import Optional, Tuple

from ..errors import MissingLocationError
from .models import FeatureLocation


def resolve_span(location: Optional[FeatureLocation]) -> Tuple[int, int]:
    """
    Normalize a feature location into a closed interval.

    Resolution order:
    1. <position> -> (pos, pos)
    2. <begin> and <end> -> (begin, end)
    3. Only one of <begin>/<end> -> both bounds set to that value
    4. Nothing usable -> MissingLocationError

    start > end is not checked here.

    Args:
        location: Feature location, or None if the feature has none

    Returns:
        (start, end) tuple of 1-based positions
    """
    if location is None:
        raise MissingLocationError("Feature has no location")

    if location.position is not None:
        return location.position, location.position

    if location.begin is not None and location.end is not None:
        return location.begin, location.end

    if location.begin is not None:
        return location.begin, location.begin

    if location.end is not None:
        return location.end, location.end

    raise MissingLocationError("Location has no position, begin or end")
