"""Factor 2: Location Score (25% weight).

First applicable rule wins:
  - Online communities are reachable from anywhere             75
  - Any coordinate missing -> city / state fallback       90 / 60 / 40
  - Otherwise haversine distance mapped onto fixed bands     100 .. 10
"""

from __future__ import annotations

import logging

from src.recommendation.geo import haversine_distance, is_missing
from src.recommendation.models import Community, UserProfile

logger = logging.getLogger(__name__)

ONLINE_SCORE = 75.0
SAME_CITY_SCORE = 90.0
SAME_STATE_SCORE = 60.0
UNKNOWN_LOCATION_SCORE = 40.0

# (max distance in miles, score), checked in order.
DISTANCE_BANDS: list[tuple[float, float]] = [
    (5.0, 100.0),
    (10.0, 90.0),
    (25.0, 75.0),
    (50.0, 50.0),
    (100.0, 30.0),
]
FAR_SCORE = 10.0


def _fallback_score(user: UserProfile, community: Community) -> float:
    if user.city and community.city and user.city.lower() == community.city.lower():
        return SAME_CITY_SCORE
    if user.state and community.state and user.state == community.state:
        return SAME_STATE_SCORE
    return UNKNOWN_LOCATION_SCORE


def distance_score(distance: float) -> float:
    for limit, band_score in DISTANCE_BANDS:
        if distance <= limit:
            return band_score
    return FAR_SCORE


def score(user: UserProfile, community: Community) -> float:
    """Compute location proximity score.  [0, 100]."""
    if community.meeting_type == "Online":
        return ONLINE_SCORE

    if is_missing(
        user.latitude, user.longitude, community.latitude, community.longitude,
    ):
        result = _fallback_score(user, community)
        logger.debug("Location: no coordinates, city/state fallback -> %.0f", result)
        return result

    distance = haversine_distance(
        user.latitude, user.longitude, community.latitude, community.longitude,
    )
    result = distance_score(distance)
    logger.debug("Location: %.1f mi -> %.0f", distance, result)
    return result
