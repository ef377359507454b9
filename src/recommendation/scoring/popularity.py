"""Factor 5: Popularity Score (10% weight).

Step function with a sweet spot at 51-100 members: brand new groups score
low, very large ones lose some ground for being less personal.
"""

from __future__ import annotations

from src.recommendation.models import Community

EMPTY_SCORE = 20.0

# (max member count, score), checked in order.
MEMBER_BANDS: list[tuple[int, float]] = [
    (10, 40.0),
    (20, 60.0),
    (50, 80.0),
    (100, 100.0),
    (200, 90.0),
]
VERY_LARGE_SCORE = 70.0


def member_count_score(member_count: int) -> float:
    if member_count == 0:
        return EMPTY_SCORE
    for limit, band_score in MEMBER_BANDS:
        if member_count <= limit:
            return band_score
    return VERY_LARGE_SCORE


def score(community: Community) -> float:
    return member_count_score(community.member_count)
