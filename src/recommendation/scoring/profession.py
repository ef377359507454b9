"""Factor 6: Profession / Activity Score (5% weight)."""

from __future__ import annotations

from src.recommendation.models import Community

NEUTRAL_SCORE = 50.0
BASE_SCORE = 60.0
PER_ITEM = 5.0
MAX_BONUS = 20.0


def _richness(items: list[str]) -> float:
    return BASE_SCORE + min(len(items) * PER_ITEM, MAX_BONUS)


def score(community: Community) -> float:
    # activities take priority; professions only count when there are none
    if community.activities:
        return _richness(community.activities)
    if community.professions:
        return _richness(community.professions)
    return NEUTRAL_SCORE
