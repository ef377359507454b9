"""Factor 7: Recovery Support Score (5% weight)."""

from __future__ import annotations

from src.recommendation.models import Community

SUPPORT_SCORE = 65.0
NEUTRAL_SCORE = 50.0


def score(community: Community) -> float:
    return SUPPORT_SCORE if community.recovery_support else NEUTRAL_SCORE
