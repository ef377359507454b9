"""Factor 3: Demographic Score (15% weight).

Neutral baseline plus independent inclusiveness bonuses.  The user side
carries no age / gender / life-stage data, so only the community's
openness is rewarded.
"""

from __future__ import annotations

from src.recommendation.models import Community

BASELINE = 50.0
BONUS = 10.0


def score(community: Community) -> float:
    """Compute demographic fit.  [0, 100]."""
    result = BASELINE
    if community.age_group == "All Ages":
        result += BONUS
    if community.gender is None or community.gender == "Co-Ed":
        result += BONUS
    if not community.life_stages or "All" in community.life_stages:
        result += BONUS
    if community.meeting_type == "Hybrid":
        result += BONUS
    return min(result, 100.0)
