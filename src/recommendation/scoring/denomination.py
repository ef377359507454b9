"""Factor 4: Denomination Score (10% weight).

Communities carry no denomination column, so the user's denomination is
matched against the community's ministry types instead.
"""

from __future__ import annotations

import logging

from src.recommendation.models import Community, UserProfile

logger = logging.getLogger(__name__)

MATCH_SCORE = 90.0
NEUTRAL_SCORE = 50.0


def score(user: UserProfile, community: Community) -> float:
    """Compute denomination alignment.  [0, 100]."""
    if not user.denomination or not community.ministry_types:
        return NEUTRAL_SCORE

    denomination = user.denomination.lower()
    for ministry in community.ministry_types:
        ministry = ministry.lower()
        if denomination in ministry or ministry in denomination:
            logger.debug("Denomination: %r matches %r", denomination, ministry)
            return MATCH_SCORE
    return NEUTRAL_SCORE
