"""Factor 1: Interest Score (30% weight).

Compares the user's comma-separated interests with the community's
interest tags, ministry types and activities.  A tag matches an interest
when either string contains the other, so "bible" and "bible study"
count as a match in both directions.  Every matching (interest, tag) pair
counts, and the match rate is doubled before capping at 100.
"""

from __future__ import annotations

import logging

from src.recommendation.models import Community, UserProfile

logger = logging.getLogger(__name__)

NEUTRAL_SCORE = 50.0
AMPLIFICATION = 2.0


def community_tags(community: Community) -> list[str]:
    tags = community.interest_tags + community.ministry_types + community.activities
    return [tag.lower() for tag in tags]


def score(user: UserProfile, community: Community) -> float:
    """Compute interest overlap for a user/community pair.  [0, 100]."""
    interests = user.interest_tokens
    tags = community_tags(community)

    if not interests or not tags:
        return NEUTRAL_SCORE

    matches = 0
    for interest in interests:
        for tag in tags:
            if interest in tag or tag in interest:
                matches += 1

    match_percentage = matches / len(interests) * 100
    result = min(match_percentage * AMPLIFICATION, 100.0)
    logger.debug(
        "Interests: %d matches over %d interests / %d tags -> %.1f",
        matches, len(interests), len(tags), result,
    )
    return result
