"""Top-level orchestrator — scores and ranks communities for one user.

Pipeline:
  1. Receive a user and candidate communities (already fetched by the caller)
  2. Score every community across seven factors         (deterministic)
  3. Combine factors into a weighted total
  4. Stable-sort descending, optionally truncate to the top N
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from src.recommendation.config import FactorWeights
from src.recommendation.models import (
    Community,
    RankedCommunity,
    RecommendationScore,
    ScoreBreakdown,
    UserProfile,
)
from src.recommendation.scoring import (
    demographics,
    denomination,
    interests,
    location,
    popularity,
    profession,
    recovery,
)
from src.recommendation.scoring.composite import composite_score

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent.parent / "data"

_OUTPUT_KEYS = ("recommendation_score", "recommendationScore", "breakdown")


def load_sample_user() -> UserProfile:
    path = DATA_DIR / "sample_user.json"
    with open(path) as f:
        raw = json.load(f)
    return UserProfile.model_validate(raw)


def load_sample_communities() -> list[Community]:
    path = DATA_DIR / "sample_communities.json"
    with open(path) as f:
        raw = json.load(f)
    return [Community.model_validate(c) for c in raw]


def load_user_from_json(data: dict[str, Any]) -> UserProfile:
    return UserProfile.model_validate(data)


def load_communities_from_json(data: list[dict[str, Any]]) -> list[Community]:
    return [Community.model_validate(c) for c in data]


def score_community(
    user: UserProfile,
    community: Community,
    weights: FactorWeights | None = None,
) -> RecommendationScore:
    """Score one community for one user across all seven factors."""
    breakdown = ScoreBreakdown(
        interests=interests.score(user, community),
        location=location.score(user, community),
        demographics=demographics.score(community),
        profession=profession.score(community),
        denomination=denomination.score(user, community),
        popularity=popularity.score(community),
        recovery=recovery.score(community),
    )
    total = composite_score(breakdown, weights)
    logger.debug(
        "Community %s: int=%.1f loc=%.1f demo=%.1f denom=%.1f pop=%.1f "
        "prof=%.1f rec=%.1f -> %.2f",
        getattr(community, "name", None) or getattr(community, "id", "?"),
        breakdown.interests, breakdown.location, breakdown.demographics,
        breakdown.denomination, breakdown.popularity, breakdown.profession,
        breakdown.recovery, total,
    )
    return RecommendationScore(total_score=total, breakdown=breakdown)


def rank(
    user: UserProfile,
    communities: Iterable[Community],
    limit: int | None = None,
    include_breakdown: bool = True,
    weights: FactorWeights | None = None,
) -> list[RankedCommunity]:
    """Rank communities for a user, best first.

    The sort is stable: communities with equal scores keep their input
    order, so repeated calls with the same input page identically.
    """
    ranked: list[RankedCommunity] = []
    for community in communities:
        result = score_community(user, community, weights)
        data = community.model_dump()
        # stored or previously serialized scores must not shadow the fresh one
        for key in _OUTPUT_KEYS:
            data.pop(key, None)
        data["recommendation_score"] = result.total_score
        data["breakdown"] = result.breakdown if include_breakdown else None
        ranked.append(RankedCommunity.model_validate(data))

    ranked.sort(key=lambda rc: rc.recommendation_score, reverse=True)
    candidates = len(ranked)
    if limit is not None:
        ranked = ranked[:limit]

    logger.info(
        "Ranking complete: %d communities scored, %d returned (top=%.2f)",
        candidates, len(ranked),
        ranked[0].recommendation_score if ranked else 0.0,
    )
    return ranked
