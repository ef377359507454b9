"""Composite ranker — weighted sum of all factor scores."""

from __future__ import annotations

from src.recommendation.config import FactorWeights, settings
from src.recommendation.models import ScoreBreakdown


def composite_score(
    breakdown: ScoreBreakdown, weights: FactorWeights | None = None,
) -> float:
    w = weights or settings.factor_weights
    return (
        w.interests * breakdown.interests
        + w.location * breakdown.location
        + w.demographics * breakdown.demographics
        + w.denomination * breakdown.denomination
        + w.popularity * breakdown.popularity
        + w.profession * breakdown.profession
        + w.recovery * breakdown.recovery
    )
