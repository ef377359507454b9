"""Pydantic v2 data models — the data contracts flowing through the system."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.recommendation.geo import parse_coordinate

DEFAULT_MEETING_TYPE = "In-Person"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _optional_text(value: object) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None


def _text_list(value: object) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return [str(v) for v in value if v is not None]
    return [str(value)]


class _StorageRecord(BaseModel):
    """Base for records handed over by the storage layer (camelCase keys)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator("latitude", "longitude", mode="before", check_fields=False)
    @classmethod
    def _parse_coordinate(cls, v: object) -> float:
        return parse_coordinate(v)

    @field_validator("city", "state", mode="before", check_fields=False)
    @classmethod
    def _blank_location_to_none(cls, v: object) -> str | None:
        return _optional_text(v)


# ---------------------------------------------------------------------------
# Input records
# ---------------------------------------------------------------------------

class UserProfile(_StorageRecord):
    model_config = ConfigDict(extra="ignore")

    interests: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    city: str | None = None
    state: str | None = None
    denomination: str | None = None

    @field_validator("interests", mode="before")
    @classmethod
    def _join_interests(cls, v: object) -> str:
        if v is None:
            return ""
        if isinstance(v, (list, tuple)):
            return ",".join(str(i) for i in v)
        return str(v)

    @field_validator("denomination", mode="before")
    @classmethod
    def _blank_denomination(cls, v: object) -> str | None:
        return _optional_text(v)

    @property
    def interest_tokens(self) -> list[str]:
        tokens = (t.strip() for t in self.interests.lower().split(","))
        return [t for t in tokens if t]


class Community(_StorageRecord):
    model_config = ConfigDict(extra="allow")

    interest_tags: list[str] = Field(default_factory=list)
    ministry_types: list[str] = Field(default_factory=list)
    activities: list[str] = Field(default_factory=list)
    professions: list[str] = Field(default_factory=list)
    recovery_support: list[str] = Field(default_factory=list)
    life_stages: list[str] = Field(default_factory=list)

    latitude: float = 0.0
    longitude: float = 0.0
    city: str | None = None
    state: str | None = None

    meeting_type: str = DEFAULT_MEETING_TYPE
    age_group: str | None = None
    gender: str | None = None
    member_count: int = 0

    @field_validator(
        "interest_tags", "ministry_types", "activities",
        "professions", "recovery_support", "life_stages",
        mode="before",
    )
    @classmethod
    def _none_to_empty(cls, v: object) -> list[str]:
        return _text_list(v)

    @field_validator("meeting_type", mode="before")
    @classmethod
    def _default_meeting_type(cls, v: object) -> str:
        return _optional_text(v) or DEFAULT_MEETING_TYPE

    @field_validator("age_group", "gender", mode="before")
    @classmethod
    def _blank_to_none(cls, v: object) -> str | None:
        return _optional_text(v)

    @field_validator("member_count", mode="before")
    @classmethod
    def _missing_count(cls, v: object) -> object:
        return 0 if v is None else v


# ---------------------------------------------------------------------------
# Scoring / output types
# ---------------------------------------------------------------------------

class ScoreBreakdown(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    interests: float = 0.0
    location: float = 0.0
    demographics: float = 0.0
    profession: float = 0.0
    denomination: float = 0.0
    popularity: float = 0.0
    recovery: float = 0.0


class RecommendationScore(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_score: float = 0.0
    breakdown: ScoreBreakdown = Field(default_factory=ScoreBreakdown)


class RankedCommunity(Community):
    recommendation_score: float = 0.0
    breakdown: ScoreBreakdown | None = None
