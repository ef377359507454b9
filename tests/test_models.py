"""Unit tests for record normalization and configuration."""

import pytest
from pydantic import ValidationError

from src.recommendation.config import FactorWeights, Settings
from src.recommendation.models import (
    Community,
    RecommendationScore,
    ScoreBreakdown,
    UserProfile,
)


class TestUserProfile:
    def test_defaults(self):
        u = UserProfile()
        assert u.interests == ""
        assert u.interest_tokens == []
        assert u.latitude == 0.0 and u.longitude == 0.0
        assert u.city is None and u.state is None and u.denomination is None

    def test_none_fields(self):
        u = UserProfile.model_validate({
            "interests": None, "latitude": None, "city": None, "denomination": None,
        })
        assert u.interests == ""
        assert u.latitude == 0.0
        assert u.city is None
        assert u.denomination is None

    def test_interest_tokens(self):
        u = UserProfile(interests=" Bible Study,PRAYER ,, worship ")
        assert u.interest_tokens == ["bible study", "prayer", "worship"]

    def test_interest_list_is_joined(self):
        u = UserProfile.model_validate({"interests": ["Prayer", "Missions"]})
        assert u.interest_tokens == ["prayer", "missions"]

    def test_coordinates_parsed(self):
        u = UserProfile.model_validate({"latitude": "30.25", "longitude": "-97.75"})
        assert u.latitude == 30.25
        assert u.longitude == -97.75

    def test_bad_coordinates_become_missing(self):
        u = UserProfile.model_validate({"latitude": "abc", "longitude": "NaN"})
        assert u.latitude == 0.0
        assert u.longitude == 0.0

    def test_blank_strings_become_none(self):
        u = UserProfile(city="  ", state="", denomination=" ")
        assert u.city is None and u.state is None and u.denomination is None

    def test_unknown_fields_ignored(self):
        u = UserProfile.model_validate({"email": "a@example.com", "interests": "x"})
        assert not hasattr(u, "email")


class TestCommunity:
    def test_defaults(self):
        c = Community()
        assert c.interest_tags == []
        assert c.recovery_support == []
        assert c.meeting_type == "In-Person"
        assert c.member_count == 0
        assert c.gender is None and c.age_group is None

    def test_camel_case_aliases(self):
        c = Community.model_validate({
            "interestTags": ["Prayer"],
            "ministryTypes": ["Baptist"],
            "recoverySupport": ["Grief"],
            "lifeStages": ["All"],
            "meetingType": "Hybrid",
            "ageGroup": "All Ages",
            "memberCount": "42",
        })
        assert c.interest_tags == ["Prayer"]
        assert c.ministry_types == ["Baptist"]
        assert c.recovery_support == ["Grief"]
        assert c.life_stages == ["All"]
        assert c.meeting_type == "Hybrid"
        assert c.age_group == "All Ages"
        assert c.member_count == 42

    def test_snake_case_names(self):
        c = Community(interest_tags=["Prayer"], member_count=3)
        assert c.interest_tags == ["Prayer"]
        assert c.member_count == 3

    def test_none_normalized(self):
        c = Community.model_validate({
            "interestTags": None, "activities": None, "meetingType": None,
            "memberCount": None, "gender": "",
        })
        assert c.interest_tags == []
        assert c.activities == []
        assert c.meeting_type == "In-Person"
        assert c.member_count == 0
        assert c.gender is None

    def test_storage_extras_kept(self):
        c = Community.model_validate({"id": 7, "name": "Grace Group", "slug": "grace"})
        assert c.id == 7
        assert c.name == "Grace Group"
        assert c.model_dump()["slug"] == "grace"

    def test_invalid_member_count_raises(self):
        with pytest.raises(ValidationError):
            Community.model_validate({"memberCount": "many"})


class TestSerialization:
    def test_score_uses_camel_case(self):
        s = RecommendationScore(total_score=81.5, breakdown=ScoreBreakdown(interests=100))
        dumped = s.model_dump(by_alias=True)
        assert dumped["totalScore"] == 81.5
        assert dumped["breakdown"]["interests"] == 100


class TestFactorWeights:
    def test_defaults_sum_to_one(self):
        w = FactorWeights()
        assert abs(sum(w.model_dump().values()) - 1.0) < 1e-9

    def test_default_values(self):
        w = FactorWeights()
        assert (w.interests, w.location, w.demographics) == (0.30, 0.25, 0.15)
        assert (w.denomination, w.popularity) == (0.10, 0.10)
        assert (w.profession, w.recovery) == (0.05, 0.05)

    def test_rejects_bad_total(self):
        with pytest.raises(ValidationError):
            FactorWeights(interests=0.50)

    def test_accepts_rebalanced_weights(self):
        w = FactorWeights(interests=0.25, location=0.30)
        assert w.location == 0.30

    def test_rejects_out_of_range(self):
        with pytest.raises(ValidationError):
            FactorWeights(interests=1.5)


class TestSettings:
    def test_defaults(self):
        s = Settings(_env_file=None)
        assert s.top_k == 10
        assert s.factor_weights == FactorWeights()
