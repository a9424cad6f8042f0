"""
Unit tests for the disease risk engine.

Tests cover:
- Rainfall categories and condition matching
- Auxiliary risk factors
- Weighted blend and level thresholds
- Monotonicity of the match towards favourable conditions
- Candidate ranking and preventive actions
"""
import pytest

from app.domain.models import DiseaseMatchLevel, RainfallCategory, RiskLevel
from app.services.domain.disease_risk_engine import (
    DiseaseRiskConfig,
    DiseaseRiskEngine,
    rainfall_category,
)


RICE_DISEASES = ["rice_blast", "rice_bacterial_blight", "stem_borer"]


@pytest.fixture
def disease_engine(reference_tables) -> DiseaseRiskEngine:
    return DiseaseRiskEngine(reference_tables, DiseaseRiskConfig())


@pytest.fixture
def rice(reference_tables):
    return reference_tables.get_crop("rice")


@pytest.fixture
def rice_blast(reference_tables):
    return reference_tables.get_disease("rice_blast")


# ============================================================
# Condition Matching Tests
# ============================================================

class TestConditionMatching:
    """Tests for per-disease condition matching."""

    @pytest.mark.parametrize("rainfall,category", [
        (0.0, RainfallCategory.LOW),
        (4.9, RainfallCategory.LOW),
        (5.0, RainfallCategory.MEDIUM),
        (14.9, RainfallCategory.MEDIUM),
        (15.0, RainfallCategory.HIGH),
        (300.0, RainfallCategory.HIGH),
    ])
    def test_rainfall_category(self, rainfall, category):
        """Rainfall should be bucketed at 5 and 15 mm."""
        assert rainfall_category(rainfall) == category

    def test_full_match(self, disease_engine, rice_blast):
        """Conditions inside every favourable range should score 8 points."""
        score = disease_engine.match_score(rice_blast, 27.0, 90.0, RainfallCategory.HIGH)

        assert score == 8
        assert disease_engine.match_level(score) == DiseaseMatchLevel.HIGH

    def test_partial_match(self, disease_engine, rice_blast):
        """Conditions just outside the ranges should score partial points."""
        score = disease_engine.match_score(rice_blast, 31.0, 80.0, RainfallCategory.LOW)

        assert score == 2
        assert disease_engine.match_level(score) == DiseaseMatchLevel.LOW

    def test_unfavourable_conditions_score_zero(self, disease_engine, rice_blast):
        """Cold, dry weather should contribute nothing."""
        score = disease_engine.match_score(rice_blast, 10.0, 20.0, RainfallCategory.LOW)

        assert score == 0

    def test_humidity_towards_range_never_lowers_match(self, disease_engine, rice_blast):
        """Moving humidity towards the favourable range should not reduce the match."""
        scores = [
            disease_engine.match_score(rice_blast, 27.0, humidity, RainfallCategory.HIGH)
            for humidity in range(0, 86, 5)
        ]

        assert all(b >= a for a, b in zip(scores, scores[1:]))

    def test_temperature_towards_range_never_lowers_match(self, disease_engine, rice_blast):
        """Moving temperature towards the favourable range should not reduce the match."""
        scores = [
            disease_engine.match_score(rice_blast, float(t), 90.0, RainfallCategory.HIGH)
            for t in range(5, 26)
        ]

        assert all(b >= a for a, b in zip(scores, scores[1:]))


# ============================================================
# Auxiliary Factor Tests
# ============================================================

class TestRiskFactors:
    """Tests for the history, seasonal and trend factors."""

    @pytest.mark.parametrize("count,expected", [(0, 20.0), (1, 15.0), (3, 45.0), (10, 80.0)])
    def test_history_factor(self, count, expected):
        """History should add 15 per recurring disease, capped at 80."""
        assert DiseaseRiskEngine.history_factor(count) == expected

    @pytest.mark.parametrize("temperature,rainfall,expected", [
        (20.0, 250.0, 70.0),
        (20.0, 150.0, 50.0),
        (32.0, 60.0, 60.0),
        (20.0, 60.0, 30.0),
    ])
    def test_seasonal_factor(self, temperature, rainfall, expected):
        """Seasonal pressure should follow rainfall and heat."""
        assert DiseaseRiskEngine.seasonal_factor(temperature, rainfall) == expected

    @pytest.mark.parametrize("temperature,humidity,rainfall,expected", [
        (28.0, 80.0, 60.0, 80.0),
        (28.0, 65.0, 10.0, 60.0),
        (10.0, 90.0, 100.0, 30.0),
    ])
    def test_weather_trend_factor(self, temperature, humidity, rainfall, expected):
        """Weather trend should peak in warm, humid, wet weather."""
        assert DiseaseRiskEngine.weather_trend_factor(temperature, humidity, rainfall) == expected

    def test_soil_factor_from_table(self, reference_tables):
        """Soil risk should come from the soil x crop table with a default of 30."""
        assert reference_tables.soil_disease_risk("Clay", "wheat") == 40
        assert reference_tables.soil_disease_risk("sandy", "RICE") == 50
        assert reference_tables.soil_disease_risk("Clay", "tomato") == 30
        assert reference_tables.soil_disease_risk(None, "rice") == 30


# ============================================================
# Assessment Tests
# ============================================================

class TestAssessment:
    """End-to-end tests for the risk assessment."""

    def test_unfavourable_weather_is_low(self, disease_engine, rice):
        """Cold, dry weather on loam with no history should be Low risk."""
        assessment = disease_engine.assess(rice, 10.0, 20.0, 0.0, "Loamy")

        assert assessment.factors.base == 20.0
        assert assessment.factors.history == 20.0
        assert assessment.factors.soil == 20.0
        assert assessment.factors.season == 30.0
        assert assessment.factors.trend == 30.0
        assert 22 <= assessment.confidence <= 23
        assert assessment.level == RiskLevel.LOW
        assert assessment.rainfall_category == RainfallCategory.LOW

    def test_favourable_weather_with_history_is_high(self, disease_engine, rice):
        """Warm, humid, wet weather on sand with recurring diseases should be High risk."""
        assessment = disease_engine.assess(rice, 27.0, 90.0, 250.0, "Sandy", history=RICE_DISEASES)

        assert assessment.factors.base == 80.0
        assert assessment.factors.history == 45.0
        assert assessment.confidence == 67
        assert assessment.level == RiskLevel.HIGH
        assert assessment.preventive_actions[0] == "Immediate field inspection required"

    def test_candidates_ranked(self, disease_engine, rice):
        """Candidates should be ordered by confidence, match score, then id."""
        assessment = disease_engine.assess(rice, 27.0, 90.0, 250.0, "Sandy", history=RICE_DISEASES)

        ids = [c.disease_id for c in assessment.diseases]
        assert ids == ["rice_bacterial_blight", "rice_blast", "stem_borer"]
        assert assessment.diseases[0].confidence == 100
        assert assessment.diseases[2].confidence == 95
        assert assessment.diseases[0].spread_rate == "Fast (3-5 days)"

    def test_history_matches_by_name(self, disease_engine, rice):
        """Reported disease names should match regardless of case and spacing."""
        by_id = disease_engine.assess(rice, 27.0, 90.0, 20.0, "Clay", history=["rice_blast"])
        by_name = disease_engine.assess(rice, 27.0, 90.0, 20.0, "Clay", history=["  RICE  BLAST "])

        assert by_name.factors.history == by_id.factors.history == 15.0

    def test_unrelated_history_ignored(self, disease_engine, rice):
        """Diseases of other crops should not count as recurring."""
        assessment = disease_engine.assess(rice, 27.0, 90.0, 20.0, "Clay", history=["wheat_rust", ""])

        assert assessment.factors.history == 20.0

    def test_crop_without_diseases(self, disease_engine, reference_tables):
        """A crop with no known diseases should have a zero base score."""
        assessment = disease_engine.assess(reference_tables.generic_crop, 27.0, 90.0, 20.0, "Clay")

        assert assessment.factors.base == 0.0
        assert assessment.diseases == []

    def test_humidity_clamped(self, disease_engine, rice):
        """Humidity above 100 % should behave like 100 %."""
        clamped = disease_engine.assess(rice, 27.0, 150.0, 20.0, "Clay")
        saturated = disease_engine.assess(rice, 27.0, 100.0, 20.0, "Clay")

        assert clamped == saturated

    def test_risk_never_drops_as_humidity_rises(self, disease_engine, rice):
        """Overall score should not decrease as humidity approaches favourable levels."""
        scores = [
            disease_engine.assess(rice, 27.0, float(h), 60.0, "Clay").confidence
            for h in range(20, 91, 10)
        ]

        assert all(b >= a for a, b in zip(scores, scores[1:]))

    @pytest.mark.parametrize("score,level", [
        (85.0, RiskLevel.CRITICAL),
        (80.0, RiskLevel.CRITICAL),
        (65.0, RiskLevel.HIGH),
        (45.0, RiskLevel.MEDIUM),
        (39.9, RiskLevel.LOW),
    ])
    def test_level_thresholds(self, disease_engine, score, level):
        """Levels should switch at 80, 60 and 40."""
        assert disease_engine.risk_level(score) == level

    def test_custom_weights(self, reference_tables, rice):
        """Weights should be configurable."""
        base_only = DiseaseRiskEngine(
            reference_tables,
            DiseaseRiskConfig(
                base_weight=1.0, history_weight=0.0, soil_weight=0.0,
                season_weight=0.0, trend_weight=0.0,
            ),
        )

        assessment = base_only.assess(rice, 27.0, 90.0, 250.0, "Sandy")

        assert assessment.confidence == 80
        assert assessment.level == RiskLevel.CRITICAL
