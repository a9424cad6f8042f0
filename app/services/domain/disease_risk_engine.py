"""
Domain service: disease and pest risk assessment.

A multi-factor expert system:
- Condition matching of each crop disease against temperature, humidity
  and rainfall
- Blending with soil, recurrence history, seasonal and weather-trend factors
- Ranking of candidate diseases with preventive actions
"""
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from app.config import settings
from app.domain.models import (
    CropProfile,
    DiseaseCandidate,
    DiseaseMatchLevel,
    DiseaseProfile,
    DiseaseRiskAssessment,
    DiseaseRiskFactors,
    RainfallCategory,
    RiskLevel,
)
from app.infrastructure.reference_tables import ReferenceTables, normalize_key

logger = logging.getLogger(__name__)


MATCH_LEVEL_SCORES = {
    DiseaseMatchLevel.HIGH: 80,
    DiseaseMatchLevel.MEDIUM: 50,
    DiseaseMatchLevel.LOW: 20,
}


@dataclass
class DiseaseRiskConfig:
    """Configuration for disease risk scoring."""

    # Condition matching
    temperature_points: int = 3
    humidity_points: int = 3
    rainfall_points: int = 2
    partial_points: int = 1
    """Points when a condition is near, but outside, the favourable range"""

    temperature_margin: float = 5.0
    """°C beyond the favourable range still counted as a partial match"""

    humidity_margin: float = 10.0
    """Humidity points beyond the favourable range still counted as partial"""

    high_match_points: int = 6
    medium_match_points: int = 3

    # Blending weights
    base_weight: float = 0.40
    history_weight: float = 0.20
    soil_weight: float = 0.15
    season_weight: float = 0.15
    trend_weight: float = 0.10

    # Level thresholds on the blended 0-100 score
    critical_threshold: float = 80.0
    high_threshold: float = 60.0
    medium_threshold: float = 40.0

    top_candidates: int = 5

    history_boost: int = 20
    """Confidence added to a disease previously reported on the farm"""

    @property
    def max_match_points(self) -> int:
        return self.temperature_points + self.humidity_points + self.rainfall_points


def rainfall_category(rainfall: float) -> RainfallCategory:
    """
    Categorize a rainfall amount.

    Args:
        rainfall: Rainfall in mm

    Returns:
        low (< 5 mm), medium (< 15 mm) or high
    """
    if rainfall < 5:
        return RainfallCategory.LOW
    if rainfall < 15:
        return RainfallCategory.MEDIUM
    return RainfallCategory.HIGH


def _distance_to_range(value: float, bounds: tuple[float, float]) -> float:
    low, high = bounds
    if value < low:
        return low - value
    if value > high:
        return value - high
    return 0.0


class DiseaseRiskEngine:
    """
    Domain service for crop disease and pest risk.

    Receives its reference tables explicitly; holds no per-call state.
    """

    def __init__(
        self,
        reference_tables: ReferenceTables,
        config: Optional[DiseaseRiskConfig] = None,
    ):
        """
        Initialize the engine.

        Args:
            reference_tables: Disease and soil risk lookup tables
            config: Scoring configuration (defaults built from settings)
        """
        self.reference_tables = reference_tables
        if config:
            self.config = config
        else:
            self.config = DiseaseRiskConfig(
                base_weight=settings.disease_weight_base,
                history_weight=settings.disease_weight_history,
                soil_weight=settings.disease_weight_soil,
                season_weight=settings.disease_weight_season,
                trend_weight=settings.disease_weight_trend,
                top_candidates=settings.disease_top_candidates,
            )

        logger.info(f"Initialized DiseaseRiskEngine with weights: "
                    f"base={self.config.base_weight}, history={self.config.history_weight}, "
                    f"soil={self.config.soil_weight}, season={self.config.season_weight}, "
                    f"trend={self.config.trend_weight}")

    def match_score(
        self,
        disease: DiseaseProfile,
        temperature: float,
        humidity: float,
        category: RainfallCategory,
    ) -> int:
        """
        Raw condition match points for one disease.

        Full points inside a favourable range, partial points within the
        configured margin of it, nothing further away.
        """
        config = self.config
        score = 0

        temperature_gap = _distance_to_range(temperature, disease.temperature_range)
        if temperature_gap == 0:
            score += config.temperature_points
        elif temperature_gap <= config.temperature_margin:
            score += config.partial_points

        humidity_gap = _distance_to_range(humidity, disease.humidity_range)
        if humidity_gap == 0:
            score += config.humidity_points
        elif humidity_gap <= config.humidity_margin:
            score += config.partial_points

        if disease.rainfall == category:
            score += config.rainfall_points

        return score

    def match_level(self, score: int) -> DiseaseMatchLevel:
        if score >= self.config.high_match_points:
            return DiseaseMatchLevel.HIGH
        if score >= self.config.medium_match_points:
            return DiseaseMatchLevel.MEDIUM
        return DiseaseMatchLevel.LOW

    def assess(
        self,
        crop: CropProfile,
        temperature: float,
        humidity: float,
        rainfall: float,
        soil_type: Optional[str],
        history: Iterable[str] = (),
    ) -> DiseaseRiskAssessment:
        """
        Assess disease risk for a crop under current conditions.

        Args:
            crop: Crop profile
            temperature: Air temperature in °C
            humidity: Relative humidity in % (clamped to [0, 100])
            rainfall: Rainfall in mm (negative counts as 0)
            soil_type: Soil type name
            history: Disease ids or names previously reported on the farm

        Returns:
            DiseaseRiskAssessment
        """
        humidity = min(max(humidity, 0.0), 100.0)
        rainfall = max(rainfall, 0.0)
        history = [normalize_key(h) for h in history if h]
        category = rainfall_category(rainfall)

        diseases = self.reference_tables.diseases_for_crop(crop.id)
        logger.debug(f"Assessing {len(diseases)} diseases for {crop.id}")

        # Step 1: Per-disease condition matching
        scored = []
        for disease in diseases:
            score = self.match_score(disease, temperature, humidity, category)
            scored.append((disease, score, self.match_level(score)))

        if scored:
            base = sum(MATCH_LEVEL_SCORES[level] for _, _, level in scored) / len(scored)
        else:
            base = 0.0

        # Step 2: Auxiliary factors
        recurring = [d for d in diseases if self._in_history(d, history)]
        factors = DiseaseRiskFactors(
            base=round(base, 2),
            history=self.history_factor(len(recurring)),
            soil=self.reference_tables.soil_disease_risk(soil_type, crop.id),
            season=self.seasonal_factor(temperature, rainfall),
            trend=self.weather_trend_factor(temperature, humidity, rainfall),
        )

        # Step 3: Weighted blend and level
        risk_score = self.blend(factors)
        level = self.risk_level(risk_score)
        logger.info(f"Disease risk for {crop.id}: score={risk_score:.1f} level={level.value}")

        # Step 4: Rank candidates
        candidates = [
            self._candidate(disease, score, match_level, temperature, humidity, history)
            for disease, score, match_level in scored
        ]
        candidates.sort(key=lambda c: (-c.confidence, -c.match_score, c.disease_id))
        top = candidates[:self.config.top_candidates]

        return DiseaseRiskAssessment(
            level=level,
            confidence=int(round(min(max(risk_score, 0.0), 100.0))),
            rainfall_category=category,
            factors=factors,
            diseases=top,
            preventive_actions=self.preventive_actions(top, level),
            critical_period=self.critical_period(temperature, rainfall),
        )

    def blend(self, factors: DiseaseRiskFactors) -> float:
        config = self.config
        return (
            factors.base * config.base_weight
            + factors.history * config.history_weight
            + factors.soil * config.soil_weight
            + factors.season * config.season_weight
            + factors.trend * config.trend_weight
        )

    def risk_level(self, score: float) -> RiskLevel:
        config = self.config
        if score >= config.critical_threshold:
            return RiskLevel.CRITICAL
        if score >= config.high_threshold:
            return RiskLevel.HIGH
        if score >= config.medium_threshold:
            return RiskLevel.MEDIUM
        return RiskLevel.LOW

    @staticmethod
    def history_factor(recurring_count: int) -> float:
        """Recurrence pressure: 20 with no history, 15 per recurring disease up to 80."""
        if recurring_count <= 0:
            return 20.0
        return float(min(recurring_count * 15, 80))

    @staticmethod
    def seasonal_factor(temperature: float, rainfall: float) -> float:
        """Monsoon-level rainfall or hot wet weather raise seasonal pressure."""
        if rainfall > 200:
            return 70.0
        if rainfall > 100:
            return 50.0
        if temperature > 30 and rainfall > 50:
            return 60.0
        return 30.0

    @staticmethod
    def weather_trend_factor(temperature: float, humidity: float, rainfall: float) -> float:
        """Peaks when temperature and humidity sit in the pathogen-favourable band."""
        if 25 <= temperature <= 32 and humidity >= 70 and rainfall > 50:
            return 80.0
        if 20 <= temperature <= 35 and humidity >= 60:
            return 60.0
        return 30.0

    @staticmethod
    def spread_rate(temperature: float, humidity: float) -> str:
        ideal_temperature = 25 <= temperature <= 32
        ideal_humidity = humidity >= 70
        if ideal_temperature and ideal_humidity:
            return "Fast (3-5 days)"
        if ideal_temperature or ideal_humidity:
            return "Moderate (5-7 days)"
        return "Slow (7-10 days)"

    @staticmethod
    def economic_impact(disease: DiseaseProfile) -> str:
        max_loss = disease.yield_loss[1]
        if max_loss >= 50:
            return "Severe (>50% loss)"
        if max_loss >= 30:
            return "High (30-50% loss)"
        if max_loss >= 15:
            return "Moderate (15-30% loss)"
        return "Low (<15% loss)"

    @staticmethod
    def critical_period(temperature: float, rainfall: float) -> str:
        if rainfall > 100:
            return "Next 7-10 days (High rainfall period)"
        if 25 <= temperature <= 32:
            return "Next 5-7 days (Optimal disease temperature)"
        return "Next 10-14 days (Monitor conditions)"

    def preventive_actions(self, candidates: list[DiseaseCandidate], level: RiskLevel) -> list[str]:
        """
        Aggregate field actions for the assessed risk.

        Args:
            candidates: Ranked disease candidates
            level: Overall risk level

        Returns:
            Ordered list of actions
        """
        actions = []
        if level in (RiskLevel.CRITICAL, RiskLevel.HIGH):
            actions.extend([
                "Immediate field inspection required",
                "Check for early symptoms daily",
                "Adjust irrigation to reduce humidity",
            ])
        if candidates:
            top = candidates[0]
            if top.prevention:
                actions.append(top.prevention[0])
            if top.organic_control:
                actions.append(f"Organic: {top.organic_control}")
        actions.append("Monitor weather forecasts closely")
        actions.append("Maintain proper plant spacing")
        return actions

    def _in_history(self, disease: DiseaseProfile, history: list[str]) -> bool:
        return disease.id in history or normalize_key(disease.name) in history

    def _candidate(
        self,
        disease: DiseaseProfile,
        score: int,
        match_level: DiseaseMatchLevel,
        temperature: float,
        humidity: float,
        history: list[str],
    ) -> DiseaseCandidate:
        confidence = round(score / self.config.max_match_points * 100)
        if self._in_history(disease, history):
            confidence += self.config.history_boost

        return DiseaseCandidate(
            disease_id=disease.id,
            name=disease.name,
            scientific_name=disease.scientific_name,
            type=disease.type,
            match_score=score,
            match_level=match_level,
            confidence=min(confidence, 100),
            severity=disease.severity,
            yield_loss=disease.yield_loss,
            spread_rate=self.spread_rate(temperature, humidity),
            economic_impact=self.economic_impact(disease),
            prevention=list(disease.prevention[:3]),
            organic_control=disease.organic_control[0] if disease.organic_control else None,
        )
