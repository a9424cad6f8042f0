"""
Domain service: farm sustainability (eco) score.

A weighted checklist rather than a physical model: starting from a
baseline, fixed point deltas are applied for water use, disease pressure,
yield efficiency and nutrient management. All deltas live in
``EcoScoreConfig`` and can be retuned freely.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from app.config import settings
from app.domain.models import NutrientLevel, RiskLevel

logger = logging.getLogger(__name__)


@dataclass
class EcoScoreConfig:
    """Point deltas for the eco score."""

    baseline: int = 100

    # Water use (irrigation need in mm/day)
    high_water_threshold: float = 10.0
    high_water_penalty: int = 15
    moderate_water_threshold: float = 5.0
    moderate_water_penalty: int = 5

    # Disease pressure
    critical_disease_penalty: int = 20
    high_disease_penalty: int = 10
    medium_disease_penalty: int = 5

    # Yield efficiency (yield gap in %)
    severe_gap_threshold: float = 50.0
    severe_gap_penalty: int = 15
    large_gap_threshold: float = 30.0
    large_gap_penalty: int = 10
    moderate_gap_threshold: float = 15.0
    moderate_gap_penalty: int = 5

    # Nutrient management
    poor_nutrient_penalty: int = 10
    excellent_nutrient_bonus: int = 5


class EcoScoreAggregator:
    """Combines irrigation, disease, yield and nutrient signals into 0-100."""

    def __init__(self, config: Optional[EcoScoreConfig] = None):
        self.config = config or EcoScoreConfig(baseline=settings.eco_score_baseline)

    def score(
        self,
        irrigation_need: float,
        disease_level: RiskLevel,
        yield_gap: float,
        nutrient_level: NutrientLevel,
    ) -> int:
        """
        Compute the eco score.

        Args:
            irrigation_need: Gross irrigation need in mm/day
            disease_level: Overall disease risk level
            yield_gap: Yield gap in %
            nutrient_level: Nutrient management quality

        Returns:
            Integer score clamped to [0, 100]
        """
        config = self.config
        disease_level = RiskLevel(disease_level)
        nutrient_level = NutrientLevel(nutrient_level)
        score = config.baseline

        if irrigation_need > config.high_water_threshold:
            score -= config.high_water_penalty
        elif irrigation_need > config.moderate_water_threshold:
            score -= config.moderate_water_penalty

        if disease_level == RiskLevel.CRITICAL:
            score -= config.critical_disease_penalty
        elif disease_level == RiskLevel.HIGH:
            score -= config.high_disease_penalty
        elif disease_level == RiskLevel.MEDIUM:
            score -= config.medium_disease_penalty

        if yield_gap > config.severe_gap_threshold:
            score -= config.severe_gap_penalty
        elif yield_gap > config.large_gap_threshold:
            score -= config.large_gap_penalty
        elif yield_gap > config.moderate_gap_threshold:
            score -= config.moderate_gap_penalty

        if nutrient_level == NutrientLevel.POOR:
            score -= config.poor_nutrient_penalty
        elif nutrient_level == NutrientLevel.EXCELLENT:
            score += config.excellent_nutrient_bonus

        result = int(max(0, min(100, score)))
        logger.debug(f"Eco score: {result} (need={irrigation_need}, disease={disease_level.value}, "
                     f"gap={yield_gap}, nutrients={nutrient_level.value})")
        return result
