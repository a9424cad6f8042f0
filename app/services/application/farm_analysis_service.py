"""
Application service: orchestration layer for a complete farm analysis.
"""
import logging
from typing import Optional

from app.domain.exceptions import MissingFarmContextError
from app.domain.models import (
    FarmAnalysis,
    FarmProfile,
    IrrigationInput,
    WeatherObservation,
)
from app.services.domain.decision_engine import AgronomicDecisionEngine

logger = logging.getLogger(__name__)


DEFAULT_DAYS_AFTER_PLANTING = 45

IRRIGATION_QUALITY_EFFICIENCY = {
    "excellent": 0.9,
    "good": 0.8,
    "average": 0.65,
    "poor": 0.5,
}
DEFAULT_IRRIGATION_EFFICIENCY = 0.7


class FarmAnalysisService:
    """
    Application service for whole-farm analysis.

    Coordinates the decision engine only: no agronomic logic lives here.
    """

    def __init__(self, engine: AgronomicDecisionEngine):
        """
        Initialize the service with dependencies.

        Args:
            engine: Agronomic decision engine
        """
        self.engine = engine

    @staticmethod
    def days_after_planting(profile: FarmProfile, weather: WeatherObservation) -> int:
        """Days between planting and the observation (45 when unknown)."""
        if profile.planting_date is None:
            return DEFAULT_DAYS_AFTER_PLANTING
        return max((weather.observation_date - profile.planting_date).days, 0)

    @staticmethod
    def irrigation_efficiency(quality: Optional[str]) -> float:
        key = (quality or "").strip().lower()
        return IRRIGATION_QUALITY_EFFICIENCY.get(key, DEFAULT_IRRIGATION_EFFICIENCY)

    def analyze(
        self,
        profile: Optional[FarmProfile],
        weather: WeatherObservation,
        rainfall: float = 0.0,
        seasonal_irrigation: float = 0.0,
    ) -> FarmAnalysis:
        """
        Run every computation for one farm and one weather observation.

        This method orchestrates:
        1. Irrigation plan for the current growth stage
        2. Disease risk from the observed weather and farm history
        3. Yield forecast with the farm's irrigation applied
        4. Eco score from the three results

        Args:
            profile: Farm profile
            weather: Weather observation for the analysis day
            rainfall: Recent rainfall in mm
            seasonal_irrigation: Seasonal irrigation applied in mm

        Returns:
            FarmAnalysis

        Raises:
            MissingFarmContextError: If the profile or its crop is missing
        """
        if profile is None:
            raise MissingFarmContextError("A farm profile is required")

        days = self.days_after_planting(profile, weather)
        logger.info(f"Analyzing farm: crop={profile.crop_id}, soil={profile.soil_type}, "
                    f"day {days}")

        irrigation = self.engine.compute_irrigation_plan(
            weather=weather,
            crop_id=profile.crop_id,
            days_after_planting=days,
            soil_type=profile.soil_type,
            recent_rainfall=rainfall,
        )

        disease_risk = self.engine.compute_disease_risk(
            crop_id=profile.crop_id,
            temperature=weather.temperature,
            humidity=weather.humidity,
            rainfall=rainfall,
            soil_type=profile.soil_type,
            history=profile.previous_diseases,
        )

        yield_forecast = self.engine.compute_yield_forecast(
            crop_id=profile.crop_id,
            soil_type=profile.soil_type,
            land_size=profile.land_size,
            temperature=weather.temperature,
            rainfall=rainfall,
            irrigation=IrrigationInput(
                applied=True,
                efficiency=self.irrigation_efficiency(profile.irrigation_quality),
                amount=seasonal_irrigation,
            ),
            nutrient_level=profile.nutrient_management,
        )

        eco_score = self.engine.compute_eco_score(
            irrigation_need=irrigation.irrigation_need,
            disease_level=disease_risk.level,
            yield_gap=yield_forecast.yield_gap,
            nutrient_level=profile.nutrient_management,
        )

        logger.info(f"Farm analysis complete: need={irrigation.irrigation_need}mm/day, "
                    f"risk={disease_risk.level.value}, gap={yield_forecast.yield_gap}%, "
                    f"eco={eco_score}")

        return FarmAnalysis(
            crop_id=profile.crop_id,
            days_after_planting=days,
            irrigation=irrigation,
            yield_forecast=yield_forecast,
            disease_risk=disease_risk,
            eco_score=eco_score,
        )
