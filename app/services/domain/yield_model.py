"""
Domain service: crop yield forecast using FAO-33 yield response to water.

Core equation (Doorenbos & Kassam, 1979):

    (1 - Ya/Ym) = Ky * (1 - ETa/ETc)

The water-limited yield is then scaled by independent soil, nutrient and
temperature suitability factors.
"""
import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from app.config import settings
from app.domain.models import (
    AreaUnit,
    CropProfile,
    IrrigationInput,
    NutrientLevel,
    SoilProfile,
    WeatherObservation,
    YieldFactors,
    YieldForecast,
    YieldWaterMetrics,
)
from app.services.domain.crop_coefficient import CropCoefficientCurve
from app.utils.evapotranspiration import (
    calculate_effective_rainfall,
    calculate_et0,
    calculate_etc,
)

logger = logging.getLogger(__name__)


HECTARES_PER_ACRE = 0.4047

NUTRIENT_FACTORS = {
    NutrientLevel.POOR: 0.6,
    NutrientLevel.AVERAGE: 0.85,
    NutrientLevel.GOOD: 0.95,
    NutrientLevel.EXCELLENT: 1.0,
}


@dataclass
class YieldModelConfig:
    """Configuration for the yield response model."""

    soil_mismatch_factor: float = 0.85
    """Multiplier when the soil is not listed as compatible for the crop"""

    temperature_stress_factor: float = 0.7
    """Multiplier when mean temperature is outside the crop tolerance"""

    model_confidence: int = 90
    """Reported confidence of the physics-based estimate"""

    reference_latitude: float = 20.0
    reference_elevation: float = 100.0
    reference_humidity: float = 60.0
    reference_wind_speed: float = 2.0
    reference_day_of_year: int = 172
    """Representative day used for seasonal ETc when no weather is given"""


def area_in_hectares(land_size: float, unit: AreaUnit = AreaUnit.ACRE) -> float:
    """
    Convert a land area to hectares.

    Args:
        land_size: Area (negative counts as 0)
        unit: Unit of ``land_size``

    Returns:
        Area in hectares
    """
    land_size = max(land_size, 0.0)
    if unit == AreaUnit.HECTARE:
        return land_size
    return land_size * HECTARES_PER_ACRE


class YieldResponseModel:
    """
    Domain service estimating actual vs. potential yield.

    Stateless: identical inputs always give identical forecasts.
    """

    def __init__(self, config: Optional[YieldModelConfig] = None):
        """
        Initialize the model.

        Args:
            config: Model configuration (defaults built from settings)
        """
        if config:
            self.config = config
        else:
            self.config = YieldModelConfig(
                reference_latitude=settings.yield_reference_latitude,
                reference_elevation=settings.yield_reference_elevation,
                reference_humidity=settings.yield_reference_humidity,
                reference_wind_speed=settings.yield_reference_wind_speed,
                reference_day_of_year=settings.yield_reference_day_of_year,
            )

    def reference_weather(self, temperature: float) -> WeatherObservation:
        """
        Representative weather for a season with a given mean temperature.

        The date is derived from the configured day of year so results never
        depend on the wall clock.
        """
        day = date(2001, 1, 1) + timedelta(days=self.config.reference_day_of_year - 1)
        return WeatherObservation(
            temperature=temperature,
            temperature_min=temperature - 5,
            temperature_max=temperature + 5,
            humidity=self.config.reference_humidity,
            wind_speed=self.config.reference_wind_speed,
            latitude=self.config.reference_latitude,
            elevation=self.config.reference_elevation,
            observation_date=day,
        )

    def seasonal_etc(
        self,
        crop: CropProfile,
        temperature: float,
        weather: Optional[WeatherObservation] = None,
    ) -> float:
        """
        Seasonal crop water requirement in mm.

        Args:
            crop: Crop profile
            temperature: Seasonal mean temperature in °C
            weather: Representative observation, if the caller has one

        Returns:
            Daily ETc x growth duration using the season-average Kc
        """
        if weather is None:
            weather = self.reference_weather(temperature)
        et0 = calculate_et0(weather)
        average_kc = CropCoefficientCurve(crop).season_average_kc()
        return calculate_etc(et0, average_kc) * crop.growth_duration

    def water_stress_reduction(
        self,
        ky: float,
        actual_et: float,
        seasonal_etc: float,
    ) -> float:
        """
        Relative yield reduction from water stress, Ky x (1 - ETa/ETc).

        Clamped to >= 0; zero when the crop has no water demand.
        """
        if seasonal_etc <= 0:
            return 0.0
        return max(0.0, ky * (1 - actual_et / seasonal_etc))

    def forecast(
        self,
        crop: CropProfile,
        soil: SoilProfile,
        land_size: float,
        temperature: float,
        rainfall: float,
        irrigation: Optional[IrrigationInput] = None,
        nutrient_level: NutrientLevel = NutrientLevel.AVERAGE,
        area_unit: AreaUnit = AreaUnit.ACRE,
        weather: Optional[WeatherObservation] = None,
    ) -> YieldForecast:
        """
        Forecast the seasonal yield for a field.

        Args:
            crop: Crop profile
            soil: Soil profile
            land_size: Field area in ``area_unit``
            temperature: Seasonal mean temperature in °C
            rainfall: Total seasonal rainfall in mm
            irrigation: Seasonal irrigation applied
            nutrient_level: Nutrient management quality
            area_unit: Unit of ``land_size``
            weather: Representative daily weather for seasonal ETc

        Returns:
            YieldForecast with 0 <= estimated <= potential
        """
        irrigation = irrigation or IrrigationInput()
        nutrient_level = NutrientLevel(nutrient_level)

        # Step 1: Maximum potential yield (Ym)
        hectares = area_in_hectares(land_size, area_unit)
        potential = crop.potential_yield * hectares

        # Step 2: Seasonal water requirement and supply
        seasonal_etc = self.seasonal_etc(crop, temperature, weather)
        effective_rain = calculate_effective_rainfall(max(rainfall, 0.0))
        effective_irrigation = irrigation.amount * irrigation.efficiency if irrigation.applied else 0.0
        water_available = effective_rain + effective_irrigation
        actual_et = min(water_available, seasonal_etc)

        # Step 3: FAO-33 water stress reduction
        ky = crop.yield_response_factor
        reduction = self.water_stress_reduction(ky, actual_et, seasonal_etc)
        water_limited = potential * (1 - reduction)

        # Step 4: Independent suitability factors
        soil_factor = self._soil_factor(crop, soil)
        nutrient_factor = NUTRIENT_FACTORS[nutrient_level]
        temperature_factor = self._temperature_factor(crop, temperature)

        estimated = max(0.0, water_limited * soil_factor * nutrient_factor * temperature_factor)
        yield_gap = (potential - estimated) / potential * 100 if potential > 0 else 0.0

        logger.info(f"Yield forecast for {crop.id}: Ym={potential:.0f}kg, Ya={estimated:.0f}kg, "
                    f"gap={yield_gap:.1f}%, stress={reduction:.3f}")
        logger.debug(f"Seasonal ETc={seasonal_etc:.1f}mm, available={water_available:.1f}mm, "
                     f"factors soil={soil_factor} nutrient={nutrient_factor} temp={temperature_factor}")

        water_stress_ratio = 1 - actual_et / seasonal_etc if seasonal_etc > 0 else 0.0

        factors = YieldFactors(
            soil_factor=soil_factor,
            nutrient_factor=nutrient_factor,
            temperature_factor=temperature_factor,
            water_stress_reduction=round(reduction, 4),
            yield_response_factor=ky,
            soil="Optimal" if soil_factor >= 1 else f"Sub-optimal (-{round((1 - soil_factor) * 100)}%)",
            weather="Favorable" if temperature_factor >= 1 else "Stressful",
            water_stress=f"-{round(reduction * 100)}% risk (Ky={ky})",
            nutrients=nutrient_level.value.capitalize(),
            management=self._management_rating(irrigation, nutrient_level),
        )
        metrics = YieldWaterMetrics(
            seasonal_etc=round(seasonal_etc, 1),
            seasonal_water_available=round(water_available, 1),
            actual_et=round(actual_et, 1),
            water_deficit=round(seasonal_etc - actual_et, 1),
            yield_reduction_percent=round(reduction * 100, 1),
        )

        return YieldForecast(
            estimated_yield=round(estimated, 2),
            potential_yield=round(potential, 2),
            yield_gap=round(yield_gap, 2),
            confidence=self.config.model_confidence,
            factors=factors,
            water_metrics=metrics,
            recommendations=self._recommendations(
                yield_gap, water_stress_ratio, soil_factor, nutrient_factor
            ),
        )

    def _soil_factor(self, crop: CropProfile, soil: SoilProfile) -> float:
        if soil.soil_type is not None and soil.soil_type in crop.soil_types:
            return 1.0
        return self.config.soil_mismatch_factor

    def _temperature_factor(self, crop: CropProfile, temperature: float) -> float:
        if crop.temperature.contains(temperature):
            return 1.0
        return self.config.temperature_stress_factor

    def _management_rating(self, irrigation: IrrigationInput, nutrient_level: NutrientLevel) -> str:
        nutrient_score = 1.0 if nutrient_level == NutrientLevel.EXCELLENT else 0.5
        score = (irrigation.efficiency + nutrient_score) / 2
        if score > 0.8:
            return "+ Excellent"
        if score > 0.6:
            return "~ Average"
        return "- Needs Improvement"

    def _recommendations(
        self,
        yield_gap: float,
        water_stress_ratio: float,
        soil_factor: float,
        nutrient_factor: float,
    ) -> list[str]:
        """
        Plain-language actions for closing the yield gap.

        Args:
            yield_gap: Yield gap in %
            water_stress_ratio: 1 - ETa/ETc
            soil_factor: Soil suitability factor
            nutrient_factor: Nutrient factor

        Returns:
            List of recommendation strings
        """
        if yield_gap < 15:
            return ["Excellent management! Keep maintaining current practices."]

        needs = []
        if water_stress_ratio > 0.1:
            needs.append(
                f"Water stress detected: the crop needs {round(water_stress_ratio * 100)}% "
                f"more water. Consider scheduled irrigation."
            )
        if soil_factor < 1.0:
            needs.append(
                "Soil mismatch: this crop is not optimal for your soil type. "
                "Consider soil amendments or crop rotation."
            )
        if nutrient_factor < 0.9:
            needs.append(
                "Nutrient deficiency: yield is limited by nutrition. "
                "Apply balanced NPK fertilizers."
            )
        if not needs:
            needs.append("General yield gap: check for pest or disease outbreaks.")
        return needs
