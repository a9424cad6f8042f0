"""
Domain service: crop water demand and irrigation scheduling.

Pipeline:
1. Reference evapotranspiration (FAO-56 Penman-Monteith)
2. Crop coefficient for the current growth stage
3. Crop evapotranspiration and effective rainfall
4. Gross irrigation requirement after system efficiency
5. Discrete watering interval from root-zone water holding capacity
"""
import logging
import math
from dataclasses import dataclass
from typing import Optional

from app.config import settings
from app.domain.models import CropProfile, IrrigationPlan, SoilProfile, WeatherObservation
from app.services.domain.crop_coefficient import CropCoefficientCurve
from app.utils.evapotranspiration import (
    calculate_effective_rainfall,
    calculate_et0,
    calculate_etc,
)

logger = logging.getLogger(__name__)


MIN_INTERVAL_DAYS = 1
MAX_INTERVAL_DAYS = 7


@dataclass(frozen=True)
class IrrigationFrequency:
    """Discrete watering schedule for a daily water need."""
    frequency: str
    interval_days: int
    amount_per_irrigation: float
    available_water: float
    """Readily available water in the root zone (mm)"""


class IrrigationNeedCalculator:
    """Net and gross irrigation requirement from crop water demand."""

    def net_irrigation(
        self,
        etc: float,
        effective_rainfall: float,
        soil_moisture_deficit: float = 0.0,
    ) -> float:
        """Net requirement = ETc - effective rainfall + soil moisture deficit."""
        return etc - effective_rainfall + max(soil_moisture_deficit, 0.0)

    def gross_irrigation(
        self,
        etc: float,
        effective_rainfall: float,
        efficiency: float,
        soil_moisture_deficit: float = 0.0,
    ) -> float:
        """
        Gross irrigation requirement in mm.

        Args:
            etc: Crop evapotranspiration in mm
            effective_rainfall: Effective rainfall in mm
            efficiency: Irrigation-system efficiency (0-1]
            soil_moisture_deficit: Additional root-zone deficit in mm

        Returns:
            Gross requirement, never negative
        """
        net = self.net_irrigation(etc, effective_rainfall, soil_moisture_deficit)
        return max(0.0, net / efficiency)


class IrrigationFrequencyPlanner:
    """
    Converts a daily water need into a watering interval.

    Readily available water = WHC x root depth x depletion fraction; the
    interval is how many days of need that reserve covers, clamped to a
    week.
    """

    def __init__(self, depletion_fraction: Optional[float] = None):
        self.depletion_fraction = (
            settings.irrigation_depletion_fraction if depletion_fraction is None else depletion_fraction
        )

    def plan(
        self,
        soil: SoilProfile,
        daily_water_need: float,
        root_depth_cm: Optional[float] = None,
    ) -> IrrigationFrequency:
        """
        Plan the watering interval.

        Args:
            soil: Soil profile with water-holding capacity
            daily_water_need: Water need in mm/day
            root_depth_cm: Effective root depth (defaults to settings)

        Returns:
            IrrigationFrequency with label, interval and amount per event
        """
        if root_depth_cm is None:
            root_depth_cm = settings.irrigation_root_depth_cm
        root_depth_cm = max(root_depth_cm, 0.0)

        available_water = soil.water_holding_capacity * root_depth_cm * self.depletion_fraction

        if daily_water_need <= 0:
            interval = MAX_INTERVAL_DAYS
        else:
            interval = math.floor(available_water / daily_water_need)
        interval = max(MIN_INTERVAL_DAYS, min(interval, MAX_INTERVAL_DAYS))

        amount = max(daily_water_need, 0.0) * interval
        label = "Daily" if interval == 1 else f"Every {interval} days"

        logger.debug(f"Frequency plan: available={available_water:.1f}mm, "
                     f"need={daily_water_need:.2f}mm/day, interval={interval}d")

        return IrrigationFrequency(
            frequency=label,
            interval_days=interval,
            amount_per_irrigation=amount,
            available_water=available_water,
        )


class IrrigationPlanner:
    """
    Domain service producing a daily irrigation plan.

    Stateless: every call derives its result from the arguments only.
    """

    def __init__(
        self,
        need_calculator: Optional[IrrigationNeedCalculator] = None,
        frequency_planner: Optional[IrrigationFrequencyPlanner] = None,
    ):
        self.need_calculator = need_calculator or IrrigationNeedCalculator()
        self.frequency_planner = frequency_planner or IrrigationFrequencyPlanner()

    def plan(
        self,
        weather: WeatherObservation,
        crop: CropProfile,
        soil: SoilProfile,
        days_after_planting: int,
        recent_rainfall: float = 0.0,
        root_depth_cm: Optional[float] = None,
        soil_moisture_deficit: float = 0.0,
    ) -> IrrigationPlan:
        """
        Build the irrigation plan for one day.

        Args:
            weather: Daily weather observation
            crop: Crop profile
            soil: Soil profile
            days_after_planting: Days since planting
            recent_rainfall: Rainfall total in mm (negative counts as 0)
            root_depth_cm: Effective root depth in cm
            soil_moisture_deficit: Extra root-zone deficit to refill in mm

        Returns:
            IrrigationPlan
        """
        days_after_planting = max(int(days_after_planting), 0)
        curve = CropCoefficientCurve(crop)

        et0 = calculate_et0(weather)
        kc = curve.kc(days_after_planting)
        etc = calculate_etc(et0, kc)
        effective_rain = calculate_effective_rainfall(max(recent_rainfall, 0.0))

        efficiency = soil.irrigation_efficiency
        need = self.need_calculator.gross_irrigation(
            etc, effective_rain, efficiency, soil_moisture_deficit
        )
        frequency = self.frequency_planner.plan(soil, need, root_depth_cm)

        logger.info(f"Irrigation plan for {crop.id} on {soil.name}: ET0={et0:.2f}, "
                    f"Kc={kc:.2f}, ETc={etc:.2f}, need={need:.2f}mm/day, "
                    f"{frequency.frequency}")

        return IrrigationPlan(
            et0=round(et0, 2),
            crop_coefficient=round(kc, 3),
            etc=round(etc, 2),
            growth_stage=curve.growth_stage(days_after_planting),
            days_after_planting=days_after_planting,
            effective_rainfall=round(effective_rain, 2),
            irrigation_efficiency=efficiency,
            irrigation_need=round(need, 2),
            frequency=frequency.frequency,
            interval_days=frequency.interval_days,
            amount_per_irrigation=round(frequency.amount_per_irrigation, 1),
            weekly_total=round(need * 7, 2),
        )
