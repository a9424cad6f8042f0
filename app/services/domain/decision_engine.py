"""
Domain facade: the four agronomic computations behind one object.

Resolves crop and soil identifiers through the injected reference tables,
normalises out-of-range scalars, and delegates to the domain services.
"""
import logging
from typing import Iterable, Optional

from app.domain.exceptions import MissingFarmContextError
from app.domain.models import (
    AreaUnit,
    CropProfile,
    DiseaseRiskAssessment,
    IrrigationInput,
    IrrigationPlan,
    NutrientLevel,
    RiskLevel,
    WeatherObservation,
    YieldForecast,
)
from app.infrastructure.reference_tables import ReferenceTables
from app.services.domain.disease_risk_engine import DiseaseRiskEngine
from app.services.domain.eco_score import EcoScoreAggregator
from app.services.domain.irrigation_planner import IrrigationPlanner
from app.services.domain.yield_model import YieldResponseModel

logger = logging.getLogger(__name__)


class AgronomicDecisionEngine:
    """
    Pure entry points for irrigation, yield, disease and eco scoring.

    The engine holds no per-call state; a single instance may be shared
    between threads.
    """

    def __init__(
        self,
        reference_tables: ReferenceTables,
        irrigation_planner: Optional[IrrigationPlanner] = None,
        yield_model: Optional[YieldResponseModel] = None,
        disease_engine: Optional[DiseaseRiskEngine] = None,
        eco_aggregator: Optional[EcoScoreAggregator] = None,
    ):
        """
        Initialize the engine with its collaborators.

        Args:
            reference_tables: Crop, soil and disease lookup tables
            irrigation_planner: Irrigation planner (default instance if omitted)
            yield_model: Yield response model (default instance if omitted)
            disease_engine: Disease risk engine (default instance if omitted)
            eco_aggregator: Eco score aggregator (default instance if omitted)
        """
        self.reference_tables = reference_tables
        self.irrigation_planner = irrigation_planner or IrrigationPlanner()
        self.yield_model = yield_model or YieldResponseModel()
        self.disease_engine = disease_engine or DiseaseRiskEngine(reference_tables)
        self.eco_aggregator = eco_aggregator or EcoScoreAggregator()

    def _resolve_crop(self, crop_id: Optional[str]) -> CropProfile:
        if crop_id is None or not str(crop_id).strip():
            raise MissingFarmContextError("A crop identifier is required")
        return self.reference_tables.get_crop(crop_id)

    def compute_irrigation_plan(
        self,
        weather: WeatherObservation,
        crop_id: str,
        days_after_planting: int,
        soil_type: Optional[str],
        recent_rainfall: float = 0.0,
        root_depth_cm: Optional[float] = None,
        soil_moisture_deficit: float = 0.0,
    ) -> IrrigationPlan:
        """
        Daily irrigation need and watering interval.

        Raises:
            MissingFarmContextError: If crop_id is missing or blank
        """
        crop = self._resolve_crop(crop_id)
        soil = self.reference_tables.get_soil(soil_type)
        return self.irrigation_planner.plan(
            weather=weather,
            crop=crop,
            soil=soil,
            days_after_planting=max(int(days_after_planting), 0),
            recent_rainfall=max(recent_rainfall, 0.0),
            root_depth_cm=root_depth_cm,
            soil_moisture_deficit=max(soil_moisture_deficit, 0.0),
        )

    def compute_yield_forecast(
        self,
        crop_id: str,
        soil_type: Optional[str],
        land_size: float,
        temperature: float,
        rainfall: float,
        irrigation: Optional[IrrigationInput] = None,
        nutrient_level: NutrientLevel = NutrientLevel.AVERAGE,
        area_unit: AreaUnit = AreaUnit.ACRE,
        weather: Optional[WeatherObservation] = None,
    ) -> YieldForecast:
        """
        Seasonal yield forecast.

        Raises:
            MissingFarmContextError: If crop_id is missing or blank
        """
        crop = self._resolve_crop(crop_id)
        soil = self.reference_tables.get_soil(soil_type)
        return self.yield_model.forecast(
            crop=crop,
            soil=soil,
            land_size=max(land_size, 0.0),
            temperature=temperature,
            rainfall=max(rainfall, 0.0),
            irrigation=irrigation,
            nutrient_level=nutrient_level,
            area_unit=area_unit,
            weather=weather,
        )

    def compute_disease_risk(
        self,
        crop_id: str,
        temperature: float,
        humidity: float,
        rainfall: float,
        soil_type: Optional[str],
        history: Iterable[str] = (),
    ) -> DiseaseRiskAssessment:
        """
        Disease and pest risk assessment.

        Raises:
            MissingFarmContextError: If crop_id is missing or blank
        """
        crop = self._resolve_crop(crop_id)
        return self.disease_engine.assess(
            crop=crop,
            temperature=temperature,
            humidity=humidity,
            rainfall=max(rainfall, 0.0),
            soil_type=soil_type,
            history=history,
        )

    def compute_eco_score(
        self,
        irrigation_need: float,
        disease_level: RiskLevel,
        yield_gap: float,
        nutrient_level: NutrientLevel,
    ) -> int:
        """Sustainability score in [0, 100]."""
        return self.eco_aggregator.score(irrigation_need, disease_level, yield_gap, nutrient_level)
