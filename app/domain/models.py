"""
Domain models for weather, farm reference data and engine outputs.

These models represent the core domain entities and should be independent
of any infrastructure concerns (HTTP, reference table storage, etc.).
Inputs are normalised at the boundary so the computation core never sees
out-of-range values; reference profiles and results are frozen.
"""
from datetime import date
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator


def _match_case_insensitive(enum_cls, value):
    if isinstance(value, str):
        key = value.strip().lower()
        for member in enum_cls:
            if member.value.lower() == key:
                return member
    return None


class SoilType(str, Enum):
    CLAY = "Clay"
    SANDY = "Sandy"
    LOAMY = "Loamy"
    SILTY = "Silty"


class NutrientLevel(str, Enum):
    POOR = "poor"
    AVERAGE = "average"
    GOOD = "good"
    EXCELLENT = "excellent"

    @classmethod
    def _missing_(cls, value):
        return _match_case_insensitive(cls, value)


class RainfallCategory(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RiskLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"

    @classmethod
    def _missing_(cls, value):
        return _match_case_insensitive(cls, value)


class DiseaseMatchLevel(str, Enum):
    """Per-disease tier derived from the raw condition match."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class AreaUnit(str, Enum):
    ACRE = "acre"
    HECTARE = "hectare"


# ============================================================
# Inputs
# ============================================================

class WeatherObservation(BaseModel):
    """
    Daily weather observation for a field.

    Missing min/max temperatures are derived from the mean (±5 °C) and a
    missing humidity defaults to 50 %. Values outside physical bounds are
    clamped rather than rejected.
    """
    temperature: float = Field(description="Mean air temperature in °C")
    temperature_min: Optional[float] = Field(
        default=None, description="Minimum air temperature in °C"
    )
    temperature_max: Optional[float] = Field(
        default=None, description="Maximum air temperature in °C"
    )
    humidity: Optional[float] = Field(
        default=50.0, description="Mean relative humidity in %"
    )
    wind_speed: float = Field(default=2.0, description="Wind speed in m/s")
    wind_height: float = Field(
        default=2.0, description="Height of the wind measurement in m"
    )
    latitude: float = Field(default=20.5937, description="Latitude in degrees")
    elevation: float = Field(default=100.0, description="Elevation above sea level in m")
    observation_date: date = Field(description="Calendar date of the observation")
    solar_radiation: Optional[float] = Field(
        default=None, description="Measured solar radiation in MJ/m²/day"
    )

    @field_validator("humidity", mode="before")
    @classmethod
    def _default_humidity(cls, value):
        if value is None:
            return 50.0
        return min(max(float(value), 0.0), 100.0)

    @field_validator("wind_speed", "solar_radiation")
    @classmethod
    def _non_negative(cls, value):
        if value is None:
            return value
        return max(value, 0.0)

    @field_validator("wind_height")
    @classmethod
    def _wind_height(cls, value):
        # log profile conversion is undefined below ~0.1 m
        return max(value, 0.1)

    @field_validator("latitude")
    @classmethod
    def _latitude(cls, value):
        return min(max(value, -90.0), 90.0)

    @model_validator(mode="after")
    def _temperature_range(self):
        t_min = self.temperature_min
        t_max = self.temperature_max
        if t_min is None:
            t_min = self.temperature - 5.0
        if t_max is None:
            t_max = self.temperature + 5.0
        if t_min > t_max:
            t_min, t_max = t_max, t_min
        # widen so that min <= mean <= max
        self.temperature_min = min(t_min, self.temperature)
        self.temperature_max = max(t_max, self.temperature)
        return self


class IrrigationInput(BaseModel):
    """Seasonal irrigation applied to the field."""
    applied: bool = False
    efficiency: float = Field(default=0.7, description="Application efficiency (0-1]")
    amount: float = Field(default=0.0, description="Total seasonal irrigation in mm")

    @field_validator("efficiency")
    @classmethod
    def _efficiency(cls, value):
        if value <= 0:
            return 0.7
        return min(value, 1.0)

    @field_validator("amount")
    @classmethod
    def _amount(cls, value):
        return max(value, 0.0)


# ============================================================
# Reference profiles
# ============================================================

class GrowthStages(BaseModel):
    """FAO-56 growth stage lengths in days."""
    initial: int = Field(ge=0)
    development: int = Field(ge=0)
    mid: int = Field(ge=0)
    late: int = Field(ge=0)

    class Config:
        frozen = True

    @property
    def total(self) -> int:
        return self.initial + self.development + self.mid + self.late


class CropCoefficients(BaseModel):
    kc_initial: float = Field(ge=0.0, le=1.5)
    kc_mid: float = Field(ge=0.0, le=1.5)
    kc_end: float = Field(ge=0.0, le=1.5)

    class Config:
        frozen = True


class ToleranceRange(BaseModel):
    """Tolerated range with an optimal band inside it."""
    min: float
    optimal: Tuple[float, float]
    max: float

    class Config:
        frozen = True

    @model_validator(mode="after")
    def _ordered(self):
        low, high = self.optimal
        if not (self.min <= low <= high <= self.max):
            raise ValueError(
                f"Tolerance range must satisfy min <= optimal <= max, got "
                f"{self.min}, {self.optimal}, {self.max}"
            )
        return self

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


class NutrientRequirement(BaseModel):
    """Nutrient requirement baseline in kg/ha."""
    nitrogen: float = Field(ge=0.0)
    phosphorus: float = Field(ge=0.0)
    potassium: float = Field(ge=0.0)

    class Config:
        frozen = True


class CropProfile(BaseModel):
    """Static agronomic profile of a crop."""
    id: str
    name: str
    scientific_name: str = ""
    category: str = "generic"
    growth_stages: GrowthStages
    crop_coefficient: CropCoefficients
    yield_response_factor: float = Field(ge=0.0, description="FAO-33 Ky")
    temperature: ToleranceRange
    rainfall: ToleranceRange
    soil_types: frozenset[SoilType]
    nutrients: NutrientRequirement
    average_yield: float = Field(ge=0.0, description="Average yield in kg/ha")
    potential_yield: float = Field(ge=0.0, description="Potential yield in kg/ha")

    class Config:
        frozen = True

    @property
    def growth_duration(self) -> int:
        return self.growth_stages.total


class SoilProfile(BaseModel):
    """Soil hydraulic properties relevant to irrigation."""
    soil_type: Optional[SoilType] = Field(
        default=None, description="Soil type, None for the fallback profile"
    )
    name: str
    water_holding_capacity: float = Field(
        gt=0.0, description="Available water in mm per cm of root depth"
    )
    irrigation_efficiency: float = Field(
        gt=0.0, le=1.0, description="Typical irrigation-system efficiency on this soil"
    )

    class Config:
        frozen = True


class DiseaseProfile(BaseModel):
    """Static profile of a crop disease or pest."""
    id: str
    name: str
    scientific_name: str = ""
    type: str
    affected_crops: frozenset[str]
    temperature_range: Tuple[float, float]
    humidity_range: Tuple[float, float]
    rainfall: RainfallCategory
    symptoms: Tuple[str, ...] = ()
    yield_loss: Tuple[float, float]
    severity: Severity
    prevention: Tuple[str, ...] = ()
    organic_control: Tuple[str, ...] = ()
    chemical_control: Tuple[str, ...] = ()
    critical_stages: Tuple[str, ...] = ()
    spread_rate: str = "moderate"

    class Config:
        frozen = True

    @field_validator("temperature_range", "humidity_range", "yield_loss")
    @classmethod
    def _ordered_range(cls, value):
        low, high = value
        if low > high:
            raise ValueError(f"Range lower bound exceeds upper bound: {value}")
        return value


# ============================================================
# Outputs
# ============================================================

class IrrigationPlan(BaseModel):
    """Daily irrigation plan for a crop on a given soil."""
    et0: float = Field(description="Reference evapotranspiration in mm/day")
    crop_coefficient: float = Field(description="Kc for the current growth stage")
    etc: float = Field(description="Crop evapotranspiration in mm/day")
    growth_stage: str
    days_after_planting: int
    effective_rainfall: float = Field(description="Effective rainfall in mm")
    irrigation_efficiency: float
    irrigation_need: float = Field(description="Gross irrigation need in mm/day")
    frequency: str = Field(description="Human readable watering interval")
    interval_days: int
    amount_per_irrigation: float = Field(description="Water per irrigation event in mm")
    weekly_total: float = Field(description="Gross irrigation need per week in mm")
    method: str = "FAO-56 Penman-Monteith"

    class Config:
        frozen = True


class YieldFactors(BaseModel):
    """Multiplicative factors contributing to the yield estimate."""
    soil_factor: float
    nutrient_factor: float
    temperature_factor: float
    water_stress_reduction: float
    yield_response_factor: float
    soil: str
    weather: str
    water_stress: str
    nutrients: str
    management: str

    class Config:
        frozen = True


class YieldWaterMetrics(BaseModel):
    """Seasonal water balance behind the yield estimate (mm)."""
    seasonal_etc: float
    seasonal_water_available: float
    actual_et: float
    water_deficit: float
    yield_reduction_percent: float

    class Config:
        frozen = True


class YieldForecast(BaseModel):
    estimated_yield: float = Field(description="Estimated yield in kg")
    potential_yield: float = Field(description="Potential yield in kg")
    yield_gap: float = Field(description="Shortfall below potential in %")
    confidence: int
    factors: YieldFactors
    water_metrics: YieldWaterMetrics
    recommendations: List[str]

    class Config:
        frozen = True


class DiseaseCandidate(BaseModel):
    """A disease or pest ranked for the current conditions."""
    disease_id: str
    name: str
    scientific_name: str
    type: str
    match_score: int = Field(description="Raw condition match points")
    match_level: DiseaseMatchLevel
    confidence: int = Field(ge=0, le=100)
    severity: Severity
    yield_loss: Tuple[float, float]
    spread_rate: str
    economic_impact: str
    prevention: List[str]
    organic_control: Optional[str] = None

    class Config:
        frozen = True


class DiseaseRiskFactors(BaseModel):
    """Component scores (0-100) blended into the overall risk."""
    base: float
    history: float
    soil: float
    season: float
    trend: float

    class Config:
        frozen = True


class DiseaseRiskAssessment(BaseModel):
    level: RiskLevel
    confidence: int = Field(ge=0, le=100)
    rainfall_category: RainfallCategory
    factors: DiseaseRiskFactors
    diseases: List[DiseaseCandidate]
    preventive_actions: List[str]
    critical_period: str
    prediction_model: str = "Multi-Factor Expert System"

    class Config:
        frozen = True


# ============================================================
# Farm analysis
# ============================================================

class FarmProfile(BaseModel):
    """Farm context used by the combined analysis."""
    crop_id: str = Field(description="Crop identifier, e.g. 'rice'")
    soil_type: Optional[str] = Field(default=None, description="Clay, Sandy, Loamy or Silty")
    land_size: float = Field(default=1.0, description="Field area in acres")
    nutrient_management: NutrientLevel = NutrientLevel.AVERAGE
    irrigation_quality: str = Field(
        default="average", description="excellent, good, average or poor"
    )
    previous_diseases: List[str] = Field(default_factory=list)
    planting_date: Optional[date] = None


class FarmAnalysis(BaseModel):
    """Combined irrigation, yield, disease and eco results for one farm."""
    crop_id: str
    days_after_planting: int
    irrigation: IrrigationPlan
    yield_forecast: YieldForecast
    disease_risk: DiseaseRiskAssessment
    eco_score: int = Field(ge=0, le=100)

    class Config:
        frozen = True
