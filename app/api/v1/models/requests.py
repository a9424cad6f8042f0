"""
API request models using Pydantic.
"""
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from app.domain.models import (
    AreaUnit,
    FarmProfile,
    IrrigationInput,
    NutrientLevel,
    RiskLevel,
    WeatherObservation,
)


class IrrigationPlanRequest(BaseModel):
    """Request model for the irrigation plan endpoint."""
    weather: WeatherObservation
    crop_id: Optional[str] = Field(default=None, examples=["rice"])
    days_after_planting: int = Field(default=0, examples=[45])
    soil_type: Optional[str] = Field(default=None, examples=["Loamy"])
    recent_rainfall: float = Field(default=0.0, description="Recent rainfall in mm")
    root_depth_cm: Optional[float] = Field(default=None, description="Effective root depth in cm")
    soil_moisture_deficit: float = Field(default=0.0, description="Root-zone deficit in mm")

    class Config:
        json_schema_extra = {
            "example": {
                "weather": {
                    "temperature": 28.0,
                    "humidity": 70,
                    "wind_speed": 2.0,
                    "latitude": 20.59,
                    "elevation": 100,
                    "observation_date": "2024-07-15",
                },
                "crop_id": "rice",
                "days_after_planting": 45,
                "soil_type": "Loamy",
                "recent_rainfall": 5.0,
            }
        }


class YieldForecastRequest(BaseModel):
    """Request model for the yield forecast endpoint."""
    crop_id: Optional[str] = Field(default=None, examples=["wheat"])
    soil_type: Optional[str] = Field(default=None, examples=["Loamy"])
    land_size: float = Field(default=1.0, description="Field area in area_unit")
    area_unit: AreaUnit = AreaUnit.ACRE
    temperature: float = Field(description="Seasonal mean temperature in °C", examples=[22.0])
    rainfall: float = Field(default=0.0, description="Seasonal rainfall in mm")
    irrigation: Optional[IrrigationInput] = None
    nutrient_level: NutrientLevel = NutrientLevel.AVERAGE
    weather: Optional[WeatherObservation] = None


class DiseaseRiskRequest(BaseModel):
    """Request model for the disease risk endpoint."""
    crop_id: Optional[str] = Field(default=None, examples=["rice"])
    temperature: float = Field(description="Air temperature in °C", examples=[27.0])
    humidity: Optional[float] = Field(default=50.0, description="Relative humidity in %")
    rainfall: float = Field(default=0.0, description="Rainfall in mm")
    soil_type: Optional[str] = Field(default=None, examples=["Clay"])
    history: List[str] = Field(
        default_factory=list,
        description="Diseases previously reported on the farm",
        examples=[["rice_blast"]],
    )

    @field_validator("humidity", mode="before")
    @classmethod
    def _default_humidity(cls, value):
        return 50.0 if value is None else value


class EcoScoreRequest(BaseModel):
    """Request model for the eco score endpoint."""
    irrigation_need: float = Field(description="Irrigation need in mm/day", examples=[4.5])
    disease_level: RiskLevel = RiskLevel.LOW
    yield_gap: float = Field(default=0.0, description="Yield gap in %")
    nutrient_level: NutrientLevel = NutrientLevel.AVERAGE


class FarmAnalysisRequest(BaseModel):
    """Request model for the combined farm analysis endpoint."""
    profile: Optional[FarmProfile] = None
    weather: WeatherObservation
    rainfall: float = Field(default=0.0, description="Recent rainfall in mm")
    seasonal_irrigation: float = Field(default=0.0, description="Seasonal irrigation applied in mm")
