"""
API response models using Pydantic.
"""
from typing import List
from pydantic import BaseModel, Field


class EcoScoreResponse(BaseModel):
    """Response model for eco score endpoint."""
    eco_score: int = Field(
        ge=0,
        le=100,
        description="Sustainability score from 0 (poor) to 100 (excellent)",
    )

    class Config:
        json_schema_extra = {
            "example": {"eco_score": 85}
        }


class CropSummary(BaseModel):
    """Short description of a crop in the reference tables."""
    id: str = Field(description="Crop identifier", examples=["rice"])
    name: str = Field(description="Display name", examples=["Rice"])
    scientific_name: str
    category: str
    growth_duration: int = Field(description="Total season length in days")


class CropListResponse(BaseModel):
    """Response model for the crop listing endpoint."""
    count: int
    crops: List[CropSummary]


class DiseaseSummary(BaseModel):
    """Short description of a disease or pest."""
    id: str
    name: str
    type: str
    severity: str
    affected_crops: List[str]


class DiseaseListResponse(BaseModel):
    """Response model for the disease listing endpoint."""
    count: int
    diseases: List[DiseaseSummary]
