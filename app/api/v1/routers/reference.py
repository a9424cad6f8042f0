"""
API router for read-only reference data.
"""
from typing import Annotated, Optional
from fastapi import APIRouter, HTTPException, Path, Query

from app.api.dependencies import ReferenceTablesDep
from app.api.v1.models.responses import (
    CropListResponse,
    CropSummary,
    DiseaseListResponse,
    DiseaseSummary,
)
from app.domain.models import CropProfile


router = APIRouter(
    prefix="/reference",
    tags=["reference"],
)


@router.get(
    "/crops",
    response_model=CropListResponse,
    summary="List supported crops",
)
async def list_crops(reference_tables: ReferenceTablesDep) -> CropListResponse:
    """List every crop in the reference tables."""
    crops = [
        CropSummary(
            id=crop.id,
            name=crop.name,
            scientific_name=crop.scientific_name,
            category=crop.category,
            growth_duration=crop.growth_duration,
        )
        for crop in reference_tables.crops.values()
    ]
    return CropListResponse(count=len(crops), crops=crops)


@router.get(
    "/crops/{crop_id}",
    response_model=CropProfile,
    summary="Get a crop profile",
    responses={404: {"description": "Crop not found"}},
)
async def get_crop(
    crop_id: Annotated[str, Path(description="Crop identifier, any case")],
    reference_tables: ReferenceTablesDep,
) -> CropProfile:
    """
    Get the full profile of a crop.

    Unlike the computation endpoints, unknown crops are reported as 404
    instead of falling back to the generic profile.
    """
    if not reference_tables.has_crop(crop_id):
        raise HTTPException(status_code=404, detail=f"Crop '{crop_id}' not found")
    return reference_tables.get_crop(crop_id)


@router.get(
    "/diseases",
    response_model=DiseaseListResponse,
    summary="List diseases and pests",
)
async def list_diseases(
    reference_tables: ReferenceTablesDep,
    crop_id: Annotated[Optional[str], Query(description="Only diseases affecting this crop")] = None,
) -> DiseaseListResponse:
    """List diseases and pests, optionally filtered by crop."""
    if crop_id:
        diseases = reference_tables.diseases_for_crop(crop_id)
    else:
        diseases = list(reference_tables.diseases.values())

    summaries = [
        DiseaseSummary(
            id=d.id,
            name=d.name,
            type=d.type,
            severity=d.severity.value,
            affected_crops=sorted(d.affected_crops),
        )
        for d in diseases
    ]
    return DiseaseListResponse(count=len(summaries), diseases=summaries)
