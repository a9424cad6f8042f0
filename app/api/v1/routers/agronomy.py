"""
API router for agronomic decision endpoints.
"""
from fastapi import APIRouter, HTTPException

from app.api.dependencies import EngineDep, FarmAnalysisServiceDep
from app.api.v1.models.requests import (
    DiseaseRiskRequest,
    EcoScoreRequest,
    FarmAnalysisRequest,
    IrrigationPlanRequest,
    YieldForecastRequest,
)
from app.api.v1.models.responses import EcoScoreResponse
from app.domain.exceptions import MissingFarmContextError
from app.domain.models import (
    DiseaseRiskAssessment,
    FarmAnalysis,
    IrrigationPlan,
    YieldForecast,
)


router = APIRouter(
    prefix="/agronomy",
    tags=["agronomy"],
)


COMMON_RESPONSES = {
    400: {"description": "Missing crop identifier or farm profile"},
    422: {"description": "Malformed request body"},
    429: {"description": "Rate limit exceeded"},
    500: {"description": "Internal server error"},
}


@router.post(
    "/irrigation-plan",
    response_model=IrrigationPlan,
    summary="Compute the daily irrigation plan",
    description="""
    Compute crop water demand and a watering schedule for one day.

    This endpoint:
    1. Computes reference evapotranspiration (FAO-56 Penman-Monteith)
    2. Applies the crop coefficient for the current growth stage
    3. Subtracts effective rainfall (USDA-SCS) and applies system efficiency
    4. Converts the daily need into a watering interval from soil water holding capacity
    """,
    responses=COMMON_RESPONSES,
)
async def irrigation_plan(
    request: IrrigationPlanRequest,
    engine: EngineDep,
) -> IrrigationPlan:
    """
    Compute an irrigation plan.

    Args:
        request: Weather, crop and soil context
        engine: Decision engine (injected dependency)

    Returns:
        IrrigationPlan

    Raises:
        HTTPException: If the crop identifier is missing
    """
    try:
        return engine.compute_irrigation_plan(
            weather=request.weather,
            crop_id=request.crop_id,
            days_after_planting=request.days_after_planting,
            soil_type=request.soil_type,
            recent_rainfall=request.recent_rainfall,
            root_depth_cm=request.root_depth_cm,
            soil_moisture_deficit=request.soil_moisture_deficit,
        )
    except MissingFarmContextError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.post(
    "/yield-forecast",
    response_model=YieldForecast,
    summary="Forecast seasonal yield",
    description="""
    Forecast seasonal yield using the FAO-33 yield response to water,
    scaled by soil, nutrient and temperature suitability factors.
    """,
    responses=COMMON_RESPONSES,
)
async def yield_forecast(
    request: YieldForecastRequest,
    engine: EngineDep,
) -> YieldForecast:
    """
    Forecast yield for a field.

    Args:
        request: Crop, soil, area and seasonal weather
        engine: Decision engine (injected dependency)

    Returns:
        YieldForecast
    """
    try:
        return engine.compute_yield_forecast(
            crop_id=request.crop_id,
            soil_type=request.soil_type,
            land_size=request.land_size,
            temperature=request.temperature,
            rainfall=request.rainfall,
            irrigation=request.irrigation,
            nutrient_level=request.nutrient_level,
            area_unit=request.area_unit,
            weather=request.weather,
        )
    except MissingFarmContextError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.post(
    "/disease-risk",
    response_model=DiseaseRiskAssessment,
    summary="Assess disease and pest risk",
    description="""
    Assess disease and pest risk for a crop.

    The overall score blends the disease condition match with soil,
    recurrence history, seasonal and weather-trend factors, and the
    most likely diseases are ranked with preventive actions.
    """,
    responses=COMMON_RESPONSES,
)
async def disease_risk(
    request: DiseaseRiskRequest,
    engine: EngineDep,
) -> DiseaseRiskAssessment:
    """
    Assess disease risk.

    Args:
        request: Crop, weather and farm history
        engine: Decision engine (injected dependency)

    Returns:
        DiseaseRiskAssessment
    """
    try:
        return engine.compute_disease_risk(
            crop_id=request.crop_id,
            temperature=request.temperature,
            humidity=request.humidity,
            rainfall=request.rainfall,
            soil_type=request.soil_type,
            history=request.history,
        )
    except MissingFarmContextError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.post(
    "/eco-score",
    response_model=EcoScoreResponse,
    summary="Compute the farm eco score",
    responses={429: COMMON_RESPONSES[429], 422: COMMON_RESPONSES[422]},
)
async def eco_score(
    request: EcoScoreRequest,
    engine: EngineDep,
) -> EcoScoreResponse:
    """Score water use, disease pressure, yield efficiency and nutrients."""
    return EcoScoreResponse(
        eco_score=engine.compute_eco_score(
            irrigation_need=request.irrigation_need,
            disease_level=request.disease_level,
            yield_gap=request.yield_gap,
            nutrient_level=request.nutrient_level,
        )
    )


@router.post(
    "/analysis",
    response_model=FarmAnalysis,
    summary="Run a complete farm analysis",
    description="""
    Run irrigation planning, disease risk, yield forecast and eco scoring
    for one farm profile and one weather observation.
    """,
    responses=COMMON_RESPONSES,
)
async def farm_analysis(
    request: FarmAnalysisRequest,
    analysis_service: FarmAnalysisServiceDep,
) -> FarmAnalysis:
    """
    Analyze a farm.

    Args:
        request: Farm profile and weather observation
        analysis_service: Farm analysis service (injected dependency)

    Returns:
        FarmAnalysis
    """
    try:
        # Delegate to service layer (no business logic here)
        return analysis_service.analyze(
            profile=request.profile,
            weather=request.weather,
            rainfall=request.rainfall,
            seasonal_irrigation=request.seasonal_irrigation,
        )
    except MissingFarmContextError as e:
        raise HTTPException(status_code=400, detail=e.message)
