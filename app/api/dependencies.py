"""
Dependency injection for FastAPI.
"""
from typing import Annotated
from fastapi import Depends

from app.infrastructure.reference_tables import (
    ReferenceTables,
    get_reference_tables,
)
from app.services.domain.decision_engine import AgronomicDecisionEngine
from app.services.application.farm_analysis_service import FarmAnalysisService


def get_decision_engine(
    reference_tables: Annotated[ReferenceTables, Depends(get_reference_tables)],
) -> AgronomicDecisionEngine:
    """
    Dependency factory for AgronomicDecisionEngine.

    Args:
        reference_tables: Shared reference tables (injected)

    Returns:
        AgronomicDecisionEngine instance
    """
    return AgronomicDecisionEngine(reference_tables=reference_tables)


def get_farm_analysis_service(
    engine: Annotated[AgronomicDecisionEngine, Depends(get_decision_engine)],
) -> FarmAnalysisService:
    """
    Dependency factory for FarmAnalysisService.

    Args:
        engine: Agronomic decision engine (injected)

    Returns:
        FarmAnalysisService instance
    """
    return FarmAnalysisService(engine=engine)


# Type aliases for cleaner route signatures
ReferenceTablesDep = Annotated[ReferenceTables, Depends(get_reference_tables)]
EngineDep = Annotated[AgronomicDecisionEngine, Depends(get_decision_engine)]
FarmAnalysisServiceDep = Annotated[FarmAnalysisService, Depends(get_farm_analysis_service)]
