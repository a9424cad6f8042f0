"""
Shared pytest fixtures for all tests.

This module provides common fixtures including:
- Reference tables and the decision engine
- Sample weather observations
- A custom crop profile with round numbers
- FastAPI test client
"""
import pytest
from datetime import date
from fastapi.testclient import TestClient

from app.main import app
from app.domain.models import CropProfile, WeatherObservation
from app.infrastructure.reference_tables import ReferenceTables
from app.services.domain.decision_engine import AgronomicDecisionEngine


# ============================================================
# Reference Data Fixtures
# ============================================================

@pytest.fixture(scope="session")
def reference_tables() -> ReferenceTables:
    """Bundled crop, soil and disease tables."""
    return ReferenceTables()


@pytest.fixture
def engine(reference_tables) -> AgronomicDecisionEngine:
    """Decision engine with default configuration."""
    return AgronomicDecisionEngine(reference_tables=reference_tables)


@pytest.fixture
def round_number_crop() -> CropProfile:
    """Crop with a 5000 kg/ha potential and wide tolerances."""
    return CropProfile(
        id="testcrop",
        name="Test Crop",
        growth_stages={"initial": 20, "development": 30, "mid": 40, "late": 10},
        crop_coefficient={"kc_initial": 0.5, "kc_mid": 1.1, "kc_end": 0.7},
        yield_response_factor=1.0,
        temperature={"min": 5, "optimal": (15, 30), "max": 40},
        rainfall={"min": 300, "optimal": (500, 900), "max": 1500},
        soil_types=["Loamy", "Clay"],
        nutrients={"nitrogen": 100, "phosphorus": 50, "potassium": 50},
        average_yield=3000,
        potential_yield=5000,
    )


# ============================================================
# Weather Fixtures
# ============================================================

@pytest.fixture
def summer_weather() -> WeatherObservation:
    """Warm, fairly humid monsoon day in central India."""
    return WeatherObservation(
        temperature=28.0,
        temperature_min=23.0,
        temperature_max=33.0,
        humidity=70.0,
        wind_speed=2.0,
        latitude=20.59,
        elevation=100.0,
        observation_date=date(2024, 7, 15),
    )


@pytest.fixture
def uccle_weather() -> WeatherObservation:
    """FAO-56 Example 18: Uccle (Brussels), 6 July, measured radiation."""
    return WeatherObservation(
        temperature=16.9,
        temperature_min=12.3,
        temperature_max=21.5,
        humidity=70.55,
        wind_speed=2.78,
        wind_height=10.0,
        latitude=50.8,
        elevation=100.0,
        observation_date=date(2023, 7, 6),
        solar_radiation=22.07,
    )


# ============================================================
# FastAPI Test Client Fixtures
# ============================================================

@pytest.fixture
def test_client() -> TestClient:
    """Create a synchronous test client for FastAPI."""
    return TestClient(app)
