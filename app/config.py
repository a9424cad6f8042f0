"""
Application configuration using Pydantic settings.
"""
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Irrigation Planning Parameters
    irrigation_root_depth_cm: float = Field(
        default=30.0,
        description="Default effective root depth used for interval planning (cm)"
    )
    irrigation_depletion_fraction: float = Field(
        default=0.5,
        description="Fraction of root-zone available water depleted before irrigating"
    )

    # Disease Risk Blending Weights
    disease_weight_base: float = Field(
        default=0.40,
        description="Weight of the disease database match score"
    )
    disease_weight_history: float = Field(
        default=0.20,
        description="Weight of the disease recurrence history factor"
    )
    disease_weight_soil: float = Field(
        default=0.15,
        description="Weight of the soil-type risk factor"
    )
    disease_weight_season: float = Field(
        default=0.15,
        description="Weight of the seasonal risk factor"
    )
    disease_weight_trend: float = Field(
        default=0.10,
        description="Weight of the weather-trend risk factor"
    )
    disease_top_candidates: int = Field(
        default=5,
        description="Number of ranked disease candidates returned"
    )

    # Eco Score
    eco_score_baseline: int = Field(
        default=100,
        description="Starting score before sustainability deductions"
    )

    # Yield Forecast Reference Day
    yield_reference_latitude: float = Field(
        default=20.0,
        description="Latitude of the representative day used for seasonal ETc"
    )
    yield_reference_elevation: float = Field(
        default=100.0,
        description="Elevation of the representative day used for seasonal ETc (m)"
    )
    yield_reference_humidity: float = Field(
        default=60.0,
        description="Relative humidity of the representative day (%)"
    )
    yield_reference_wind_speed: float = Field(
        default=2.0,
        description="Wind speed at 2 m of the representative day (m/s)"
    )
    yield_reference_day_of_year: int = Field(
        default=172,
        description="Day of year of the representative day"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )

    # CORS Configuration
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins (use specific origins in production)"
    )

    # Rate Limiting
    rate_limit_requests: int = Field(
        default=100,
        description="Maximum requests per minute per client"
    )

    # Application Settings
    app_name: str = Field(
        default="Agronomic Decision Engine",
        description="Application name"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Application version"
    )
    debug: bool = Field(
        default=False,
        description="Debug mode"
    )

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
