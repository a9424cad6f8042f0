"""
Unit tests for solar geometry and reference evapotranspiration.

Tests cover:
- Extraterrestrial and clear-sky radiation
- Polar latitudes
- Penman-Monteith ET0 against a worked FAO-56 example
- Wind height conversion
- Effective rainfall
"""
import math
import pytest
from datetime import date

from app.domain.models import WeatherObservation
from app.utils.solar_geometry import (
    compute_solar_geometry,
    day_of_year,
    sunset_hour_angle,
)
from app.utils.evapotranspiration import (
    atmospheric_pressure,
    calculate_effective_rainfall,
    calculate_et0,
    calculate_etc,
    penman_monteith_breakdown,
    wind_speed_at_2m,
)


# ============================================================
# Solar Geometry Tests
# ============================================================

class TestSolarGeometry:
    """Tests for solar angles and radiation."""

    def test_day_of_year(self):
        """Day of year should count from 1 January."""
        assert day_of_year(date(2023, 1, 1)) == 1
        assert day_of_year(date(2023, 9, 3)) == 246
        assert day_of_year(date(2024, 12, 31)) == 366

    def test_extraterrestrial_radiation_fao_example(self):
        """20°S on 3 September should give Ra of about 32.2 MJ/m²/day."""
        solar = compute_solar_geometry(latitude=-20.0, elevation=0.0, day=date(2023, 9, 3))

        assert solar.extraterrestrial_radiation == pytest.approx(32.2, abs=0.1)
        assert solar.declination == pytest.approx(0.120, abs=0.002)
        assert solar.sunset_hour_angle == pytest.approx(1.527, abs=0.002)

    def test_clear_sky_radiation_scales_with_elevation(self):
        """Rso should be 0.75 Ra at sea level and grow with elevation."""
        low = compute_solar_geometry(latitude=30.0, elevation=0.0, day=date(2023, 6, 1))
        high = compute_solar_geometry(latitude=30.0, elevation=2000.0, day=date(2023, 6, 1))

        assert low.clear_sky_radiation == pytest.approx(0.75 * low.extraterrestrial_radiation)
        assert high.clear_sky_radiation > low.clear_sky_radiation

    @pytest.mark.parametrize("latitude,day", [
        (89.0, date(2023, 12, 21)),
        (89.0, date(2023, 6, 21)),
        (-89.0, date(2023, 6, 21)),
        (90.0, date(2023, 3, 21)),
    ])
    def test_polar_latitudes_are_finite(self, latitude, day):
        """Polar day and night should never produce NaN."""
        solar = compute_solar_geometry(latitude=latitude, elevation=0.0, day=day)

        assert math.isfinite(solar.sunset_hour_angle)
        assert math.isfinite(solar.extraterrestrial_radiation)
        assert solar.extraterrestrial_radiation >= 0.0

    def test_sunset_hour_angle_clipped(self):
        """Polar night gives 0 and polar day gives pi."""
        assert sunset_hour_angle(math.radians(89.0), 0.409) == pytest.approx(math.pi)
        assert sunset_hour_angle(math.radians(89.0), -0.409) == pytest.approx(0.0)


# ============================================================
# ET0 Tests
# ============================================================

class TestReferenceEvapotranspiration:
    """Tests for FAO-56 Penman-Monteith ET0."""

    def test_fao_example_18(self, uccle_weather):
        """Uccle on 6 July should give ET0 of about 3.9 mm/day."""
        breakdown = penman_monteith_breakdown(uccle_weather)

        assert breakdown.wind_speed_2m == pytest.approx(2.078, abs=0.01)
        assert breakdown.saturation_vapour_pressure == pytest.approx(1.997, abs=0.01)
        assert breakdown.et0 == pytest.approx(3.9, abs=0.2)

    def test_atmospheric_pressure(self):
        """Pressure should be ~101.3 kPa at sea level and ~81.8 kPa at 1800 m."""
        assert atmospheric_pressure(0.0) == pytest.approx(101.3)
        assert atmospheric_pressure(1800.0) == pytest.approx(81.8, abs=0.1)

    def test_et0_non_negative_in_polar_night(self):
        """ET0 should be floored at zero when there is no sun."""
        weather = WeatherObservation(
            temperature=-25.0,
            humidity=90,
            latitude=89.0,
            observation_date=date(2023, 12, 21),
        )

        et0 = calculate_et0(weather)

        assert math.isfinite(et0)
        assert et0 >= 0.0

    def test_et0_increases_with_drier_air(self, summer_weather):
        """Lower humidity should raise the vapour pressure deficit and ET0."""
        dry = summer_weather.model_copy(update={"humidity": 30.0})

        assert calculate_et0(dry) > calculate_et0(summer_weather)

    def test_et0_plausible_range(self, summer_weather):
        """A warm monsoon day should give a few mm/day."""
        et0 = calculate_et0(summer_weather)

        assert 2.0 < et0 < 8.0

    def test_wind_at_2m_unchanged(self):
        """Wind measured at 2 m should not be converted."""
        assert wind_speed_at_2m(3.0, 2.0) == 3.0

    def test_wind_at_10m_reduced(self):
        """Wind measured at 10 m should be reduced by the log profile."""
        assert wind_speed_at_2m(3.0, 10.0) == pytest.approx(3.0 * 0.748, abs=0.01)

    def test_etc_scales_with_kc(self):
        """ETc should be ET0 x Kc."""
        assert calculate_etc(5.0, 1.2) == pytest.approx(6.0)
        assert calculate_etc(5.0, 0.0) == 0.0


# ============================================================
# Weather Normalisation Tests
# ============================================================

class TestWeatherObservation:
    """Tests for input normalisation of weather observations."""

    def test_defaults_derived_from_mean(self):
        """Missing min/max and humidity should be derived."""
        weather = WeatherObservation(temperature=20.0, humidity=None, observation_date=date(2024, 1, 1))

        assert weather.temperature_min == 15.0
        assert weather.temperature_max == 25.0
        assert weather.humidity == 50.0

    def test_out_of_range_values_clamped(self):
        """Humidity, wind speed and latitude should be clamped."""
        weather = WeatherObservation(
            temperature=20.0,
            humidity=140,
            wind_speed=-3.0,
            latitude=120.0,
            observation_date=date(2024, 1, 1),
        )

        assert weather.humidity == 100.0
        assert weather.wind_speed == 0.0
        assert weather.latitude == 90.0

    def test_inverted_range_widened_around_mean(self):
        """Swapped or inconsistent min/max should enclose the mean."""
        weather = WeatherObservation(
            temperature=30.0,
            temperature_min=25.0,
            temperature_max=20.0,
            observation_date=date(2024, 1, 1),
        )

        assert weather.temperature_min <= weather.temperature <= weather.temperature_max
        assert weather.temperature_min == 20.0
        assert weather.temperature_max == 30.0

    def test_negative_elevation_allowed(self):
        """Below-sea-level sites are valid."""
        weather = WeatherObservation(temperature=30.0, elevation=-400.0, observation_date=date(2024, 1, 1))

        assert weather.elevation == -400.0


# ============================================================
# Effective Rainfall Tests
# ============================================================

class TestEffectiveRainfall:
    """Tests for the USDA-SCS effective rainfall method."""

    @pytest.mark.parametrize("rainfall,expected", [
        (0.0, 0.0),
        (-10.0, 0.0),
        (100.0, 84.0),
        (250.0, 150.0),
        (500.0, 175.0),
    ])
    def test_effective_rainfall(self, rainfall, expected):
        """Effective rainfall should follow both SCS branches."""
        assert calculate_effective_rainfall(rainfall) == pytest.approx(expected)

    def test_continuous_at_breakpoint(self):
        """Both branches should meet at 250 mm."""
        below = calculate_effective_rainfall(250.0 - 1e-6)
        at = calculate_effective_rainfall(250.0)

        assert below == pytest.approx(at, abs=1e-4)

    def test_never_exceeds_rainfall(self):
        """Effective rainfall should never exceed the total."""
        for rainfall in [1.0, 10.0, 50.0, 200.0, 249.0, 300.0]:
            assert 0.0 <= calculate_effective_rainfall(rainfall) <= rainfall
