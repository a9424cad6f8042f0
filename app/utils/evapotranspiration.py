"""
FAO-56 Penman-Monteith reference evapotranspiration and crop water helpers.

Reference: Allen, R.G., Pereira, L.S., Raes, D. and Smith, M. (1998).
Crop evapotranspiration - Guidelines for computing crop water requirements.
FAO Irrigation and Drainage Paper 56. FAO, Rome.
"""
from dataclasses import dataclass

import numpy as np

from app.domain.models import WeatherObservation
from app.utils.solar_geometry import SolarGeometry, compute_solar_geometry


STEFAN_BOLTZMANN = 4.903e-9
"""Stefan-Boltzmann constant in MJ K⁻⁴ m⁻² day⁻¹"""

ALBEDO = 0.23
"""Reflectivity of the hypothetical grass reference crop"""

HARGREAVES_RADIATION_COEFFICIENT = 0.16
"""kRs adjustment for interior locations"""

EFFECTIVE_RAINFALL_BREAKPOINT = 250.0
"""Total rainfall (mm) where the SCS method switches to the linear branch"""


@dataclass(frozen=True)
class ET0Breakdown:
    """Intermediate terms of a Penman-Monteith ET0 computation."""
    atmospheric_pressure: float
    psychrometric_constant: float
    saturation_vapour_pressure: float
    actual_vapour_pressure: float
    vapour_pressure_slope: float
    solar_radiation: float
    net_shortwave_radiation: float
    net_longwave_radiation: float
    net_radiation: float
    wind_speed_2m: float
    solar: SolarGeometry
    et0: float


def atmospheric_pressure(elevation: float) -> float:
    """Atmospheric pressure in kPa (FAO-56 eq. 7)."""
    return float(101.3 * np.power((293 - 0.0065 * elevation) / 293, 5.26))


def psychrometric_constant(pressure: float) -> float:
    """Psychrometric constant in kPa/°C (FAO-56 eq. 8)."""
    return 0.000665 * pressure


def saturation_vapour_pressure(temperature: float) -> float:
    """Saturation vapour pressure e°(T) in kPa (FAO-56 eq. 11)."""
    return float(0.6108 * np.exp(17.27 * temperature / (temperature + 237.3)))


def mean_saturation_vapour_pressure(t_min: float, t_max: float) -> float:
    """Mean saturation vapour pressure es in kPa (FAO-56 eq. 12)."""
    return (saturation_vapour_pressure(t_max) + saturation_vapour_pressure(t_min)) / 2


def vapour_pressure_slope(temperature: float) -> float:
    """Slope of the saturation vapour pressure curve in kPa/°C (FAO-56 eq. 13)."""
    return 4098 * saturation_vapour_pressure(temperature) / (temperature + 237.3) ** 2


def wind_speed_at_2m(wind_speed: float, height: float) -> float:
    """
    Convert wind speed measured at an arbitrary height to 2 m (FAO-56 eq. 47).

    Args:
        wind_speed: Measured wind speed in m/s
        height: Measurement height in meters

    Returns:
        Wind speed at 2 m in m/s
    """
    if height == 2.0:
        return wind_speed
    return float(wind_speed * 4.87 / np.log(67.8 * height - 5.42))


def hargreaves_solar_radiation(t_min: float, t_max: float, ra: float) -> float:
    """Solar radiation estimated from the temperature range (FAO-56 eq. 50)."""
    return float(HARGREAVES_RADIATION_COEFFICIENT * np.sqrt(max(t_max - t_min, 0.0)) * ra)


def net_longwave_radiation(
    t_min: float,
    t_max: float,
    actual_vapour_pressure: float,
    solar_radiation: float,
    clear_sky_radiation: float,
) -> float:
    """
    Net outgoing longwave radiation in MJ m⁻² day⁻¹ (FAO-56 eq. 39).

    Rs/Rso is limited to 1.0 and taken as 1.0 when Rso is zero (polar night).
    """
    if clear_sky_radiation > 0:
        relative_radiation = min(solar_radiation / clear_sky_radiation, 1.0)
    else:
        relative_radiation = 1.0

    mean_kelvin_fourth = ((t_max + 273.16) ** 4 + (t_min + 273.16) ** 4) / 2
    humidity_correction = 0.34 - 0.14 * np.sqrt(actual_vapour_pressure)
    cloudiness = 1.35 * relative_radiation - 0.35

    return float(STEFAN_BOLTZMANN * mean_kelvin_fourth * humidity_correction * cloudiness)


def penman_monteith_breakdown(weather: WeatherObservation) -> ET0Breakdown:
    """
    Compute daily reference evapotranspiration with every intermediate term.

    Args:
        weather: Validated daily weather observation

    Returns:
        ET0Breakdown whose ``et0`` is floored at zero
    """
    t_mean = weather.temperature
    t_min = weather.temperature_min
    t_max = weather.temperature_max

    pressure = atmospheric_pressure(weather.elevation)
    gamma = psychrometric_constant(pressure)

    es = mean_saturation_vapour_pressure(t_min, t_max)
    ea = es * weather.humidity / 100
    delta = vapour_pressure_slope(t_mean)

    solar = compute_solar_geometry(weather.latitude, weather.elevation, weather.observation_date)

    if weather.solar_radiation is not None:
        rs = weather.solar_radiation
    else:
        rs = hargreaves_solar_radiation(t_min, t_max, solar.extraterrestrial_radiation)

    rns = (1 - ALBEDO) * rs
    rnl = net_longwave_radiation(t_min, t_max, ea, rs, solar.clear_sky_radiation)
    rn = rns - rnl
    soil_heat_flux = 0.0  # negligible for daily steps

    u2 = wind_speed_at_2m(weather.wind_speed, weather.wind_height)

    numerator = (
        0.408 * delta * (rn - soil_heat_flux)
        + gamma * (900 / (t_mean + 273)) * u2 * (es - ea)
    )
    denominator = delta + gamma * (1 + 0.34 * u2)
    et0 = max(0.0, numerator / denominator)

    return ET0Breakdown(
        atmospheric_pressure=pressure,
        psychrometric_constant=gamma,
        saturation_vapour_pressure=es,
        actual_vapour_pressure=ea,
        vapour_pressure_slope=delta,
        solar_radiation=rs,
        net_shortwave_radiation=rns,
        net_longwave_radiation=rnl,
        net_radiation=rn,
        wind_speed_2m=u2,
        solar=solar,
        et0=et0,
    )


def calculate_et0(weather: WeatherObservation) -> float:
    """
    Reference evapotranspiration ET0 in mm/day (FAO-56 eq. 6).

    Args:
        weather: Validated daily weather observation

    Returns:
        ET0 in mm/day, never negative
    """
    return penman_monteith_breakdown(weather).et0


def calculate_etc(et0: float, crop_coefficient: float) -> float:
    """Crop evapotranspiration ETc = ET0 x Kc in mm/day."""
    return max(0.0, et0 * crop_coefficient)


def calculate_effective_rainfall(total_rainfall: float) -> float:
    """
    Effective rainfall using the USDA Soil Conservation Service method.

    Args:
        total_rainfall: Total rainfall in mm (negative values count as 0)

    Returns:
        Effective rainfall in mm
    """
    if total_rainfall <= 0:
        return 0.0
    if total_rainfall < EFFECTIVE_RAINFALL_BREAKPOINT:
        return total_rainfall * (125 - 0.2 * total_rainfall) / 125
    return 125 + 0.1 * total_rainfall
