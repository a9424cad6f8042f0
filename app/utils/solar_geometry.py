"""
Solar geometry utilities for daily evapotranspiration.

Implements the astronomical terms of FAO Irrigation and Drainage Paper 56
(equations 21-25 and 37) for a daily time step.
"""
from dataclasses import dataclass
from datetime import date

import numpy as np


SOLAR_CONSTANT = 0.0820
"""Solar constant Gsc in MJ m⁻² min⁻¹"""


@dataclass(frozen=True)
class SolarGeometry:
    """Solar angles and radiation terms for one day at one location."""
    day_of_year: int
    declination: float
    """Solar declination in radians"""
    sunset_hour_angle: float
    """Sunset hour angle in radians"""
    inverse_distance: float
    """Inverse relative Earth-Sun distance (dimensionless)"""
    extraterrestrial_radiation: float
    """Ra in MJ m⁻² day⁻¹"""
    clear_sky_radiation: float
    """Rso in MJ m⁻² day⁻¹"""


def day_of_year(day: date) -> int:
    """
    Get the day number within the year (1 = 1 January).

    Args:
        day: Calendar date

    Returns:
        Day of year in [1, 366]
    """
    return day.timetuple().tm_yday


def solar_declination(doy: int) -> float:
    """Solar declination in radians (FAO-56 eq. 24)."""
    return float(0.409 * np.sin(2 * np.pi * doy / 365 - 1.39))


def inverse_relative_distance(doy: int) -> float:
    """Inverse relative Earth-Sun distance (FAO-56 eq. 23)."""
    return float(1 + 0.033 * np.cos(2 * np.pi * doy / 365))


def sunset_hour_angle(latitude_rad: float, declination: float) -> float:
    """
    Sunset hour angle in radians (FAO-56 eq. 25).

    The arccos argument is clipped to [-1, 1] so that polar night (0) and
    polar day (pi) are returned instead of NaN.
    """
    x = -np.tan(latitude_rad) * np.tan(declination)
    return float(np.arccos(np.clip(x, -1.0, 1.0)))


def extraterrestrial_radiation(
    latitude_rad: float,
    declination: float,
    sunset_angle: float,
    inverse_distance: float,
) -> float:
    """Extraterrestrial radiation Ra in MJ m⁻² day⁻¹ (FAO-56 eq. 21)."""
    ra = (24 * 60 / np.pi) * SOLAR_CONSTANT * inverse_distance * (
        sunset_angle * np.sin(latitude_rad) * np.sin(declination)
        + np.cos(latitude_rad) * np.cos(declination) * np.sin(sunset_angle)
    )
    return float(max(ra, 0.0))


def clear_sky_radiation(ra: float, elevation: float) -> float:
    """Clear-sky solar radiation Rso in MJ m⁻² day⁻¹ (FAO-56 eq. 37)."""
    return (0.75 + 2e-5 * elevation) * ra


def compute_solar_geometry(latitude: float, elevation: float, day: date) -> SolarGeometry:
    """
    Derive the solar geometry for a location and date.

    Args:
        latitude: Latitude in degrees, [-90, 90]
        elevation: Elevation above sea level in meters
        day: Calendar date

    Returns:
        SolarGeometry with angles and radiation terms
    """
    doy = day_of_year(day)
    latitude_rad = float(np.deg2rad(latitude))

    declination = solar_declination(doy)
    omega_s = sunset_hour_angle(latitude_rad, declination)
    dr = inverse_relative_distance(doy)
    ra = extraterrestrial_radiation(latitude_rad, declination, omega_s, dr)

    return SolarGeometry(
        day_of_year=doy,
        declination=declination,
        sunset_hour_angle=omega_s,
        inverse_distance=dr,
        extraterrestrial_radiation=ra,
        clear_sky_radiation=clear_sky_radiation(ra, elevation),
    )
