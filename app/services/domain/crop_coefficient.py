"""
Domain service: FAO-56 single crop coefficient curve.

Kc follows the trapezoidal FAO-56 pattern:
- Initial stage: flat at kc_initial
- Development stage: linear rise from kc_initial to kc_mid
- Mid-season: flat at kc_mid
- Late season: linear change from kc_mid to kc_end
"""
import logging

from app.domain.models import CropProfile

logger = logging.getLogger(__name__)


MIN_LATE_SEASON_KC = 0.3
"""Minimal ground-cover coefficient during the late season"""

FALLOW_KC = 0.5
"""Coefficient for fallow/stubble long after harvest"""

POST_HARVEST_GRACE_DAYS = 30
"""Days past the growth duration before the fallow coefficient applies"""


def _interpolate(start: float, end: float, progress: float) -> float:
    # exact at both ends of the stage
    if progress >= 1.0:
        return end
    return start + (end - start) * progress


class CropCoefficientCurve:
    """Growth-stage interpolated crop coefficient for a single crop."""

    def __init__(self, crop: CropProfile):
        self.crop = crop
        stages = crop.growth_stages
        self.initial_end = stages.initial
        self.development_end = self.initial_end + stages.development
        self.mid_end = self.development_end + stages.mid
        self.total_duration = stages.total

    def kc(self, days_after_planting: float) -> float:
        """
        Crop coefficient for a day of the season.

        Args:
            days_after_planting: Days since planting (negative counts as 0)

        Returns:
            Kc for that day
        """
        days = max(days_after_planting, 0)
        coefficients = self.crop.crop_coefficient

        if days > self.total_duration + POST_HARVEST_GRACE_DAYS:
            return FALLOW_KC

        days = min(days, self.total_duration)
        stages = self.crop.growth_stages

        if days <= self.initial_end:
            return coefficients.kc_initial

        if days <= self.development_end:
            progress = (days - self.initial_end) / stages.development
            return _interpolate(coefficients.kc_initial, coefficients.kc_mid, progress)

        if days <= self.mid_end:
            return coefficients.kc_mid

        progress = (days - self.mid_end) / stages.late
        kc = _interpolate(coefficients.kc_mid, coefficients.kc_end, progress)
        return max(kc, MIN_LATE_SEASON_KC)

    def growth_stage(self, days_after_planting: float) -> str:
        """Growth stage label for a day of the season."""
        days = max(days_after_planting, 0)
        if days > self.total_duration:
            return "Post-harvest"
        if days <= self.initial_end:
            return "Initial"
        if days <= self.development_end:
            return "Development"
        if days <= self.mid_end:
            return "Mid-season"
        return "Late season"

    def season_average_kc(self) -> float:
        """Season-weighted average Kc, counting the mid-season twice."""
        c = self.crop.crop_coefficient
        return (c.kc_initial + 2 * c.kc_mid + c.kc_end) / 4
