"""
Unit tests for the crop coefficient curve and irrigation planning.

Tests cover:
- Kc values and continuity at stage boundaries
- Growth stage labels
- Gross irrigation need
- Watering interval and amount per event
- End-to-end irrigation plan
"""
import pytest

from app.services.domain.crop_coefficient import CropCoefficientCurve, FALLOW_KC
from app.services.domain.irrigation_planner import (
    IrrigationFrequencyPlanner,
    IrrigationNeedCalculator,
    IrrigationPlanner,
    MAX_INTERVAL_DAYS,
)


# ============================================================
# Test Fixtures
# ============================================================

@pytest.fixture
def rice(reference_tables):
    return reference_tables.get_crop("rice")


@pytest.fixture
def loamy(reference_tables):
    return reference_tables.get_soil("Loamy")


@pytest.fixture
def sandy(reference_tables):
    return reference_tables.get_soil("Sandy")


# ============================================================
# Crop Coefficient Tests
# ============================================================

class TestCropCoefficientCurve:
    """Tests for the FAO-56 single Kc curve."""

    def test_stage_values(self, rice):
        """Rice Kc should be 1.05 initially, 1.20 mid-season, 0.90 at harvest."""
        curve = CropCoefficientCurve(rice)

        assert curve.kc(0) == 1.05
        assert curve.kc(15) == 1.05
        assert curve.kc(45) == pytest.approx(1.125)
        assert curve.kc(80) == 1.20
        assert curve.kc(120) == pytest.approx(0.90)

    def test_exact_at_stage_boundaries(self, rice):
        """Boundaries should return the stage coefficients exactly."""
        curve = CropCoefficientCurve(rice)
        c = rice.crop_coefficient

        assert curve.kc(curve.initial_end) == c.kc_initial
        assert curve.kc(curve.development_end) == c.kc_mid
        assert curve.kc(curve.mid_end) == c.kc_mid

    @pytest.mark.parametrize("crop_id", ["rice", "wheat", "cotton", "corn", "potato", "tomato"])
    def test_continuous_at_stage_boundaries(self, reference_tables, crop_id):
        """Kc should not jump at any stage boundary."""
        curve = CropCoefficientCurve(reference_tables.get_crop(crop_id))
        epsilon = 1e-6

        for boundary in [curve.initial_end, curve.development_end, curve.mid_end]:
            before = curve.kc(boundary - epsilon)
            after = curve.kc(boundary + epsilon)
            assert abs(after - before) < 1e-4

    @pytest.mark.parametrize("crop_id", [
        "rice", "wheat", "cotton", "corn", "soybean", "sugarcane", "potato", "tomato", "quinoa",
    ])
    def test_non_decreasing_through_development(self, reference_tables, crop_id):
        """Kc should rise steadily from kc_initial to kc_mid during development."""
        crop = reference_tables.get_crop(crop_id)
        curve = CropCoefficientCurve(crop)
        assert crop.crop_coefficient.kc_mid >= crop.crop_coefficient.kc_initial

        values = [curve.kc(day) for day in range(curve.initial_end, curve.development_end + 1)]

        assert values == sorted(values)
        assert values[0] == crop.crop_coefficient.kc_initial
        assert values[-1] == crop.crop_coefficient.kc_mid

    def test_negative_days_treated_as_planting_day(self, rice):
        """Negative days should give the initial coefficient."""
        curve = CropCoefficientCurve(rice)

        assert curve.kc(-10) == rice.crop_coefficient.kc_initial
        assert curve.growth_stage(-10) == "Initial"

    def test_after_season(self, rice):
        """Shortly after harvest Kc holds at kc_end, long after it is fallow."""
        curve = CropCoefficientCurve(rice)

        assert curve.kc(curve.total_duration + 10) == pytest.approx(rice.crop_coefficient.kc_end)
        assert curve.kc(curve.total_duration + 31) == FALLOW_KC

    @pytest.mark.parametrize("day,stage", [
        (10, "Initial"),
        (45, "Development"),
        (80, "Mid-season"),
        (110, "Late season"),
        (130, "Post-harvest"),
    ])
    def test_growth_stage(self, rice, day, stage):
        """Growth stage labels should follow the stage lengths."""
        assert CropCoefficientCurve(rice).growth_stage(day) == stage

    def test_season_average(self, rice):
        """Season average should count the mid-season coefficient twice."""
        assert CropCoefficientCurve(rice).season_average_kc() == pytest.approx(
            (1.05 + 2 * 1.20 + 0.90) / 4
        )


# ============================================================
# Irrigation Need Tests
# ============================================================

class TestIrrigationNeed:
    """Tests for net and gross irrigation requirement."""

    def test_gross_divides_by_efficiency(self):
        """Gross need should be net need divided by efficiency."""
        calculator = IrrigationNeedCalculator()

        assert calculator.gross_irrigation(6.0, 1.0, 0.8) == pytest.approx(6.25)

    def test_soil_moisture_deficit_added(self):
        """A root-zone deficit should be added to the net need."""
        calculator = IrrigationNeedCalculator()

        assert calculator.net_irrigation(5.0, 0.0, 3.0) == pytest.approx(8.0)

    def test_never_negative(self):
        """Rain exceeding demand should give zero need."""
        calculator = IrrigationNeedCalculator()

        assert calculator.gross_irrigation(4.0, 80.0, 0.85) == 0.0


# ============================================================
# Irrigation Frequency Tests
# ============================================================

class TestIrrigationFrequency:
    """Tests for watering interval planning."""

    def test_loamy_five_mm_per_day(self, loamy):
        """Loamy soil at 5 mm/day should be watered every 4 days with 20 mm."""
        plan = IrrigationFrequencyPlanner(depletion_fraction=0.5).plan(loamy, 5.0, root_depth_cm=30)

        assert plan.available_water == pytest.approx(22.5)
        assert plan.interval_days == 4
        assert plan.amount_per_irrigation == pytest.approx(20.0)
        assert plan.frequency == "Every 4 days"

    def test_high_need_on_sand_is_daily(self, sandy):
        """A large need on sandy soil should require daily watering."""
        plan = IrrigationFrequencyPlanner(depletion_fraction=0.5).plan(sandy, 15.0, root_depth_cm=30)

        assert plan.interval_days == 1
        assert plan.frequency == "Daily"

    def test_interval_capped_at_a_week(self, loamy):
        """Low need should never space events more than a week apart."""
        plan = IrrigationFrequencyPlanner(depletion_fraction=0.5).plan(loamy, 0.5, root_depth_cm=30)

        assert plan.interval_days == MAX_INTERVAL_DAYS
        assert plan.amount_per_irrigation == pytest.approx(3.5)

    def test_explicit_zero_depletion_kept(self, loamy):
        """An explicit zero depletion fraction should not fall back to the default."""
        planner = IrrigationFrequencyPlanner(depletion_fraction=0.0)

        assert planner.depletion_fraction == 0.0
        plan = planner.plan(loamy, 5.0, root_depth_cm=30)
        assert plan.available_water == 0.0
        assert plan.interval_days == 1

    def test_zero_need(self, loamy):
        """No need should give the maximum interval and no water."""
        plan = IrrigationFrequencyPlanner().plan(loamy, 0.0)

        assert plan.interval_days == MAX_INTERVAL_DAYS
        assert plan.amount_per_irrigation == 0.0

    @pytest.mark.parametrize("need", [0.3, 1.0, 2.5, 4.0, 6.5, 9.0, 14.0, 30.0])
    def test_interval_always_in_range(self, loamy, need):
        """Interval should always be between one day and one week."""
        plan = IrrigationFrequencyPlanner().plan(loamy, need)

        assert 1 <= plan.interval_days <= 7
        assert plan.amount_per_irrigation == pytest.approx(need * plan.interval_days)


# ============================================================
# Irrigation Plan Tests
# ============================================================

class TestIrrigationPlanner:
    """End-to-end tests for the daily irrigation plan."""

    def test_plan_fields(self, summer_weather, rice, loamy):
        """The plan should carry every intermediate value."""
        plan = IrrigationPlanner().plan(summer_weather, rice, loamy, days_after_planting=45)

        assert plan.et0 > 0
        assert plan.crop_coefficient == pytest.approx(1.125)
        assert plan.etc == pytest.approx(plan.et0 * plan.crop_coefficient, abs=0.02)
        assert plan.growth_stage == "Development"
        assert plan.irrigation_efficiency == 0.85
        assert plan.method == "FAO-56 Penman-Monteith"

    def test_weekly_total_consistent_with_events(self, summer_weather, rice, loamy):
        """Amount per event x events per week should match the weekly total."""
        plan = IrrigationPlanner().plan(summer_weather, rice, loamy, days_after_planting=80)

        assert plan.amount_per_irrigation * (7 / plan.interval_days) == pytest.approx(
            plan.weekly_total, abs=0.5
        )

    def test_heavy_rain_removes_need(self, summer_weather, rice, loamy):
        """Rain well above crop demand should give zero need."""
        plan = IrrigationPlanner().plan(
            summer_weather, rice, loamy, days_after_planting=45, recent_rainfall=60.0
        )

        assert plan.irrigation_need == 0.0
        assert plan.weekly_total == 0.0
        assert plan.interval_days == MAX_INTERVAL_DAYS

    def test_non_negative_outputs(self, summer_weather, rice, sandy):
        """Every quantity should be non-negative."""
        plan = IrrigationPlanner().plan(
            summer_weather, rice, sandy, days_after_planting=-5, recent_rainfall=-20.0
        )

        assert plan.days_after_planting == 0
        for value in [plan.et0, plan.etc, plan.effective_rainfall, plan.irrigation_need,
                      plan.amount_per_irrigation, plan.weekly_total]:
            assert value >= 0.0
