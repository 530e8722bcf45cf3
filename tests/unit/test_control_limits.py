"""Unit tests for I-MR control limit calculation.

Tests verify:
- Empty limits for fewer than 2 readings
- Exact limits for known scenarios
- Ordering invariants between center lines and limits
- Zero-width band for identical readings
- Determinism and order sensitivity
"""

import random

import pytest

from spectrospc.core.engine.control_limits import calculate_limits
from spectrospc.core.models import ControlLimits

LIMIT_FIELDS = ("mean_x", "ucl_x", "lcl_x", "mean_mr", "ucl_mr", "lcl_mr")


class TestInsufficientData:
    """Test behavior with fewer than 2 readings."""

    @pytest.mark.parametrize("values", [[], [3.5]])
    def test_all_fields_absent(self, readings_factory, values):
        """Verify every field is None for 0 or 1 readings."""
        limits = calculate_limits(readings_factory(values))

        assert limits == ControlLimits()
        assert limits.is_empty
        for name in LIMIT_FIELDS:
            assert getattr(limits, name) is None

    def test_two_readings_fill_every_field(self, readings_factory):
        limits = calculate_limits(readings_factory([1.0, 2.0]))

        assert not limits.is_empty
        for name in LIMIT_FIELDS:
            assert getattr(limits, name) is not None


class TestKnownScenarios:
    """Test limits against hand-calculated values."""

    def test_two_readings(self, readings_factory):
        """[5, 7]: MR-bar = 2, sigma = 2/1.128."""
        limits = calculate_limits(readings_factory([5.0, 7.0]))

        assert limits.mean_x == 6.0
        assert limits.mean_mr == 2.0
        assert limits.ucl_x == pytest.approx(11.319, abs=1e-3)
        assert limits.lcl_x == pytest.approx(0.681, abs=1e-3)
        assert limits.ucl_mr == pytest.approx(6.534)
        assert limits.lcl_mr == 0.0

    def test_identical_readings_give_zero_width_band(self, readings_factory):
        """[10, 10, 10]: all limits collapse onto the center lines."""
        limits = calculate_limits(readings_factory([10.0, 10.0, 10.0]))

        assert limits.mean_x == 10.0
        assert limits.ucl_x == 10.0
        assert limits.lcl_x == 10.0
        assert limits.mean_mr == 0.0
        assert limits.ucl_mr == 0.0
        assert limits.lcl_mr == 0.0
        assert not limits.is_empty

    def test_spike_at_end(self, readings_factory):
        """[1, 1, 1, 1, 100]: MR = [0, 0, 0, 99]."""
        limits = calculate_limits(readings_factory([1, 1, 1, 1, 100]))

        assert limits.mean_x == pytest.approx(20.8)
        assert limits.mean_mr == pytest.approx(24.75)
        sigma = 24.75 / 1.128
        assert limits.ucl_x == pytest.approx(20.8 + 3 * sigma)
        assert limits.lcl_x == pytest.approx(20.8 - 3 * sigma)
        assert limits.ucl_mr == pytest.approx(3.267 * 24.75)

    def test_negative_values(self, readings_factory):
        limits = calculate_limits(readings_factory([-2.0, -4.0, -3.0]))

        assert limits.mean_x == pytest.approx(-3.0)
        assert limits.mean_mr == pytest.approx(1.5)
        assert limits.lcl_x < limits.mean_x < limits.ucl_x


class TestInvariants:
    """Test ordering invariants across arbitrary inputs."""

    @pytest.mark.parametrize("seed", range(10))
    def test_limits_bracket_center_lines(self, readings_factory, seed):
        """lcl_x <= mean_x <= ucl_x and 0 = lcl_mr <= mean_mr <= ucl_mr."""
        rng = random.Random(seed)
        values = [rng.uniform(-100, 100) for _ in range(rng.randint(2, 40))]

        limits = calculate_limits(readings_factory(values))

        assert limits.lcl_x <= limits.mean_x <= limits.ucl_x
        assert limits.lcl_mr == 0.0
        assert limits.lcl_mr <= limits.mean_mr <= limits.ucl_mr

    def test_deterministic(self, readings_factory):
        """Verify repeated calls give identical results."""
        readings = readings_factory([0.45, 0.47, 0.44, 0.52, 0.46, 0.49])

        assert calculate_limits(readings) == calculate_limits(readings)

    def test_input_not_mutated(self, readings_factory):
        readings = readings_factory([1.0, 3.0, 2.0])
        before = list(readings)

        calculate_limits(readings)

        assert readings == before

    def test_reordering_changes_limits(self, readings_factory):
        """Permuting readings changes the moving ranges and the limits."""
        ordered = calculate_limits(readings_factory([1.0, 2.0, 3.0, 4.0]))
        shuffled = calculate_limits(readings_factory([1.0, 3.0, 2.0, 4.0]))

        assert ordered.mean_x == shuffled.mean_x
        assert ordered.mean_mr == pytest.approx(1.0)
        assert shuffled.mean_mr == pytest.approx(5.0 / 3.0)
        assert ordered.ucl_x != shuffled.ucl_x

    def test_as_dict_keeps_absent_fields(self, readings_factory):
        assert calculate_limits(readings_factory([1.0])).as_dict() == dict.fromkeys(LIMIT_FIELDS)
        assert calculate_limits(readings_factory([5.0, 7.0])).as_dict()["lcl_mr"] == 0.0

    def test_accepts_tuple(self, readings_factory):
        readings = readings_factory([5.0, 7.0])

        assert calculate_limits(tuple(readings)) == calculate_limits(readings)
