"""
Tests for core/grid_calculator.py - Column count and width derivation.
"""

import pytest

from core.grid_calculator import GridCalculator, GridConfigError, GridDefinition, calculate


class TestCalculateScenarios:
    """Known widths and the grids they should produce."""

    def test_exact_fit_three_columns(self):
        """(320 + 10) / (100 + 10) is exactly 3, so three columns of 100."""
        grid = calculate(320, 100, 10)
        assert grid.column_count == 3
        assert grid.column_width == pytest.approx(100.0)

    def test_narrow_width_forces_single_column(self):
        """Too narrow for one minimum cell still yields one column."""
        grid = calculate(50, 100, 10)
        assert grid.column_count == 1
        assert grid.column_width == pytest.approx(50.0)

    def test_no_spacing(self):
        grid = calculate(300, 100, 0)
        assert grid == GridDefinition(column_count=3, column_width=pytest.approx(100.0))

    def test_slack_is_spread_over_columns(self):
        """Leftover width widens every column instead of leaving a gap."""
        grid = calculate(350, 100, 10)
        assert grid.column_count == 3
        assert grid.column_width == pytest.approx((350 - 20) / 3)

    def test_just_below_boundary(self):
        """One unit short of fitting a third column drops to two."""
        grid = calculate(319, 100, 10)
        assert grid.column_count == 2
        assert grid.column_width == pytest.approx(154.5)


class TestCalculateEdgeCases:
    """Degenerate widths degrade instead of failing."""

    def test_zero_width(self):
        grid = calculate(0, 100, 10)
        assert grid.column_count == 1
        assert grid.column_width == pytest.approx(0.0)

    def test_negative_width(self):
        """Negative widths use floor, not truncation, and still clamp to 1."""
        grid = calculate(-50, 100, 10)
        assert grid.column_count == 1
        assert grid.column_width == pytest.approx(-50.0)

    @pytest.mark.parametrize("min_width", [0, -1, -100.5])
    def test_non_positive_minimum_rejected(self, min_width):
        with pytest.raises(GridConfigError):
            calculate(320, min_width, 10)

    def test_negative_spacing_rejected(self):
        with pytest.raises(GridConfigError):
            calculate(320, 100, -1)

    @pytest.mark.parametrize(
        "args",
        [
            (float("inf"), 100, 10),
            (float("nan"), 100, 10),
            (320, float("nan"), 10),
            (320, float("inf"), 10),
            (320, 100, float("inf")),
            (320, 100, float("nan")),
        ],
    )
    def test_non_finite_inputs_rejected(self, args):
        """Non-finite inputs raise the same error type as other bad parameters."""
        with pytest.raises(GridConfigError):
            calculate(*args)

    def test_config_error_is_value_error(self):
        """Callers catching ValueError also see grid config errors."""
        assert issubclass(GridConfigError, ValueError)


class TestCalculateProperties:
    """Invariants over a sweep of widths."""

    WIDTHS = [w * 7.5 for w in range(0, 200)]

    def test_column_count_monotonic(self):
        counts = [calculate(w, 96, 8).column_count for w in self.WIDTHS]
        assert counts == sorted(counts)

    @pytest.mark.parametrize("spacing", [0, 4, 12.5])
    def test_full_span(self, spacing):
        """Columns plus gaps always add up to the available width."""
        for width in self.WIDTHS:
            grid = calculate(width, 90, spacing)
            total = grid.column_count * grid.column_width + (grid.column_count - 1) * spacing
            assert total == pytest.approx(width)

    def test_minimum_respected_when_width_allows(self):
        for width in self.WIDTHS:
            if width < 90:
                continue
            grid = calculate(width, 90, 6)
            assert grid.column_width >= 90 - 1e-9

    def test_always_at_least_one_column(self):
        for width in self.WIDTHS:
            assert calculate(width, 500, 20).column_count >= 1

    def test_idempotent(self):
        assert calculate(1234.5, 77, 3) == calculate(1234.5, 77, 3)


class TestGridCalculator:
    """The stateless calculator object used by GridStack."""

    def test_delegates_to_calculate(self):
        calculator = GridCalculator()
        assert calculator.calculate(
            available_width=320, minimum_cell_width=100, cell_spacing=10
        ) == calculate(320, 100, 10)

    def test_grid_definition_is_immutable(self):
        grid = calculate(320, 100, 10)
        with pytest.raises(AttributeError):
            grid.column_count = 5
