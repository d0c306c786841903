"""
Tests for mapping values to colors.
"""
import math

import pytest
from PySide6.QtGui import QColor

from gral.plots.colors import (
    ColormapMapper,
    HeatMap,
    LinearGradient,
    MappingMode,
    QuasiRandomColors,
    RainbowColors,
    SingleColor,
    to_color,
)

BLACK = QColor(0, 0, 0)
WHITE = QColor(255, 255, 255)


class TestLinearGradient:
    """Tests for gradients and the mapping modes of scaled mappers."""

    def test_interpolates(self):
        grey = LinearGradient(BLACK, WHITE).get(0.5)
        assert grey.redF() == pytest.approx(0.5, abs=0.01)
        assert grey.blueF() == pytest.approx(0.5, abs=0.01)

    def test_end_points(self):
        gradient = LinearGradient(BLACK, QColor(255, 0, 0), WHITE)
        assert gradient.get(0.0).rgb() == BLACK.rgb()
        assert gradient.get(0.5).rgb() == QColor(255, 0, 0).rgb()
        assert gradient.get(1.0).rgb() == WHITE.rgb()

    def test_needs_two_colors(self):
        with pytest.raises(ValueError):
            LinearGradient(BLACK)

    def test_repeat_clamps(self):
        gradient = LinearGradient(BLACK, WHITE)
        assert gradient.get(1.5).rgb() == WHITE.rgb()
        assert gradient.get(-3.0).rgb() == BLACK.rgb()

    def test_omit(self):
        gradient = LinearGradient(BLACK, WHITE, mode=MappingMode.OMIT)
        assert gradient.get(1.5) is None
        assert gradient.get(1.0) is not None

    def test_circular(self):
        gradient = LinearGradient(BLACK, WHITE, mode=MappingMode.CIRCULAR)
        assert gradient.get(1.25).redF() == pytest.approx(0.25, abs=0.01)

    def test_non_finite_values(self):
        gradient = LinearGradient(BLACK, WHITE)
        assert gradient.get(math.nan) is None

    def test_range(self):
        gradient = LinearGradient(BLACK, WHITE)
        gradient.set_range(10.0, 20.0)
        assert gradient.scale_value(15.0) == pytest.approx(0.5)
        assert gradient.get(20.0).rgb() == WHITE.rgb()

    def test_zero_scale(self):
        gradient = LinearGradient(BLACK, WHITE)
        gradient.set_range(1.0, 1.0)
        assert gradient.get(1.0) is None


class TestPalettes:
    """Tests for the predefined mappers."""

    def test_single_color(self):
        mapper = SingleColor((10, 20, 30))
        assert mapper.get(0.0).rgb() == QColor(10, 20, 30).rgb()
        assert mapper.get(123.0).rgb() == QColor(10, 20, 30).rgb()

    def test_to_color(self):
        assert to_color("#ff0000").rgb() == QColor(255, 0, 0).rgb()
        assert to_color((0, 255, 0, 128)).alpha() == 128

    def test_heat_map(self):
        heat = HeatMap()
        assert heat.get(0.0).rgb() == BLACK.rgb()
        assert heat.get(1.0).rgb() == WHITE.rgb()

    def test_rainbow_starts_red(self):
        red = RainbowColors().get(0.0)
        assert (red.red(), red.green(), red.blue()) == (255, 0, 0)

    def test_quasi_random_is_reproducible(self):
        colors = QuasiRandomColors()
        assert colors.get(3).rgb() == colors.get(3).rgb()
        assert colors.get(3).rgb() == QuasiRandomColors().get(3).rgb()
        assert colors.get(1).rgb() != colors.get(2).rgb()

    def test_quasi_random_seed(self):
        assert QuasiRandomColors(seed=0.3).get(1).rgb() != QuasiRandomColors().get(1).rgb()

    def test_quasi_random_follows_settings(self):
        colors = QuasiRandomColors()
        before = colors.get(1).rgb()
        colors.seed = 0.3
        assert colors.get(1).rgb() == QuasiRandomColors(seed=0.3).get(1).rgb()
        assert colors.get(1).rgb() != before

    def test_colormap(self):
        first = ColormapMapper("viridis").get(0.0)
        assert first.redF() == pytest.approx(0.267, abs=0.01)
        assert first.blueF() == pytest.approx(0.329, abs=0.01)

    def test_unknown_colormap(self):
        with pytest.raises(ValueError):
            ColormapMapper("no-such-colormap")
