"""Tests for pdf_generator/units.py — millimetre scaling and engine factors."""

import pytest
from reportlab.lib.units import mm, cm, inch

from pdf_generator.units import MM_TO_PT, normalize_unit, points_per_unit, scale, scale_factor


# =========================================================================
# scale
# =========================================================================

class TestScale:
    @pytest.mark.parametrize("magnitude", [0, 1, 5, 20, 130, 297.5, -15])
    def test_millimetres_identity(self, magnitude):
        assert scale(magnitude, "mm") == magnitude

    @pytest.mark.parametrize("magnitude", [0, 1, 5, 20, 130, 297.5])
    def test_points_factor(self, magnitude):
        assert scale(magnitude, "pt") == pytest.approx(magnitude * 2.834)

    def test_points_factor_constant(self):
        assert MM_TO_PT == 2.834

    def test_points_linear(self):
        assert scale(20 + 130, "pt") == pytest.approx(scale(20, "pt") + scale(130, "pt"))

    def test_default_unit_is_mm(self):
        assert scale(42) == 42

    def test_centimetres(self):
        assert scale(15, "cm") == pytest.approx(1.5)

    def test_inches(self):
        assert scale(25.4, "in") == pytest.approx(1.0)

    def test_unknown_unit(self):
        with pytest.raises(ValueError):
            scale(10, "furlong")


# =========================================================================
# normalize_unit / factors
# =========================================================================

class TestUnitFactors:
    def test_normalize_case_and_spaces(self):
        assert normalize_unit(" MM ") == "mm"

    def test_inch_alias(self):
        assert normalize_unit("inch") == "in"

    def test_empty_unit_rejected(self):
        with pytest.raises(ValueError):
            normalize_unit("")

    def test_scale_factor_mm(self):
        assert scale_factor("mm") == 1.0

    def test_points_per_unit(self):
        assert points_per_unit("mm") == mm
        assert points_per_unit("cm") == cm
        assert points_per_unit("in") == inch
        assert points_per_unit("pt") == 1.0
