"""
Unit conversion helpers.

Layout constants are written once in millimetres; ``scale`` converts them
into whatever unit the document was configured with. ``points_per_unit``
is the factor the engine boundary uses to turn that unit into PDF points.
"""
from reportlab.lib.units import cm, inch, mm

MM_TO_PT = 2.834

UNIT_MM = "mm"
UNIT_PT = "pt"
UNIT_CM = "cm"
UNIT_IN = "in"

_MM_SCALE = {
    UNIT_MM: 1.0,
    UNIT_PT: MM_TO_PT,
    UNIT_CM: 1 / 10,
    UNIT_IN: 1 / 25.4,
}

_POINTS = {
    UNIT_MM: mm,
    UNIT_PT: 1.0,
    UNIT_CM: cm,
    UNIT_IN: inch,
}


def normalize_unit(unit: str) -> str:
    """Return the canonical unit key, raising ValueError if unsupported."""
    key = (unit or "").strip().lower()
    if key == "inch":
        key = UNIT_IN
    if key not in _MM_SCALE:
        raise ValueError(f"Unsupported unit: {unit!r}")
    return key


def scale_factor(unit: str) -> float:
    """Multiplier that turns millimetres into ``unit``."""
    return _MM_SCALE[normalize_unit(unit)]


def scale(magnitude: float, unit: str = UNIT_MM) -> float:
    """Convert a millimetre magnitude into ``unit``.

    Identity for millimetres; multiplied by ``MM_TO_PT`` for points.
    """
    factor = scale_factor(unit)
    if factor == 1.0:
        return magnitude
    return magnitude * factor


def points_per_unit(unit: str) -> float:
    """Number of PDF points in one ``unit``."""
    return _POINTS[normalize_unit(unit)]
