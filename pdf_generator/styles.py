"""
PDF Styles Module.

Page setup and per-role text styling for the document generator.
Plain value objects; turning them into engine calls is left to the generator.
"""
from reportlab.lib.pagesizes import A3, A4, A5, LEGAL, LETTER, landscape, portrait
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.colors import Color as RLColor
from reportlab.lib.enums import TA_LEFT, TA_CENTER, TA_RIGHT, TA_JUSTIFY
from reportlab.lib.fonts import tt2ps
from dataclasses import dataclass, field
from typing import Tuple

from .config import Config
from .constants import ALIGN_LEFT, ALIGN_CENTER, ALIGN_RIGHT, ALIGN_JUSTIFY
from .units import normalize_unit


# ============================================================================
# PAGE CONFIGURATION
# ============================================================================

ORIENTATION_PORTRAIT = "P"
ORIENTATION_LANDSCAPE = "L"

_ORIENTATIONS = {
    "p": ORIENTATION_PORTRAIT,
    "portrait": ORIENTATION_PORTRAIT,
    "l": ORIENTATION_LANDSCAPE,
    "landscape": ORIENTATION_LANDSCAPE,
}

PAPER_SIZES = {
    "a3": A3,
    "a4": A4,
    "a5": A5,
    "letter": LETTER,
    "legal": LEGAL,
}


@dataclass(frozen=True)
class Margins:
    """Page margins in the configured unit."""
    left: float = 10.0
    top: float = 10.0
    right: float = 10.0


@dataclass(frozen=True)
class PageConfig:
    """Page geometry handed to the generator at construction."""
    orientation: str = ORIENTATION_PORTRAIT
    unit: str = "mm"
    paper_size: str = "A4"
    margins: Margins = field(default_factory=Margins)
    register_fonts: bool = False

    def __post_init__(self):
        if self.orientation.strip().lower() not in _ORIENTATIONS:
            raise ValueError(f"Unsupported orientation: {self.orientation!r}")
        if self.paper_size.strip().lower() not in PAPER_SIZES:
            raise ValueError(f"Unsupported paper size: {self.paper_size!r}")
        normalize_unit(self.unit)

    @property
    def is_landscape(self) -> bool:
        return _ORIENTATIONS[self.orientation.strip().lower()] == ORIENTATION_LANDSCAPE

    def page_size_points(self) -> Tuple[float, float]:
        """Page (width, height) in PDF points, orientation applied."""
        size = PAPER_SIZES[self.paper_size.strip().lower()]
        return landscape(size) if self.is_landscape else portrait(size)


def new_pdf_config(
    orientation: str,
    units: str,
    paper_size: str,
    left_margin: float,
    right_margin: float,
    top_margin: float,
    register_fonts: bool,
) -> PageConfig:
    """Build a PageConfig from positional values (note: left, right, top order).

    An empty paper size falls back to ``Config.DEFAULT_PAPER_SIZE``.
    """
    return PageConfig(
        orientation=orientation,
        unit=units,
        paper_size=paper_size or Config.DEFAULT_PAPER_SIZE,
        margins=Margins(left=left_margin, top=top_margin, right=right_margin),
        register_fonts=register_fonts,
    )


# ============================================================================
# TEXT STYLING
# ============================================================================

ALIGNMENTS = {
    ALIGN_LEFT: TA_LEFT,
    ALIGN_CENTER: TA_CENTER,
    ALIGN_RIGHT: TA_RIGHT,
    ALIGN_JUSTIFY: TA_JUSTIFY,
}

# Core font aliases; Arial has no metrics of its own in the engine
FONT_ALIASES = {
    "arial": "Helvetica",
}


@dataclass(frozen=True)
class Color:
    """RGB color, each channel 0-255."""
    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self):
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range 0-255: {channel}")

    def fractions(self) -> Tuple[float, float, float]:
        return self.r / 255, self.g / 255, self.b / 255

    def to_reportlab(self) -> RLColor:
        return RLColor(*self.fractions())


BLACK = Color(0, 0, 0)


@dataclass(frozen=True)
class TextStyle:
    """Styling for one document role (header, footer, title, subtitle, body).

    ``align`` is one of "L", "C", "R", "J" (empty means left).
    ``style`` combines "B" and "I"; empty is regular.
    """
    font_family: str = "Helvetica"
    align: str = ALIGN_LEFT
    style: str = ""
    size: float = 12
    color: Color = BLACK

    def __post_init__(self):
        if self.align.upper() not in ALIGNMENTS and self.align != "":
            raise ValueError(f"Unsupported alignment: {self.align!r}")
        unknown = set(self.style.upper()) - {"B", "I"}
        if unknown:
            raise ValueError(f"Unsupported style flags: {''.join(sorted(unknown))!r}")

    @property
    def bold(self) -> bool:
        return "B" in self.style.upper()

    @property
    def italic(self) -> bool:
        return "I" in self.style.upper()

    @property
    def alignment(self) -> int:
        return ALIGNMENTS.get(self.align.upper(), TA_LEFT)

    @property
    def font_name(self) -> str:
        """Engine face name for this family and style flags."""
        family = FONT_ALIASES.get(self.font_family.lower(), self.font_family)
        return tt2ps(family, int(self.bold), int(self.italic))


def create_paragraph_style(name: str, text_style: TextStyle, leading: float,
                           space_after: float = 0) -> ParagraphStyle:
    """Build a ParagraphStyle for ``text_style``.

    Args:
        name: Style name
        text_style: Role styling
        leading: Line height in points
        space_after: Extra space after the paragraph in points

    Returns:
        ParagraphStyle ready for a Paragraph flowable.
    """
    return ParagraphStyle(
        name,
        fontName=text_style.font_name,
        fontSize=text_style.size,
        leading=leading,
        textColor=text_style.color.to_reportlab(),
        alignment=text_style.alignment,
        spaceBefore=0,
        spaceAfter=space_after,
    )
