"""
Font registration.

Registers the four style variants of a single TrueType family with the
engine so role styles can reference the family by name.
"""
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont, TTFError

from .config import Config

logger = logging.getLogger(__name__)


class FontLoadError(Exception):
    """A font file was missing, unreadable or rejected by the engine."""


# Style variant keys, matching TextStyle.style flags
REGULAR = ""
BOLD = "B"
ITALIC = "I"
BOLD_ITALIC = "BI"

_FACE_SUFFIX = {
    REGULAR: "",
    BOLD: "-Bold",
    ITALIC: "-Italic",
    BOLD_ITALIC: "-BoldItalic",
}


@dataclass(frozen=True)
class FontFamily:
    """A family name and the font file for each style variant."""
    name: str
    files: Mapping[str, str]

    def face_name(self, variant: str) -> str:
        return f"{self.name}{_FACE_SUFFIX[variant]}"


BOOKMAN_OLD_STYLE = FontFamily(
    name="Bookman",
    files={
        REGULAR: "./font/bookman-old-style.ttf",
        BOLD: "./font/bookman-old-style-bold.ttf",
        BOLD_ITALIC: "./font/bookman-old-style-bold-italic.ttf",
        ITALIC: "./font/bookman-old-style-italic.ttf",
    },
)


def dejavu_sans() -> FontFamily:
    """DejaVu Sans table built from the fonts bundled with matplotlib."""
    import matplotlib
    font_dir = os.path.join(matplotlib.get_data_path(), "fonts", "ttf")

    return FontFamily(
        name="DejaVuSans",
        files={
            REGULAR: os.path.join(font_dir, "DejaVuSans.ttf"),
            BOLD: os.path.join(font_dir, "DejaVuSans-Bold.ttf"),
            ITALIC: os.path.join(font_dir, "DejaVuSans-Oblique.ttf"),
            BOLD_ITALIC: os.path.join(font_dir, "DejaVuSans-BoldOblique.ttf"),
        },
    )


def _resolve(path: str, base_dir: Union[str, Path]) -> Path:
    candidate = Path(path)
    if candidate.is_absolute():
        return candidate
    return Path(base_dir) / candidate


def register_font_family(family: FontFamily = BOOKMAN_OLD_STYLE,
                         base_dir: Optional[Union[str, Path]] = None) -> Dict[str, str]:
    """Register all four variants of ``family`` with the engine.

    Args:
        family: Font table to register
        base_dir: Directory for relative font paths (default: Config.FONT_DIR)

    Returns:
        Dict mapping style variant to the registered face name.

    Raises:
        FontLoadError: If any variant is missing or cannot be loaded.
    """
    base_dir = Config.FONT_DIR if base_dir is None else base_dir
    missing = set(_FACE_SUFFIX) - set(family.files)
    if missing:
        raise FontLoadError(f"Font family {family.name} has no file for variants {sorted(missing)}")

    faces = {}
    for variant, path in family.files.items():
        font_path = _resolve(path, base_dir)
        face = family.face_name(variant)
        if not font_path.is_file():
            logger.error("Font file not found: %s", font_path)
            raise FontLoadError(f"Font file not found: {font_path}")
        try:
            pdfmetrics.registerFont(TTFont(face, str(font_path)))
        except (TTFError, OSError) as e:
            logger.error("Font %s rejected: %s", font_path, e)
            raise FontLoadError(f"Cannot load font {font_path}: {e}") from e
        faces[variant] = face

    pdfmetrics.registerFontFamily(
        family.name,
        normal=faces[REGULAR],
        bold=faces[BOLD],
        italic=faces[ITALIC],
        boldItalic=faces[BOLD_ITALIC],
    )
    logger.info("Registered font family %s", family.name)
    return faces
