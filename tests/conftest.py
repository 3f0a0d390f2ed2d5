# Tests configuration for pdf_generator
import os
import sys
from pathlib import Path

import pytest
import reportlab

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pdf_generator.fonts import FontFamily
from pdf_generator.styles import Color, Margins, PageConfig, TextStyle


RL_FONT_DIR = os.path.join(os.path.dirname(reportlab.__file__), "fonts")


@pytest.fixture
def page_config_mm():
    """A4 portrait, millimetres, 10 mm margins, no font registration."""
    return PageConfig(
        orientation="P",
        unit="mm",
        paper_size="A4",
        margins=Margins(left=10, top=10, right=10),
        register_fonts=False,
    )


@pytest.fixture
def page_config_pt():
    """A4 portrait in points with ~10 mm margins."""
    return PageConfig(
        orientation="P",
        unit="pt",
        paper_size="A4",
        margins=Margins(left=28.34, top=28.34, right=28.34),
        register_fonts=False,
    )


@pytest.fixture
def role_styles():
    """Header, footer, title, subtitle and body styles on core fonts."""
    return {
        "header": TextStyle("Helvetica", "C", "B", 10, Color(40, 40, 40)),
        "footer": TextStyle("Helvetica", "L", "I", 8, Color(200, 0, 0)),
        "title": TextStyle("Times", "C", "B", 16, Color(0, 0, 120)),
        "subtitle": TextStyle("Times", "L", "BI", 13, Color(60, 60, 60)),
        "text": TextStyle("Arial", "J", "", 11, Color(0, 0, 0)),
    }


@pytest.fixture
def vera_family():
    """Font table pointing at the Vera fonts shipped with ReportLab."""
    return FontFamily(
        name="TestVera",
        files={
            "": os.path.join(RL_FONT_DIR, "Vera.ttf"),
            "B": os.path.join(RL_FONT_DIR, "VeraBd.ttf"),
            "I": os.path.join(RL_FONT_DIR, "VeraIt.ttf"),
            "BI": os.path.join(RL_FONT_DIR, "VeraBI.ttf"),
        },
    )


@pytest.fixture
def make_generator(role_styles):
    """Factory building a PdfGenerator from a page config and the role styles."""
    from pdf_generator.generator import PdfGenerator

    def _make(page_config, **kwargs):
        return PdfGenerator(
            page_config,
            role_styles["header"],
            role_styles["footer"],
            role_styles["title"],
            role_styles["subtitle"],
            role_styles["text"],
            **kwargs,
        )

    return _make
