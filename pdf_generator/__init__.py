"""
PDF Generator.

Thin convenience layer over ReportLab: page setup, one registered font
family and pre-styled helpers for header, footer, title, subtitle, body
text and signature.

Module Structure:
- styles.py: Page setup and per-role text styling
- fonts.py: Font family tables and registration
- units.py: Millimetre to active-unit conversion
- generator.py: The document generator

Usage:
    from pdf_generator import PdfGenerator, new_pdf_config, TextStyle

    cfg = new_pdf_config("P", "mm", "A4", 10, 10, 10, False)
    style = TextStyle("Helvetica", "L", "", 12)
    pdf = PdfGenerator(cfg, style, style, style, style, style)
    pdf.emit_title("Report")
    pdf.output("report.pdf")
"""
from .styles import PageConfig, Margins, TextStyle, Color, new_pdf_config
from .fonts import FontLoadError, FontFamily, BOOKMAN_OLD_STYLE, dejavu_sans, register_font_family
from .units import scale, points_per_unit, MM_TO_PT
from .generator import PdfGenerator, header_offset, signature_span


__all__ = [
    # Main API
    "PdfGenerator",
    "FontLoadError",
    # Configuration
    "PageConfig",
    "Margins",
    "TextStyle",
    "Color",
    "new_pdf_config",
    # Fonts
    "FontFamily",
    "BOOKMAN_OLD_STYLE",
    "dejavu_sans",
    "register_font_family",
    # Geometry (for advanced usage)
    "scale",
    "points_per_unit",
    "MM_TO_PT",
    "header_offset",
    "signature_span",
]
