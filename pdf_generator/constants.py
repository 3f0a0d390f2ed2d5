"""
Layout constants.

All sizes are authored in millimetres and pass through
``pdf_generator.units.scale`` before reaching the engine.
"""

# ============================================================================
# ALIGNMENT
# ============================================================================

ALIGN_LEFT = "L"
ALIGN_CENTER = "C"
ALIGN_RIGHT = "R"
ALIGN_JUSTIFY = "J"

# ============================================================================
# CONTENT SIZES (mm)
# ============================================================================

SIZE_TITLE_HEIGHT = 10
SIZE_SUBTITLE_HEIGHT = 8
SIZE_TEXT_HEIGHT = 5
SIZE_LINE_BREAK = 5

# Cell inner margin used when drawing header/footer text
SIZE_CELL_MARGIN = 1

# ============================================================================
# HEADER / FOOTER (mm)
# ============================================================================

SIZE_HEADER_PADDING = 6
SIZE_HEADER_CELL_HEIGHT = 9
SIZE_HEADER_LINE = 10

# Footer cell starts 1.5 cm above the page bottom
SIZE_FOOTER_OFFSET = 15
SIZE_FOOTER_CELL_HEIGHT = 10

# Content never flows below this distance from the page bottom
SIZE_PAGE_BREAK_MARGIN = 40

# ============================================================================
# SIGNATURE (mm)
# ============================================================================

SIZE_SIGNATURE_LINE = 130
SIZE_SIGNATURE_DROP = 20
SIZE_SIGNATURE_CELL_HEIGHT = 10

# Vertical advance of the whole signature block
SIZE_SIGNATURE_BLOCK_HEIGHT = 50

# ============================================================================
# CAPTIONS
# ============================================================================

PAGE_NUMBER_CAPTION = "Pág. %d"
