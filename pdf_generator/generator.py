"""
PDF Generator Module.

Wraps a ReportLab canvas with pre-filled styling for the usual parts of a
simple document: default header, footer with page numbering, title,
subtitle, body text and a signature line.

Content flows top-down through a Frame per page. The header handler runs
when a page starts receiving content, the footer handler when it closes.
Coordinates handed in and out use the configured unit measured from the
top-left corner; conversion to points happens at the canvas boundary.
"""
from io import BytesIO
from pathlib import Path
from xml.sax.saxutils import escape
import logging
from typing import Callable, List, Optional, Tuple, Union

from reportlab.pdfgen.canvas import Canvas
from reportlab.platypus import Flowable, Frame, Paragraph, Spacer
from reportlab.platypus.doctemplate import LayoutError

from .constants import (
    ALIGN_CENTER, ALIGN_RIGHT,
    SIZE_TITLE_HEIGHT, SIZE_SUBTITLE_HEIGHT, SIZE_TEXT_HEIGHT, SIZE_LINE_BREAK,
    SIZE_CELL_MARGIN, SIZE_HEADER_PADDING, SIZE_HEADER_CELL_HEIGHT, SIZE_HEADER_LINE,
    SIZE_FOOTER_OFFSET, SIZE_FOOTER_CELL_HEIGHT, SIZE_PAGE_BREAK_MARGIN,
    SIZE_SIGNATURE_LINE, SIZE_SIGNATURE_DROP, SIZE_SIGNATURE_CELL_HEIGHT,
    SIZE_SIGNATURE_BLOCK_HEIGHT,
    PAGE_NUMBER_CAPTION,
)
from .fonts import BOOKMAN_OLD_STYLE, FontFamily, FontLoadError, register_font_family
from .styles import PageConfig, TextStyle, create_paragraph_style
from .units import normalize_unit, points_per_unit, scale

logger = logging.getLogger(__name__)

PageHandler = Callable[[Canvas], None]


def header_offset(page_width: float, text_width: float, unit: str = "mm") -> float:
    """Left edge of a header cell centered on the page.

    The cell is the rendered text width plus a fixed horizontal padding.
    """
    return (page_width - (text_width + scale(SIZE_HEADER_PADDING, unit))) / 2


def signature_span(page_width: float, left: float, right: float,
                   unit: str = "mm") -> Tuple[float, float]:
    """Start and end x of the signature line, centered between the margins."""
    line_size = scale(SIZE_SIGNATURE_LINE, unit)
    available_space = (page_width - left - right - line_size) / 2
    start = left + available_space
    return start, start + line_size


def _markup(text: str) -> str:
    """Escape text for Paragraph markup, keeping explicit line breaks."""
    return escape(text).replace("\n", "<br/>")


class SignatureBlock(Flowable):
    """Horizontal signature line with a centered name underneath.

    All measures are in points, relative to the flowable's own box.
    """

    def __init__(self, name, offset, length, drop, cell_height, font_name, font_size, color,
                 block_height=0):
        Flowable.__init__(self)
        self.name = name
        self.offset = offset
        self.length = length
        self.drop = drop
        self.cell_height = cell_height
        self.font_name = font_name
        self.font_size = font_size
        self.color = color
        self.block_height = block_height

    def wrap(self, availWidth, availHeight):
        self.width = availWidth
        self.height = max(self.block_height, self.drop + self.cell_height)
        return self.width, self.height

    def draw(self):
        canv = self.canv
        line_y = self.height - self.drop
        canv.line(self.offset, line_y, self.offset + self.length, line_y)

        canv.setFont(self.font_name, self.font_size)
        canv.setFillColor(self.color)
        baseline = line_y - self.cell_height / 2 - 0.3 * self.font_size
        canv.drawCentredString(self.width / 2, baseline, self.name)


class PdfGenerator:
    """Document generator bound to one page setup and five role styles.

    Args:
        page_config: Orientation, unit, paper size, margins, font flag
        txt_cfg_header: Header role style
        txt_cfg_footer: Footer role style
        txt_cfg_title: Title role style
        txt_cfg_subtitle: Subtitle role style
        txt_cfg_text: Body text role style
        font_family: Font table registered when page_config.register_fonts is set
        font_dir: Base directory for relative font paths

    Raises:
        FontLoadError: If font registration was requested and failed.
    """

    def __init__(
        self,
        page_config: PageConfig,
        txt_cfg_header: TextStyle,
        txt_cfg_footer: TextStyle,
        txt_cfg_title: TextStyle,
        txt_cfg_subtitle: TextStyle,
        txt_cfg_text: TextStyle,
        font_family: FontFamily = BOOKMAN_OLD_STYLE,
        font_dir: Optional[Union[str, Path]] = None,
    ):
        self.page_config = page_config
        self.txt_cfg_header = txt_cfg_header
        self.txt_cfg_footer = txt_cfg_footer
        self.txt_cfg_title = txt_cfg_title
        self.txt_cfg_subtitle = txt_cfg_subtitle
        self.txt_cfg_text = txt_cfg_text

        self.unit = normalize_unit(page_config.unit)
        self._k = points_per_unit(self.unit)

        if page_config.register_fonts:
            try:
                register_font_family(font_family, base_dir=font_dir)
            except FontLoadError as e:
                logger.error("Font registration failed, generator not created: %s", e)
                raise FontLoadError("font loading failed") from e

        self._page_width_pt, self._page_height_pt = page_config.page_size_points()
        self._buffer = BytesIO()
        self.canvas = Canvas(self._buffer, pagesize=(self._page_width_pt, self._page_height_pt))

        margins = page_config.margins
        self.left_margin = margins.left
        self.top_margin = margins.top
        self.right_margin = margins.right
        self.page_break_margin = self.scale(SIZE_PAGE_BREAK_MARGIN)

        self._header_func: Optional[PageHandler] = None
        self._footer_func: Optional[PageHandler] = None
        self._frame: Optional[Frame] = None
        self._frame_empty = True
        self._page_count = 0
        self._pdf_bytes: Optional[bytes] = None

        logger.debug(
            "Opened page 1 (%s, %s, %s)",
            page_config.paper_size, page_config.orientation, self.unit,
        )

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def scale(self, magnitude: float) -> float:
        """Convert a millimetre constant into this document's unit."""
        return scale(magnitude, self.unit)

    def _pt(self, value: float) -> float:
        return value * self._k

    @property
    def page_width(self) -> float:
        return self._page_width_pt / self._k

    @property
    def page_height(self) -> float:
        return self._page_height_pt / self._k

    @property
    def page_size(self) -> Tuple[float, float]:
        return self.page_width, self.page_height

    @property
    def page_no(self) -> int:
        """Number of the page currently being written."""
        if self._pdf_bytes is not None:
            return self._page_count
        return self.canvas.getPageNumber()

    @property
    def y(self) -> float:
        """Vertical cursor, measured from the top of the page."""
        if self._frame is None:
            return self._content_top()
        return (self._page_height_pt - self._frame_cursor()) / self._k

    def _frame_cursor(self) -> float:
        # Frame keeps its current position (points from the page bottom) in the
        # private _y attribute; no public accessor exists in ReportLab.
        return self._frame._y

    def _content_top(self) -> float:
        top = self.top_margin
        if self._header_func is not None:
            top += self.scale(SIZE_HEADER_LINE)
        return top

    # ------------------------------------------------------------------
    # Page handling
    # ------------------------------------------------------------------

    def _run_handler(self, handler: Optional[PageHandler]):
        if handler is None:
            return
        self.canvas.saveState()
        handler(self.canvas)
        self.canvas.restoreState()

    def _begin_page(self):
        self._run_handler(self._header_func)

        top = self._content_top()
        width = self.page_width - self.left_margin - self.right_margin
        height = self.page_height - top - self.page_break_margin
        self._frame = Frame(
            self._pt(self.left_margin),
            self._pt(self.page_break_margin),
            self._pt(width),
            self._pt(height),
            leftPadding=0,
            bottomPadding=0,
            rightPadding=0,
            topPadding=0,
            showBoundary=0,
        )
        self._frame_empty = True

    def _end_page(self):
        if self._frame is None:
            self._begin_page()
        self._run_handler(self._footer_func)

    def _current_frame(self) -> Frame:
        if self._frame is None:
            self._begin_page()
        return self._frame

    def _ensure_open(self):
        if self._pdf_bytes is not None:
            raise RuntimeError("Document already finalized")

    def add_page(self):
        """Close the current page and start a new one."""
        self._ensure_open()
        self._end_page()
        self.canvas.showPage()
        self._frame = None
        logger.debug("Opened page %d", self.canvas.getPageNumber())

    def _flow(self, flowables: List[Flowable]):
        """Place flowables, splitting them and breaking pages as needed."""
        self._ensure_open()
        pending = list(flowables)
        while pending:
            frame = self._current_frame()
            flowable = pending.pop(0)
            if frame.add(flowable, self.canvas, trySplit=1):
                self._frame_empty = False
                continue

            parts = frame.split(flowable, self.canvas)
            if parts:
                if not frame.add(parts[0], self.canvas, trySplit=0):
                    raise LayoutError(f"Splitting error on page {self.page_no}")
                pending[:0] = parts[1:]
            elif self._frame_empty:
                raise LayoutError(f"{flowable.identity()} too large on page {self.page_no}")
            else:
                pending.insert(0, flowable)
            self.add_page()

    # ------------------------------------------------------------------
    # Header / footer
    # ------------------------------------------------------------------

    def _draw_cell(self, canvas: Canvas, x: float, y: float, w: float, h: float,
                   text: str, align: str, font_size: float):
        """Draw one line of text inside a cell whose top-left is (x, y)."""
        baseline = y + h / 2 + 0.3 * font_size / self._k
        y_pt = self._page_height_pt - self._pt(baseline)
        margin = self.scale(SIZE_CELL_MARGIN)

        align = align.upper()
        if align == ALIGN_RIGHT:
            canvas.drawRightString(self._pt(x + w - margin), y_pt, text)
        elif align == ALIGN_CENTER:
            canvas.drawCentredString(self._pt(x + w / 2), y_pt, text)
        else:
            canvas.drawString(self._pt(x + margin), y_pt, text)

    def set_default_header(self, header_text: str):
        """Install a header drawn, centered, at the top of every page."""
        cfg = self.txt_cfg_header
        color = cfg.color

        def draw_header(canvas: Canvas):
            canvas.setFont(cfg.font_name, cfg.size)
            canvas.setFillColorRGB(*color.fractions())

            # Calculate width of header and position
            text_width = canvas.stringWidth(header_text, cfg.font_name, cfg.size) / self._k
            wd = text_width + self.scale(SIZE_HEADER_PADDING)
            x = header_offset(self.page_width, text_width, self.unit)

            self._draw_cell(canvas, x, self.top_margin, wd, self.scale(SIZE_HEADER_CELL_HEIGHT),
                            header_text, cfg.align, cfg.size)

        self._header_func = draw_header

    def set_default_footer(self, text: str, page_number: bool):
        """Install a footer with optional right-aligned page number."""
        cfg = self.txt_cfg_footer
        color = cfg.color

        def draw_footer(canvas: Canvas):
            # Position at 1.5 cm from bottom
            y = self.page_height - self.scale(SIZE_FOOTER_OFFSET)
            h = self.scale(SIZE_FOOTER_CELL_HEIGHT)
            width = self.page_width - self.left_margin - self.right_margin

            canvas.setFont(cfg.font_name, cfg.size)
            canvas.setFillColorRGB(*color.fractions())
            self._draw_cell(canvas, self.left_margin, y, width, h, text, cfg.align, cfg.size)

            if page_number:
                # page number only black
                canvas.setFillColorRGB(0, 0, 0)
                caption = PAGE_NUMBER_CAPTION % canvas.getPageNumber()
                self._draw_cell(canvas, self.left_margin, y, width, h, caption, ALIGN_RIGHT, cfg.size)

        self._footer_func = draw_footer

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def _emit_heading(self, text: str, cfg: TextStyle, height: float, name: str):
        style = create_paragraph_style(name, cfg, leading=self._pt(self.scale(height)))
        self._flow([
            Paragraph(_markup(text), style),
            Spacer(0, self._pt(self.scale(SIZE_LINE_BREAK))),
        ])

    def emit_title(self, title: str):
        self._emit_heading(title, self.txt_cfg_title, SIZE_TITLE_HEIGHT, "Title")

    def emit_subtitle(self, subtitle: str):
        self._emit_heading(subtitle, self.txt_cfg_subtitle, SIZE_SUBTITLE_HEIGHT, "Subtitle")

    def emit_text(self, text: str):
        """Word-wrapped body text across the content width, then one blank line."""
        leading = self._pt(self.scale(SIZE_TEXT_HEIGHT))
        if not text:
            # An empty paragraph still takes one line
            self._flow([Spacer(0, leading), Spacer(0, leading)])
            return
        style = create_paragraph_style("Text", self.txt_cfg_text, leading=leading, space_after=leading)
        self._flow([Paragraph(_markup(text), style)])

    def emit_signature(self, signature_name: str):
        """Centered signature line below the cursor with the name underneath."""
        cfg = self.txt_cfg_text
        start, end = signature_span(self.page_width, self.left_margin, self.right_margin, self.unit)

        self._flow([SignatureBlock(
            signature_name,
            offset=self._pt(start - self.left_margin),
            length=self._pt(end - start),
            drop=self._pt(self.scale(SIZE_SIGNATURE_DROP)),
            cell_height=self._pt(self.scale(SIZE_SIGNATURE_CELL_HEIGHT)),
            font_name=cfg.font_name,
            font_size=cfg.size,
            color=cfg.color.to_reportlab(),
            block_height=self._pt(self.scale(SIZE_SIGNATURE_BLOCK_HEIGHT)),
        )])

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def output_bytes(self) -> bytes:
        """Close the last page and return the finished PDF."""
        if self._pdf_bytes is None:
            self._end_page()
            self._page_count = self.canvas.getPageNumber()
            self.canvas.showPage()
            self.canvas.save()
            self._pdf_bytes = self._buffer.getvalue()
            self._buffer.close()
            logger.info("PDF finalized: %d page(s)", self._page_count)
        return self._pdf_bytes

    def output(self, output_path: Union[str, Path]) -> bytes:
        """Finalize and write the PDF to ``output_path``."""
        pdf_bytes = self.output_bytes()
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "wb") as f:
            f.write(pdf_bytes)
        logger.info("PDF saved to: %s", output_path)
        return pdf_bytes
