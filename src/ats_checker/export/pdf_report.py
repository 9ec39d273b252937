"""PDF report renderer using fpdf2 (pure Python, no system deps)."""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from ats_checker.export.summary import display_score
from ats_checker.models.result import AnalysisResult

logger = logging.getLogger(__name__)

DEFAULT_PDF_NAME = "ATS_Report.pdf"

# Unicode-capable font search paths (macOS, Linux, Windows)
_UNICODE_FONT_PATHS = [
    "/Library/Fonts/Arial Unicode.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    "C:/Windows/Fonts/arial.ttf",
]


def _find_unicode_font() -> str | None:
    for path in _UNICODE_FONT_PATHS:
        if Path(path).exists():
            return path
    return None


def render_pdf_report(result: AnalysisResult, title: str = "ATS Report") -> bytes:
    """Render score, keywords, checks and suggestions to PDF bytes."""
    pdf = FPDF()
    pdf.set_auto_page_break(auto=True, margin=20)
    pdf.set_margins(10, 10, 10)
    pdf.add_page()

    font_name = "Helvetica"
    unicode_font = _find_unicode_font()
    if unicode_font:
        try:
            pdf.add_font("ReportFont", "", unicode_font)
            font_name = "ReportFont"
        except (OSError, RuntimeError):
            logger.debug("Failed to load font %s", unicode_font)

    def heading(text: str, size: int) -> None:
        pdf.ln(3)
        pdf.set_font_size(size)
        pdf.multi_cell(0, size * 0.6, _safe_text(text, pdf), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_font_size(10)

    def body(text: str) -> None:
        pdf.multi_cell(0, 6, _safe_text(text, pdf), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    pdf.set_font(font_name, size=10)
    heading(title, 18)
    pdf.line(pdf.l_margin, pdf.get_y(), pdf.w - pdf.r_margin, pdf.get_y())
    heading(f"ATS Score: {display_score(result)}/100", 14)

    heading(f"Matched keywords ({len(result.keywords_hit)})", 12)
    body(", ".join(result.keywords_hit) or "-")
    heading(f"Missing keywords ({len(result.keywords_miss)})", 12)
    body(", ".join(result.keywords_miss) or "-")

    heading("Checks", 12)
    for check in result.checks:
        body(f"[{check.status.upper()}] {check.message}")

    heading("Suggestions", 12)
    for suggestion in result.suggestions:
        body(f"  - {suggestion}")

    buf = BytesIO()
    pdf.output(buf)
    return buf.getvalue()


def save_pdf(pdf_bytes: bytes, output_path: str | Path = DEFAULT_PDF_NAME) -> Path:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(pdf_bytes)
    logger.info("PDF report written to %s", path)
    return path


def _safe_text(text: str, pdf: FPDF) -> str:
    """Ensure text is encodable by the current font. Replace if needed."""
    if pdf.is_ttf_font:
        return text
    # Built-in fonts (Helvetica etc.) only cover latin-1
    try:
        text.encode("latin-1")
        return text
    except UnicodeEncodeError:
        return text.encode("latin-1", errors="replace").decode("latin-1")
