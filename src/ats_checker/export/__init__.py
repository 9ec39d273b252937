"""Report export: summary text, JSON, HTML and PDF."""
from ats_checker.export.html_report import render_html_report, save_html
from ats_checker.export.pdf_report import render_pdf_report, save_pdf
from ats_checker.export.summary import (
    build_report_data,
    build_summary,
    save_json_report,
)

__all__ = [
    "build_report_data",
    "build_summary",
    "render_html_report",
    "render_pdf_report",
    "save_html",
    "save_json_report",
    "save_pdf",
]
