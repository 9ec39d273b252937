from __future__ import annotations

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from ats_checker.export.summary import display_score
from ats_checker.models.result import AnalysisResult

logger = logging.getLogger(__name__)

BASE_TEMPLATE_DIR = Path(__file__).parent


def render_html_report(result: AnalysisResult, title: str = "ATS Report") -> str:
    """Render an analysis result to a standalone HTML page."""
    env = Environment(
        loader=FileSystemLoader(str(BASE_TEMPLATE_DIR)),
        autoescape=True,
    )
    template = env.get_template("report.html")
    return template.render(title=title, score=display_score(result), result=result)


def save_html(html_content: str, output_path: str | Path) -> Path:
    """Save HTML content to file."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html_content, encoding="utf-8")
    logger.info("HTML report written to %s", path)
    return path
