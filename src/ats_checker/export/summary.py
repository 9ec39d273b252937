"""Plain-text summary and JSON report for an analysis result."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ats_checker.models.result import AnalysisResult

logger = logging.getLogger(__name__)

DEFAULT_JSON_NAME = "ats_report.json"


def display_score(result: AnalysisResult) -> int:
    return round(result.score)


def build_summary(result: AnalysisResult) -> str:
    """Short copy-paste summary of score and keyword coverage."""
    hit = result.keywords_hit
    miss = result.keywords_miss
    return (
        f"ATS Score: {display_score(result)}/100\n"
        f"Matched keywords ({len(hit)}): {', '.join(hit)}\n"
        f"Missing keywords ({len(miss)}): {', '.join(miss)}\n\n"
        "See detailed checks and suggestions in the report."
    )


def build_report_data(result: AnalysisResult) -> dict[str, Any]:
    """Downloadable report: rounded score and upper-case check badges."""
    data = result.model_dump(by_alias=True)
    data["score"] = display_score(result)
    data["checks"] = [
        {"status": check.status.upper(), "message": check.message}
        for check in result.checks
    ]
    return data


def save_json_report(
    result: AnalysisResult,
    output_path: str | Path = DEFAULT_JSON_NAME,
    indent: int = 2,
) -> Path:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(build_report_data(result), ensure_ascii=False, indent=indent),
        encoding="utf-8",
    )
    logger.info("JSON report written to %s", path)
    return path
