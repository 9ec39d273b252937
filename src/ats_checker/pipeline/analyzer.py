"""Entry point that scores a resume against a job description."""

from __future__ import annotations

import logging

from ats_checker.config import AppConfig
from ats_checker.models.result import AnalysisResult
from ats_checker.pipeline.checks import run_checks
from ats_checker.pipeline.keywords import extract_keywords
from ats_checker.pipeline.matcher import match_keywords
from ats_checker.pipeline.normalizer import normalize
from ats_checker.pipeline.scoring import build_breakdown, compose_score
from ats_checker.pipeline.suggestions import generate_suggestions

logger = logging.getLogger(__name__)


def validate_inputs(resume_text: str, job_description_text: str) -> None:
    """Reject blank inputs before calling analyze()."""
    if not normalize(resume_text):
        raise ValueError("Please provide resume text (upload or paste).")
    if not normalize(job_description_text):
        raise ValueError("Please paste the job description.")


def analyze(
    resume_text: str,
    job_description_text: str,
    file_name: str | None = None,
    *,
    config: AppConfig | None = None,
) -> AnalysisResult:
    """Score resume text against a job description.

    Args:
        resume_text: Plain resume text (already extracted from PDF/DOCX).
        job_description_text: Plain job description text.
        file_name: Original resume file name, if the resume came from a file.
        config: Thresholds and weights; defaults when omitted.

    Never raises for string input. Blank text yields a low but
    well-defined result; callers should run validate_inputs() first.
    """
    config = config or AppConfig()
    resume = normalize(resume_text)
    job_description = normalize(job_description_text)

    keywords = extract_keywords(job_description, config.analysis)
    hits, misses = match_keywords(resume, keywords)
    report = run_checks(resume, file_name, config.analysis)

    breakdown = build_breakdown(len(hits), len(keywords), report)
    score = compose_score(breakdown, config.weights)
    suggestions = generate_suggestions(misses, len(keywords), report, config.analysis)

    logger.debug(
        "Scored resume: %.1f (%d/%d keywords, %d checks)",
        score, len(hits), len(keywords), len(report.checks),
    )
    return AnalysisResult(
        score=score,
        keywords_hit=hits,
        keywords_miss=misses,
        checks=report.checks,
        suggestions=suggestions,
        breakdown=breakdown,
    )
