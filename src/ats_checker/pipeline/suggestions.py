"""Improvement suggestions derived from match results and check signals."""

from __future__ import annotations

from ats_checker.config import AnalysisConfig
from ats_checker.models.check import CheckReport
from ats_checker.pipeline.scoring import keyword_ratio


def generate_suggestions(
    misses: list[str],
    keyword_count: int,
    report: CheckReport,
    config: AnalysisConfig | None = None,
) -> list[str]:
    config = config or AnalysisConfig()
    suggestions: list[str] = []

    if misses:
        listed = ", ".join(misses[: config.missing_keywords_listed])
        suggestions.append(f"Add or rephrase to include missing keywords: {listed}.")
    if not report.email_ok:
        suggestions.append("Add a professional email at the top.")
    if not report.phone_ok:
        suggestions.append(
            "Include a reachable phone number (with country code if applying internationally)."
        )
    if not report.linkedin_ok:
        suggestions.append("Add your LinkedIn profile URL.")
    if not report.length_ok:
        suggestions.append(
            f"Keep resume to 1–2 pages (approx. {config.min_words}–{config.max_words} words)."
        )
    if report.action_verb_count < config.action_verb_target:
        suggestions.append("Use stronger action verbs (led, built, optimized, delivered, etc.).")
    if report.number_count < config.number_target:
        suggestions.append("Quantify achievements (e.g., 'reduced load time by 35%').")
    if report.has_tables:
        suggestions.append("Avoid tables or multi-column layouts; many ATS read left-to-right only.")
    if report.has_image_hint:
        suggestions.append("Avoid images/logos for key info; ATS won’t parse them.")
    hit_count = keyword_count - len(misses)
    if keyword_ratio(hit_count, keyword_count) < 0.5:
        suggestions.append("Tailor the resume more specifically to this job description.")

    return suggestions
