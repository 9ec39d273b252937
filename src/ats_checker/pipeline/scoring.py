"""Weighted composite score."""

from __future__ import annotations

from ats_checker.config import ScoringWeights
from ats_checker.models.check import CheckReport
from ats_checker.models.result import ScoreBreakdown
from ats_checker.pipeline.patterns import SECTIONS

ACTION_VERB_SATURATION = 10  # 10+ verbs => 100
NUMBER_SATURATION = 12  # 12+ numbers => 100
TABLE_PENALTY = 15
IMAGE_PENALTY = 10
SHORT_OR_LONG_LENGTH_SCORE = 40


def keyword_ratio(hit_count: int, keyword_count: int) -> float:
    return hit_count / max(1, keyword_count)


def build_breakdown(hit_count: int, keyword_count: int, report: CheckReport) -> ScoreBreakdown:
    """Derive the eight 0-100 sub-scores from match results and check signals."""
    return ScoreBreakdown(
        keyword_coverage=keyword_ratio(hit_count, keyword_count) * 100,
        section_coverage=report.section_hits / len(SECTIONS) * 100,
        formatting_penalty=(
            (TABLE_PENALTY if report.has_tables else 0)
            + (IMAGE_PENALTY if report.has_image_hint else 0)
        ),
        action_verb_score=min(100, report.action_verb_count / ACTION_VERB_SATURATION * 100),
        contact_coverage=(
            (34 if report.email_ok else 0)
            + (33 if report.phone_ok else 0)
            + (33 if report.linkedin_ok else 0)
        ),
        length_score=100 if report.length_ok else SHORT_OR_LONG_LENGTH_SCORE,
        impact_score=min(100, report.number_count / NUMBER_SATURATION * 100),
        file_name_score=report.file_score * 50,
    )


def compose_score(breakdown: ScoreBreakdown, weights: ScoringWeights | None = None) -> float:
    """Weighted sum of the sub-scores, clamped to 0-100."""
    w = weights or ScoringWeights()
    total = (
        w.keyword_coverage * breakdown.keyword_coverage
        + w.section_coverage * breakdown.section_coverage
        + w.formatting * (100 - breakdown.formatting_penalty)
        + w.action_verbs * breakdown.action_verb_score
        + w.contact * breakdown.contact_coverage
        + w.length * breakdown.length_score
        + w.impact * breakdown.impact_score
        + w.file_name * breakdown.file_name_score
    )
    return max(0.0, min(100.0, total))
