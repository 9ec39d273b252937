"""Pydantic models for the analysis result."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, Field

from ats_checker.models.check import Check


@dataclass(frozen=True)
class ScoreBreakdown:
    """Eight named sub-scores, each 0-100."""

    keyword_coverage: float = 0.0
    section_coverage: float = 0.0
    formatting_penalty: float = 0.0  # subtracted from 100 before weighting
    action_verb_score: float = 0.0
    contact_coverage: float = 0.0
    length_score: float = 0.0
    impact_score: float = 0.0
    file_name_score: float = 0.0


class AnalysisResult(BaseModel):
    score: float = Field(ge=0, le=100)
    keywords_hit: list[str] = Field(alias="keywordsHit")
    keywords_miss: list[str] = Field(alias="keywordsMiss")
    checks: list[Check]
    suggestions: list[str]
    breakdown: ScoreBreakdown = Field(default_factory=ScoreBreakdown, exclude=True)

    model_config = {"populate_by_name": True, "frozen": True}
