"""Data models for the ATS checker."""

from ats_checker.models.check import Check, CheckReport, CheckStatus
from ats_checker.models.result import AnalysisResult, ScoreBreakdown

__all__ = [
    "AnalysisResult",
    "Check",
    "CheckReport",
    "CheckStatus",
    "ScoreBreakdown",
]
