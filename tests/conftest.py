"""Shared test fixtures."""

from __future__ import annotations

import pytest

from ats_checker.models.check import Check, CheckReport
from ats_checker.models.result import AnalysisResult, ScoreBreakdown
from ats_checker.parsers.jd_parser import SAMPLE_JD


@pytest.fixture
def sample_jd_text() -> str:
    return SAMPLE_JD


@pytest.fixture
def sample_resume_text() -> str:
    return """Jane Doe
Front-End Developer
jane.doe@example.com | +1 415-555-0101 | linkedin.com/in/janedoe

Summary
Front-end developer with 4 years of experience building responsive UIs
with React, TypeScript and modern CSS.

Experience
Acme Corp - Front-End Developer (2021 - 2024)
- Led migration of 12 legacy pages to React and TypeScript
- Built a design system used by 5 product teams
- Optimized bundle size, reduced load time by 35%
- Implemented REST API integrations and automated testing with Jest
- Mentored 3 junior engineers and collaborated with designers

Projects
- Portfolio site with Next.js and Tailwind, deployed via GitHub Actions CI/CD

Education
B.Sc. Computer Science, State University (2016 - 2020)

Skills
HTML, CSS, JavaScript, React, TypeScript, Git, Jest, Flexbox, Grid

Certifications
AWS Certified Cloud Practitioner (2022)
"""


@pytest.fixture
def strong_report() -> CheckReport:
    """Signals of a resume that passes every check."""
    return CheckReport(
        checks=[],
        section_hits=6,
        email_ok=True,
        phone_ok=True,
        linkedin_ok=True,
        word_count=600,
        length_ok=True,
        file_score=1.0,
        has_tables=False,
        has_image_hint=False,
        action_verb_count=12,
        number_count=15,
    )


@pytest.fixture
def sample_result() -> AnalysisResult:
    return AnalysisResult(
        score=72.6,
        keywords_hit=["react", "TypeScript"],
        keywords_miss=["graphql", "AWS"],
        checks=[
            Check(status="ok", message="Has skills"),
            Check(status="danger", message="Email missing"),
            Check(status="warn", message="LinkedIn not found"),
        ],
        suggestions=["Add a professional email at the top."],
        breakdown=ScoreBreakdown(keyword_coverage=50.0),
    )
