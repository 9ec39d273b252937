"""Structural, contact, length, file-name and formatting checks."""

from __future__ import annotations

from ats_checker.config import AnalysisConfig
from ats_checker.models.check import Check, CheckReport
from ats_checker.pipeline import patterns
from ats_checker.pipeline.normalizer import tokenize


def _section_checks(resume: str) -> tuple[list[Check], int]:
    checks: list[Check] = []
    hits = 0
    for section in patterns.SECTIONS:
        ok = patterns.has_section(resume, section)
        hits += ok
        checks.append(
            Check(
                status="ok" if ok else "warn",
                message=("Has " if ok else "Missing ") + section.label,
            )
        )
    return checks, hits


def _contact_checks(email_ok: bool, phone_ok: bool, linkedin_ok: bool) -> list[Check]:
    return [
        Check(status="ok" if email_ok else "danger",
              message="Email present" if email_ok else "Email missing"),
        Check(status="ok" if phone_ok else "warn",
              message="Phone present" if phone_ok else "Phone missing"),
        Check(status="ok" if linkedin_ok else "warn",
              message="LinkedIn present" if linkedin_ok else "LinkedIn not found"),
    ]


def _length_check(word_count: int, length_ok: bool) -> Check:
    verdict = "(good)" if length_ok else "(consider 1–2 pages)"
    return Check(
        status="ok" if length_ok else "warn",
        message=f"Length ~{word_count} words {verdict}",
    )


def _file_name_check(file_name: str) -> tuple[Check, float]:
    name_like = patterns.has_name_like_file_name(file_name)
    has_role = patterns.has_role_in_file_name(file_name)
    check = Check(
        status="ok" if name_like else "warn",
        message=f"File name looks {'descriptive' if name_like else 'generic'} ({file_name})",
    )
    return check, 0.5 * name_like + 0.5 * has_role


def run_checks(
    resume: str,
    file_name: str | None = None,
    config: AnalysisConfig | None = None,
) -> CheckReport:
    """Run the fixed check battery over normalized resume text.

    Checks come back in a fixed order: sections, email, phone, LinkedIn,
    length, file name (only when given), then formatting warnings (only
    when triggered).
    """
    config = config or AnalysisConfig()

    checks, section_hits = _section_checks(resume)

    email_ok = patterns.has_email(resume)
    phone_ok = patterns.has_phone(resume)
    linkedin_ok = patterns.has_linkedin(resume)
    checks.extend(_contact_checks(email_ok, phone_ok, linkedin_ok))

    word_count = len(tokenize(resume))
    length_ok = config.min_words <= word_count <= config.max_words
    checks.append(_length_check(word_count, length_ok))

    file_score = 0.0
    if file_name:
        check, file_score = _file_name_check(file_name)
        checks.append(check)

    has_tables = patterns.has_table_chars(resume)
    has_image_hint = patterns.has_image_hint(resume)
    if has_tables:
        checks.append(Check(
            status="warn",
            message="Table-like characters found; avoid complex tables/columns",
        ))
    if has_image_hint:
        checks.append(Check(
            status="warn",
            message="Images detected; many ATS can't read images",
        ))

    return CheckReport(
        checks=checks,
        section_hits=section_hits,
        email_ok=email_ok,
        phone_ok=phone_ok,
        linkedin_ok=linkedin_ok,
        word_count=word_count,
        length_ok=length_ok,
        file_score=file_score,
        has_tables=has_tables,
        has_image_hint=has_image_hint,
        action_verb_count=patterns.count_action_verbs(resume),
        number_count=patterns.count_numbers(resume),
    )
