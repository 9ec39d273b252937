"""Named regex predicates used by the check battery.

Each predicate takes normalized resume text (or a file name) and can be
tested on its own.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class SectionRule:
    name: str
    label: str
    pattern: re.Pattern[str]


SECTIONS: tuple[SectionRule, ...] = (
    SectionRule("summary", "summary / objective", re.compile(r"summary|objective", re.I | re.ASCII)),
    SectionRule(
        "experience",
        "experience / employment / work history",
        re.compile(r"experience|employment|work history", re.I | re.ASCII),
    ),
    SectionRule("education", "education", re.compile(r"education", re.I | re.ASCII)),
    SectionRule("skills", "skills", re.compile(r"skills", re.I | re.ASCII)),
    SectionRule("projects", "projects", re.compile(r"projects", re.I | re.ASCII)),
    SectionRule(
        "certifications",
        "certifications / awards",
        re.compile(r"certifications?|awards?", re.I | re.ASCII),
    ),
)

ACTION_VERBS: tuple[str, ...] = (
    "led", "managed", "built", "designed", "developed", "implemented", "created",
    "launched", "owned", "architected", "optimized", "delivered", "improved",
    "increased", "reduced", "automated", "migrated", "integrated", "tested",
    "deployed", "mentored", "collaborated", "analyzed", "defined", "prototyped",
    "debugged", "refactored", "shipped",
)

TABLE_CHARS = "│┤└┐┌┘┼─—═║"

_EMAIL = re.compile(r"\b[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}\b", re.I | re.ASCII)
# Digits are ASCII only; the separators accept any Unicode whitespace (NBSP included)
_PHONE = re.compile(r"(?<![A-Za-z0-9_])(\+?[0-9][0-9\-\s\ufeff()]{7,}[0-9])(?![A-Za-z0-9_])")
_LINKEDIN = re.compile(r"linkedin\.com/in/", re.I | re.ASCII)
_NAME_LIKE_UNDERSCORE = re.compile(r"[a-z]+_[a-z]+", re.I | re.ASCII)
_NAME_LIKE_HYPHEN = re.compile(r"[A-Z][a-z]+\s?-[A-Z][a-z]+")
_ROLE = re.compile(
    r"developer|engineer|manager|designer|analyst|data|qa|marketing|sales|product", re.I | re.ASCII
)
_TABLE = re.compile(f"[{TABLE_CHARS}]")
_IMAGE_HINT = re.compile(r"image:|figure|diagram", re.I | re.ASCII)
_NUMBER = re.compile(r"\b\d+\b", re.ASCII)
_ACTION_VERB_PATTERNS = tuple(
    re.compile(rf"\b{verb}\b", re.I | re.ASCII) for verb in ACTION_VERBS
)


def has_section(text: str, section: SectionRule) -> bool:
    return bool(section.pattern.search(text))


def has_email(text: str) -> bool:
    return bool(_EMAIL.search(text))


def has_phone(text: str) -> bool:
    return bool(_PHONE.search(text))


def has_linkedin(text: str) -> bool:
    return bool(_LINKEDIN.search(text))


def has_name_like_file_name(file_name: str) -> bool:
    """firstname_lastname or Firstname-Lastname style names."""
    return bool(_NAME_LIKE_UNDERSCORE.search(file_name) or _NAME_LIKE_HYPHEN.search(file_name))


def has_role_in_file_name(file_name: str) -> bool:
    return bool(_ROLE.search(file_name))


def has_table_chars(text: str) -> bool:
    """Box-drawing characters left behind by tables and column layouts."""
    return bool(_TABLE.search(text))


def has_image_hint(text: str) -> bool:
    return bool(_IMAGE_HINT.search(text))


def count_action_verbs(text: str) -> int:
    return sum(len(p.findall(text)) for p in _ACTION_VERB_PATTERNS)


def count_numbers(text: str) -> int:
    return len(_NUMBER.findall(text))
