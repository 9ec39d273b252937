"""Keyword extraction from a job description."""

from __future__ import annotations

import logging
import re
from collections import Counter

from ats_checker.config import AnalysisConfig
from ats_checker.pipeline.normalizer import tokenize

logger = logging.getLogger(__name__)

STOPWORDS: frozenset[str] = frozenset(
    "a an and the of in on for to with from by as is are be this that it you your".split()
)

_KEYWORD_TOKEN = re.compile(r"^[a-z0-9+#.\-]+$")
# Capitalized words (React, TypeScript, Next.js) and acronyms (AWS, REST)
_TECH_TERM = re.compile(r"\b([A-Z][a-zA-Z0-9+#.]{1,}|[A-Z]{2,})\b", re.ASCII)


def frequent_terms(job_description: str, limit: int = 30) -> list[str]:
    """Most frequent non-stopword tokens; ties keep first-occurrence order."""
    freq = Counter(
        t for t in tokenize(job_description)
        if t not in STOPWORDS and _KEYWORD_TOKEN.match(t)
    )
    ranked = sorted(freq, key=lambda term: -freq[term])
    return ranked[:limit]


def technical_terms(job_description: str) -> list[str]:
    """Case-preserved proper nouns and acronyms in scan order, unique."""
    found = (m.group(1) for m in _TECH_TERM.finditer(job_description))
    return list(dict.fromkeys(w for w in found if len(w) > 2))


def extract_keywords(
    job_description: str, config: AnalysisConfig | None = None
) -> list[str]:
    """Frequency terms followed by technical terms, de-duplicated and capped.

    Uniqueness is by exact string, so "api" and "API" can both appear.
    """
    config = config or AnalysisConfig()
    frequent = frequent_terms(job_description, config.frequency_keywords)
    technical = technical_terms(job_description)
    keywords = list(dict.fromkeys([*frequent, *technical]))[: config.max_keywords]
    logger.debug(
        "Extracted %d keywords (%d frequent, %d technical)",
        len(keywords), len(frequent), len(technical),
    )
    return keywords
