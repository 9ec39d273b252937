"""Resume-to-keyword matching."""

from __future__ import annotations

from ats_checker.pipeline.normalizer import tokenize


def is_present(keyword: str, resume: str, resume_tokens: set[str]) -> bool:
    # Token lookup handles punctuation around plain words; the substring
    # test covers technical terms that do not tokenize the same way.
    return keyword.lower() in resume_tokens or keyword in resume


def match_keywords(resume: str, keywords: list[str]) -> tuple[list[str], list[str]]:
    """Split keywords into (hits, misses), keeping input order."""
    resume_tokens = set(tokenize(resume))
    hits: list[str] = []
    misses: list[str] = []
    for keyword in keywords:
        if is_present(keyword, resume, resume_tokens):
            hits.append(keyword)
        else:
            misses.append(keyword)
    return hits, misses
