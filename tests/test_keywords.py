"""Tests for job description keyword extraction."""

from ats_checker.config import AnalysisConfig
from ats_checker.pipeline.keywords import (
    STOPWORDS,
    extract_keywords,
    frequent_terms,
    technical_terms,
)


class TestFrequentTerms:
    def test_drops_stopwords(self):
        terms = frequent_terms("the python and the java")
        assert terms == ["python", "java"]
        assert not set(terms) & STOPWORDS

    def test_ranked_by_frequency(self):
        assert frequent_terms("go java java python python python") == ["python", "java", "go"]

    def test_ties_keep_first_occurrence(self):
        assert frequent_terms("java python python java rust") == ["java", "python", "rust"]

    def test_limit(self):
        text = " ".join(f"word{i}" for i in range(50))
        assert frequent_terms(text, limit=30) == [f"word{i}" for i in range(30)]


class TestTechnicalTerms:
    def test_capitalized_and_acronyms(self):
        assert technical_terms("Experience with React, TypeScript and AWS") == [
            "Experience", "React", "TypeScript", "AWS",
        ]

    def test_short_matches_dropped(self):
        assert technical_terms("Go or JS with Use") == ["Use"]

    def test_unique_in_scan_order(self):
        assert technical_terms("React then Vue then React") == ["React", "Vue"]

    def test_dotted_names(self):
        assert "Next.js" in technical_terms("Bonus: Next.js, Tailwind")

    def test_lowercase_text_has_none(self):
        assert technical_terms("python and java") == []


class TestExtractKeywords:
    def test_frequency_terms_then_technical_terms(self):
        keywords = extract_keywords("We need React and TypeScript skills.")
        assert keywords == ["we", "need", "react", "typescript", "skills.", "React", "TypeScript"]

    def test_case_variants_coexist(self):
        keywords = extract_keywords("Experience with API design. The api must scale.")
        assert "api" in keywords
        assert "API" in keywords

    def test_unique(self, sample_jd_text):
        keywords = extract_keywords(sample_jd_text)
        assert len(keywords) == len(set(keywords))

    def test_capped_at_forty(self):
        lower = " ".join(f"w{i}" for i in range(50))
        tech = " ".join(f"Tech{i}" for i in range(20))
        keywords = extract_keywords(f"{lower} {tech}")
        assert len(keywords) == 40
        assert keywords[:30] == [f"w{i}" for i in range(30)]
        assert keywords[30:] == [f"Tech{i}" for i in range(10)]

    def test_custom_limits(self):
        config = AnalysisConfig(frequency_keywords=2, max_keywords=3)
        keywords = extract_keywords("python python java go Rust Kotlin", config)
        assert keywords == ["python", "java", "Rust"]

    def test_sample_jd(self, sample_jd_text):
        keywords = extract_keywords(sample_jd_text)
        assert len(keywords) == 40
        assert keywords[:3] == ["-", "css", "react"]
        assert "JavaScript" in keywords

    def test_empty(self):
        assert extract_keywords("") == []
