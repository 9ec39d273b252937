"""Tests for resume keyword matching."""

from ats_checker.pipeline.matcher import is_present, match_keywords


class TestMatchKeywords:
    def test_token_match(self):
        hits, misses = match_keywords("Python, SQL and Docker.", ["python", "sql", "kafka"])
        assert hits == ["python", "sql"]
        assert misses == ["kafka"]

    def test_case_preserved_substring_match(self):
        hits, misses = match_keywords("Worked with React.js daily", ["React", "react"])
        assert hits == ["React"]
        assert misses == ["react"]

    def test_lowercase_keyword_matches_capitalized_resume_token(self):
        hits, _ = match_keywords("GRAPHQL APIs", ["graphql"])
        assert hits == ["graphql"]

    def test_order_preserved(self):
        keywords = ["c", "a", "x", "b", "y"]
        hits, misses = match_keywords("a b c", keywords)
        assert hits == ["c", "a", "b"]
        assert misses == ["x", "y"]

    def test_partition(self):
        keywords = ["python", "Go", "rust", "AWS"]
        hits, misses = match_keywords("Python and AWS", keywords)
        assert not set(hits) & set(misses)
        assert sorted(hits + misses) == sorted(keywords)

    def test_empty_resume(self):
        hits, misses = match_keywords("", ["python"])
        assert hits == []
        assert misses == ["python"]

    def test_no_keywords(self):
        assert match_keywords("anything", []) == ([], [])


class TestIsPresent:
    def test_token_lookup(self):
        assert is_present("Docker", "docker compose", {"docker", "compose"})

    def test_substring_is_case_sensitive(self):
        assert not is_present("Kubernetes", "kubernetes-native", {"kubernetes-native"})
