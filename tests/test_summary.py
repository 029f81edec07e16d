import pytest

from data_designer_newsletter_tagger.core import analyze_content
from data_designer_newsletter_tagger.summary import extract_highlight_ranges, grade, overall_score, summarize


class TestScore:
    @pytest.mark.parametrize(
        ("issues", "words", "expected"),
        [(0, 100, 100.0), (1, 100, 95.0), (2, 100, 90.0), (3, 100, 85.0), (5, 100, 75.0),
         (7, 100, 65.0), (10, 100, 56.0), (1000, 10, 0.0), (0, 0, 100.0)],
    )
    def test_overall_score(self, issues, words, expected):
        assert overall_score(issues, words) == pytest.approx(expected)

    @pytest.mark.parametrize(
        ("score", "letter"),
        [(100, "A"), (90, "A"), (89.99, "B"), (80, "B"), (70, "C"), (60, "D"), (59.9, "F"), (0, "F")],
    )
    def test_grade(self, score, letter):
        assert grade(score) == letter


class TestSummarize:
    def test_cta_is_not_scored(self):
        summary = summarize(analyze_content("Please sign up today."))
        assert summary["issue_counts"] == {"high": 0, "medium": 0, "low": 0, "info": 1}
        assert summary["issue_types"] == ["cta"]
        assert summary["score"] == 100.0
        assert summary["grade"] == "A"

    def test_issues_lower_the_score(self):
        summary = summarize(analyze_content("Prices might drop soon."))
        assert summary["issue_counts"]["medium"] == 2
        assert summary["issue_types"] == ["hedging", "vague_date"]
        assert summary["score"] == 0.0
        assert summary["grade"] == "F"

    def test_metrics(self):
        result = analyze_content("The team released the update on Monday.")
        summary = summarize(result)
        assert summary["metrics"] == {
            "word_count": 7,
            "sentence_count": 1,
            "readability_grade": result.report.global_metrics.readability.flesch_kincaid_grade,
            "link_density": 0.0,
        }
        assert summary["global_flags"] == []


class TestHighlightRanges:
    def test_one_range_per_tag(self):
        content = "Intro line. Prices might drop soon."
        ranges = extract_highlight_ranges(content, analyze_content(content))
        assert [r.tag for r in ranges] == ["hedging", "vague_date"]
        for r in ranges:
            assert (r.start, r.end) == (12, 35)
            assert content[r.start:r.end] == "Prices might drop soon."
            assert r.priority == "medium"

    def test_payload(self):
        content = "Prices might drop soon."
        payload = extract_highlight_ranges(content, analyze_content(content))[0].to_payload()
        assert payload["type"] == "hedging"
        assert payload["message"] == "Uncertain language weakens your message"
        assert set(payload) == {"start", "end", "type", "priority", "message", "suggestion"}

    def test_unflagged_content(self):
        content = "The team released the update on Monday."
        assert extract_highlight_ranges(content, analyze_content(content)) == []
