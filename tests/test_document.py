import pytest

from data_designer_newsletter_tagger import document
from data_designer_newsletter_tagger.options import DEFAULT_OPTIONS, resolve_options


class TestLinks:
    def test_count_links(self):
        text = "See https://example.com/a and (http://example.org) plus example.net."
        assert document.count_links(text) == 2

    def test_link_density(self):
        assert document.link_density(1, 3) == 33.33
        assert document.link_density(2, 0) == 200.0
        assert document.link_density(0, 0) == 0.0

    def test_detect_link_density(self):
        finding = document.detect_link_density(4, 100, DEFAULT_OPTIONS)
        assert finding is not None
        assert finding.reasons == {"links": 4, "words": 100, "per100": 4.0}
        assert document.detect_link_density(3, 100, DEFAULT_OPTIONS) is None


class TestFormatting:
    def test_clean(self):
        assert document.detect_formatting_issues("One line.\nAnother line.") is None

    def test_double_spaces(self):
        finding = document.detect_formatting_issues("Too  many   spaces.")
        assert finding is not None
        assert finding.reasons["doubleSpaces"] == 2
        assert finding.reasons["inconsistentDashes"] is False

    def test_smart_quote_mix(self):
        finding = document.detect_formatting_issues("It's the team\u2019s pick.")
        assert finding is not None
        assert finding.reasons["smartQuotesMix"] is True

    def test_inconsistent_dashes(self):
        finding = document.detect_formatting_issues("A well-known fact \u2014 mostly.")
        assert finding is not None
        assert finding.reasons["inconsistentDashes"] == {"hyphenCount": 1, "enDashCount": 0, "emDashCount": 1}

    def test_single_dash_kind_is_fine(self):
        assert document.detect_formatting_issues("A well-known, long-standing fact.") is None

    def test_trailing_spaces(self):
        finding = document.detect_formatting_issues("First \nSecond\t\r\nThird")
        assert finding is not None
        assert finding.reasons["trailingSpacesLines"] == 2


class TestRedundancy:
    def test_jaccard_tokens_drop_short_and_stop_words(self):
        assert document.jaccard_tokens("The team and our readers love the digest") == frozenset(
            {"team", "readers", "love", "digest"}
        )

    def test_jaccard(self):
        a = frozenset({"alpha", "beta"})
        b = frozenset({"beta", "gamma"})
        assert document.jaccard(a, b) == pytest.approx(1 / 3)
        assert document.jaccard(a, b) == document.jaccard(b, a)
        assert document.jaccard(a, a) == 1.0
        assert document.jaccard(frozenset(), frozenset()) == 0.0

    def test_short_sentences_are_ignored(self):
        sentences = ["Market trends matter.", "Market trends matter."]
        assert document.find_redundant_sentences(sentences, DEFAULT_OPTIONS) is None

    def test_threshold(self):
        sentences = [
            "Weekly digest covers product launches and market trends.",
            "Weekly digest covers product launches and funding news.",
        ]
        assert document.find_redundant_sentences(sentences, DEFAULT_OPTIONS) is None
        options = resolve_options({"redundancy": {"similarity_threshold": 0.5}})
        finding = document.find_redundant_sentences(sentences, options)
        assert finding is not None
        assert finding.reasons["pairs"] == ({"i": 0, "j": 1, "similarity": 0.56},)


class TestReadability:
    @pytest.mark.parametrize(
        ("word", "expected"),
        [("cat", 1), ("table", 1), ("reading", 2), ("the", 1), ("rhythm", 1), ("42", 0), ("banana", 3)],
    )
    def test_count_syllables(self, word, expected):
        assert document.count_syllables(word) == expected

    def test_grade_is_deterministic(self):
        text = "The cat sat on the mat. It was a sunny day."
        assert document.flesch_kincaid_grade(text) == document.flesch_kincaid_grade(text)

    def test_grade_rises_with_syllables_per_word(self):
        # Six words in one sentence each; only syllables per word change.
        texts = [
            "Dogs ran to the big park.",
            "Happy dogs ran to the garden.",
            "Enormous elephants wandered into the marketplace.",
        ]
        grades = [document.flesch_kincaid_grade(t) for t in texts]
        assert grades == sorted(grades)
        assert len(set(grades)) == 3

    def test_detect_readability(self):
        assert document.detect_readability(9, DEFAULT_OPTIONS) is None
        finding = document.detect_readability(9.5, DEFAULT_OPTIONS)
        assert finding is not None
        assert finding.reasons == {"grade": 9.5, "threshold": 9}


class TestLongParagraphs:
    def test_only_long_paragraphs_reported(self):
        long_para = " ".join(["word"] * 121)
        content = f"Short one.\n\n{long_para}\n\n\nAnother short one."
        assert document.long_paragraphs(content) == [121]

    def test_boundary(self):
        assert document.long_paragraphs(" ".join(["word"] * 120)) == []
