from data_designer_newsletter_tagger.text import normalize_html, split_sentences, word_count


class TestNormalizeHtml:
    def test_block_tags_become_paragraph_breaks(self):
        assert normalize_html("<p>One.</p><p>Two.</p>") == "One.\n\nTwo."

    def test_line_breaks(self):
        assert normalize_html("Line one<br>Line two<br/>Line three") == "Line one\nLine two\nLine three"

    def test_inline_tags_are_stripped(self):
        assert normalize_html("Join our <b>weekly</b> <a href='x'>digest</a>.") == "Join our weekly digest."

    def test_entities_decoded(self):
        assert normalize_html("Tom&nbsp;&amp;&nbsp;Jerry &lt;3 &quot;hi&quot; it&#39;s") == 'Tom & Jerry <3 "hi" it\'s'

    def test_whitespace_collapsed(self):
        assert normalize_html("  a\t\tb   c\n\n\n\nd\n  e  ") == "a b c\n\nd\ne"

    def test_plain_text_unchanged(self):
        text = "Nothing to strip here."
        assert normalize_html(text) == text

    def test_empty(self):
        assert normalize_html("") == ""


class TestSplitSentences:
    def test_terminal_punctuation(self):
        assert split_sentences("Hi there. How are you? Great!") == ["Hi there.", "How are you?", "Great!"]

    def test_punctuation_runs_stay_together(self):
        assert split_sentences("Wait... What?!") == ["Wait...", "What?!"]

    def test_trailing_fragment(self):
        assert split_sentences("Done. And then") == ["Done.", "And then"]

    def test_no_empty_segments(self):
        assert split_sentences("   ") == []
        assert split_sentences("") == []

    def test_decimals_split(self):
        assert split_sentences("It costs 3.5 dollars.") == ["It costs 3.", "5 dollars."]


class TestWordCount:
    def test_counts_word_runs(self):
        assert word_count("Hello, world! It's 2024.") == 5

    def test_empty(self):
        assert word_count("") == 0
