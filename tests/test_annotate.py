from data_designer_newsletter_tagger.annotate import Annotator, annotation_tag, report_tags, wrap
from data_designer_newsletter_tagger.checks import Finding


def _findings(*tags):
    return [Finding(tag, {}) for tag in tags]


class TestTagSelection:
    def test_report_tags_keep_order_without_duplicates(self):
        assert report_tags(_findings("cta", "hedging", "cta")) == ["cta", "hedging"]

    def test_annotation_tag_picks_highest_priority(self):
        assert annotation_tag(_findings("cta", "grammar_spelling", "hedging")) == "grammar_spelling"
        assert annotation_tag(_findings("claim_without_evidence", "spam_words")) == "spam_words"

    def test_annotation_tag_empty(self):
        assert annotation_tag([]) is None

    def test_wrap(self):
        assert wrap("Hi.", "cta") == "<cta>Hi.</cta>"


class TestAnnotator:
    def test_exact_match(self):
        annotator = Annotator("Intro. Prices might drop soon. Outro.")
        assert annotator.annotate("Prices might drop soon.", _findings("hedging", "vague_date"))
        assert annotator.content == "Intro. <hedging>Prices might drop soon.</hedging> Outro."

    def test_fuzzy_match_across_inline_markup(self):
        content = "<p>Join our <b>weekly</b> digest for product news.</p>"
        annotator = Annotator(content)
        assert annotator.annotate("Join our weekly digest for product news.", _findings("cta"))
        assert annotator.content == "<p><cta>Join our <b>weekly</b> digest for product news.</cta></p>"

    def test_no_match_leaves_content_alone(self):
        annotator = Annotator("Something else entirely.")
        assert not annotator.annotate("Totally different words here.", _findings("fluff"))
        assert annotator.content == "Something else entirely."

    def test_no_findings(self):
        annotator = Annotator("Plain sentence.")
        assert not annotator.annotate("Plain sentence.", [])
        assert annotator.content == "Plain sentence."

    def test_sentence_annotated_once(self):
        annotator = Annotator("Buy now! Buy now!")
        assert annotator.annotate("Buy now!", _findings("spam_words"))
        assert not annotator.annotate("Buy now!", _findings("spam_words"))
        assert annotator.content == "<spam_words>Buy now!</spam_words> Buy now!"

    def test_skips_text_inside_existing_annotation(self):
        content = "<hedging>We may act fast.</hedging>"
        annotator = Annotator(content)
        assert not annotator.annotate("act fast.", _findings("spam_words"))
        assert annotator.content == content

    def test_fuzzy_match_crossing_annotation_is_skipped(self):
        content = "<hedging>Alpha beta now.</hedging> Delta epsilon."
        annotator = Annotator(content)
        assert not annotator.annotate("Alpha beta then Delta epsilon.", _findings("fluff"))
        assert annotator.content == content

    def test_fuzzy_words_are_literal(self):
        content = "<p>Save (big) on <i>all</i> plans [today] now.</p>"
        annotator = Annotator(content)
        assert annotator.annotate("Save (big) on all plans [today] now.", _findings("spam_words"))
        assert annotator.content == "<p><spam_words>Save (big) on <i>all</i> plans [today] now.</spam_words></p>"

    def test_fuzzy_match_inside_annotation_is_skipped(self):
        content = "<fluff>Boost your sales and tell your friends.</fluff> Boost&nbsp;your friends."
        annotator = Annotator(content)
        assert not annotator.annotate("Boost your friends.", _findings("fluff"))
        assert annotator.content == content
