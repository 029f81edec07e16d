import dataclasses

import pytest

from data_designer_newsletter_tagger import lexicon
from data_designer_newsletter_tagger.options import DEFAULT_OPTIONS, GrammarOptions, Options, resolve_options


class TestResolveOptions:
    def test_none_gives_defaults(self):
        assert resolve_options(None) is DEFAULT_OPTIONS
        assert resolve_options() is DEFAULT_OPTIONS

    def test_options_instance_passes_through(self):
        options = Options(max_sentence_length=10)
        assert resolve_options(options) is options

    def test_defaults(self):
        assert DEFAULT_OPTIONS.max_sentence_length == 22
        assert DEFAULT_OPTIONS.thresholds.spam_words == 2
        assert DEFAULT_OPTIONS.redundancy.similarity_threshold == 0.85
        assert DEFAULT_OPTIONS.readability.grade_threshold == 9
        assert DEFAULT_OPTIONS.spelling_dictionary is lexicon.COMMON_WORDS

    def test_nested_groups_merge_partially(self):
        options = resolve_options({"thresholds": {"spam_words": 1}, "max_exclamations": 5})
        assert options.thresholds.spam_words == 1
        assert options.thresholds.fluff_phrases == 2
        assert options.max_exclamations == 5
        assert options.max_all_caps == 2

    def test_defaults_are_not_mutated(self):
        resolve_options({"thresholds": {"spam_words": 7}})
        assert DEFAULT_OPTIONS.thresholds.spam_words == 2

    def test_phrase_lists_are_lowercased(self):
        options = resolve_options({"hedge_words": ["Might", "PERHAPS"]})
        assert options.hedge_words == ("might", "perhaps")

    def test_custom_dictionary(self):
        options = resolve_options({"grammar": {"dictionary": ["Newsletter", "digest"]}})
        assert options.grammar.dictionary == frozenset({"newsletter", "digest"})
        assert options.spelling_dictionary == frozenset({"newsletter", "digest"})
        assert options.grammar.enabled is True

    def test_dictionary_lowercased_without_merge(self):
        grammar = GrammarOptions(dictionary=frozenset({"Acme", "NewsBot"}))
        assert grammar.dictionary == frozenset({"acme", "newsbot"})

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="'bogus'"):
            resolve_options({"bogus": 1})

    def test_unknown_nested_key(self):
        with pytest.raises(ValueError, match="'thresholds.nope'"):
            resolve_options({"thresholds": {"nope": 1}})

    def test_nested_group_requires_mapping(self):
        with pytest.raises(TypeError):
            resolve_options({"grammar": True})

    def test_phrase_list_rejects_string(self):
        with pytest.raises(TypeError):
            resolve_options({"cta_phrases": "sign up"})

    def test_rejects_non_mapping(self):
        with pytest.raises(TypeError):
            resolve_options(42)

    def test_options_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_OPTIONS.max_sentence_length = 5
