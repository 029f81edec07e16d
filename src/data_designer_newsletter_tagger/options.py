from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields, is_dataclass, replace
from typing import Any

from data_designer_newsletter_tagger import lexicon

# ---------------------------------------------------------------------------
# Option groups
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Thresholds:
    """Minimum hit counts before a phrase-list check fires."""

    fluff_phrases: int = 2
    mild_jargon: int = 2
    heavy_jargon: int = 1
    spam_words: int = 2


@dataclass(frozen=True)
class RedundancyOptions:
    similarity_threshold: float = 0.85
    min_sentence_words: int = 6


@dataclass(frozen=True)
class ReadabilityOptions:
    grade_threshold: float = 9


@dataclass(frozen=True)
class GrammarOptions:
    """Spelling and structural grammar checks.

    ``dictionary`` replaces the built-in allow-list when set and is lowercased on
    construction. Words shorter than ``min_word_length`` are never checked for
    spelling.
    """

    enabled: bool = True
    dictionary: frozenset[str] | None = None
    min_word_length: int = 5
    skip_proper_nouns: bool = True
    skip_non_lexical: bool = True
    max_misspellings_listed: int = 3

    def __post_init__(self) -> None:
        if self.dictionary is not None:
            object.__setattr__(self, "dictionary", frozenset(w.lower() for w in self.dictionary))


@dataclass(frozen=True)
class Options:
    """Thresholds, phrase lists, and toggles used by the content tagger."""

    max_sentence_length: int = 22
    max_all_caps: int = 2
    max_exclamations: int = 3
    passive_voice: bool = True

    thresholds: Thresholds = field(default_factory=Thresholds)

    max_emoji_per_sentence: int = 3
    max_links_per_100_words: float = 3

    cta_phrases: tuple[str, ...] = lexicon.CTA_PHRASES
    hedge_words: tuple[str, ...] = lexicon.HEDGE_WORDS
    vague_dates: tuple[str, ...] = lexicon.VAGUE_DATES
    bald_claim_verbs: tuple[str, ...] = lexicon.BALD_CLAIM_VERBS
    spam_words: tuple[str, ...] = lexicon.SPAM_WORDS
    mild_jargon: tuple[str, ...] = lexicon.MILD_JARGON
    heavy_jargon: tuple[str, ...] = lexicon.HEAVY_JARGON
    fluff_phrases: tuple[str, ...] = lexicon.FLUFF_PHRASES
    intensifiers: tuple[str, ...] = lexicon.INTENSIFIERS

    redundancy: RedundancyOptions = field(default_factory=RedundancyOptions)
    readability: ReadabilityOptions = field(default_factory=ReadabilityOptions)
    grammar: GrammarOptions = field(default_factory=GrammarOptions)

    annotate: bool = True

    @property
    def spelling_dictionary(self) -> frozenset[str]:
        if self.grammar.dictionary is not None:
            return self.grammar.dictionary
        return lexicon.COMMON_WORDS


DEFAULT_OPTIONS = Options()


# ---------------------------------------------------------------------------
# Merging caller overrides
# ---------------------------------------------------------------------------


def _coerce(name: str, current: Any, value: Any) -> Any:
    if is_dataclass(current):
        if isinstance(value, type(current)):
            return value
        if not isinstance(value, Mapping):
            raise TypeError(f"Option {name!r} expects a mapping, got {type(value).__name__}")
        return _merge(current, value, prefix=f"{name}.")
    if name == "grammar.dictionary":
        if value is None:
            return None
        if isinstance(value, str):
            raise TypeError("Option 'grammar.dictionary' expects a collection of words, not a string")
        return frozenset(str(w) for w in value)
    if isinstance(current, tuple):
        if isinstance(value, str) or not isinstance(value, Iterable):
            raise TypeError(f"Option {name!r} expects a list of phrases")
        return tuple(str(p).lower() for p in value)
    return value


def _merge(base: Any, overrides: Mapping[str, Any], prefix: str = "") -> Any:
    known = {f.name for f in fields(base)}
    changes: dict[str, Any] = {}
    for key, value in overrides.items():
        if key not in known:
            raise ValueError(f"Unknown option {prefix + key!r}")
        changes[key] = _coerce(prefix + key, getattr(base, key), value)
    return replace(base, **changes)


def resolve_options(overrides: Options | Mapping[str, Any] | None = None) -> Options:
    """Merge caller overrides onto the defaults.

    Accepts a ready ``Options`` instance (returned as-is), a mapping of any subset
    of ``Options`` fields (nested groups may be given as partial mappings), or None.
    """
    if overrides is None:
        return DEFAULT_OPTIONS
    if isinstance(overrides, Options):
        return overrides
    if not isinstance(overrides, Mapping):
        raise TypeError(f"options must be an Options instance or a mapping, got {type(overrides).__name__}")
    return _merge(DEFAULT_OPTIONS, overrides)
