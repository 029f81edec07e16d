from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable

from data_designer_newsletter_tagger.options import Options

# ---------------------------------------------------------------------------
# Findings
# ---------------------------------------------------------------------------

SPAM_WORDS = "spam_words"
GRAMMAR_SPELLING = "grammar_spelling"
HARD_TO_READ = "hard_to_read"
FLUFF = "fluff"
EMOJI_EXCESS = "emoji_excess"
CTA = "cta"
HEDGING = "hedging"
VAGUE_DATE = "vague_date"
VAGUE_NUMBER = "vague_number"
CLAIM_WITHOUT_EVIDENCE = "claim_without_evidence"

# Highest priority first. Only used to pick the single annotation tag.
TAG_PRIORITY: tuple[str, ...] = (
    SPAM_WORDS,
    GRAMMAR_SPELLING,
    HARD_TO_READ,
    FLUFF,
    EMOJI_EXCESS,
    CTA,
    HEDGING,
    VAGUE_DATE,
    VAGUE_NUMBER,
    CLAIM_WITHOUT_EVIDENCE,
)


def freeze(value: Any) -> Any:
    """Read-only copy: mappings become ``MappingProxyType``, lists become tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(v) for v in value)
    return value


def thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [thaw(v) for v in value]
    return value


@dataclass(frozen=True)
class Finding:
    tag: str
    reasons: Mapping[str, Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "reasons", freeze(self.reasons))

    def to_payload(self) -> dict[str, object]:
        return {"tag": self.tag, "reasons": thaw(self.reasons)}


SentenceCheck = Callable[[str, Options], "Finding | None"]

# ---------------------------------------------------------------------------
# Compiled patterns
# ---------------------------------------------------------------------------

_WORD_RE = re.compile(r"\b\w+\b")
_CAPS_WORD_RE = re.compile(r"\b[A-Z]{3,}\b")
_CONJUNCTION_RE = re.compile(r"\b(?:and|or|but|which|that)\b", re.IGNORECASE)
_PASSIVE_RE = re.compile(r"\b(?:is|are|was|were|be|been|being)\s+\w+(?:ed|en)\b", re.IGNORECASE)
_VAGUE_VERB_OBJECT_RE = re.compile(r"\b(?:improve|boost|enhance|increase|elevate)\s+(?:your|the|our)\s+\w+", re.IGNORECASE)
_EMOJI_RE = re.compile("[\U0001F300-\U0001FAFF\u2600-\u27BF]")
URL_RE = re.compile(r"\bhttps?://[^\s)]+", re.IGNORECASE)

_NUMBER_RE = re.compile(r"\b\d+(?:[.,]\d+)*\b")
_CURRENCY_BEFORE_RE = re.compile(r"[$€£¥]\s*$")
_IDENTIFIER_BEFORE_RE = re.compile(r"(?:\b(?:version|model|id|no|gpt)|#)[\s.:-]*$", re.IGNORECASE)
_UNIT_AFTER_RE = re.compile(
    r"[\s-]*(?:%|(?:per\s+\w+|users|subs|subscribers|customers|orders|impressions|clicks"
    r"|hrs?|hours?|mins?|minutes?|days?|weeks?|months?|yrs?|years?|kg|km|mb|gb|tb"
    r"|percent|percentage|dollars?|cents?|images?|words?|articles?|posts?|am|pm)\b)",
    re.IGNORECASE,
)

_QUANTIFIER_RE = re.compile(r"\d+%|\$\d+|\b\d+\b")
_CERTAINTY_RE = re.compile(r"guarantee|prove|ensure", re.IGNORECASE)
_EVIDENCE_RE = re.compile(r"\b(?:source|study|report|citation|according to|data)\b", re.IGNORECASE)

_TOKEN_RE = re.compile(r"\b[A-Za-z][A-Za-z'\u2019\-]*\b")
_PROPER_NOUN_RE = re.compile(r"^[A-Z][a-z]+$")
_NON_LEXICAL_RE = re.compile(r"\d|[_@/\\]|[a-z][A-Z]")
_DOUBLE_WORD_RE = re.compile(r"\b(\w+)\s+\1\b", re.IGNORECASE)
_BAD_AGREEMENT_RE = re.compile(r"\b(?:they|we|you)\s+was\b|\b(?:he|she|it)\s+were\b", re.IGNORECASE)
_ARTICLE_RE = re.compile(r"\b(a|an|A|An)\s+([A-Za-z][\w'-]*)")
_SPACE_BEFORE_PUNCT_RE = re.compile(r"\s+[,.!?;:](?!\S)")
_MISSING_SPACE_AFTER_COMMA_RE = re.compile(r",[^\s\d]")

_CONSONANT_SOUND_PREFIXES = (
    "unique", "unit", "union", "univers", "uniform", "unify", "unified", "unicorn", "unilateral",
    "use", "usa", "usu", "uti", "ura", "ure", "uro", "eu", "ewe", "one", "once", "ubiq",
)
_SILENT_H_PREFIXES = ("hour", "honest", "honor", "honour", "heir")
_INFLECTIONS = ("s", "es", "ed", "d", "ing", "ly", "er", "ers", "est")

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _count_includes(sentence: str, phrases: tuple[str, ...]) -> int:
    lowered = sentence.lower()
    return sum(1 for p in phrases if p in lowered)


def _matching_phrases(sentence: str, phrases: tuple[str, ...]) -> list[str]:
    lowered = sentence.lower()
    return [p for p in phrases if p in lowered]


def _has_word(sentence: str, word: str) -> bool:
    return re.search(rf"\b{re.escape(word)}\b", sentence, re.IGNORECASE) is not None


def _starts_with_vowel_sound(word: str) -> bool:
    w = word.lower()
    if w.startswith(_SILENT_H_PREFIXES):
        return True
    if w.startswith(_CONSONANT_SOUND_PREFIXES):
        return False
    return w[0] in "aeiou"


def _bad_article(sentence: str) -> bool:
    for m in _ARTICLE_RE.finditer(sentence):
        article, word = m.group(1), m.group(2)
        if article[0] == "A" and m.start() != 0:
            continue
        if len(word) > 1 and word.isupper():
            continue
        vowel_sound = _starts_with_vowel_sound(word)
        if article.lower() == "a" and vowel_sound:
            return True
        if article.lower() == "an" and not vowel_sound:
            return True
    return False


def _skip_token(token: str, options: Options) -> bool:
    grammar = options.grammar
    if grammar.skip_non_lexical and _NON_LEXICAL_RE.search(token):
        return True
    if len(token) <= 5 and token == token.upper():
        return True
    if grammar.skip_proper_nouns and _PROPER_NOUN_RE.match(token):
        return True
    return False


def _known_word(word: str, dictionary: frozenset[str]) -> bool:
    base = word.lower().replace("\u2019", "'")
    norm = base[:-2] if base.endswith("'s") else base
    norm = norm.replace("-", "")
    if base in dictionary or norm in dictionary:
        return True
    for suffix in _INFLECTIONS:
        if not norm.endswith(suffix) or len(norm) - len(suffix) < 3:
            continue
        stem = norm[: -len(suffix)]
        if stem in dictionary or stem + "e" in dictionary:
            return True
        if suffix in ("es", "ed", "er", "ers", "est") and stem.endswith("i") and stem[:-1] + "y" in dictionary:
            return True
        if len(stem) > 3 and stem[-1] == stem[-2] and stem[:-1] in dictionary:
            return True
    return False


def _vague_numbers(sentence: str) -> list[str]:
    vague = []
    for m in _NUMBER_RE.finditer(sentence):
        number = m.group(0)
        if number.count(".") >= 2 or re.fullmatch(r"\d{4}", number):
            continue
        before, after = sentence[: m.start()], sentence[m.end():]
        if _CURRENCY_BEFORE_RE.search(before) or _IDENTIFIER_BEFORE_RE.search(before):
            continue
        if _UNIT_AFTER_RE.match(after):
            continue
        vague.append(number)
    return vague


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------


def check_spam(sentence: str, options: Options) -> Finding | None:
    spam_count = _count_includes(sentence, options.spam_words)
    exclam = sentence.count("!")
    caps = len(_CAPS_WORD_RE.findall(sentence))
    if (
        spam_count >= options.thresholds.spam_words
        or exclam > options.max_exclamations
        or caps > options.max_all_caps
    ):
        return Finding(SPAM_WORDS, {"spamCount": spam_count, "exclam": exclam, "caps": caps})
    return None


def check_jargon(sentence: str, options: Options) -> Finding | None:
    mild = _count_includes(sentence, options.mild_jargon)
    heavy = _count_includes(sentence, options.heavy_jargon)
    too_long = len(_WORD_RE.findall(sentence)) > options.max_sentence_length
    passive = options.passive_voice and _PASSIVE_RE.search(sentence) is not None
    commas = sentence.count(",")
    conj = len(_CONJUNCTION_RE.findall(sentence))

    jargon_hit = heavy >= options.thresholds.heavy_jargon or mild >= options.thresholds.mild_jargon
    hard_structure = too_long or commas >= 3 or conj >= 2 or passive
    if jargon_hit or hard_structure:
        return Finding(HARD_TO_READ, {
            "mild": mild, "heavy": heavy, "tooLong": too_long,
            "passive": passive, "commas": commas, "conj": conj,
        })
    return None


def check_fluff(sentence: str, options: Options) -> Finding | None:
    fp = _count_includes(sentence, options.fluff_phrases)
    intens = _count_includes(sentence, options.intensifiers)
    vague_verb_obj = _VAGUE_VERB_OBJECT_RE.search(sentence) is not None
    if fp >= options.thresholds.fluff_phrases or (fp >= 1 and intens >= 1) or vague_verb_obj:
        return Finding(FLUFF, {"fp": fp, "intens": intens, "vagueVerbObj": vague_verb_obj})
    return None


def check_emoji_excess(sentence: str, options: Options) -> Finding | None:
    emojis = len(_EMOJI_RE.findall(sentence))
    if emojis > options.max_emoji_per_sentence:
        return Finding(EMOJI_EXCESS, {"emojis": emojis})
    return None


def check_cta(sentence: str, options: Options) -> Finding | None:
    phrases = _matching_phrases(sentence, options.cta_phrases)
    return Finding(CTA, {"phrases": phrases}) if phrases else None


def check_hedging(sentence: str, options: Options) -> Finding | None:
    hedges = [w for w in options.hedge_words if _has_word(sentence, w)]
    return Finding(HEDGING, {"hedges": hedges}) if hedges else None


def check_vague_dates(sentence: str, options: Options) -> Finding | None:
    hits = _matching_phrases(sentence, options.vague_dates)
    return Finding(VAGUE_DATE, {"hits": hits}) if hits else None


def check_vague_numbers(sentence: str, options: Options) -> Finding | None:
    """Numbers with no unit, currency, or percent beside them.

    Four-digit numbers (years), dotted versions ("1.2.3"), and numbers following
    "version", "model", "id", "#", or "gpt-" are treated as identifiers.
    """
    numbers = _vague_numbers(sentence)
    return Finding(VAGUE_NUMBER, {"numbers": numbers}) if numbers else None


def check_bald_claims(sentence: str, options: Options) -> Finding | None:
    claim_verb = any(_has_word(sentence, v) for v in options.bald_claim_verbs)
    has_quant = _QUANTIFIER_RE.search(sentence) is not None
    has_source = _EVIDENCE_RE.search(sentence) is not None or URL_RE.search(sentence) is not None
    if claim_verb and (has_quant or _CERTAINTY_RE.search(sentence)) and not has_source:
        return Finding(CLAIM_WITHOUT_EVIDENCE, {"claimVerb": claim_verb, "hasQuant": has_quant, "hasSource": has_source})
    return None


def check_grammar_spelling(sentence: str, options: Options) -> Finding | None:
    grammar = options.grammar
    if not grammar.enabled:
        return None

    dictionary = options.spelling_dictionary
    misspelled: list[str] = []
    for token in _TOKEN_RE.findall(sentence):
        if len(misspelled) >= grammar.max_misspellings_listed:
            break
        if len(token) < grammar.min_word_length or _skip_token(token, options):
            continue
        if not _known_word(token, dictionary):
            misspelled.append(token)

    double_word = _DOUBLE_WORD_RE.search(sentence) is not None
    bad_agreement = _BAD_AGREEMENT_RE.search(sentence) is not None
    bad_article = _bad_article(sentence)
    punct_space = _SPACE_BEFORE_PUNCT_RE.search(sentence) is not None
    missing_space = _MISSING_SPACE_AFTER_COMMA_RE.search(sentence) is not None

    if misspelled or double_word or bad_agreement or bad_article or punct_space or missing_space:
        return Finding(GRAMMAR_SPELLING, {
            "misspelled": misspelled,
            "doubleWord": double_word,
            "badAgreement": bad_agreement,
            "badArticleAn": bad_article,
            "spaceBeforePunctuation": punct_space,
            "missingSpaceAfterComma": missing_space,
        })
    return None


# ---------------------------------------------------------------------------
# Pipeline wiring
# ---------------------------------------------------------------------------

SENTENCE_CHECKS: tuple[SentenceCheck, ...] = (
    check_spam,
    check_grammar_spelling,
    check_jargon,
    check_fluff,
    check_emoji_excess,
    check_cta,
    check_hedging,
    check_vague_dates,
    check_vague_numbers,
    check_bald_claims,
)


def run_sentence_checks(sentence: str, options: Options) -> list[Finding]:
    findings = (check(sentence, options) for check in SENTENCE_CHECKS)
    return [f for f in findings if f is not None]
