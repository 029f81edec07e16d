from __future__ import annotations

import re

from data_designer_newsletter_tagger import lexicon
from data_designer_newsletter_tagger.checks import URL_RE, Finding
from data_designer_newsletter_tagger.options import Options
from data_designer_newsletter_tagger.text import split_sentences, word_count

LINK_DENSITY_HIGH = "link_density_high"
FORMATTING_ISSUES = "formatting_issues"
REDUNDANT_SENTENCES = "redundant_sentences"
READABILITY_GRADE = "readability_grade"

LONG_PARAGRAPH_WORDS = 120

_LINE_SPLIT_RE = re.compile(r"\r?\n")
_DOUBLE_SPACE_RE = re.compile(r" {2,}")
_TRAILING_SPACE_RE = re.compile(r"[ \t]+$")
_PARAGRAPH_SPLIT_RE = re.compile(r"\n{2,}")
_JACCARD_TOKEN_RE = re.compile(r"\b[a-z0-9']+\b")
_FK_WORD_RE = re.compile(r"\b\S+\b")
_VOWEL_GROUP_RE = re.compile(r"[aeiouy]+")
_NON_ALPHA_RE = re.compile(r"[^a-z]")

# ---------------------------------------------------------------------------
# Links
# ---------------------------------------------------------------------------


def count_links(content: str) -> int:
    return len(URL_RE.findall(content))


def link_density(links: int, words: int) -> float:
    """Links per 100 words, rounded to two places; word count floors at 1."""
    return round(links / max(words, 1) * 100, 2)


def detect_link_density(links: int, words: int, options: Options) -> Finding | None:
    per100 = link_density(links, words)
    if per100 > options.max_links_per_100_words:
        return Finding(LINK_DENSITY_HIGH, {"links": links, "words": words, "per100": per100})
    return None


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def detect_formatting_issues(content: str) -> Finding | None:
    double_spaces = len(_DOUBLE_SPACE_RE.findall(content))

    smart_quotes_mix = ("'" in content and ("\u2018" in content or "\u2019" in content)) or (
        '"' in content and ("\u201c" in content or "\u201d" in content)
    )

    hyphens = content.count("-")
    en_dashes = content.count("\u2013")
    em_dashes = content.count("\u2014")
    dash_kinds = sum(1 for n in (hyphens, en_dashes, em_dashes) if n > 0)
    inconsistent_dashes = dash_kinds > 1

    trailing = sum(1 for line in _LINE_SPLIT_RE.split(content) if _TRAILING_SPACE_RE.search(line))

    if double_spaces > 0 or smart_quotes_mix or inconsistent_dashes or trailing > 0:
        return Finding(FORMATTING_ISSUES, {
            "doubleSpaces": double_spaces,
            "smartQuotesMix": smart_quotes_mix,
            "inconsistentDashes": (
                {"hyphenCount": hyphens, "enDashCount": en_dashes, "emDashCount": em_dashes}
                if inconsistent_dashes else False
            ),
            "trailingSpacesLines": trailing,
        })
    return None


# ---------------------------------------------------------------------------
# Redundancy
# ---------------------------------------------------------------------------


def jaccard_tokens(sentence: str) -> frozenset[str]:
    return frozenset(
        w for w in _JACCARD_TOKEN_RE.findall(sentence.lower())
        if len(w) > 3 and w not in lexicon.STOPWORDS
    )


def jaccard(a: frozenset[str], b: frozenset[str]) -> float:
    """|a & b| / |a | b|; two empty sets score 0."""
    union = len(a | b)
    if union == 0:
        return 0.0
    return len(a & b) / union


def find_redundant_sentences(sentences: list[str], options: Options) -> Finding | None:
    """Compare every eligible sentence pair. Quadratic in sentence count."""
    settings = options.redundancy
    tokens = [jaccard_tokens(s) for s in sentences]
    eligible = [word_count(s) >= settings.min_sentence_words for s in sentences]

    pairs = []
    for i in range(len(sentences)):
        if not eligible[i]:
            continue
        for j in range(i + 1, len(sentences)):
            if not eligible[j]:
                continue
            similarity = jaccard(tokens[i], tokens[j])
            if similarity >= settings.similarity_threshold:
                pairs.append({"i": i, "j": j, "similarity": round(similarity, 2)})
    return Finding(REDUNDANT_SENTENCES, {"pairs": pairs}) if pairs else None


# ---------------------------------------------------------------------------
# Readability
# ---------------------------------------------------------------------------


def count_syllables(word: str) -> int:
    """Vowel groups, minus a trailing silent 'e', at least one for any alphabetic word."""
    w = _NON_ALPHA_RE.sub("", word.lower())
    if not w:
        return 0
    syllables = len(_VOWEL_GROUP_RE.findall(w))
    if w.endswith("e"):
        syllables -= 1
    return max(1, syllables)


def flesch_kincaid_grade(text: str) -> float:
    sentences = max(1, len(split_sentences(text)))
    words = _FK_WORD_RE.findall(text)
    syllables = sum(count_syllables(w) for w in words)
    word_total = max(1, len(words))
    grade = 0.39 * (word_total / sentences) + 11.8 * (syllables / word_total) - 15.59
    return round(grade, 2)


def detect_readability(grade: float, options: Options) -> Finding | None:
    threshold = options.readability.grade_threshold
    if grade > threshold:
        return Finding(READABILITY_GRADE, {"grade": grade, "threshold": threshold})
    return None


# ---------------------------------------------------------------------------
# Paragraphs
# ---------------------------------------------------------------------------


def long_paragraphs(content: str) -> list[int]:
    counts = (word_count(p) for p in _PARAGRAPH_SPLIT_RE.split(content))
    return [n for n in counts if n > LONG_PARAGRAPH_WORDS]
