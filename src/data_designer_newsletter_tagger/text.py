"""Text normalization and sentence segmentation.

Normalization is for analysis only; callers keep the original string for
annotation and document-level formatting checks.
"""

from __future__ import annotations

import re

_BLOCK_CLOSE_RE = re.compile(r"</(?:p|div|h[1-6])>", re.IGNORECASE)
_BREAK_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
_BLOCK_OPEN_RE = re.compile(r"<(?:p|div|h[1-6])[^>]*>", re.IGNORECASE)
_ANY_TAG_RE = re.compile(r"<[^>]*>")

# Decoded in this order, so "&amp;lt;" ends up as "<".
_ENTITIES = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)

_BLANK_LINES_RE = re.compile(r"\n{3,}")
_INLINE_SPACE_RE = re.compile(r"[ \t]+")
_LINE_LEAD_SPACE_RE = re.compile(r"\n ")

_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]+|[^.!?]+\Z")
_WORD_RE = re.compile(r"\b\w+\b")


def normalize_html(content: str) -> str:
    """Reduce HTML (or plain text) to whitespace-normalized plain text."""
    text = _BLOCK_CLOSE_RE.sub("\n\n", content)
    text = _BREAK_RE.sub("\n", text)
    text = _BLOCK_OPEN_RE.sub("", text)
    text = _ANY_TAG_RE.sub("", text)
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    text = _BLANK_LINES_RE.sub("\n\n", text)
    text = _INLINE_SPACE_RE.sub(" ", text)
    text = _LINE_LEAD_SPACE_RE.sub("\n", text)
    return text.strip()


def split_sentences(text: str) -> list[str]:
    """Split on runs of terminal punctuation; the end of text closes the last sentence.

    Abbreviations and decimals ("e.g.", "3.5") split like any other period.
    """
    sentences = (m.group(0).strip() for m in _SENTENCE_RE.finditer(text))
    return [s for s in sentences if s]


def word_count(text: str) -> int:
    return len(_WORD_RE.findall(text))
