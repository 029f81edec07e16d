"""Tag selection and in-place annotation of the original content.

Two derivations come out of one finding list: ``report_tags`` keeps every tag
for the report, ``annotation_tag`` picks the single tag used to wrap the
sentence in the annotated output.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from data_designer_newsletter_tagger.checks import TAG_PRIORITY, Finding

logger = logging.getLogger(__name__)

_PRIORITY_RANK = {tag: rank for rank, tag in enumerate(TAG_PRIORITY)}
_ANNOTATION_TAG_RE = re.compile(r"</?(?:" + "|".join(TAG_PRIORITY) + r")>")
_ANNOTATED_SPAN_RE = re.compile(r"<(" + "|".join(TAG_PRIORITY) + r")>[\s\S]*?</\1>")
_FUZZY_MIN_WORDS = 3


def report_tags(findings: Iterable[Finding]) -> list[str]:
    tags: list[str] = []
    for finding in findings:
        if finding.tag not in tags:
            tags.append(finding.tag)
    return tags


def annotation_tag(findings: Iterable[Finding]) -> str | None:
    ranked = [f.tag for f in findings if f.tag in _PRIORITY_RANK]
    if not ranked:
        return None
    return min(ranked, key=_PRIORITY_RANK.__getitem__)


def wrap(text: str, tag: str) -> str:
    return f"<{tag}>{text}</{tag}>"


def _fuzzy_pattern(sentence: str) -> re.Pattern[str] | None:
    words = [w for w in sentence.split() if len(w) > 2]
    if len(words) < _FUZZY_MIN_WORDS:
        return None
    first = r"\s+".join(re.escape(w) for w in words[:2])
    last = r"\s+".join(re.escape(w) for w in words[-2:])
    return re.compile(rf"{first}[\s\S]*?{last}", re.IGNORECASE)


def _annotated_spans(content: str) -> list[tuple[int, int]]:
    return [m.span() for m in _ANNOTATED_SPAN_RE.finditer(content)]


def _overlaps(spans: list[tuple[int, int]], start: int, end: int) -> bool:
    return any(lo < end and start < hi for lo, hi in spans)


def _find_unannotated(content: str, target: str) -> int:
    """Index of the first occurrence of ``target`` outside existing annotations, or -1."""
    spans = _annotated_spans(content)
    pos = content.find(target)
    while pos != -1:
        if not _overlaps(spans, pos, pos + len(target)):
            return pos
        pos = content.find(target, pos + 1)
    return -1


class Annotator:
    """Progressively wraps flagged sentences in the original content.

    Sentences are located by exact substring first, then by a pattern built from
    their first and last two words. A sentence that cannot be located, or whose
    fuzzy match would overlap an existing annotation, is left alone.
    """

    def __init__(self, content: str) -> None:
        self.content = content
        self._seen: set[str] = set()

    def annotate(self, sentence: str, findings: list[Finding]) -> bool:
        tag = annotation_tag(findings)
        if tag is None:
            return False
        target = sentence.strip()
        if target in self._seen:
            return False

        if target and target in self.content:
            pos = _find_unannotated(self.content, target)
            if pos == -1:
                logger.debug(f"Sentence {target[:40]!r} only occurs inside existing annotations; skipped")
                return False
            end = pos + len(target)
            self.content = self.content[:pos] + wrap(target, tag) + self.content[end:]
            self._seen.add(target)
            return True

        pattern = _fuzzy_pattern(target)
        match = pattern.search(self.content) if pattern else None
        if match is None:
            logger.debug(f"No match in content for sentence {target[:40]!r}; left unannotated")
            return False
        start, end = match.span()
        if _ANNOTATION_TAG_RE.search(match.group(0)) or _overlaps(_annotated_spans(self.content), start, end):
            logger.debug(f"Fuzzy match for {target[:40]!r} overlaps an existing annotation; skipped")
            return False

        self.content = self.content[:start] + wrap(match.group(0), tag) + self.content[end:]
        self._seen.add(target)
        return True
