# Rule-based newsletter content tagger.
#
# Splits text into sentences, runs ten heuristic checks per sentence, wraps each
# flagged sentence of the original content in its highest-priority tag, and adds
# document-level findings (link density, formatting, redundancy, readability).

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from data_designer_newsletter_tagger import document
from data_designer_newsletter_tagger.annotate import Annotator, report_tags
from data_designer_newsletter_tagger.checks import Finding, freeze, run_sentence_checks, thaw
from data_designer_newsletter_tagger.options import Options, resolve_options
from data_designer_newsletter_tagger.text import normalize_html, split_sentences, word_count

logger = logging.getLogger(__name__)


class InvalidContentError(TypeError):
    """Raised when the content to analyze is not a string."""


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SentenceReport:
    sentence: str
    tags: tuple[str, ...]
    reasons: Mapping[str, Mapping[str, Any]]

    def __post_init__(self) -> None:
        object.__setattr__(self, "reasons", freeze(self.reasons))

    def to_payload(self) -> dict[str, object]:
        return {"sentence": self.sentence, "tags": list(self.tags), "reasons": thaw(self.reasons)}


@dataclass(frozen=True)
class Readability:
    flesch_kincaid_grade: float
    threshold: float

    def to_payload(self) -> dict[str, object]:
        return {"fleschKincaidGrade": self.flesch_kincaid_grade, "threshold": self.threshold}


@dataclass(frozen=True)
class GlobalMetrics:
    word_count: int
    sentence_count: int
    link_count: int
    link_density_per_100_words: float
    long_paragraphs: tuple[int, ...]
    readability: Readability
    flags: tuple[Finding, ...]

    def flag(self, tag: str) -> Finding | None:
        return next((f for f in self.flags if f.tag == tag), None)

    def to_payload(self) -> dict[str, object]:
        return {
            "wordCount": self.word_count,
            "sentenceCount": self.sentence_count,
            "linkCount": self.link_count,
            "linkDensityPer100Words": self.link_density_per_100_words,
            "longParagraphs": list(self.long_paragraphs),
            "readability": self.readability.to_payload(),
            "flags": [f.to_payload() for f in self.flags],
        }


@dataclass(frozen=True)
class AnalysisReport:
    per_sentence: tuple[SentenceReport, ...]
    global_metrics: GlobalMetrics

    def to_payload(self) -> dict[str, object]:
        return {
            "perSentence": [s.to_payload() for s in self.per_sentence],
            "global": self.global_metrics.to_payload(),
        }


@dataclass(frozen=True)
class AnalysisResult:
    annotated: str
    report: AnalysisReport

    def to_payload(self) -> dict[str, object]:
        return {"annotated": self.annotated, "report": self.report.to_payload()}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def analyze_content(content: str, options: Options | Mapping[str, Any] | None = None) -> AnalysisResult:
    """Tag newsletter content sentence by sentence and score the document.

    Args:
        content: Raw text or HTML. Analysis runs on a normalized copy; annotation
            and formatting checks use the original.
        options: An ``Options`` instance or a mapping overriding any subset of the
            defaults. Uses ``DEFAULT_OPTIONS`` if omitted.

    Returns:
        An ``AnalysisResult`` holding the annotated content and the report.

    Raises:
        InvalidContentError: If ``content`` is not a string.
    """
    if not isinstance(content, str):
        raise InvalidContentError(f"content must be a string, got {type(content).__name__}")
    opts = resolve_options(options)

    clean = normalize_html(content)
    logger.debug(f"Normalized content for analysis: {clean[:100]!r}")
    sentences = split_sentences(clean)

    annotator = Annotator(content)
    per_sentence: list[SentenceReport] = []
    for sentence in sentences:
        findings = run_sentence_checks(sentence, opts)
        if opts.annotate and findings:
            annotator.annotate(sentence, findings)
        per_sentence.append(SentenceReport(
            sentence=sentence,
            tags=tuple(report_tags(findings)),
            reasons={f.tag: f.reasons for f in findings},
        ))

    words = word_count(clean)
    links = document.count_links(content)
    grade = document.flesch_kincaid_grade(content)
    flags = [
        document.detect_link_density(links, words, opts),
        document.detect_formatting_issues(content),
        document.find_redundant_sentences(sentences, opts),
        document.detect_readability(grade, opts),
    ]

    global_metrics = GlobalMetrics(
        word_count=words,
        sentence_count=len(sentences),
        link_count=links,
        link_density_per_100_words=document.link_density(links, words),
        long_paragraphs=tuple(document.long_paragraphs(content)),
        readability=Readability(flesch_kincaid_grade=grade, threshold=opts.readability.grade_threshold),
        flags=tuple(f for f in flags if f is not None),
    )
    logger.debug(
        f"Analyzed {len(sentences)} sentences, {words} words; "
        f"{sum(1 for s in per_sentence if s.tags)} flagged, {len(global_metrics.flags)} document flags"
    )
    return AnalysisResult(
        annotated=annotator.content,
        report=AnalysisReport(per_sentence=tuple(per_sentence), global_metrics=global_metrics),
    )
