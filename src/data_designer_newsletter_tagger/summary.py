from __future__ import annotations

from dataclasses import dataclass

from data_designer_newsletter_tagger import checks
from data_designer_newsletter_tagger.core import AnalysisResult

HIGH = "high"
MEDIUM = "medium"
LOW = "low"
INFO = "info"

HIGHLIGHT_PRIORITIES: dict[str, str] = {
    checks.SPAM_WORDS: HIGH,
    checks.GRAMMAR_SPELLING: HIGH,
    checks.CLAIM_WITHOUT_EVIDENCE: HIGH,
    checks.HARD_TO_READ: MEDIUM,
    checks.FLUFF: MEDIUM,
    checks.HEDGING: MEDIUM,
    checks.VAGUE_DATE: MEDIUM,
    checks.VAGUE_NUMBER: MEDIUM,
    checks.EMOJI_EXCESS: LOW,
    checks.CTA: INFO,
}

# tag -> (message, suggestion)
HIGHLIGHT_MESSAGES: dict[str, tuple[str, str]] = {
    checks.SPAM_WORDS: (
        "Contains spam-like language that may trigger email filters",
        "Use more natural, conversational language",
    ),
    checks.GRAMMAR_SPELLING: (
        "Grammar or spelling issue detected",
        "Review and correct the grammar or spelling",
    ),
    checks.HARD_TO_READ: (
        "This sentence is complex and may be hard to read",
        "Break into shorter sentences or simplify the language",
    ),
    checks.FLUFF: (
        "Contains unnecessary filler words or phrases",
        "Remove filler words to make the message more direct",
    ),
    checks.EMOJI_EXCESS: (
        "Too many emojis may appear unprofessional",
        "Use emojis sparingly for better impact",
    ),
    checks.CTA: (
        "Call-to-action detected",
        "Ensure your CTA is clear and compelling",
    ),
    checks.HEDGING: (
        "Uncertain language weakens your message",
        "Use more confident, direct language",
    ),
    checks.VAGUE_DATE: (
        "Vague time reference may confuse readers",
        "Use specific dates or timeframes",
    ),
    checks.VAGUE_NUMBER: (
        "Number lacks context or units",
        "Add units, percentages, or context to numbers",
    ),
    checks.CLAIM_WITHOUT_EVIDENCE: (
        "Strong claim without supporting evidence",
        "Add data, sources, or examples to support your claim",
    ),
}


@dataclass(frozen=True)
class HighlightRange:
    start: int
    end: int
    tag: str
    priority: str
    message: str
    suggestion: str

    def to_payload(self) -> dict[str, object]:
        return {
            "start": self.start,
            "end": self.end,
            "type": self.tag,
            "priority": self.priority,
            "message": self.message,
            "suggestion": self.suggestion,
        }


def extract_highlight_ranges(content: str, result: AnalysisResult) -> list[HighlightRange]:
    """One range per tag for every flagged sentence found verbatim in ``content``."""
    ranges: list[HighlightRange] = []
    for entry in result.report.per_sentence:
        sentence = entry.sentence.strip()
        if not entry.tags or not sentence:
            continue
        start = content.find(sentence)
        if start == -1:
            continue
        for tag in entry.tags:
            if tag not in HIGHLIGHT_PRIORITIES:
                continue
            message, suggestion = HIGHLIGHT_MESSAGES[tag]
            ranges.append(HighlightRange(start, start + len(sentence), tag, HIGHLIGHT_PRIORITIES[tag], message, suggestion))
    return ranges


def overall_score(total_issues: int, word_count: int) -> float:
    """Map issues per 100 words onto 0-100; each grade band spans two issues per 100 words."""
    per100 = total_issues / max(word_count, 1) * 100
    if per100 <= 2:
        return max(90.0, 100 - per100 * 5)
    if per100 <= 4:
        return max(80.0, 90 - (per100 - 2) * 5)
    if per100 <= 6:
        return max(70.0, 80 - (per100 - 4) * 5)
    if per100 <= 8:
        return max(60.0, 70 - (per100 - 6) * 5)
    return max(0.0, 60 - (per100 - 8) * 2)


def grade(score: float) -> str:
    if score >= 90:
        return "A"
    if score >= 80:
        return "B"
    if score >= 70:
        return "C"
    if score >= 60:
        return "D"
    return "F"


def summarize(result: AnalysisResult) -> dict:
    """Issue counts by priority, an overall score and letter grade, and headline metrics.

    Call-to-action tags count under ``info`` but not toward the score.
    """
    metrics = result.report.global_metrics
    issue_counts = {HIGH: 0, MEDIUM: 0, LOW: 0, INFO: 0}
    issue_types: list[str] = []
    for entry in result.report.per_sentence:
        for tag in entry.tags:
            priority = HIGHLIGHT_PRIORITIES.get(tag)
            if priority is None:
                continue
            issue_counts[priority] += 1
            if tag not in issue_types:
                issue_types.append(tag)

    total_issues = issue_counts[HIGH] + issue_counts[MEDIUM] + issue_counts[LOW]
    score = overall_score(total_issues, metrics.word_count)
    return {
        "score": round(score, 2),
        "grade": grade(score),
        "issue_counts": issue_counts,
        "issue_types": issue_types,
        "metrics": {
            "word_count": metrics.word_count,
            "sentence_count": metrics.sentence_count,
            "readability_grade": metrics.readability.flesch_kincaid_grade,
            "link_density": metrics.link_density_per_100_words,
        },
        "global_flags": [f.to_payload() for f in metrics.flags],
    }
