"""Fixed-width plaintext alignment report."""

from __future__ import annotations

from mfademo.formatting.textgrid import format_seconds
from mfademo.models.alignment import AlignmentResult, Interval

RULE_WIDTH = 80
WORD_COLUMN = 20
PHONE_COLUMN = 10
NUMBER_COLUMN = 10

WORD_HEADER = "Word                 Start Time    End Time      Duration"
PHONE_HEADER = "Phoneme    Start Time    End Time      Duration"


def render_report(result: AlignmentResult) -> str:
    """Render the header block followed by the word and phoneme tables."""
    lines = [
        "FORCED ALIGNMENT REPORT",
        "=" * RULE_WIDTH,
        "",
        f"File: {result.identifier}",
        f"Transcript: {result.transcript}",
        f"Total Duration: {format_seconds(result.total_duration)}s",
        f"Word Count: {result.word_count}",
        f"Phoneme Count: {result.phone_count}",
        f"Average Word Duration: {format_seconds(result.average_word_duration)}s",
        f"Average Phoneme Duration: {format_seconds(result.average_phone_duration)}s",
        "",
        "WORD ALIGNMENTS",
    ]
    lines.extend(_table(WORD_HEADER, result.words, WORD_COLUMN))
    lines.extend(["", "", "PHONEME ALIGNMENTS"])
    lines.extend(_table(PHONE_HEADER, result.phones, PHONE_COLUMN))
    return "\n".join(lines) + "\n"


def _table(header: str, intervals: list[Interval], label_width: int) -> list[str]:
    rule = "-" * RULE_WIDTH
    rows = [rule, header, rule]
    for interval in intervals:
        rows.append(
            f"{interval.label.ljust(label_width)} "
            f"{format_seconds(interval.start):>{NUMBER_COLUMN}}s   "
            f"{format_seconds(interval.end):>{NUMBER_COLUMN}}s   "
            f"{format_seconds(interval.duration):>{NUMBER_COLUMN}}s"
        )
    return rows
