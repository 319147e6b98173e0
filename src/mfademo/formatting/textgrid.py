"""Praat TextGrid (long text format) rendering."""

from __future__ import annotations

from mfademo.models.alignment import AlignmentResult, Interval

TIER_INDENT = " " * 4
INTERVAL_INDENT = " " * 8
FIELD_INDENT = " " * 12


def format_seconds(value: float) -> str:
    return f"{value:.3f}"


def quote(text: str) -> str:
    """Praat string literal; embedded quotes are doubled."""
    return '"' + text.replace('"', '""') + '"'


def render_textgrid(result: AlignmentResult) -> str:
    """Render a two-tier (words, phones) TextGrid document."""
    xmax = format_seconds(result.total_duration)
    lines = [
        'File type = "ooTextFile"',
        'Object class = "TextGrid"',
        "",
        "xmin = 0",
        f"xmax = {xmax}",
        "tiers? <exists>",
        "size = 2",
        "item []:",
    ]
    lines.extend(_render_tier(1, "words", result.words, xmax))
    lines.extend(_render_tier(2, "phones", result.phones, xmax))
    return "\n".join(lines) + "\n"


def _render_tier(index: int, name: str, intervals: list[Interval], xmax: str) -> list[str]:
    lines = [
        f"{TIER_INDENT}item [{index}]:",
        f'{INTERVAL_INDENT}class = "IntervalTier"',
        f"{INTERVAL_INDENT}name = {quote(name)}",
        f"{INTERVAL_INDENT}xmin = 0",
        f"{INTERVAL_INDENT}xmax = {xmax}",
        f"{INTERVAL_INDENT}intervals: size = {len(intervals)}",
    ]
    for i, interval in enumerate(intervals, start=1):
        lines.append(f"{INTERVAL_INDENT}intervals [{i}]:")
        lines.append(f"{FIELD_INDENT}xmin = {format_seconds(interval.start)}")
        lines.append(f"{FIELD_INDENT}xmax = {format_seconds(interval.end)}")
        lines.append(f"{FIELD_INDENT}text = {quote(interval.label)}")
    return lines
