"""Output file names derived from the audio identifier."""

from __future__ import annotations

from pathlib import PurePath
from typing import Iterable

from mfademo.errors import AlignmentInputError

TEXTGRID_SUFFIX = ".TextGrid"
REPORT_SUFFIX = "_report.txt"


def _stem(identifier: str) -> str:
    name = PurePath(identifier).name
    return PurePath(name).stem if PurePath(name).suffix else name


def textgrid_filename(identifier: str) -> str:
    """speech.wav -> speech.TextGrid"""
    return _stem(identifier) + TEXTGRID_SUFFIX


def report_filename(identifier: str) -> str:
    """speech.wav -> speech_report.txt"""
    return _stem(identifier) + REPORT_SUFFIX


def check_output_names(identifiers: Iterable[str]) -> None:
    """Raise if two identifiers would write to the same output files.

    Names are compared case-insensitively since some filesystems are.
    """
    seen: dict[str, str] = {}
    for identifier in identifiers:
        key = textgrid_filename(identifier).casefold()
        if key in seen:
            raise AlignmentInputError(
                f"{seen[key]} and {identifier} would both be written as "
                f"{textgrid_filename(identifier)}; rename one of them"
            )
        seen[key] = identifier
