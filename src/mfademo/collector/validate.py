"""Entry validation — every entry needs a transcript before alignment."""

from __future__ import annotations

from typing import Sequence

from mfademo.errors import MissingTranscriptError, NoEntriesError
from mfademo.models.session import TranscriptEntry


def validate_all(entries: Sequence[TranscriptEntry]) -> None:
    """Raise for the first problem found; return None if all entries are valid."""
    if not entries:
        raise NoEntriesError()
    for entry in entries:
        if not entry.has_transcript:
            raise MissingTranscriptError(entry.identifier)
