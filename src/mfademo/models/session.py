"""Session model — the entries, config and results of one run."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, Field, field_validator

from mfademo.errors import UnknownEntryError
from mfademo.models.alignment import AlignmentResult
from mfademo.models.config import Config


def _new_entry_id() -> str:
    return uuid.uuid4().hex[:9]


class TranscriptEntry(BaseModel):
    """An audio file paired with the transcript typed for it."""

    id: str = Field(default_factory=_new_entry_id)
    identifier: str  # file name
    source: str | None = None  # path to the audio; never read
    transcript: str = ""

    @field_validator("transcript", mode="before")
    @classmethod
    def _blank_transcript(cls, value: str | None) -> str:
        return "" if value is None else value

    @property
    def has_transcript(self) -> bool:
        return bool(self.transcript.strip())


class Session(BaseModel):
    """In-memory state for one processing session.

    ``results`` is replaced wholesale by each run and never persisted.
    """

    entries: list[TranscriptEntry] = Field(default_factory=list)
    results: list[AlignmentResult] = Field(default_factory=list)
    config: Config = Field(default_factory=Config)

    def add_entry(self, identifier: str, source: str | None = None) -> TranscriptEntry:
        entry = TranscriptEntry(identifier=identifier, source=source)
        while any(e.id == entry.id for e in self.entries):
            entry.id = _new_entry_id()
        self.entries.append(entry)
        return entry

    def get_entry(self, entry_id: str) -> TranscriptEntry:
        for entry in self.entries:
            if entry.id == entry_id:
                return entry
        raise UnknownEntryError(entry_id)

    def set_transcript(self, entry_id: str, text: str) -> None:
        self.get_entry(entry_id).transcript = text

    def remove_entry(self, entry_id: str) -> None:
        self.entries.remove(self.get_entry(entry_id))
