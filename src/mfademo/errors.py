"""Exceptions raised by the collector, pipeline and batch loader."""

from __future__ import annotations


class AlignmentInputError(ValueError):
    """Input cannot be aligned. Aborts the whole run."""


class NoEntriesError(AlignmentInputError):
    def __init__(self) -> None:
        super().__init__("Please upload at least one audio file")


class MissingTranscriptError(AlignmentInputError):
    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"Missing transcript for {identifier}")


class UnknownEntryError(KeyError):
    def __init__(self, entry_id: str) -> None:
        self.entry_id = entry_id
        super().__init__(entry_id)

    def __str__(self) -> str:
        return f"No entry with id {self.entry_id!r}"


class BatchFileError(ValueError):
    """The batch file is missing, unreadable or does not validate."""
