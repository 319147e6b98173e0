"""Alignment result models: timed word and phoneme intervals."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class Interval(BaseModel):
    """A labelled time span, in seconds. Used for words and phonemes."""

    label: str
    start: float = Field(ge=0.0)
    end: float

    @model_validator(mode="after")
    def _check_order(self) -> Interval:
        if self.end <= self.start:
            raise ValueError(
                f"Interval end ({self.end}) must be after start ({self.start})"
            )
        return self

    @property
    def duration(self) -> float:
        return self.end - self.start


class AlignmentResult(BaseModel):
    """Word and phoneme timings generated for one audio file.

    Words are contiguous from 0 to ``total_duration``; the phones of each
    word are contiguous and cover exactly that word's span.
    """

    identifier: str
    transcript: str
    total_duration: float = 0.0
    words: list[Interval] = Field(default_factory=list)
    phones: list[Interval] = Field(default_factory=list)

    @property
    def word_count(self) -> int:
        return len(self.words)

    @property
    def phone_count(self) -> int:
        return len(self.phones)

    @property
    def average_word_duration(self) -> float:
        return _mean(w.duration for w in self.words)

    @property
    def average_phone_duration(self) -> float:
        return _mean(p.duration for p in self.phones)


def _mean(values) -> float:
    values = list(values)
    return sum(values) / len(values) if values else 0.0
