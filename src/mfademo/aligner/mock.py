"""Mock forced alignment — random word and phoneme timings.

Nothing here looks at audio. Word durations are drawn uniformly from the
configured range and split evenly across a phoneme count derived from the
word's length; phoneme labels are drawn from a fixed inventory.
"""

from __future__ import annotations

import math
import random

from mfademo.models.alignment import AlignmentResult, Interval
from mfademo.models.config import AlignerConfig
from mfademo.models.session import TranscriptEntry


def tokenize(transcript: str) -> list[str]:
    """Uppercase whitespace-delimited tokens."""
    return transcript.upper().split()


def phone_count_for(token: str, config: AlignerConfig | None = None) -> int:
    config = config or AlignerConfig()
    return max(config.min_phones, math.floor(len(token) * config.phones_per_char))


def make_rng(config: AlignerConfig | None = None) -> random.Random:
    """A generator seeded from config, or from system entropy if unseeded."""
    seed = config.seed if config else None
    return random.Random(seed)


def align(
    entry: TranscriptEntry,
    *,
    rng: random.Random | None = None,
    config: AlignerConfig | None = None,
) -> AlignmentResult:
    """Generate word and phoneme intervals for a validated entry.

    Timings accumulate at full precision; rounding happens only when a
    result is rendered.
    """
    config = config or AlignerConfig()
    rng = rng or make_rng(config)
    span = config.word_duration_max - config.word_duration_min

    words: list[Interval] = []
    phones: list[Interval] = []
    t = 0.0

    for token in tokenize(entry.transcript):
        word_start = t
        word_duration = config.word_duration_min + rng.random() * span
        phone_count = phone_count_for(token, config)
        phone_duration = word_duration / phone_count

        for _ in range(phone_count):
            label = rng.choice(config.phone_inventory)
            phones.append(Interval(label=label, start=t, end=t + phone_duration))
            t += phone_duration

        words.append(Interval(label=token, start=word_start, end=t))

    return AlignmentResult(
        identifier=entry.identifier,
        transcript=entry.transcript,
        total_duration=t,
        words=words,
        phones=phones,
    )
