"""Shared fixtures for all tests."""

from __future__ import annotations

import random
import sys
from pathlib import Path

# Ensure src/ is on sys.path so tests can import the `mfademo` package
# when running pytest from the repository root without an editable install.
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

import pytest  # noqa: E402

from mfademo.models.alignment import AlignmentResult, Interval  # noqa: E402
from mfademo.models.session import Session, TranscriptEntry  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def hello_entry() -> TranscriptEntry:
    return TranscriptEntry(identifier="hello_world.wav", transcript="hello world")


@pytest.fixture
def fixed_result() -> AlignmentResult:
    """Hand-built result matching the golden files in tests/fixtures."""
    return AlignmentResult(
        identifier="hello_world.wav",
        transcript="hello world",
        total_duration=1.1,
        words=[
            Interval(label="HELLO", start=0.0, end=0.5),
            Interval(label="WORLD", start=0.5, end=1.1),
        ],
        phones=[
            Interval(label="M", start=0.0, end=0.25),
            Interval(label="AH", start=0.25, end=0.5),
            Interval(label="W", start=0.5, end=0.7),
            Interval(label="R", start=0.7, end=0.9),
            Interval(label="D", start=0.9, end=1.1),
        ],
    )


@pytest.fixture
def session() -> Session:
    s = Session()
    s.set_transcript(s.add_entry("one.wav").id, "HELLO WORLD")
    s.set_transcript(s.add_entry("two.wav").id, "the quick brown fox")
    return s


@pytest.fixture
def golden_textgrid() -> str:
    return (FIXTURES_DIR / "hello_world.TextGrid").read_text(encoding="utf-8")


@pytest.fixture
def golden_report() -> str:
    return (FIXTURES_DIR / "hello_world_report.txt").read_text(encoding="utf-8")
