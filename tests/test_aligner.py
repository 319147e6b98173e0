"""Tests for the mock aligner (mfademo.aligner)."""

from __future__ import annotations

import math
import random

import pytest

from mfademo.aligner import align, make_rng, phone_count_for, tokenize
from mfademo.models.config import PHONE_INVENTORY, AlignerConfig
from mfademo.models.session import TranscriptEntry


def _entry(text: str) -> TranscriptEntry:
    return TranscriptEntry(identifier="a.wav", transcript=text)


class TestTokenize:
    def test_uppercases(self) -> None:
        assert tokenize("hello World") == ["HELLO", "WORLD"]

    def test_discards_empty_segments(self) -> None:
        assert tokenize("  hello \n\t world  ") == ["HELLO", "WORLD"]

    def test_blank_has_no_tokens(self) -> None:
        assert tokenize("   ") == []


class TestPhoneCount:
    @pytest.mark.parametrize(
        "token, expected",
        [("A", 2), ("HI", 2), ("HELLO", 3), ("WORLD", 3), ("ALIGNMENT", 5)],
    )
    def test_default_rule(self, token: str, expected: int) -> None:
        assert phone_count_for(token) == expected

    def test_custom_minimum(self) -> None:
        assert phone_count_for("A", AlignerConfig(min_phones=4)) == 4


class TestAlign:
    def test_hello_world_scenario(self, hello_entry, rng) -> None:
        result = align(hello_entry, rng=rng)
        assert [w.label for w in result.words] == ["HELLO", "WORLD"]
        assert result.phone_count == 6
        assert result.word_count == 2

    def test_keeps_identifier_and_raw_transcript(self, rng) -> None:
        result = align(_entry("  mixed Case  "), rng=rng)
        assert result.identifier == "a.wav"
        assert result.transcript == "  mixed Case  "

    def test_word_durations_in_range(self, rng) -> None:
        result = align(_entry("one two three four five six seven eight"), rng=rng)
        for word in result.words:
            assert 0.3 - 1e-9 <= word.duration < 0.7 + 1e-9

    def test_phone_labels_from_inventory(self, rng) -> None:
        result = align(_entry("supercalifragilistic expialidocious"), rng=rng)
        assert {p.label for p in result.phones} <= set(PHONE_INVENTORY)

    def test_words_are_contiguous_from_zero(self, rng) -> None:
        result = align(_entry("a bb ccc dddd eeeee"), rng=rng)
        assert result.words[0].start == 0.0
        for prev, cur in zip(result.words, result.words[1:]):
            assert cur.start == prev.end

    def test_phones_cover_each_word(self, rng) -> None:
        result = align(_entry("forced alignment is fun"), rng=rng)
        i = 0
        for word in result.words:
            n = phone_count_for(word.label)
            word_phones = result.phones[i:i + n]
            i += n
            assert word_phones[0].start == word.start
            assert word_phones[-1].end == word.end
            for prev, cur in zip(word_phones, word_phones[1:]):
                assert cur.start == prev.end
            assert math.isclose(
                sum(p.duration for p in word_phones), word.duration, abs_tol=1e-9
            )
        assert i == result.phone_count

    def test_total_duration_is_last_phone_end(self, rng) -> None:
        result = align(_entry("the quick brown fox"), rng=rng)
        assert result.total_duration == result.phones[-1].end
        assert result.total_duration == result.words[-1].end

    def test_averages(self, rng) -> None:
        result = align(_entry("the quick brown fox"), rng=rng)
        assert math.isclose(
            result.average_word_duration, result.total_duration / result.word_count
        )
        assert math.isclose(
            result.average_phone_duration, result.total_duration / result.phone_count
        )

    def test_same_seed_same_result(self, hello_entry) -> None:
        first = align(hello_entry, rng=random.Random(7))
        second = align(hello_entry, rng=random.Random(7))
        assert first == second

    def test_seed_from_config(self, hello_entry) -> None:
        config = AlignerConfig(seed=99)
        assert align(hello_entry, config=config) == align(hello_entry, config=config)

    def test_make_rng_unseeded(self) -> None:
        assert isinstance(make_rng(), random.Random)

    def test_custom_inventory_and_range(self, rng) -> None:
        config = AlignerConfig(
            word_duration_min=1.0, word_duration_max=2.0, phone_inventory=["X"]
        )
        result = align(_entry("abc defgh"), rng=rng, config=config)
        assert {p.label for p in result.phones} == {"X"}
        for word in result.words:
            assert 1.0 - 1e-9 <= word.duration < 2.0 + 1e-9
