"""Batch files — YAML documents listing entries and config for one run."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from pydantic import ValidationError
from rich.markup import escape
from ruamel.yaml.error import YAMLError

from mfademo.errors import AlignmentInputError, BatchFileError
from mfademo.models.session import Session, TranscriptEntry
from mfademo.utils.io import read_yaml, write_yaml
from mfademo.utils.progress import log_warning

BATCH_VERSION = "1.0"


def session_from_batch(data: dict) -> Session:
    """Build a session from a parsed batch document."""
    version = str(data.get("version", BATCH_VERSION))
    if version != BATCH_VERSION:
        log_warning(f"Batch file version {escape(version)} (expected {BATCH_VERSION})")
    try:
        return Session(
            entries=data.get("entries") or [],
            config=data.get("config") or {},
        )
    except ValidationError as e:
        raise BatchFileError(f"Invalid batch file: {e}") from e


def batch_from_session(session: Session) -> dict:
    """Serialize a session's entries and config. Results are not included."""
    return {
        "version": BATCH_VERSION,
        "entries": [
            entry.model_dump(mode="json", exclude={"id"})
            for entry in session.entries
        ],
        "config": session.config.model_dump(mode="json"),
    }


def load_batch(path: Path) -> Session:
    """Read a batch file into a new session."""
    if not path.exists():
        raise BatchFileError(f"Batch file not found: {path}")
    try:
        data = read_yaml(path)
    except (YAMLError, ValueError, OSError) as e:
        raise BatchFileError(f"Cannot read batch file {path}: {e}") from e
    return session_from_batch(data)


def save_batch(path: Path, session: Session) -> None:
    write_yaml(path, batch_from_session(session))


def transcript_sidecar(audio_path: Path) -> Path:
    """hello.wav -> hello.txt"""
    return audio_path.with_suffix(".txt")


def collect_entries(
    session: Session,
    audio_paths: Sequence[Path],
    transcripts: Sequence[str] = (),
) -> list[TranscriptEntry]:
    """Add one entry per audio file to the session.

    Transcripts are paired with audio files by position. Files without a
    positional transcript fall back to a sibling ``.txt`` file, then to an
    empty transcript.
    """
    if len(transcripts) > len(audio_paths):
        raise AlignmentInputError(
            f"Got {len(transcripts)} transcripts for {len(audio_paths)} audio file(s)"
        )

    added = []
    for i, audio_path in enumerate(audio_paths):
        entry = session.add_entry(audio_path.name, source=str(audio_path))
        if i < len(transcripts):
            session.set_transcript(entry.id, transcripts[i])
        else:
            sidecar = transcript_sidecar(audio_path)
            if sidecar.exists():
                session.set_transcript(entry.id, _read_sidecar(sidecar))
        added.append(entry)
    return added


def _read_sidecar(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8").strip()
    except UnicodeDecodeError as e:
        raise AlignmentInputError(f"Transcript {path.name} is not valid UTF-8") from e
    except OSError as e:
        raise AlignmentInputError(f"Cannot read transcript {path.name}: {e}") from e
