"""mfademo init — scaffold a batch file from audio files."""

from __future__ import annotations

from pathlib import Path

import click
from rich.markup import escape

from mfademo.cli.common import fail
from mfademo.collector.batch import collect_entries, save_batch
from mfademo.errors import AlignmentInputError
from mfademo.models.session import Session
from mfademo.utils.progress import log_error, log_success, log_warning


@click.command()
@click.option(
    "--audio", "-a",
    multiple=True,
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Audio files (WAV), one per entry",
)
@click.option(
    "--transcript", "-t",
    multiple=True,
    help="Transcripts, in the same order as --audio. Defaults to a sibling .txt file.",
)
@click.option(
    "--output", "-o",
    default="batch.yaml",
    type=click.Path(dir_okay=False),
    help="Batch file to write",
)
@click.option("--force", is_flag=True, help="Overwrite an existing batch file")
def init_cmd(
    audio: tuple[str, ...],
    transcript: tuple[str, ...],
    output: str,
    force: bool,
) -> None:
    """Scaffold a batch file listing audio files and their transcripts."""
    batch_path = Path(output).resolve()
    if batch_path.exists() and not force:
        log_error(f"Batch file already exists: {escape(str(batch_path))} (use --force)")
        raise SystemExit(1)

    session = Session()
    try:
        entries = collect_entries(session, [Path(a) for a in audio], transcript)
    except AlignmentInputError as e:
        fail(e)

    try:
        save_batch(batch_path, session)
    except OSError as e:
        fail(e)

    missing = [e.identifier for e in entries if not e.has_transcript]
    log_success(f"Batch file: {escape(str(batch_path))}")
    log_success(f"Entries: {len(entries)}")
    for name in missing:
        log_warning(f"No transcript yet for {escape(name)}")

    click.echo(f"\nNext: fill in transcripts, then mfademo run -b {batch_path}")
