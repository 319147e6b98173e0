"""mfademo align — one-shot alignment without a batch file."""

from __future__ import annotations

from pathlib import Path

import click

from mfademo.cli.common import apply_overrides, execute_session, fail
from mfademo.collector.batch import collect_entries
from mfademo.errors import AlignmentInputError
from mfademo.models.session import Session


@click.command()
@click.argument(
    "audio",
    nargs=-1,
    type=click.Path(exists=True, dir_okay=False),
)
@click.option(
    "--transcript", "-t",
    multiple=True,
    help="Transcripts, in the same order as the audio files",
)
@click.option(
    "--output-dir", "-o",
    default=".",
    type=click.Path(file_okay=False),
    help="Where to write TextGrid and report files",
)
@click.option("--seed", default=None, type=int, help="Seed for reproducible timings")
@click.option(
    "--delay",
    default=None,
    type=click.FloatRange(0.0, 10.0),
    help="Simulated processing time per file, in seconds",
)
@click.option("--quiet", "-q", is_flag=True, help="Skip per-file result tables")
def align_cmd(
    audio: tuple[str, ...],
    transcript: tuple[str, ...],
    output_dir: str,
    seed: int | None,
    delay: float | None,
    quiet: bool,
) -> None:
    """Align audio files against transcripts given on the command line."""
    session = Session()
    try:
        collect_entries(session, [Path(a) for a in audio], transcript)
    except AlignmentInputError as e:
        fail(e)

    apply_overrides(session, seed=seed, delay=delay)
    execute_session(session, Path(output_dir).resolve(), quiet=quiet)
