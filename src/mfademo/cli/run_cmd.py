"""mfademo run — align every entry of a batch file."""

from __future__ import annotations

from pathlib import Path

import click
from rich.markup import escape

from mfademo.cli.common import apply_overrides, execute_session, fail
from mfademo.collector.batch import load_batch
from mfademo.errors import BatchFileError
from mfademo.utils.progress import log

DEFAULT_OUTPUT_DIR = "alignments"


@click.command()
@click.option(
    "--batch", "-b",
    default="batch.yaml",
    type=click.Path(dir_okay=False),
    help="Path to batch.yaml",
)
@click.option(
    "--output-dir", "-o",
    default=None,
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
@click.option("--textgrid/--no-textgrid", default=None, help="Write TextGrid files")
@click.option("--report/--no-report", default=None, help="Write plaintext reports")
@click.option("--quiet", "-q", is_flag=True, help="Skip per-file result tables")
def run_cmd(
    batch: str,
    output_dir: str | None,
    seed: int | None,
    delay: float | None,
    textgrid: bool | None,
    report: bool | None,
    quiet: bool,
) -> None:
    """Run mock alignment over a batch file."""
    batch_path = Path(batch).resolve()
    try:
        session = load_batch(batch_path)
    except BatchFileError as e:
        fail(e)

    apply_overrides(session, seed=seed, delay=delay, textgrid=textgrid, report=report)

    if output_dir:
        target = Path(output_dir).resolve()
    else:
        target = batch_path.parent / (session.config.output.output_dir or DEFAULT_OUTPUT_DIR)

    log(
        f"[bold]mfademo[/bold] — {len(session.entries)} file(s) "
        f"from {escape(batch_path.name)}"
    )
    execute_session(session, target, quiet=quiet)
