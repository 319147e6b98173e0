"""Shared command plumbing: run a session and report the outcome."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

from rich.markup import escape

from mfademo.errors import AlignmentInputError
from mfademo.models.session import Session
from mfademo.pipeline.runner import run_session, write_outputs
from mfademo.utils.progress import log_error, log_success, show_result_summary


def execute_session(session: Session, output_dir: Path, *, quiet: bool = False) -> None:
    """Run the session and write its outputs; exit 1 on failure."""
    try:
        results = run_session(session)
        written = write_outputs(
            results,
            output_dir,
            textgrid=session.config.output.textgrid,
            report=session.config.output.report,
        )
    except (AlignmentInputError, OSError) as e:
        fail(e)

    if not quiet:
        for result in results:
            show_result_summary(result)

    for path in written:
        log_success(f"Wrote {escape(str(path))}")


def fail(error: Exception) -> NoReturn:
    """Report an error on the console and exit with status 1."""
    log_error(escape(str(error)))
    raise SystemExit(1)


def apply_overrides(
    session: Session,
    *,
    seed: int | None = None,
    delay: float | None = None,
    textgrid: bool | None = None,
    report: bool | None = None,
) -> None:
    """Apply command-line options on top of the session config."""
    config = session.config
    if seed is not None:
        config.aligner.seed = seed
    if delay is not None:
        config.processing_delay_seconds = delay
    if textgrid is not None:
        config.output.textgrid = textgrid
    if report is not None:
        config.output.report = report
