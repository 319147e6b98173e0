"""Sequential session runner — validate, align every entry, write outputs."""

from __future__ import annotations

import random
import time
from pathlib import Path

from rich.markup import escape

from mfademo.aligner.mock import align, make_rng
from mfademo.collector.validate import validate_all
from mfademo.formatting import (
    check_output_names,
    render_report,
    render_textgrid,
    report_filename,
    textgrid_filename,
)
from mfademo.models.alignment import AlignmentResult
from mfademo.models.session import Session
from mfademo.utils.io import write_atomic
from mfademo.utils.progress import log_step, log_success


def run_session(
    session: Session,
    *,
    rng: random.Random | None = None,
    sleep=time.sleep,
) -> list[AlignmentResult]:
    """Align every entry in the session, in order.

    The run is all-or-nothing: ``session.results`` is cleared first and only
    set once every entry has been aligned. Validation errors propagate
    before any entry is aligned.
    """
    session.results = []
    validate_all(session.entries)

    config = session.config
    rng = rng or make_rng(config.aligner)
    results: list[AlignmentResult] = []

    for entry in session.entries:
        if config.processing_delay_seconds > 0:
            sleep(config.processing_delay_seconds)
        result = align(entry, rng=rng, config=config.aligner)
        log_step(
            "Align",
            f"{escape(entry.identifier)} — {result.word_count} words, "
            f"{result.phone_count} phonemes, {result.total_duration:.3f}s",
        )
        results.append(result)

    session.results = results
    log_success(f"Aligned {len(results)} file(s)")
    return results


def write_outputs(
    results: list[AlignmentResult],
    output_dir: Path,
    *,
    textgrid: bool = True,
    report: bool = True,
) -> list[Path]:
    """Write the TextGrid and report for each result. Returns written paths.

    Colliding output names are rejected before anything is written.
    """
    check_output_names(r.identifier for r in results)
    output_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []

    for result in results:
        if textgrid:
            path = output_dir / textgrid_filename(result.identifier)
            write_atomic(path, render_textgrid(result))
            written.append(path)
        if report:
            path = output_dir / report_filename(result.identifier)
            write_atomic(path, render_report(result))
            written.append(path)

    log_step("Write", f"{len(written)} file(s) written to {escape(str(output_dir))}")
    return written
