"""Root CLI group for mfademo."""

from __future__ import annotations

import click

from mfademo import __version__


@click.group()
@click.version_option(version=__version__, prog_name="mfademo")
def cli() -> None:
    """mfademo — mock forced alignment with TextGrid and report output."""


# Import and register subcommands
from mfademo.cli.init_cmd import init_cmd  # noqa: E402
from mfademo.cli.run_cmd import run_cmd  # noqa: E402
from mfademo.cli.align_cmd import align_cmd  # noqa: E402

cli.add_command(init_cmd, "init")
cli.add_command(run_cmd, "run")
cli.add_command(align_cmd, "align")
