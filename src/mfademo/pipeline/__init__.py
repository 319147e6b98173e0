"""Session pipeline."""

from mfademo.pipeline.runner import run_session, write_outputs

__all__ = ["run_session", "write_outputs"]
