"""Pydantic data models for mfademo."""

from mfademo.models.alignment import AlignmentResult, Interval
from mfademo.models.config import AlignerConfig, Config, OutputConfig
from mfademo.models.session import Session, TranscriptEntry

__all__ = [
    "AlignmentResult",
    "Interval",
    "AlignerConfig",
    "Config",
    "OutputConfig",
    "Session",
    "TranscriptEntry",
]
