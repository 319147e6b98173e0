"""Input collection: session entries, batch files and validation."""

from mfademo.collector.batch import collect_entries, load_batch, save_batch
from mfademo.collector.validate import validate_all

__all__ = ["collect_entries", "load_batch", "save_batch", "validate_all"]
