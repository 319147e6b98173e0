"""Mock aligner."""

from mfademo.aligner.mock import align, make_rng, phone_count_for, tokenize

__all__ = ["align", "make_rng", "phone_count_for", "tokenize"]
