"""mfademo — mock forced alignment demonstration tool."""

__version__ = "0.1.0"
