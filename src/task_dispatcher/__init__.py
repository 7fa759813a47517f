"""Single-queue task dispatcher for polling workers."""

__version__ = "0.1.0"
