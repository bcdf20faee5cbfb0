"""AuthentiWrite: publishing platform backend for verified human writers."""

__version__ = "0.1.0"
