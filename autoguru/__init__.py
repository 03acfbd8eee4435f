"""AutoGuru engine and transmission simulation core."""

__version__ = "0.1.0"
