"""In-memory key-value store with RESP frames, commands and stream connections."""

__version__ = "0.1.0"