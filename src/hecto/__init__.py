"""Unicode-aware text buffer and view core for a terminal editor."""

__all__ = [
    "adapters",
    "buffer",
    "config",
    "runtime",
    "session",
    "view",
]

__version__ = "0.1.0"
