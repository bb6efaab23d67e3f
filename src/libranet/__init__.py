"""LibraNet: in-memory lending of books, audiobooks and e-magazines."""

__version__ = "0.1.0"
