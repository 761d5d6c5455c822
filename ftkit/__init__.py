"""ASCII, byte-buffer, linked-list and hashing helpers with a printf-style formatter."""

__version__ = "0.1.0"