"""A small interactive POSIX shell with pipelines, redirection and built-in utilities."""

__version__ = "1.0.0"