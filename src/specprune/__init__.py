"""Find and delete single-``describe`` Angular spec files."""

__version__ = "0.1.0"
