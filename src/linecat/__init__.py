"""Concatenate text inputs, optionally showing tabs and line ends."""

__version__ = "0.1.0"
