"""Errors raised while concatenating inputs."""

from __future__ import annotations


class LinecatError(Exception):
    """Base error for this package."""


class StdinReadError(LinecatError):
    """Raised when reading standard input fails for a reason other than EOF."""


class InputFileError(LinecatError):
    """Raised when a named input cannot be opened or decoded as text."""

    def __init__(self, path: str, cause: BaseException):
        self.path = path
        self.cause = cause
        reason = getattr(cause, "strerror", None) or str(cause)
        super().__init__(f"{path}: {reason}")
