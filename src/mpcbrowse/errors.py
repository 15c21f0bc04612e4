"""Exceptions that terminate the browser."""

from __future__ import annotations


class BrowseError(RuntimeError):
    """Fatal error: the entry point resets the screen and exits non-zero.

    ``step`` names the operation that failed (``"tcgetattr"``,
    ``"getScreenSize"``, ``"popen"``...) and is shown in the diagnostic.
    """

    def __init__(self, step: str, reason: str = "") -> None:
        self.step = step
        self.reason = reason
        super().__init__(f"{step}: {reason}" if reason else step)


class TerminalError(BrowseError):
    """Terminal attributes, size or input could not be handled."""


class BackendError(BrowseError):
    """The external row provider or action program could not be run."""
