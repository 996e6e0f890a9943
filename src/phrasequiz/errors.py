from pathlib import Path


class PhraseQuizError(Exception):
    """Base class for errors raised by phrasequiz."""


class FileReadError(PhraseQuizError):
    """The phrase file is missing, unreadable, or failed while being read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read phrase file {path}: {reason}")
