import io
import logging
from collections.abc import Iterable

import pytest
from rich.console import Console


class ScriptedAnswers:
    """Answer source replaying fixed lines, then raising EOFError like a closed stdin."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)


@pytest.fixture
def console():
    """Non-interactive console writing into a buffer, read back via ``console.file.getvalue()``."""
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)


@pytest.fixture
def scripted_answers():
    """Factory for scripted answer sources."""
    return ScriptedAnswers


@pytest.fixture
def phrase_file(tmp_path):
    """Write a phrase file with the given content and return its path."""
    def _write(content: str, name: str = "phrases.txt"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def restore_root_logging():
    """setup_logging replaces root handlers; put the originals back after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
