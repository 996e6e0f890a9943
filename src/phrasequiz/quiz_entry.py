from collections.abc import Mapping
from dataclasses import dataclass, field


# Source phrase -> expected translation, read-only once loaded
PhraseTable = Mapping[str, str]


@dataclass(frozen=True)
class QuizEntry:
    phrase: str
    expected: str
    answer: str
    correct: bool


@dataclass(frozen=True)
class MistakeRecord:
    phrase: str
    expected: str
    answer: str


@dataclass
class SessionTally:
    score: int = 0
    total: int = 0
    mistakes: list[MistakeRecord] = field(default_factory=list)
    interrupted: bool = False

    def record(self, entry: QuizEntry) -> None:
        """Fold one answered question into the tally."""
        if entry.correct:
            self.score += 1
        else:
            self.mistakes.append(
                MistakeRecord(phrase=entry.phrase, expected=entry.expected, answer=entry.answer)
            )
        self.total += 1
