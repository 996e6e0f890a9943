import random
from collections.abc import Callable

from rich.console import Console
from rich.text import Text

from .logging import get_logger
from .quiz_entry import PhraseTable, QuizEntry, SessionTally


# Takes the prompt, returns one line typed by the user; raises EOFError when input ends
AnswerSource = Callable[[str], str]


def answers_match(expected: str, answer: str) -> bool:
    """Case-insensitive equality after trimming surrounding whitespace.

    No Unicode case folding: "ß" does not match "SS".
    """
    return answer.strip().lower() == expected.strip().lower()


class QuizRunner:
    def __init__(
        self,
        console: Console | None = None,
        ask: AnswerSource | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.logger = get_logger("phrasequiz.quiz")
        self.console = console or Console()
        self.ask = ask or self.console.input
        self.rng = rng or random.Random()

    def run(self, phrases: PhraseTable) -> SessionTally:
        """Ask every phrase once, in random order, and score the answers.

        Stops early, keeping the partial tally, when the answer source runs dry.
        """
        tally = SessionTally()
        if not phrases:
            self.logger.info("Phrase table is empty; no questions to ask")
            self.console.print("[yellow]No phrases found in the phrase file.[/yellow]")
            return tally

        order = list(phrases.keys())
        self.rng.shuffle(order)
        self.logger.info("Starting quiz with %d phrases", len(order))

        for phrase in order:
            try:
                entry = self._ask_one(phrase, phrases[phrase])
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                self.logger.warning(
                    "Input ended after %d of %d questions; stopping the quiz",
                    tally.total,
                    len(order),
                )
                tally.interrupted = True
                break
            tally.record(entry)

        self.logger.info("Quiz finished: %d/%d correct", tally.score, tally.total)
        return tally

    def _ask_one(self, phrase: str, expected: str) -> QuizEntry:
        # Text keeps phrases literal (no markup or :emoji: codes); soft_wrap keeps them on one line
        self.console.print()
        self.console.print(Text.assemble(("Translate: ", "bold"), phrase), soft_wrap=True)
        answer = self.ask("> ").strip()

        correct = answers_match(expected, answer)
        if correct:
            self.console.print("[green]✅ Correct![/green]")
        else:
            self.console.print(
                Text.assemble(("❌ Wrong answer. The correct translation is: ", "red"), expected),
                soft_wrap=True,
            )
        self.logger.debug("Asked '%s', got '%s' (correct=%s)", phrase, answer, correct)
        return QuizEntry(phrase=phrase, expected=expected, answer=answer, correct=correct)
