from rich.console import Console
from rich.text import Text

from .quiz_entry import MistakeRecord, SessionTally


def format_mistake(mistake: MistakeRecord) -> str:
    return f"{mistake.phrase} → {mistake.expected} (user's answer: {mistake.answer})"


class Reporter:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def report(self, tally: SessionTally) -> None:
        self.console.print()
        self.console.print(f"[bold cyan]🔹 Final score: {tally.score}/{tally.total}[/bold cyan]")

        if tally.interrupted:
            self.console.print("[yellow]The quiz ended early: input was closed before all phrases were asked.[/yellow]")

        if tally.mistakes:
            self.console.print()
            self.console.print("[bold red]❗ Mistakes:[/bold red]")
            for mistake in tally.mistakes:
                # One physical line per mistake, whatever the terminal width
                self.console.print(Text(format_mistake(mistake)), soft_wrap=True)
        elif tally.total == 0:
            self.console.print("[dim]No questions were asked.[/dim]")
        else:
            self.console.print("[bold green]🎉 Well done, no mistakes![/bold green]")
