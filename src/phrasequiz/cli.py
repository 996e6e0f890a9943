import random
import sys

import yaml
from pydantic_settings import CliApp
from rich.console import Console
from rich.text import Text

from .errors import FileReadError
from .logging import get_logger, setup_logging
from .phrase_table import read_from_file
from .quiz import AnswerSource, QuizRunner
from .report import Reporter
from .settings import Settings


def app(
    cli_args: list[str] | None = None,
    *,
    console: Console | None = None,
    ask: AnswerSource | None = None,
) -> int:
    """CLI entrypoint.
    Uses pydantic-settings CLI source
    to parse and merge arguments from CLI, env, and dotenv.

    Returns the process exit code: 0 once the quiz has run, 1 if the phrase
    file could not be read.
    """
    settings = CliApp.run(Settings, cli_args=cli_args)

    setup_logging(settings.log_level)
    logger = get_logger("phrasequiz.cli")

    logger.info(
        "Settings loaded:\n%s",
        yaml.safe_dump(
            settings.model_dump(mode="json"),
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        ),
    )

    console = console or Console()
    try:
        phrases = read_from_file(settings.phrases_file)
    except FileReadError as e:
        logger.error("Failed to load phrases: %s", e)
        console.print(Text.assemble(("Error reading the phrase file: ", "bold red"), str(e)), soft_wrap=True)
        return 1

    runner = QuizRunner(console=console, ask=ask, rng=random.Random(settings.seed))
    tally = runner.run(phrases)
    Reporter(console=console).report(tally)
    return 0


def main() -> None:
    sys.exit(app())


if __name__ == "__main__":
    main()
