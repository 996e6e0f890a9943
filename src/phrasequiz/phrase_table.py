from pathlib import Path
from types import MappingProxyType

from .errors import FileReadError
from .logging import get_logger
from .quiz_entry import PhraseTable


logger = get_logger("phrasequiz.phrase_table")

DELIMITER = "="


def read_from_string(text: str) -> PhraseTable:
    logger.debug("Parsing phrase text into a phrase table")
    phrases: dict[str, str] = {}
    lines = text.splitlines()
    for idx, line in enumerate(lines):
        if not line.strip():
            continue
        if DELIMITER not in line:
            logger.debug("Skipping line %d: no '%s' delimiter", idx + 1, DELIMITER)
            continue
        source, target = line.split(DELIMITER, 1)
        source = source.strip()
        if source in phrases:
            logger.debug(
                "Line %d redefines '%s'; the later translation replaces the earlier one",
                idx + 1,
                source,
            )
            del phrases[source]
        phrases[source] = target.strip()
    logger.info("Converted %d lines into %d phrase pairs", len(lines), len(phrases))
    return MappingProxyType(phrases)


def read_from_file(path: Path) -> PhraseTable:
    logger.info("Reading phrases from %s", path)
    try:
        with path.open("r", encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError as e:
        raise FileReadError(path, "file not found") from e
    except IsADirectoryError as e:
        raise FileReadError(path, "is a directory") from e
    except PermissionError as e:
        raise FileReadError(path, "permission denied") from e
    except UnicodeDecodeError as e:
        raise FileReadError(path, f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise FileReadError(path, e.strerror or str(e)) from e
    return read_from_string(text)
