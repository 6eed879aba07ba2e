"""Word list loading from files and command-line arguments."""

import csv
import logging
from pathlib import Path
from typing import Iterable, List, Union

import yaml

from boardgen.errors import WordSourceError
from boardgen.words import unique_words

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def _clean(entries: Iterable) -> List[str]:
    """Strip entries and drop blank ones."""
    words = []
    for entry in entries:
        if entry is None:
            continue
        word = str(entry).strip()
        if word:
            words.append(word)
    return words


def _read_yaml(path: Path) -> List:
    with open(path, "r") as f:
        data = yaml.safe_load(f)
    if data is None:
        return []
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        words = data.get("names", [])  # Same key as the Codenames word files
        if isinstance(words, list):
            return words
    raise WordSourceError(f"Expected a list of words or a 'names' list in {path}")


def _read_csv(path: Path) -> List:
    with open(path, "r", newline="") as f:
        return [row[0] for row in csv.reader(f) if row]


def read_word_file(path: Union[str, Path]) -> List[str]:
    """Load a word pool from a YAML or CSV file.

    YAML files hold a ``names`` list (or a bare list). Any other file is read
    as CSV and the first column of each row is used, so a plain file with one
    word per line also works. Blank entries are dropped and repeated words
    are removed, keeping the first occurrence.

    Args:
        path: Path to the word list

    Returns:
        Cleaned, deduplicated words in file order

    Raises:
        WordSourceError: If the file is missing or cannot be parsed
    """
    path = Path(path)
    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            entries = _read_yaml(path)
        else:
            entries = _read_csv(path)
    except FileNotFoundError:
        logger.debug(f"Words file not found: {path}")
        raise WordSourceError(f"Sorry, the file {path} does not exist")
    except (yaml.YAMLError, csv.Error, UnicodeDecodeError) as e:
        logger.debug(f"Error loading words from {path}: {e}")
        raise WordSourceError(f"Could not read words from {path}: {e}") from e

    words = unique_words(_clean(entries))
    logger.info(f"Loaded {len(words)} unique words from {path}")
    return words


def words_from_args(args: Iterable[str]) -> List[str]:
    """Words given literally, in order, without blanks. Repeats are kept."""
    return _clean(args)
