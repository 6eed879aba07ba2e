"""Settings for the board generator CLI."""

import logging
import random
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional, Union

import yaml

from boardgen.errors import ConfigError

logger = logging.getLogger(__name__)

# Accepted YAML types per setting; None is allowed where listed
SETTING_TYPES = {
    "seed": (int, type(None)),
    "words_file": (str, type(None)),
    "pretty": (bool,),
    "log_path": (str, type(None)),
    "verbose": (bool,),
}


@dataclass
class BoardSettings:
    """Options that can be set in a YAML file and overridden on the command line."""
    seed: Optional[int] = None
    words_file: Optional[str] = None
    pretty: bool = False
    log_path: Optional[str] = None
    verbose: bool = False

    def merge(self, **overrides) -> "BoardSettings":
        """Return a copy with every override that is not None applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def load_settings(path: Union[str, Path]) -> BoardSettings:
    """Load settings from a YAML mapping.

    Unknown keys are ignored with a warning.
    """
    path = Path(path)
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        raise ConfigError(f"Settings file not found: {path}")
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid settings file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {path} must contain a mapping")

    known = {f.name for f in fields(BoardSettings)}
    for key in sorted(set(data) - known):
        logger.warning(f"Ignoring unknown setting '{key}' in {path}")

    values = {k: v for k, v in data.items() if k in known}
    for key, value in values.items():
        # True/False would otherwise pass as an int seed
        if not isinstance(value, SETTING_TYPES[key]) or (key == "seed" and isinstance(value, bool)):
            expected = " or ".join(
                "null" if t is type(None) else t.__name__ for t in SETTING_TYPES[key]
            )
            raise ConfigError(
                f"Invalid value for '{key}' in {path}: expected {expected}, got {value!r}"
            )

    settings = BoardSettings(**values)
    logger.debug(f"Loaded settings from {path}: {settings}")
    return settings


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Random source for one run; a seed makes boards reproducible."""
    return random.Random(seed)
