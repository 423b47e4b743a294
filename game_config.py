# game_config.py
# Typed game configuration read once at startup from a flat key = value file

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
import configparser
import logging

from exit_codes import ExitCode, GameError
from game_log import SUCCESS

logger = logging.getLogger(__name__)

CONFIG_FILE = 'game.cfg'
DEFAULT_RANGE_START = 0
DEFAULT_RANGE_END = 1000
DEFAULT_SCOREBOARD_ROWS = 10

# configparser needs a section; the game file has none
_SECTION = 'game'
_KNOWN_KEYS = {'debug', 'hidden_range_start', 'hidden_range_end', 'sb_rec_nr'}


@dataclass(frozen=True)
class HiddenRange:
    start: int = DEFAULT_RANGE_START
    end: int = DEFAULT_RANGE_END

    def __post_init__(self):
        if self.start >= self.end:
            raise ValueError(f"Range start must be below range end (got {self.start}..{self.end})")

    @property
    def band(self) -> int:
        """One fifth of the range width; guesses nearer than this are 'close'."""
        return (self.end - self.start) // 5

    def __contains__(self, value: int) -> bool:
        return self.start <= value <= self.end


@dataclass(frozen=True)
class GameConfig:
    debug: bool = False
    hidden_range: HiddenRange = field(default_factory=HiddenRange)
    scoreboard_display_count: int = DEFAULT_SCOREBOARD_ROWS

    def __post_init__(self):
        if self.scoreboard_display_count < 0:
            raise ValueError("sb_rec_nr cannot be negative")


def parse_config(text: str) -> GameConfig:
    """
    Build a GameConfig from the contents of a config file.

    Raises:
        ValueError: if a value cannot be converted or fails validation.
    """
    parser = configparser.ConfigParser(interpolation=None)
    try:
        parser.read_string(f'[{_SECTION}]\n{text}')
    except configparser.Error as e:
        raise ValueError(f"Malformed config: {e}") from e
    section = parser[_SECTION]

    for key in section:
        if key not in _KNOWN_KEYS:
            logger.debug("ignoring unknown config key %r", key)

    debug = section.getboolean('debug', fallback=False)
    start = section.getint('hidden_range_start', fallback=DEFAULT_RANGE_START)
    end = section.getint('hidden_range_end', fallback=DEFAULT_RANGE_END)
    rows = section.getint('sb_rec_nr', fallback=DEFAULT_SCOREBOARD_ROWS)

    return GameConfig(debug=debug, hidden_range=HiddenRange(start, end), scoreboard_display_count=rows)


def load_config(path: str = CONFIG_FILE) -> GameConfig:
    """
    Load and validate the game configuration.

    Args:
        path: Path to the key = value config file.

    Returns:
        GameConfig populated from the file, with defaults for absent keys.

    Raises:
        GameError: CONFIG_NO_FILE if the file is missing or unreadable,
            CONFIG_INVALID if a value is malformed.
    """
    logger.info("initialized")
    p = Path(path)
    try:
        text = p.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        logger.error("config file unreadable or not found: %s", e)
        raise GameError(ExitCode.CONFIG_NO_FILE, f"Cannot read config file {path}: {e}") from e

    try:
        config = parse_config(text)
    except ValueError as e:
        logger.error("invalid configuration in %s: %s", path, e)
        raise GameError(ExitCode.CONFIG_INVALID, f"Invalid config file {path}: {e}") from e

    if config.debug:
        logger.info("debug traces on")
    logger.log(SUCCESS, "loaded successfully: range %d-%d, %d scoreboard rows",
               config.hidden_range.start, config.hidden_range.end, config.scoreboard_display_count)
    return config
