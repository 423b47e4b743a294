# leaderboard.py
# Persistent best-score table: player name -> lowest number of tries

from pathlib import Path
from typing import Dict, List, Optional, Tuple
import logging

from colorama import Fore

from exit_codes import ExitCode, GameError
from game_console import Console
from game_log import SUCCESS

logger = logging.getLogger(__name__)

SCOREBOARD_FILE = 'scoreboard.db'

Entry = Tuple[str, int]


def parse_line(line: str) -> Optional[Entry]:
    """
    Parse one ``"<name> <score>"`` record.

    The score is taken after the last space so that names may contain spaces.

    Returns:
        (name, score) or None if the line is malformed.
    """
    name, sep, raw_score = line.rpartition(' ')
    if not sep or not name:
        return None
    try:
        score = int(raw_score)
    except ValueError:
        return None
    if score < 1:
        return None
    return name, score


def format_line(name: str, score: int) -> str:
    return f'{name} {score}\n'


class Leaderboard:
    """In-memory leaderboard backed by a flat text file, rewritten whole on every save."""

    def __init__(self, path: str = SCOREBOARD_FILE, console: Optional[Console] = None):
        self.path = Path(path)
        self.console = console or Console()
        self._scores: Dict[str, int] = {}
        self.last_save_error: Optional[str] = None

    def __len__(self) -> int:
        return len(self._scores)

    def __contains__(self, name: str) -> bool:
        return name in self._scores

    @property
    def entries(self) -> Dict[str, int]:
        return dict(self._scores)

    def best(self, name: str) -> Optional[int]:
        return self._scores.get(name)

    def load(self) -> int:
        """
        Replace the in-memory table with the persisted one.

        A missing file yields an empty leaderboard. Malformed lines are skipped
        and logged; when a name appears twice the lower score wins.

        Returns:
            Number of players loaded.

        Raises:
            GameError: SCOREBOARD_UNREADABLE if the file exists but cannot be read.
        """
        logger.info("initialized")
        self._scores = {}

        if not self.path.exists():
            logger.info("no scoreboard file to load")
            return 0

        try:
            # only \n separates records; names may hold other line-break characters
            with self.path.open('r', encoding='utf-8', newline='') as f:
                lines = f.read().split('\n')
        except (OSError, UnicodeDecodeError) as e:
            logger.error("failed to read scoreboard file %s: %s", self.path, e)
            raise GameError(ExitCode.SCOREBOARD_UNREADABLE, f"Cannot read scoreboard {self.path}: {e}") from e

        for lineno, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            entry = parse_line(line)
            if entry is None:
                logger.warning("skipping malformed scoreboard line %d: %r", lineno, line)
                continue
            name, score = entry
            if name in self._scores:
                logger.warning("duplicate scoreboard entry for %r on line %d", name, lineno)
                score = min(score, self._scores[name])
            self._scores[name] = score

        logger.log(SUCCESS, "scoreboard file loaded into memory")
        logger.info("scoreboard size : %d", len(self._scores))
        return len(self._scores)

    def record_attempt(self, player_name: str, tries: int) -> Optional[int]:
        """
        Store a finished game, keeping only the player's best result.

        Args:
            player_name: Exact (case-sensitive) player name.
            tries: Number of guesses the game took.

        Returns:
            The improvement margin when an existing record was beaten, else None.
        """
        if tries < 1:
            raise ValueError(f"tries must be at least 1, got {tries}")

        previous = self._scores.get(player_name)
        if previous is None:
            logger.info('player "%s" not yet on the scoreboard, saving', player_name)
            self._scores[player_name] = tries
            return None

        if tries < previous:
            margin = previous - tries
            logger.info('player "%s" beat their record, saving', player_name)
            self.console.success(f"You beat your previous record by {margin} tries!")
            self._scores[player_name] = tries
            return margin

        logger.debug('player "%s" did not beat their record of %d', player_name, previous)
        return None

    def ranked(self) -> List[Entry]:
        # sorted() is stable, so equal scores keep insertion order
        return sorted(self._scores.items(), key=lambda item: item[1])

    def top(self, n: int) -> List[Entry]:
        """Return the ``n`` best entries, ascending by tries; all of them if n exceeds the size."""
        return self.ranked()[:max(n, 0)]

    def save(self) -> bool:
        """
        Sort ascending and overwrite the scoreboard file.

        Failures are logged and swallowed so the game can continue.

        Returns:
            bool: True if the file was written.
        """
        self._scores = dict(self.ranked())
        logger.debug("scoreboard sorted")
        content = ''.join(format_line(name, score) for name, score in self._scores.items())
        try:
            # encode before opening so an unencodable name cannot truncate the file
            data = content.encode('utf-8')
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open('wb') as f:
                f.write(data)
        except (OSError, UnicodeError) as e:
            self.last_save_error = f"Failed to save scoreboard to {self.path}: {e}"
            logger.warning("failed to save scoreboard: %s", e)
            return False
        self.last_save_error = None
        logger.log(SUCCESS, "scoreboard saved successfully")
        return True

    def render(self, n: int) -> None:
        """Print the top ``n`` players as a ranked table."""
        rows = self.top(n)
        self.console.say(f"pos |{' player'.ljust(32)}| tries", Fore.YELLOW)
        if not rows:
            self.console.say("No scores recorded yet.")
        for pos, (name, score) in enumerate(rows, start=1):
            self.console.say(f"{Fore.CYAN}{str(pos).ljust(4)}{Fore.RESET}| {name.ljust(31)}| {Fore.GREEN}{score}{Fore.RESET}")
