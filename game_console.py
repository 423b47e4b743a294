# game_console.py
# Text output sink and blocking prompts for the terminal game

from typing import Optional
import logging

from colorama import Fore, Style, just_fix_windows_console
from colorama.ansi import clear_screen, Cursor

logger = logging.getLogger(__name__)

AFFIRMATIVE = ('Y', 'y')

just_fix_windows_console()


class Console:
    """Coloured print/input wrapper shared by the menu, the session and the leaderboard."""

    def __init__(self, debug: bool = False):
        self.debug = debug

    def say(self, text: str = '', color: Optional[str] = None, end: str = '\n') -> None:
        if color:
            text = f'{color}{text}{Style.RESET_ALL}'
        print(text, end=end, flush=True)

    def success(self, text: str) -> None:
        self.say(text, Fore.GREEN)

    def warn(self, text: str) -> None:
        self.say(text, Fore.YELLOW)

    def error(self, text: str) -> None:
        self.say(text, Fore.RED)

    def clear(self) -> None:
        # keep the scroll-back while debugging so traces stay visible
        if self.debug:
            return
        print(clear_screen() + Cursor.POS(1, 1), end='', flush=True)
        logger.debug("terminal cleared")

    def prompt(self, text: str) -> str:
        """Block until a line is entered; the line terminator is stripped by input()."""
        return input(text)

    def confirm(self, text: str) -> bool:
        return self.prompt(f'{text} [Y/n] ') in AFFIRMATIVE

    def pause(self, text: str = '=> press Enter to return to main menu') -> None:
        self.prompt(f'{Fore.CYAN}{text}{Style.RESET_ALL}')
