# game_menu.py
# Top-level navigation: render the menu, read a choice, dispatch

from enum import IntEnum
from typing import Callable, Dict, Optional
import logging

from colorama import Fore

from app_context import AppContext
from exit_codes import ExitCode, GameError
from game_session import GameSession

logger = logging.getLogger(__name__)

BANNER = "=================================="
UNSUPPORTED_OPTION = "!!! This menu option is not supported !!!"


class MenuChoice(IntEnum):
    PLAY = 1
    SCOREBOARD = 2
    STATISTICS = 3
    OPTIONS = 4
    EXIT = 5


def parse_choice(raw: str) -> Optional[MenuChoice]:
    try:
        return MenuChoice(int(raw.strip()))
    except ValueError:
        return None


class MenuController:
    """Loops over the main menu until the player exits."""

    def __init__(self, ctx: AppContext):
        self.ctx = ctx
        self.console = ctx.console
        self.message: Optional[str] = None
        self.handlers: Dict[MenuChoice, Callable[[], bool]] = {
            MenuChoice.PLAY: self.play,
            MenuChoice.SCOREBOARD: self.show_scoreboard,
            MenuChoice.STATISTICS: self.show_statistics,
            MenuChoice.OPTIONS: self.show_options,
            MenuChoice.EXIT: self.exit,
        }

    def render(self) -> None:
        self.console.clear()
        if self.message:
            self.console.error(self.message)
            self.console.say()
            self.message = None
        self.console.say(BANNER, Fore.BLUE)
        self.console.say("Guessing Game!", Fore.YELLOW)
        self.console.say(BANNER, Fore.BLUE)
        self.console.say("1) Play", Fore.GREEN)
        self.console.say("2) Scoreboard")
        self.console.say("3) Statistics")
        self.console.say("4) Options")
        self.console.say("5) Exit", Fore.RED)

    def read_choice(self) -> MenuChoice:
        """Render the menu until a supported option is entered."""
        while True:
            self.render()
            logger.debug("menu in display")
            raw = self.console.prompt(f"{Fore.YELLOW}=> {Fore.RESET}")
            logger.info("received user input : %s", raw)
            choice = parse_choice(raw)
            if choice is not None:
                return choice
            self.message = UNSUPPORTED_OPTION
            logger.warning("bad input -- menu option not supported")

    def dispatch(self, choice: MenuChoice) -> bool:
        """Run the view for ``choice``; returns True when the game should terminate."""
        handler = self.handlers.get(choice)
        if handler is None:
            logger.error("menu choice %r has no handler", choice)
            raise GameError(ExitCode.MENU_CASE_SLIP, f"No handler for menu choice {choice!r}")
        logger.info('user chose option "%s"', choice.name.title())
        return handler()

    def run(self) -> ExitCode:
        logger.info("game menu open")
        while True:
            if self.dispatch(self.read_choice()):
                return ExitCode.SUCCESS

    def play(self) -> bool:
        GameSession(self.ctx).run()
        if self.console.confirm("Do you want to exit the game?"):
            logger.info("player chose to quit the game")
            return True
        logger.info("returning to the main menu")
        return False

    def show_scoreboard(self) -> bool:
        self.console.clear()
        self.ctx.leaderboard.render(self.ctx.config.scoreboard_display_count)
        self.console.pause()
        return False

    def show_statistics(self) -> bool:
        self.message = "Statistics are not available yet."
        return False

    def show_options(self) -> bool:
        self.message = "Options are not available yet."
        return False

    def exit(self) -> bool:
        return True
