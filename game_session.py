# game_session.py
# One play-through: name entry, guess loop, record update, "play again?"

from dataclasses import dataclass
from typing import Optional
import logging

from app_context import AppContext
from guess_evaluator import Feedback, evaluate

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    player_name: str
    hidden_number: int
    tries: int = 0


class GameSession:
    """
    Runs games until the player declines to play again.

    States: awaiting a name, awaiting guesses (until an exact hit), complete.
    """

    def __init__(self, ctx: AppContext):
        self.ctx = ctx
        self.console = ctx.console
        self.last_state: Optional[GameState] = None

    def run(self) -> None:
        logger.info("starting the game")
        while True:
            self.console.clear()
            state = self.start(self.ask_name())
            self.play(state)
            self.complete(state)
            if not self.console.confirm("Do you want to play again?"):
                logger.info("player chose to stop playing")
                return
            logger.info("restarting the game")

    def ask_name(self) -> str:
        while True:
            name = self.console.prompt("Your name: ")
            if name:
                logger.info("player name registered : %s", name)
                return name
            self.console.error("Please enter a name.")

    def start(self, player_name: str) -> GameState:
        hidden_range = self.ctx.config.hidden_range
        hidden = self.ctx.rng.randint(hidden_range.start, hidden_range.end)
        logger.info("hidden number generated within range %d-%d", hidden_range.start, hidden_range.end)
        state = GameState(player_name=player_name, hidden_number=hidden)
        self.last_state = state
        return state

    def ask_guess(self) -> int:
        while True:
            raw = self.console.prompt("Your guess: ").strip()
            try:
                return int(raw)
            except ValueError:
                self.console.error("Please enter a whole number.")
                logger.warning("rejected non-numeric guess %r", raw)

    def submit(self, state: GameState, guess: int) -> Feedback:
        state.tries += 1
        logger.info("trial nr %d, player guessed : %d", state.tries, guess)
        hidden_range = self.ctx.config.hidden_range
        if guess not in hidden_range:
            logger.debug("guess %d is outside %d-%d", guess, hidden_range.start, hidden_range.end)
        feedback = evaluate(guess, state.hidden_number, hidden_range)
        self.console.say(feedback.message, feedback.color)
        return feedback

    def play(self, state: GameState) -> int:
        feedback = None
        while feedback is not Feedback.EXACT:
            feedback = self.submit(state, self.ask_guess())
        return state.tries

    def complete(self, state: GameState) -> None:
        self.console.say(f"You did it in {state.tries} tries!")
        logger.info("player succeeded in %d tries", state.tries)
        leaderboard = self.ctx.leaderboard
        leaderboard.record_attempt(state.player_name, state.tries)
        leaderboard.save()
