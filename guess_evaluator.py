# guess_evaluator.py
# Proximity feedback for a single guess

from enum import Enum
import logging

from colorama import Fore

from game_config import HiddenRange

logger = logging.getLogger(__name__)


class Feedback(Enum):
    EXACT = ("You guessed it!", Fore.GREEN)
    CLOSE_LOW = ("You're close! Too low!", Fore.YELLOW)
    CLOSE_HIGH = ("You're close! Too high!", Fore.YELLOW)
    TOO_LOW = ("Too low!", Fore.RED)
    TOO_HIGH = ("Too high!", Fore.RED)

    def __init__(self, message: str, color: str):
        self.message = message
        self.color = color

    @property
    def is_terminal(self) -> bool:
        return self is Feedback.EXACT

    @property
    def is_close(self) -> bool:
        return self in (Feedback.CLOSE_LOW, Feedback.CLOSE_HIGH)


def evaluate(guess: int, hidden: int, hidden_range: HiddenRange) -> Feedback:
    """
    Classify a guess against the hidden number.

    A guess is "close" when it misses by less than one fifth of the range
    width, "far" otherwise. With a range narrower than five the band is zero
    and every miss is far.
    """
    band = hidden_range.band
    diff = hidden - guess

    if diff == 0:
        logger.info("player guessed the hidden number")
        return Feedback.EXACT

    if abs(diff) < band:
        feedback = Feedback.CLOSE_LOW if diff > 0 else Feedback.CLOSE_HIGH
    else:
        feedback = Feedback.TOO_LOW if diff > 0 else Feedback.TOO_HIGH
    logger.debug("guess %d vs band %d -> %s", guess, band, feedback.name)
    return feedback
