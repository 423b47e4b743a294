import builtins
import random

import pytest

from app_context import AppContext
from game_config import GameConfig, HiddenRange
from game_console import Console
from leaderboard import Leaderboard


class FixedRandom(random.Random):
    """Random source whose randint always returns the same number."""

    def __init__(self, value):
        super().__init__(0)
        self.value = value

    def randint(self, a, b):
        return self.value


@pytest.fixture
def feed_input(monkeypatch):
    """Script builtins.input; an exhausted script behaves like Ctrl-D."""
    def _feed(*answers):
        remaining = iter(answers)
        prompts = []

        def fake_input(prompt=''):
            prompts.append(prompt)
            try:
                answer = next(remaining)
            except StopIteration:
                raise EOFError
            if isinstance(answer, BaseException):
                raise answer
            return answer

        monkeypatch.setattr(builtins, 'input', fake_input)
        return prompts
    return _feed


@pytest.fixture
def make_ctx(tmp_path):
    def _make(start=0, end=1000, rows=10, hidden=500, debug=True):
        console = Console(debug=debug)
        config = GameConfig(debug=debug, hidden_range=HiddenRange(start, end), scoreboard_display_count=rows)
        leaderboard = Leaderboard(str(tmp_path / 'scoreboard.db'), console=console)
        return AppContext(config=config, leaderboard=leaderboard, console=console, rng=FixedRandom(hidden))
    return _make
