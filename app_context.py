# app_context.py
# Objects built once at startup and handed to the menu and the game sessions

from dataclasses import dataclass, field
import random

from game_config import GameConfig
from game_console import Console
from leaderboard import Leaderboard


@dataclass
class AppContext:
    config: GameConfig
    leaderboard: Leaderboard
    console: Console
    rng: random.Random = field(default_factory=random.Random)
