"""
Repeated games between two players.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Optional

from tqdm.auto import trange

from .config import GameConfig
from .game import play_game
from .player import Player
from .rules import Win

logger = logging.getLogger(__name__)


@dataclass
class MatchResult:
    """Tally of a series of games."""
    games: int = 0
    wins: Dict[str, int] = field(default_factory=dict)  # marker -> games won
    draws: int = 0

    def win_rate(self, marker: str) -> float:
        return self.wins.get(marker, 0) / self.games if self.games else 0.0

    @property
    def draw_rate(self) -> float:
        return self.draws / self.games if self.games else 0.0


def play_match(
    player_one: Player,
    player_two: Player,
    games: int = 100,
    alternate: bool = True,
    config: Optional[GameConfig] = None,
    progress: bool = False,
) -> MatchResult:
    """
    Play `games` games and tally the results.

    Args:
        player_one: Moves first in even-numbered games
        player_two: The other player
        games: Number of games
        alternate: If True, player_two moves first in odd-numbered games
        config: Game loop configuration
        progress: Show a tqdm progress bar

    Returns:
        MatchResult with wins keyed by marker
    """
    wins: Counter = Counter()
    draws = 0

    for g in trange(games, desc="Match", disable=not progress):
        if alternate and g % 2 == 1:
            first, second = player_two, player_one
        else:
            first, second = player_one, player_two

        state = play_game(first, second, config)
        if isinstance(state, Win):
            wins[state.marker] += 1
        else:
            draws += 1

    result = MatchResult(games=games, wins=dict(wins), draws=draws)
    logger.info(
        "Match %s vs %s: %s | draws %d/%d",
        player_one.get_marker(), player_two.get_marker(), result.wins, draws, games,
    )
    return result
