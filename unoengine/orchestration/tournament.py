"""Simulations - play many all-computer games and aggregate results."""

import logging
import random
from collections import defaultdict
from typing import Optional

from unoengine.agent.protocol import ComputerPolicy
from unoengine.engine import new_game

logger = logging.getLogger(__name__)


def run_simulations(
    num_games: int = 100,
    num_players: int = 4,
    seed: Optional[int] = None,
    policy: Optional[ComputerPolicy] = None,
) -> dict[int, int]:
    """Play `num_games` games between computer players.

    Each game gets its own seed drawn from `seed`, so a run is reproducible.

    Returns:
        Dict mapping seat index to number of wins.
    """
    wins: dict[int, int] = defaultdict(int)

    rng = random.Random(seed)
    for g in range(num_games):
        game = new_game(
            human_players=0,
            computer_players=num_players,
            rng=random.Random(rng.randint(0, 2**31 - 1)),
            policy=policy,
        )
        logger.debug("Game %d won by seat %s", g, game.winner)
        if game.winner is not None:
            wins[game.winner] += 1

    return dict(wins)
