"""Game orchestration."""

from unoengine.orchestration.game_runner import GameResult, GameRunner
from unoengine.orchestration.tournament import run_simulations

__all__ = ["GameResult", "GameRunner", "run_simulations"]
