"""Terminal session runner."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, TextIO

from unoengine.engine import Game, new_game
from unoengine.ui import clear_screen, render

if TYPE_CHECKING:
    from unoengine.agents.human_agent import HumanInputReader
    from unoengine.config import Settings


@dataclass
class GameResult:
    """Result of a finished (or abandoned) session."""

    winner: Optional[int]
    num_commands: int
    num_players: int


class GameRunner:
    """Runs one game in the terminal, reading human input until someone wins."""

    def __init__(
        self,
        settings: "Settings",
        input_reader: "HumanInputReader",
        output: Optional[TextIO] = None,
        clear: bool = True,
    ):
        self._settings = settings
        self._input = input_reader
        self._out = output or sys.stdout
        self._clear = clear
        self.game: Optional[Game] = None

    def _show(self, text: str) -> None:
        if self._clear:
            clear_screen(self._out)
        self._out.write(text + "\n")
        self._out.flush()

    def run(self) -> GameResult:
        """Run the game and return the result. Stops early if input runs out."""
        settings = self._settings
        rng = random.Random(settings.seed)
        self.game = game = new_game(
            human_players=settings.human_players,
            computer_players=settings.computer_players,
            rng=rng,
            policy=settings.make_policy(),
        )
        num_commands = 0

        snapshot = game.snapshot()
        while snapshot.winner is None:
            self._show(render(snapshot))
            token = self._input.read()
            if token is None:
                break
            snapshot = game.handle_input(token)
            num_commands += 1

        if snapshot.winner is not None:
            self._show(render(snapshot))

        return GameResult(
            winner=snapshot.winner,
            num_commands=num_commands,
            num_players=len(game.players),
        )
