"""Game state types for UNO."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Union

from unoengine.engine.card import Card

if TYPE_CHECKING:
    from unoengine.engine.rules import Game


class Direction(int, Enum):
    """Turn direction. The value is the seat step."""

    FORWARD = 1
    BACKWARD = -1

    def flipped(self) -> "Direction":
        return Direction.BACKWARD if self is Direction.FORWARD else Direction.FORWARD


@dataclass
class Player:
    """A seat at the table."""

    hand: List[Card] = field(default_factory=list)
    is_computer_controlled: bool = False


@dataclass(frozen=True)
class Normal:
    """Waiting for the current player to play or draw."""

    pass


@dataclass(frozen=True)
class AwaitingWildColor:
    """The current player picked the wild card at `card_index` (1-based) and must choose a color."""

    card_index: int


@dataclass(frozen=True)
class GameOver:
    """Someone emptied their hand."""

    winner: int


EngineState = Union[Normal, AwaitingWildColor, GameOver]


class Instruction(str, Enum):
    """What the displayed player is expected to do next."""

    PICK_CARD = "pick_card"
    PICK_WILD_COLOR = "pick_wild_color"


@dataclass(frozen=True)
class TurnRecap:
    """Summary of one resolved turn."""

    player: int
    played_card: Card
    drawn_cards: int = 0


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of the game for rendering.

    Only the current player's hand is included, and only when that seat is
    human-controlled. Everyone else is reduced to a card count.
    """

    current_player: int
    displayed_player: Optional[int]
    displayed_hand: Optional[tuple[Card, ...]]
    instruction: Optional[Instruction]
    top_discard: Optional[Card]
    direction: Direction
    hand_sizes: tuple[int, ...]
    turn_recaps: tuple[TurnRecap, ...] = ()
    one_card_players: tuple[int, ...] = ()
    error: Optional[str] = None
    winner: Optional[int] = None

    @property
    def last_turn_recap(self) -> Optional[TurnRecap]:
        return self.turn_recaps[-1] if self.turn_recaps else None

    @classmethod
    def from_game(cls, game: "Game", error: Optional[str] = None) -> "GameSnapshot":
        """Create a snapshot from the engine, hiding computer players' hands."""
        current = game.current_player_index
        player = game.players[current]
        show_hand = not player.is_computer_controlled and not game.is_over

        instruction = None
        if show_hand:
            if isinstance(game.state, AwaitingWildColor):
                instruction = Instruction.PICK_WILD_COLOR
            else:
                instruction = Instruction.PICK_CARD

        return cls(
            current_player=current,
            displayed_player=current if show_hand else None,
            displayed_hand=tuple(player.hand) if show_hand else None,
            instruction=instruction,
            top_discard=game.top_discard,
            direction=game.direction,
            hand_sizes=tuple(len(p.hand) for p in game.players),
            turn_recaps=tuple(game.turn_recaps),
            one_card_players=tuple(i for i, p in enumerate(game.players) if len(p.hand) == 1),
            error=error,
            winner=game.winner,
        )
