"""Card, Color and effect types for UNO."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class Color(str, Enum):
    """Card colors."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"


class TurnEffect(str, Enum):
    """Effects that change who plays next."""

    SKIP = "skip"
    REVERSE = "reverse"


@dataclass(frozen=True)
class DrawEffect:
    """The next player draws `count` cards."""

    count: int

    def __str__(self) -> str:
        return f"draw {self.count}"


@dataclass(frozen=True)
class Card:
    """An UNO card as a flat record of optional attributes.

    Number cards have a color and number, action cards a color and a turn or
    draw effect. Wild cards start without a color; the color is assigned when
    the card is played and removed again when it is recycled into the deck.
    """

    number: Optional[int] = None
    color: Optional[Color] = None
    turn_effect: Optional[TurnEffect] = None
    draw_effect: Optional[DrawEffect] = None
    wild: bool = False

    def __post_init__(self) -> None:
        if self.number is not None and not 0 <= self.number <= 9:
            raise ValueError(f"Invalid card number: {self.number}")

    def with_color(self, color: Color) -> "Card":
        """Return this wild card with its color assigned."""
        if not self.wild:
            raise ValueError(f"Only wild cards can be recolored, got {self}")
        return replace(self, color=color)

    def blank(self) -> "Card":
        """Return the card as it is in a fresh deck (wilds lose their color)."""
        if self.wild and self.color is not None:
            return replace(self, color=None)
        return self

    def __str__(self) -> str:
        parts = []
        if self.wild:
            parts.append("wild")
        if self.color is not None:
            parts.append(self.color.value)
        if self.number is not None:
            parts.append(str(self.number))
        if self.turn_effect is not None:
            parts.append(self.turn_effect.value)
        if self.draw_effect is not None:
            parts.append(str(self.draw_effect))
        return " ".join(parts)


def is_legal_follow_up(previous: Optional[Card], next_card: Card) -> bool:
    """Check if `next_card` may be played on top of `previous`.

    Anything goes on an empty discard pile, and wild cards go on anything.
    Otherwise the cards must share a color, a number or a turn effect, or both
    carry a draw effect (of any size).
    """
    if previous is None or next_card.wild:
        return True
    if next_card.color is not None and next_card.color == previous.color:
        return True
    if next_card.number is not None and next_card.number == previous.number:
        return True
    if next_card.turn_effect is not None and next_card.turn_effect == previous.turn_effect:
        return True
    if next_card.draw_effect is not None and previous.draw_effect is not None:
        return True
    return False
