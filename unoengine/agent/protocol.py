"""Policy protocol - interface that computer players implement."""

from typing import Optional, Protocol, Sequence, runtime_checkable

from unoengine.engine.card import Card, Color


@runtime_checkable
class ComputerPolicy(Protocol):
    """Interface for computer-controlled UNO players."""

    @property
    def name(self) -> str:
        """Display name for the policy."""
        ...

    def choose_card(self, hand: Sequence[Card], top: Optional[Card]) -> Optional[int]:
        """Choose a card to play.

        Args:
            hand: The player's hand, in hand order.
            top: Top card of the discard pile, or None before the first play.

        Returns:
            0-based index of a card that is a legal follow-up of `top`, or
            None to draw a card and be asked again.
        """
        ...

    def choose_color(self, hand: Sequence[Card]) -> Color:
        """Choose the color of a wild card about to be played.

        Args:
            hand: The player's hand without the wild card.
        """
        ...
