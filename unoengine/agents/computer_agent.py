"""Deterministic computer player."""

from collections import Counter
from typing import Optional, Sequence

from unoengine.engine.card import Card, Color, is_legal_follow_up

# Tie-break order when several colors are held equally often
COLOR_PRIORITY = (Color.RED, Color.BLUE, Color.YELLOW, Color.GREEN)


class FirstPlayablePolicy:
    """Plays the first legal card in hand order, drawing until there is one.

    Wild cards take the color the player holds most of.
    """

    @property
    def name(self) -> str:
        return "first-playable"

    def choose_card(self, hand: Sequence[Card], top: Optional[Card]) -> Optional[int]:
        for i, card in enumerate(hand):
            if is_legal_follow_up(top, card):
                return i
        return None

    def choose_color(self, hand: Sequence[Card]) -> Color:
        counts = Counter(card.color for card in hand if card.color is not None)
        return max(COLOR_PRIORITY, key=lambda color: (counts[color], -COLOR_PRIORITY.index(color)))
