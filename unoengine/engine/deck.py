"""Deck creation and shuffling."""

import random
from typing import List, Optional

from unoengine.engine.card import Card, Color, DrawEffect, TurnEffect

CANONICAL_DECK_SIZE = 108
HAND_SIZE = 7
# Larger tables can hold nearly every card in hand and run the draw pile dry
MAX_PLAYERS = 6


def create_deck(rng: Optional[random.Random] = None) -> List[Card]:
    """Create a standard 108-card UNO deck.

    - 4 colors × (one 0, two each of 1-9): 76 cards
    - 4 colors × (two Skip, two Reverse, two Draw Two): 24 cards
    - 4 Wild, 4 Wild Draw Four: 8 cards
    - Total: 108 cards

    The deck is built in a fixed order and shuffled only when `rng` is given.
    """
    cards: List[Card] = []

    for color in Color:
        # One zero per color
        cards.append(Card(number=0, color=color))
        # Two of each 1-9 and action cards per color
        for _ in range(2):
            for number in range(1, 10):
                cards.append(Card(number=number, color=color))
            cards.append(Card(color=color, turn_effect=TurnEffect.SKIP))
            cards.append(Card(color=color, turn_effect=TurnEffect.REVERSE))
            cards.append(Card(color=color, draw_effect=DrawEffect(2)))

    for _ in range(4):
        cards.append(Card(wild=True))
        cards.append(Card(wild=True, draw_effect=DrawEffect(4)))

    if rng is not None:
        rng.shuffle(cards)

    return cards
