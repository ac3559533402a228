"""Drawing cards, recycling the discard pile when the deck runs out."""

import logging
import random
from typing import List

from unoengine.engine.card import Card
from unoengine.engine.errors import DeckExhaustedError

logger = logging.getLogger(__name__)


def drawable_count(deck: List[Card], discard: List[Card]) -> int:
    """Number of cards that can still be drawn. The discard top is reserved."""
    return len(deck) + max(len(discard) - 1, 0)


def draw_cards(
    hand: List[Card],
    count: int,
    deck: List[Card],
    discard: List[Card],
    rng: random.Random,
) -> None:
    """Move `count` cards from the top of `deck` into `hand`.

    If the deck is too small, every discard card except the top one is
    shuffled back into the deck first, with wild cards returned to colorless.
    Asking for more cards than exist raises `DeckExhaustedError`.
    """
    if count <= 0:
        return

    available = drawable_count(deck, discard)
    if available < count:
        raise DeckExhaustedError(count, available)

    if len(deck) < count:
        top = discard.pop()
        recycled = [card.blank() for card in discard]
        discard.clear()
        discard.append(top)
        deck.extend(recycled)
        rng.shuffle(deck)
        logger.debug("Reshuffled %d discarded cards into the deck", len(recycled))

    for _ in range(count):
        hand.append(deck.pop())
