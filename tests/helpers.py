"""Card and game builders shared by the tests."""

import random
from typing import List, Optional

from unoengine.engine import Card, Color, Game, Player


def red(n: int) -> Card:
    return Card(number=n, color=Color.RED)


def blue(n: int) -> Card:
    return Card(number=n, color=Color.BLUE)


def green(n: int) -> Card:
    return Card(number=n, color=Color.GREEN)


def yellow(n: int) -> Card:
    return Card(number=n, color=Color.YELLOW)


def make_game(
    hands: List[List[Card]],
    computers: Optional[List[bool]] = None,
    deck: Optional[List[Card]] = None,
    discard: Optional[List[Card]] = None,
    **kwargs,
) -> Game:
    """A game with the given hands; every seat is human unless `computers` says otherwise."""
    computers = computers or [False] * len(hands)
    players = [
        Player(hand=list(hand), is_computer_controlled=computer)
        for hand, computer in zip(hands, computers)
    ]
    if deck is None:
        deck = [yellow(n) for n in range(10)]
    return Game(
        players,
        list(deck),
        list(discard) if discard is not None else None,
        rng=random.Random(0),
        **kwargs,
    )


