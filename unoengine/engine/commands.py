"""Input tokens and the commands they map to."""

from dataclasses import dataclass
from typing import Optional, Union

from unoengine.engine.card import Color


@dataclass(frozen=True)
class NumberInput:
    """A line of input that parsed as an integer."""

    value: int


@dataclass(frozen=True)
class TextInput:
    """Any other line of input."""

    text: str


Input = Union[NumberInput, TextInput]


@dataclass(frozen=True)
class PickCardToPlay:
    """Command: play the card at `index` (1-based, as shown to the player)."""

    index: int


@dataclass(frozen=True)
class DrawCard:
    """Command: draw one card. The turn does not pass."""

    pass


@dataclass(frozen=True)
class PickWildCardColor:
    """Command: choose the color of the wild card being played."""

    color: Color


Command = Union[PickCardToPlay, DrawCard, PickWildCardColor]

COLOR_SHORTCUTS = {
    "r": Color.RED,
    "b": Color.BLUE,
    "g": Color.GREEN,
    "y": Color.YELLOW,
}


def parse_input(raw: str) -> Input:
    """Turn a raw line of input into a token."""
    text = raw.rstrip("\r\n").strip()
    try:
        return NumberInput(int(text))
    except ValueError:
        return TextInput(text)


def command_from_input(token: Input, awaiting_color: bool = False) -> Optional[Command]:
    """Map an input token to a command, or None if it means nothing."""
    if isinstance(token, NumberInput):
        return PickCardToPlay(token.value)

    text = token.text.lower()
    if text == "d":
        return DrawCard()
    if awaiting_color and text in COLOR_SHORTCUTS:
        return PickWildCardColor(COLOR_SHORTCUTS[text])
    return None
