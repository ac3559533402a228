"""Game engine for UNO."""

from unoengine.engine.card import Card, Color, DrawEffect, TurnEffect, is_legal_follow_up
from unoengine.engine.commands import (
    Command,
    DrawCard,
    Input,
    NumberInput,
    PickCardToPlay,
    PickWildCardColor,
    TextInput,
    command_from_input,
    parse_input,
)
from unoengine.engine.deck import CANONICAL_DECK_SIZE, MAX_PLAYERS, create_deck
from unoengine.engine.draw import draw_cards
from unoengine.engine.errors import (
    DeckExhaustedError,
    GameError,
    GameOverError,
    IllegalPlayError,
    InvalidCommandError,
    InvariantViolation,
    NoSuchCardError,
    UnrecognizedInputError,
)
from unoengine.engine.game_state import (
    AwaitingWildColor,
    Direction,
    GameOver,
    GameSnapshot,
    Instruction,
    Normal,
    Player,
    TurnRecap,
)
from unoengine.engine.rules import Game, new_game, next_seat

__all__ = [
    "Card",
    "Color",
    "DrawEffect",
    "TurnEffect",
    "is_legal_follow_up",
    "Command",
    "DrawCard",
    "Input",
    "NumberInput",
    "PickCardToPlay",
    "PickWildCardColor",
    "TextInput",
    "command_from_input",
    "parse_input",
    "CANONICAL_DECK_SIZE",
    "MAX_PLAYERS",
    "create_deck",
    "draw_cards",
    "DeckExhaustedError",
    "GameError",
    "GameOverError",
    "IllegalPlayError",
    "InvalidCommandError",
    "InvariantViolation",
    "NoSuchCardError",
    "UnrecognizedInputError",
    "AwaitingWildColor",
    "Direction",
    "GameOver",
    "GameSnapshot",
    "Instruction",
    "Normal",
    "Player",
    "TurnRecap",
    "Game",
    "new_game",
    "next_seat",
]
