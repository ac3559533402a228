"""Exceptions raised by the game engine.

`GameError` subclasses are rejections of a single command: the engine reports
them to the player and leaves the game untouched. `InvariantViolation` means
the engine's own bookkeeping is broken and the game cannot continue.
"""


class GameError(Exception):
    """A command was rejected. The message is shown to the player."""


class NoSuchCardError(GameError):
    def __init__(self, index: int, hand_size: int):
        super().__init__(f"There is no card number {index}. Pick a number from 1 to {hand_size}.")
        self.index = index


class IllegalPlayError(GameError):
    def __init__(self, card, top):
        super().__init__(f"You can't play a {card} on a {top}.")
        self.card = card
        self.top = top


class InvalidCommandError(GameError):
    """The command is not valid in the engine's current state."""


class GameOverError(InvalidCommandError):
    def __init__(self, winner: int):
        super().__init__(f"The game is over. Player {winner} won.")
        self.winner = winner


class UnrecognizedInputError(GameError):
    def __init__(self, text: str):
        super().__init__(f"Unrecognized input {text!r}. Type a card number or \"d\" to draw.")
        self.text = text


class InvariantViolation(RuntimeError):
    """Internal state is inconsistent. Not meant to be caught by game logic."""


class DeckExhaustedError(InvariantViolation):
    def __init__(self, requested: int, available: int):
        super().__init__(
            f"Cannot draw {requested} cards: only {available} left in deck and discard pile"
        )
        self.requested = requested
        self.available = available
