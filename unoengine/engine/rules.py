"""UNO rules: command validation, card effects and turn order."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, List, Optional

from unoengine.engine.card import Card, TurnEffect, is_legal_follow_up
from unoengine.engine.commands import (
    Command,
    DrawCard,
    Input,
    PickCardToPlay,
    PickWildCardColor,
    TextInput,
    command_from_input,
)
from unoengine.engine.deck import HAND_SIZE, MAX_PLAYERS, create_deck
from unoengine.engine.draw import draw_cards
from unoengine.engine.errors import (
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
    EngineState,
    GameOver,
    GameSnapshot,
    Normal,
    Player,
    TurnRecap,
)

if TYPE_CHECKING:
    from unoengine.agent.protocol import ComputerPolicy

logger = logging.getLogger(__name__)


def next_seat(index: int, direction: Direction, num_players: int, skip: bool = False) -> int:
    """Seat reached by stepping once in `direction`, twice when skipping."""
    if not 0 <= index < num_players:
        raise InvariantViolation(f"Seat {index} out of range for {num_players} players")
    steps = 2 if skip else 1
    return (index + steps * direction.value) % num_players


def seat_layout(human_players: int, computer_players: int) -> List[bool]:
    """Interleave human and computer seats, humans first.

    Returns one `is_computer_controlled` flag per seat.
    """
    seats: List[bool] = []
    while human_players or computer_players:
        if human_players:
            seats.append(False)
            human_players -= 1
        if computer_players:
            seats.append(True)
            computer_players -= 1
    return seats


class Game:
    """A single UNO match.

    The game is mutated only through commands. Computer-controlled seats are
    played automatically after every accepted command until a human is to
    move or someone wins.
    """

    def __init__(
        self,
        players: List[Player],
        deck: List[Card],
        discard: Optional[List[Card]] = None,
        *,
        rng: Optional[random.Random] = None,
        policy: Optional["ComputerPolicy"] = None,
        current_player_index: int = 0,
        direction: Direction = Direction.FORWARD,
    ):
        if len(players) < 2:
            raise ValueError("UNO needs at least 2 players")
        if not 0 <= current_player_index < len(players):
            raise InvariantViolation(f"Seat {current_player_index} out of range")
        if policy is None:
            from unoengine.agents.computer_agent import FirstPlayablePolicy

            policy = FirstPlayablePolicy()

        self._players = players
        self._deck = deck
        self._discard = discard if discard is not None else []
        self._rng = rng or random.Random()
        self._policy = policy
        self._current = current_player_index
        self._direction = direction
        self._state: EngineState = Normal()
        self._drawn_this_turn = 0
        self._turn_recaps: List[TurnRecap] = []
        self._new_recaps: List[TurnRecap] = []
        self._error: Optional[str] = None

    @property
    def players(self) -> List[Player]:
        return self._players

    @property
    def deck(self) -> List[Card]:
        return self._deck

    @property
    def discard(self) -> List[Card]:
        return self._discard

    @property
    def current_player_index(self) -> int:
        return self._current

    @property
    def current_player(self) -> Player:
        return self._players[self._current]

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def policy(self) -> "ComputerPolicy":
        return self._policy

    @property
    def turn_recaps(self) -> List[TurnRecap]:
        """Turns resolved by the most recent command that resolved any."""
        return list(self._turn_recaps)

    @property
    def top_discard(self) -> Optional[Card]:
        return self._discard[-1] if self._discard else None

    @property
    def is_over(self) -> bool:
        return isinstance(self._state, GameOver)

    @property
    def winner(self) -> Optional[int]:
        return self._state.winner if isinstance(self._state, GameOver) else None

    def total_cards(self) -> int:
        """Cards across deck, discard pile and all hands. Always 108 in a real game."""
        return len(self._deck) + len(self._discard) + sum(len(p.hand) for p in self._players)

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot.from_game(self, error=self._error)

    def handle(self, command: Optional[Command]) -> GameSnapshot:
        """Apply a command, reporting a rejection in the snapshot instead of raising."""
        self._error = None
        if command is not None:
            try:
                self.apply(command)
            except GameError as exc:
                logger.info("Player %d: rejected %s: %s", self._current, command, exc)
                self._error = str(exc)
        return self.snapshot()

    def handle_input(self, token: Input) -> GameSnapshot:
        """Map a raw input token to a command and handle it.

        Text that means nothing is rejected, except while a wild color is
        being chosen, where it is ignored.
        """
        awaiting = isinstance(self._state, AwaitingWildColor)
        command = command_from_input(token, awaiting_color=awaiting)
        if command is None and not awaiting and isinstance(token, TextInput):
            self._error = str(UnrecognizedInputError(token.text))
            return self.snapshot()
        return self.handle(command)

    def apply(self, command: Command) -> None:
        """Apply a command for the current player.

        Raises:
            GameError: the command was rejected and nothing changed.
        """
        if isinstance(self._state, GameOver):
            raise GameOverError(self._state.winner)

        if isinstance(command, DrawCard):
            self._require_normal("draw a card")
            self._draw_for_current(1)
        elif isinstance(command, PickCardToPlay):
            self._require_normal("play another card")
            card = self._card_at(command.index)
            if not is_legal_follow_up(self.top_discard, card):
                raise IllegalPlayError(card, self.top_discard)
            if card.wild:
                self._state = AwaitingWildColor(command.index)
                return
            self.current_player.hand.pop(command.index - 1)
            self._finish_turn(card)
        elif isinstance(command, PickWildCardColor):
            if not isinstance(self._state, AwaitingWildColor):
                raise InvalidCommandError("There is no wild card waiting for a color.")
            card = self.current_player.hand.pop(self._state.card_index - 1)
            self._state = Normal()
            self._finish_turn(card.with_color(command.color))
        else:
            raise TypeError(f"Unknown command: {command!r}")

        self.run_computer_turns()

    def run_computer_turns(self) -> None:
        """Play computer seats until a human is to move or the game ends."""
        while not self.is_over and self.current_player.is_computer_controlled:
            self._play_computer_turn()
        self._publish_recaps()

    def apply_played_card(self, card: Card) -> None:
        """Resolve the effects of `card` played by the current player."""
        if card.turn_effect is TurnEffect.REVERSE:
            self._direction = self._direction.flipped()

        next_index = next_seat(
            self._current,
            self._direction,
            len(self._players),
            skip=card.turn_effect is TurnEffect.SKIP,
        )

        if card.draw_effect is not None:
            target = self._players[next_index]
            draw_cards(target.hand, card.draw_effect.count, self._deck, self._discard, self._rng)
            logger.debug("Player %d draws %d cards", next_index, card.draw_effect.count)

        self._discard.append(card)

        hand = self.current_player.hand
        if not hand:
            self._state = GameOver(self._current)
            logger.info("Player %d won", self._current)
            return
        if len(hand) == 1:
            logger.info("Player %d has uno", self._current)
        self._current = next_index

    def _require_normal(self, action: str) -> None:
        if isinstance(self._state, AwaitingWildColor):
            raise InvalidCommandError(
                f"Pick a color for your wild card before you {action}."
            )

    def _card_at(self, index: int) -> Card:
        hand = self.current_player.hand
        if not 1 <= index <= len(hand):
            raise NoSuchCardError(index, len(hand))
        return hand[index - 1]

    def _draw_for_current(self, count: int) -> None:
        draw_cards(self.current_player.hand, count, self._deck, self._discard, self._rng)
        self._drawn_this_turn += count

    def _finish_turn(self, card: Card) -> None:
        recap = TurnRecap(self._current, card, self._drawn_this_turn)
        self._drawn_this_turn = 0
        self.apply_played_card(card)
        self._new_recaps.append(recap)

    def _play_computer_turn(self) -> None:
        hand = self.current_player.hand
        while True:
            choice = self._policy.choose_card(tuple(hand), self.top_discard)
            if choice is None:
                self._draw_for_current(1)
                continue
            if not 0 <= choice < len(hand) or not is_legal_follow_up(self.top_discard, hand[choice]):
                raise InvariantViolation(
                    f"{self._policy.name} chose card {choice}, which is not a legal play"
                )
            break

        card = hand.pop(choice)
        if card.wild:
            card = card.with_color(self._policy.choose_color(tuple(hand)))
        logger.debug(
            "Player %d (%s) plays %s after drawing %d",
            self._current,
            self._policy.name,
            card,
            self._drawn_this_turn,
        )
        self._finish_turn(card)

    def _publish_recaps(self) -> None:
        if self._new_recaps:
            self._turn_recaps = self._new_recaps
            self._new_recaps = []


def new_game(
    human_players: int = 1,
    computer_players: int = 3,
    rng: Optional[random.Random] = None,
    policy: Optional["ComputerPolicy"] = None,
) -> Game:
    """Create a game: shuffle, seat players, deal 7 cards each.

    The discard pile starts empty, so any card may open the game. If there
    are no humans the computer players play the whole game right away.
    """
    if human_players < 0 or computer_players < 0:
        raise ValueError("Player counts cannot be negative")
    num_players = human_players + computer_players
    if num_players < 2:
        raise ValueError("UNO needs at least 2 players")
    if num_players > MAX_PLAYERS:
        raise ValueError(f"Too many players for one deck: {num_players} (at most {MAX_PLAYERS})")

    rng = rng or random.Random()
    deck = create_deck(rng)
    players = [Player(is_computer_controlled=computer) for computer in seat_layout(human_players, computer_players)]
    for _ in range(HAND_SIZE):
        for player in players:
            player.hand.append(deck.pop())

    game = Game(players, deck, rng=rng, policy=policy)
    logger.info(
        "New game: %d human and %d computer players", human_players, computer_players
    )
    game.run_computer_turns()
    return game
