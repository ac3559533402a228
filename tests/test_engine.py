"""Unit tests for the turn engine."""

import random

import pytest

from unoengine.engine import (
    AwaitingWildColor,
    Card,
    Color,
    Direction,
    DrawCard,
    DrawEffect,
    GameOver,
    GameOverError,
    IllegalPlayError,
    InvalidCommandError,
    InvariantViolation,
    MAX_PLAYERS,
    NoSuchCardError,
    Normal,
    PickCardToPlay,
    PickWildCardColor,
    TurnEffect,
    is_legal_follow_up,
    new_game,
    next_seat,
)
from unoengine.engine.rules import seat_layout

from helpers import blue, green, make_game, red, yellow

RED_SKIP = Card(color=Color.RED, turn_effect=TurnEffect.SKIP)
RED_REVERSE = Card(color=Color.RED, turn_effect=TurnEffect.REVERSE)
RED_DRAW_TWO = Card(color=Color.RED, draw_effect=DrawEffect(2))
WILD = Card(wild=True)
WILD_DRAW_FOUR = Card(wild=True, draw_effect=DrawEffect(4))


def test_new_game_deals_seven_cards() -> None:
    game = new_game(human_players=1, computer_players=2, rng=random.Random(1))
    assert [len(p.hand) for p in game.players] == [7, 7, 7]
    assert game.discard == []
    assert len(game.deck) == 108 - 7 * 3
    assert game.current_player_index == 0
    assert game.direction is Direction.FORWARD
    assert game.state == Normal()
    assert game.winner is None


def test_new_game_seats_human_first() -> None:
    game = new_game(human_players=2, computer_players=3, rng=random.Random(1))
    assert [p.is_computer_controlled for p in game.players] == [False, True, False, True, True]
    assert seat_layout(1, 3) == [False, True, True, True]
    assert seat_layout(3, 1) == [False, True, False, False]


@pytest.mark.parametrize(
    "humans,computers",
    [(1, 0), (0, 1), (0, 0), (8, 8), (-1, 3), (0, MAX_PLAYERS + 1), (2, MAX_PLAYERS - 1)],
)
def test_new_game_rejects_bad_player_counts(humans: int, computers: int) -> None:
    with pytest.raises(ValueError):
        new_game(human_players=humans, computer_players=computers)


def test_new_game_reproducible() -> None:
    g1 = new_game(human_players=1, computer_players=3, rng=random.Random(99))
    g2 = new_game(human_players=1, computer_players=3, rng=random.Random(99))
    assert g1.players[0].hand == g2.players[0].hand
    assert g1.deck == g2.deck


def test_next_seat_wraps() -> None:
    assert next_seat(2, Direction.FORWARD, 3) == 0
    assert next_seat(0, Direction.BACKWARD, 3) == 2
    assert next_seat(0, Direction.FORWARD, 3, skip=True) == 2
    assert next_seat(1, Direction.BACKWARD, 3, skip=True) == 2


def test_next_seat_out_of_range_is_fatal() -> None:
    with pytest.raises(InvariantViolation):
        next_seat(3, Direction.FORWARD, 3)


def test_play_number_card_advances_turn() -> None:
    game = make_game([[red(5), blue(1)], [green(2)], [yellow(3)]])
    game.apply(PickCardToPlay(1))
    assert game.top_discard == red(5)
    assert game.players[0].hand == [blue(1)]
    assert game.current_player_index == 1


def test_skip_with_three_players() -> None:
    game = make_game([[RED_SKIP, blue(1)], [green(2)], [yellow(3)]])
    game.apply(PickCardToPlay(1))
    assert game.current_player_index == 2
    assert game.direction is Direction.FORWARD


def test_reverse_with_three_players() -> None:
    game = make_game([[RED_REVERSE, blue(1)], [green(2)], [yellow(3)]])
    game.apply(PickCardToPlay(1))
    assert game.direction is Direction.BACKWARD
    assert game.current_player_index == 2


def test_reverse_then_normal_play_goes_backward() -> None:
    game = make_game([[RED_REVERSE, blue(1)], [green(2)], [red(3), red(4)]])
    game.apply(PickCardToPlay(1))
    game.apply(PickCardToPlay(1))
    assert game.current_player_index == 1


def test_draw_two_hits_next_player() -> None:
    deck = [yellow(1), yellow(2), yellow(3)]
    game = make_game([[RED_DRAW_TWO, blue(1)], [green(2)], [yellow(3)]], deck=deck)
    game.apply(PickCardToPlay(1))
    assert game.players[1].hand == [green(2), yellow(3), yellow(2)]
    assert len(game.players[2].hand) == 1
    assert game.deck == [yellow(1)]
    assert game.current_player_index == 1


def test_draw_targets_seat_after_reverse() -> None:
    reverse_draw = Card(color=Color.RED, turn_effect=TurnEffect.REVERSE, draw_effect=DrawEffect(2))
    game = make_game([[reverse_draw, blue(1)], [green(2)], [yellow(3)]])
    game.apply(PickCardToPlay(1))
    assert len(game.players[2].hand) == 3
    assert len(game.players[1].hand) == 1
    assert game.current_player_index == 2


def test_draw_targets_seat_after_skip() -> None:
    skip_draw = Card(color=Color.RED, turn_effect=TurnEffect.SKIP, draw_effect=DrawEffect(2))
    game = make_game([[skip_draw, blue(1)], [green(2)], [yellow(3)]])
    game.apply(PickCardToPlay(1))
    assert len(game.players[1].hand) == 1
    assert len(game.players[2].hand) == 3
    assert game.current_player_index == 2


def test_draw_command_keeps_turn() -> None:
    game = make_game([[red(5)], [green(2)]], deck=[yellow(1), yellow(2)])
    game.apply(DrawCard())
    assert game.players[0].hand == [red(5), yellow(2)]
    assert game.current_player_index == 0
    assert game.deck == [yellow(1)]


def test_no_such_card() -> None:
    game = make_game([[red(5), blue(1)], [green(2)]])
    for index in (0, 3, -1):
        with pytest.raises(NoSuchCardError):
            game.apply(PickCardToPlay(index))
    assert game.players[0].hand == [red(5), blue(1)]
    assert game.current_player_index == 0


def test_illegal_play_leaves_state_alone() -> None:
    game = make_game([[blue(2), red(1)], [green(2)]], discard=[red(5)])
    with pytest.raises(IllegalPlayError):
        game.apply(PickCardToPlay(1))
    assert game.players[0].hand == [blue(2), red(1)]
    assert game.discard == [red(5)]
    assert game.current_player_index == 0


def test_wild_card_waits_for_color() -> None:
    game = make_game([[WILD, red(1)], [green(2)]], discard=[blue(5)])
    game.apply(PickCardToPlay(1))
    assert game.state == AwaitingWildColor(1)
    assert game.players[0].hand == [WILD, red(1)]
    assert game.current_player_index == 0

    game.apply(PickWildCardColor(Color.GREEN))
    assert game.state == Normal()
    assert game.top_discard == Card(wild=True, color=Color.GREEN)
    assert game.players[0].hand == [red(1)]
    assert game.current_player_index == 1


def test_wild_draw_four_hits_next_player() -> None:
    deck = [yellow(n) for n in range(6)]
    game = make_game([[red(1), WILD_DRAW_FOUR], [green(2)], [blue(3)]], deck=deck)
    game.apply(PickCardToPlay(2))
    game.apply(PickWildCardColor(Color.RED))
    assert game.top_discard == Card(wild=True, color=Color.RED, draw_effect=DrawEffect(4))
    assert len(game.players[1].hand) == 5
    assert game.current_player_index == 1


def test_only_color_pick_while_awaiting_color() -> None:
    game = make_game([[WILD, red(1)], [green(2)]])
    game.apply(PickCardToPlay(1))
    with pytest.raises(InvalidCommandError):
        game.apply(DrawCard())
    with pytest.raises(InvalidCommandError):
        game.apply(PickCardToPlay(2))
    assert game.state == AwaitingWildColor(1)
    assert game.players[0].hand == [WILD, red(1)]


def test_color_pick_without_wild_is_rejected() -> None:
    game = make_game([[red(1)], [green(2)]])
    with pytest.raises(InvalidCommandError):
        game.apply(PickWildCardColor(Color.RED))
    assert game.state == Normal()


def test_last_card_wins() -> None:
    game = make_game([[red(5)], [green(2), red(7)], [yellow(3)]], discard=[red(1)])
    game.apply(PickCardToPlay(1))
    assert game.state == GameOver(0)
    assert game.winner == 0
    assert game.is_over
    assert game.current_player_index == 0
    with pytest.raises(GameOverError):
        game.apply(DrawCard())
    with pytest.raises(GameOverError):
        game.apply(PickCardToPlay(1))


def test_last_card_draw_two_still_hits_next_player() -> None:
    game = make_game([[RED_DRAW_TWO], [green(2)]])
    game.apply(PickCardToPlay(1))
    assert game.winner == 0
    assert len(game.players[1].hand) == 3
    assert game.current_player_index == 0


def test_winning_wild_card() -> None:
    game = make_game([[WILD], [green(2)]])
    game.apply(PickCardToPlay(1))
    game.apply(PickWildCardColor(Color.BLUE))
    assert game.winner == 0


def test_computer_plays_after_human() -> None:
    game = make_game(
        [[red(5), green(1)], [blue(2), red(7)]],
        computers=[False, True],
    )
    game.apply(PickCardToPlay(1))
    assert game.current_player_index == 0
    assert game.top_discard == red(7)
    assert game.players[1].hand == [blue(2)]


def test_computer_draws_until_playable() -> None:
    game = make_game(
        [[red(5), green(1)], [blue(2)]],
        computers=[False, True],
        deck=[yellow(1), red(3), blue(8)],
    )
    game.apply(PickCardToPlay(1))
    assert game.top_discard == red(3)
    assert game.players[1].hand == [blue(2), blue(8)]
    assert game.deck == [yellow(1)]
    assert game.current_player_index == 0


def test_computer_wins_and_stops_cascade() -> None:
    game = make_game(
        [[red(5), green(1)], [red(7)], [red(8), red(9)]],
        computers=[False, True, True],
    )
    game.apply(PickCardToPlay(1))
    assert game.winner == 1
    assert game.players[2].hand == [red(8), red(9)]
    assert game.top_discard == red(7)


def test_computer_cascade_through_several_seats() -> None:
    game = make_game(
        [[red(5), green(1)], [red(7), blue(1)], [red(8), red(9)]],
        computers=[False, True, True],
    )
    game.apply(PickCardToPlay(1))
    assert game.current_player_index == 0
    assert game.discard == [red(5), red(7), red(8)]


def test_computer_wild_color_choice() -> None:
    game = make_game(
        [[yellow(5), green(1)], [WILD, blue(2), blue(3), green(4)]],
        computers=[False, True],
        discard=[yellow(7)],
    )
    game.apply(PickCardToPlay(1))
    assert game.top_discard == Card(wild=True, color=Color.BLUE)
    assert game.players[1].hand == [blue(2), blue(3), green(4)]
    assert game.current_player_index == 0


def test_card_count_conserved_through_a_game(rng: random.Random) -> None:
    game = new_game(human_players=1, computer_players=3, rng=rng)
    assert game.total_cards() == 108
    for _ in range(500):
        if game.is_over:
            break
        hand = game.players[0].hand
        playable = [i for i, card in enumerate(hand, start=1) if is_legal_follow_up(game.top_discard, card)]
        if playable:
            game.apply(PickCardToPlay(playable[0]))
            if isinstance(game.state, AwaitingWildColor):
                game.apply(PickWildCardColor(Color.RED))
        else:
            game.apply(DrawCard())
        assert game.total_cards() == 108
    assert game.total_cards() == 108
