"""Play one all-computer game and print every turn."""

import random

from unoengine.engine import new_game


def main():
    game = new_game(human_players=0, computer_players=4, rng=random.Random(42))

    # The whole game resolves while the game is created
    for recap in game.turn_recaps:
        drew = f" after drawing {recap.drawn_cards}" if recap.drawn_cards else ""
        print(f"> Player {recap.player} played {recap.played_card}{drew}")

    print(f"Game finished! Winner: Player {game.winner}")
    print(f"Turns: {len(game.turn_recaps)}")
    print(f"Cards accounted for: {game.total_cards()}")


if __name__ == "__main__":
    main()
