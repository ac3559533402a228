"""Plain-text rendering of a game snapshot."""

import sys
from typing import List, Optional, TextIO

from unoengine.engine import GameSnapshot, Instruction

# ANSI: erase display, move cursor home
CLEAR_SCREEN = "\x1b[2J\x1b[H"


def render(snapshot: GameSnapshot) -> str:
    """Render the snapshot as the text shown to the human player."""
    if snapshot.winner is not None:
        return f"Player {snapshot.winner} won!"

    lines: List[str] = []

    if snapshot.turn_recaps:
        for recap in snapshot.turn_recaps:
            if recap.drawn_cards > 0:
                noun = "card" if recap.drawn_cards == 1 else "cards"
                lines.append(f"Player {recap.player} drew {recap.drawn_cards} {noun}!")
            lines.append(f"Player {recap.player} played a {recap.played_card}!")
        lines.append("")

    if snapshot.one_card_players:
        for player in snapshot.one_card_players:
            lines.append(f"Player {player} has uno!")
        lines.append("")

    if snapshot.top_discard is not None:
        lines.append(f"Top of the discard pile: {snapshot.top_discard}")
        lines.append("")

    if snapshot.displayed_hand is not None:
        lines.append(f"Player {snapshot.displayed_player}'s cards:")
        for i, card in enumerate(snapshot.displayed_hand, start=1):
            lines.append(f"{i}) {card}")
        lines.append("")

    if snapshot.instruction is Instruction.PICK_CARD:
        lines.append('Type a number to play a card, or "d" to draw a card: ')
    elif snapshot.instruction is Instruction.PICK_WILD_COLOR:
        lines.append("What color do you want your wild card to be?")
        lines.append('Enter one of "R", "B", "G", or "Y" to pick a color: ')

    if snapshot.error:
        lines.append("")
        lines.append(snapshot.error)

    return "\n".join(lines)


def clear_screen(out: Optional[TextIO] = None) -> None:
    (out or sys.stdout).write(CLEAR_SCREEN)
