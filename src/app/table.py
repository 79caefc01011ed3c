from __future__ import annotations

from typing import Final

from tabulate import tabulate

from protocol import MoveSet, Outcome, RulesLike

CORNER: Final[str] = "Moves"

# Cell text for the help table; round results use their own wording.
CELL_TEXT: Final[dict[Outcome, str]] = {
    "draw": "Draw",
    "win": "Win",
    "lose": "Lose",
}


def build_matrix(moves: MoveSet, rules: RulesLike) -> list[list[str]]:
    """Outcome grid with the row move as self and the column move as opponent.

    The first row is the header: ``["Moves", *moves]``.
    """
    grid: list[list[str]] = [[CORNER, *moves]]
    for own in moves:
        grid.append([own, *(CELL_TEXT[rules.determine_winner(own, opponent)] for opponent in moves)])
    return grid


def render_matrix(grid: list[list[str]]) -> str:
    header, *rows = grid
    return tabulate(rows, headers=header, tablefmt="grid", disable_numparse=True)


class HelpTable:
    def __init__(self, moves: MoveSet, rules: RulesLike) -> None:
        # The move set never changes, so the grid is built once.
        self.grid = build_matrix(moves, rules)

    def render(self) -> str:
        return "\n".join(
            [
                "Results are shown from the row move's point of view against the column move.",
                render_matrix(self.grid),
            ]
        )
