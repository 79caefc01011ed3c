from __future__ import annotations

import secrets
from dataclasses import dataclass, replace
from typing import Callable, Final

from protocol import CommitterLike, HelpTableLike, InvalidInputError, MoveSet, Outcome, RulesLike, parse_number

HELP_COMMAND: Final[str] = "?"
EXIT_NUMBER: Final[int] = 0
PROMPT: Final[str] = "Enter your move: "

RESULT_TEXT: Final[dict[Outcome, str]] = {
    "draw": "Draw!",
    "win": "You Win!",
    "lose": "You Lose!",
}


@dataclass(frozen=True)
class RoundState:
    computer_move: str
    key: str
    tag: str
    user_move: str | None = None
    outcome: Outcome | None = None

    def resolve(self, user_move: str, outcome: Outcome) -> "RoundState":
        return replace(self, user_move=user_move, outcome=outcome)


class Game:
    def __init__(
        self,
        moves: MoveSet,
        rules: RulesLike,
        committer: CommitterLike,
        help_table: HelpTableLike,
        *,
        read_line: Callable[[str], str] | None = None,
        write: Callable[[str], None] | None = None,
        choose_index: Callable[[int], int] = secrets.randbelow,
    ) -> None:
        self.moves = moves
        self.rules = rules
        self.committer = committer
        self.help_table = help_table
        self._read_line = read_line or input
        self._write = write or print
        self._choose_index = choose_index

    def run(self) -> int:
        """Play rounds until the user exits. Returns the number of rounds resolved."""
        played = 0
        while self.play_round() is not None:
            played += 1
        return played

    def play_round(self) -> RoundState | None:
        state = self.commit()
        while True:
            self._show_menu(state)
            try:
                line = self._read_line(PROMPT)
            except EOFError:
                self._write("")
                self._write("Exiting the game.")
                return None

            if line.strip() == HELP_COMMAND:
                self._write(self.help_table.render())
                continue
            if parse_number(line) == EXIT_NUMBER:
                self._write("Exiting the game.")
                return None

            try:
                user_move = self._select(line)
            except InvalidInputError:
                self._write("Invalid move!")
                continue

            outcome = self.rules.determine_winner(user_move, state.computer_move)
            resolved = state.resolve(user_move, outcome)
            self._show_result(resolved, outcome)
            return resolved

    def commit(self) -> RoundState:
        computer_move = self.moves.by_number(self._choose_index(len(self.moves)) + 1)
        key = self.committer.generate_key()
        return RoundState(computer_move=computer_move, key=key, tag=self.committer.generate_tag(key, computer_move))

    def _select(self, line: str) -> str:
        if not self.rules.is_valid_move(line):
            raise InvalidInputError(f"not a move number: {line!r}")
        return self.moves.by_number(int(line))

    def _show_menu(self, state: RoundState) -> None:
        self._write(f"HMAC: {state.tag}")
        self._write("Available moves:")
        for number, move in enumerate(self.moves, start=1):
            self._write(f"{number} - {move}")
        self._write(f"{EXIT_NUMBER} - exit")
        self._write(f"{HELP_COMMAND} - help")

    def _show_result(self, state: RoundState, outcome: Outcome) -> None:
        self._write(f"Your move: {state.user_move}")
        self._write(f"Computer move: {state.computer_move}")
        self._write(RESULT_TEXT[outcome])
        self._write(f"HMAC key: {state.key}")
        self._write("")
