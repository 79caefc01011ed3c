from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Literal, Protocol, Sequence

Outcome = Literal["draw", "win", "lose"]

MIN_MOVES = 3


class ArgumentError(ValueError):
    """The move set given on the command line is unusable."""


class InvalidInputError(ValueError):
    """A move selection typed during a round is not a listed number."""


class InvalidMoveError(ValueError):
    """A move name is not part of the configured move set."""


@dataclass(frozen=True)
class MoveSet:
    names: tuple[str, ...]

    @classmethod
    def from_args(cls, args: Sequence[str]) -> "MoveSet":
        names = tuple(args)
        if len(names) < MIN_MOVES or len(names) % 2 == 0 or len(set(names)) != len(names):
            raise ArgumentError(
                f"expected an odd number (at least {MIN_MOVES}) of unique moves, got {len(names)}: "
                + " ".join(names)
            )
        return cls(names=names)

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def index_of(self, name: str) -> int:
        try:
            return self.names.index(name)
        except ValueError:
            raise InvalidMoveError(f"unknown move: {name!r}") from None

    def by_number(self, number: int) -> str:
        # Menu numbers start at 1; 0 is reserved for exit.
        return self.names[number - 1]


class Rules:
    """Half-cycle beats relation over an odd number of moves.

    Moves sit on a cycle. A move loses to its immediate successor and to the
    move n // 2 steps ahead, and beats every other move except itself. For three
    or five moves that is a balanced tournament; from seven moves on each move
    has only two losing matchups.
    """

    def __init__(self, moves: MoveSet) -> None:
        self.moves = moves

    def is_valid_move(self, candidate: str | int) -> bool:
        number = parse_number(candidate)
        return number is not None and 1 <= number <= len(self.moves)

    def determine_winner(self, own: str, opponent: str) -> Outcome:
        own_idx = self.moves.index_of(own)
        opp_idx = self.moves.index_of(opponent)
        n = len(self.moves)

        if opp_idx == own_idx:
            return "draw"
        if opp_idx == (own_idx + 1) % n or opp_idx == (own_idx + n // 2) % n:
            return "lose"
        return "win"


def parse_number(candidate: str | int) -> int | None:
    if isinstance(candidate, bool):
        return None
    if isinstance(candidate, int):
        return candidate
    try:
        return int(str(candidate).strip())
    except ValueError:
        return None


# Capability interfaces; the concrete classes satisfy them structurally.


class RulesLike(Protocol):
    def is_valid_move(self, candidate: str | int) -> bool: ...

    def determine_winner(self, own: str, opponent: str) -> Outcome: ...


class CommitterLike(Protocol):
    def generate_key(self) -> str: ...

    def generate_tag(self, key: str, move: str) -> str: ...


class HelpTableLike(Protocol):
    def render(self) -> str: ...
