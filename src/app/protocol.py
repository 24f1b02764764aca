from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Sequence

from errors import DuplicateMove, EmptyArgumentList, InvalidMoveCount, InvalidMoveParity


class Outcome(Enum):
    WIN = "Win"
    LOSE = "Lose"
    DRAW = "Draw"


def validate_moves(moves: Sequence[str]) -> None:
    if len(moves) == 0:
        raise EmptyArgumentList()
    if len(moves) < 3:
        raise InvalidMoveCount(len(moves))
    if len(moves) % 2 == 0:
        raise InvalidMoveParity(len(moves))

    seen: set[str] = set()
    for move in moves:
        if move in seen:
            raise DuplicateMove(move)
        seen.add(move)


@dataclass(frozen=True)
class MoveSet:
    moves: tuple[str, ...]

    def __post_init__(self) -> None:
        validate_moves(self.moves)

    @classmethod
    def from_args(cls, args: Sequence[str]) -> "MoveSet":
        return cls(tuple(args))

    def __len__(self) -> int:
        return len(self.moves)

    def __getitem__(self, index: int) -> str:
        return self.moves[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.moves)

    def index(self, move: str) -> int:
        return self.moves.index(move)


def determine_outcome(challenger: int, defender: int, size: int) -> Outcome:
    """Outcome for the challenger when moves sit on a cycle of ``size``.

    Every move beats the ``size // 2`` moves immediately before it on the
    cycle and loses to the ``size // 2`` moves after it, so with
    rock, paper, scissors each move beats its predecessor (wrapping round).
    """
    if challenger == defender:
        return Outcome.DRAW

    half = size // 2
    if 1 <= (challenger - defender) % size <= half:
        return Outcome.WIN
    return Outcome.LOSE


@dataclass(frozen=True)
class OutcomeTable:
    moves: MoveSet
    # Indexed [challenger][defender].
    grid: tuple[tuple[Outcome, ...], ...]

    def outcome(self, challenger: int, defender: int) -> Outcome:
        if not (0 <= challenger < len(self.moves) and 0 <= defender < len(self.moves)):
            raise IndexError(f"move index out of range: ({challenger}, {defender})")
        return self.grid[challenger][defender]

    def rows(self) -> Iterator[tuple[str, list[str]]]:
        for move, row in zip(self.moves, self.grid):
            yield move, [cell.value for cell in row]


def build_table(moves: MoveSet) -> OutcomeTable:
    size = len(moves)
    grid = tuple(
        tuple(determine_outcome(i, j, size) for j in range(size))
        for i in range(size)
    )
    return OutcomeTable(moves=moves, grid=grid)


def outcome(table: OutcomeTable, challenger: int, defender: int) -> Outcome:
    return table.outcome(challenger, defender)
