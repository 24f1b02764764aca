from __future__ import annotations

USAGE = "Usage: rps move1 move2 move3 ... (Provide an odd number of unique moves >= 3)"


class MoveSetError(ValueError):
    """Raised when the moves given on the command line cannot form a game."""


class EmptyArgumentList(MoveSetError):
    def __init__(self) -> None:
        super().__init__("Error: No moves provided. Please provide an odd number of moves (>= 3).")


class InvalidMoveCount(MoveSetError):
    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Error: At least 3 moves required, got {count}.")


class InvalidMoveParity(MoveSetError):
    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Error: The number of moves must be odd, got {count}.")


class DuplicateMove(MoveSetError):
    def __init__(self, move: str) -> None:
        self.move = move
        super().__init__(f"Error: Moves must be unique, {move!r} appears more than once.")


class UsageError(MoveSetError):
    """Raised when the command line itself cannot be parsed."""


class PhaseError(RuntimeError):
    """Raised when a round is driven out of order."""


class CommitmentSpent(RuntimeError):
    """Raised when a commitment key is disclosed a second time."""


class InvalidKey(ValueError):
    """Raised when a disclosed key is not one this game could have produced."""
