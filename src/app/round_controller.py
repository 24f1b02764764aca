from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from commit_reveal import Commitment
from errors import PhaseError
from protocol import MoveSet, Outcome, OutcomeTable, build_table
from rules_table import format_help, format_menu

logger = logging.getLogger(__name__)

RESULT_MESSAGES = {
    Outcome.WIN: "You win!",
    Outcome.LOSE: "You lose!",
    Outcome.DRAW: "It's a draw!",
}


class Phase(Enum):
    INIT = "init"
    AWAITING_INPUT = "awaiting_input"
    HELP_SHOWN = "help_shown"
    RESOLVED = "resolved"
    DONE = "done"


@dataclass
class Round:
    moves: MoveSet
    table: OutcomeTable
    computer_index: int
    commitment: Commitment
    human_index: int | None = None
    result: Outcome | None = None


class RoundController:
    """Plays one round: publish the HMAC, read the player's move, reveal the key.

    The digest is written in ``start`` before any input is accepted and the
    key only after the result line, so the ordering holds however ``handle``
    is fed.
    """

    def __init__(
        self,
        moves: MoveSet,
        *,
        write: Callable[[str], None] = print,
        computer_index: int | None = None,
        key: str | None = None,
    ) -> None:
        if computer_index is None:
            computer_index = secrets.randbelow(len(moves))
        elif not 0 <= computer_index < len(moves):
            raise IndexError(f"computer move index out of range: {computer_index}")

        self.round = Round(
            moves=moves,
            table=build_table(moves),
            computer_index=computer_index,
            commitment=Commitment.create(moves[computer_index], key=key),
        )
        self._write = write
        self.phase = Phase.INIT

    @property
    def mac(self) -> str:
        return self.round.commitment.mac

    def start(self) -> None:
        self._expect(Phase.INIT)
        self._write(f"HMAC: {self.mac}")
        self._write(format_menu(self.round.moves))
        self._enter(Phase.AWAITING_INPUT)

    def handle(self, line: str) -> Phase:
        self._expect(Phase.AWAITING_INPUT)
        choice = line.strip()

        if choice == "0":
            self._write("Exiting game.")
            self._enter(Phase.DONE)
        elif choice == "?":
            self._enter(Phase.HELP_SHOWN)
            self._write(format_help(self.round.table))
            self._enter(Phase.AWAITING_INPUT)
        else:
            index = _parse_choice(choice, len(self.round.moves))
            if index is None:
                self._write("Invalid choice, please try again.")
                self._write(format_menu(self.round.moves))
            else:
                self._resolve(index)
        return self.phase

    def run(self, read_line: Callable[[], str] | None = None) -> Round:
        if read_line is None:
            read_line = input
        self.start()
        while self.phase is not Phase.DONE:
            try:
                line = read_line()
            except EOFError:
                logger.debug("input closed, quitting")
                self._enter(Phase.DONE)
                break
            self.handle(line)
        return self.round

    def _resolve(self, human_index: int) -> None:
        rnd = self.round
        rnd.human_index = human_index
        rnd.result = rnd.table.outcome(human_index, rnd.computer_index)
        self._enter(Phase.RESOLVED)

        self._write(f"Your move: {rnd.moves[human_index]}")
        self._write(f"Computer move: {rnd.moves[rnd.computer_index]}")
        self._write(RESULT_MESSAGES[rnd.result])
        self._write(f"HMAC key: {rnd.commitment.disclose()}")
        self._enter(Phase.DONE)

    def _expect(self, phase: Phase) -> None:
        if self.phase is not phase:
            raise PhaseError(f"expected phase {phase.value}, round is in {self.phase.value}")

    def _enter(self, phase: Phase) -> None:
        logger.debug("phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase


def _parse_choice(choice: str, size: int) -> int | None:
    if not (choice.isascii() and choice.isdigit()):
        return None
    number = int(choice)
    if 1 <= number <= size:
        return number - 1
    return None
