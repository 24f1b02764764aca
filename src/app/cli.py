from __future__ import annotations

import argparse
import logging

from commit_reveal import verify
from errors import USAGE, InvalidKey, MoveSetError, UsageError
from protocol import MoveSet
from round_controller import RoundController


class MovesParser(argparse.ArgumentParser):
    """Parser whose errors end up on the usage path instead of exiting with 2."""

    def error(self, message: str):  # type: ignore[override]
        raise UsageError(f"Error: {message}")


def main(argv: list[str] | None = None) -> int:
    # Move names are arbitrary strings, so anything that is not --verbose
    # (including "-h" or "-x") is kept, in order, as a move.
    parser = MovesParser(
        prog="rps",
        description="Play one round of N-move rock-paper-scissors against a provably fair computer.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("--verbose", action="store_true", help="Log round phases to stderr")

    try:
        args, move_args = parser.parse_known_args(argv)
        moves = MoveSet.from_args(move_args)
    except MoveSetError as exc:
        print(exc)
        print(USAGE)
        return 0

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    controller = RoundController(moves)
    try:
        controller.run()
    except KeyboardInterrupt:
        print("\nGame interrupted. Goodbye!")
    return 0


def verify_main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rps-verify",
        description="Check that a published HMAC matches the move and key revealed after the round.",
    )
    parser.add_argument("--key", required=True, help="HMAC key printed after the round (hex)")
    parser.add_argument("--move", required=True, help="Computer move printed after the round")
    parser.add_argument("--hmac", required=True, help="HMAC printed before you chose your move")
    args = parser.parse_args(argv)

    try:
        ok = verify(args.key, args.move, args.hmac)
    except InvalidKey as exc:
        print(f"Error: {exc}")
        return 2

    if ok:
        print("HMAC verified.")
        return 0
    print("HMAC mismatch!")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
