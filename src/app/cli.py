from __future__ import annotations

import argparse
import sys

from commit_reveal import Committer, verify_tag
from game import Game
from protocol import ArgumentError, MoveSet, Rules
from table import HelpTable

EXAMPLE = "rps rock paper scissors lizard spock"


def main(argv: list[str] | None = None) -> int:
    # Every argument is a move name, including ones that look like options.
    if argv is None:
        argv = sys.argv[1:]

    try:
        moves = MoveSet.from_args(argv)
    except ArgumentError as exc:
        print("Invalid arguments! Please provide an odd number (at least 3) of unique moves.", file=sys.stderr)
        print(f"  {exc}", file=sys.stderr)
        print(f"Example: {EXAMPLE}", file=sys.stderr)
        return 1

    rules = Rules(moves)
    game = Game(moves, rules, Committer(), HelpTable(moves, rules))
    try:
        game.run()
    except KeyboardInterrupt:
        print("\nGame interrupted. Goodbye!")
        return 130
    return 0


def verify_main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rps-verify",
        description="Check that a revealed HMAC key and move reproduce the HMAC shown before your move.",
    )
    parser.add_argument("key", help="HMAC key revealed after the round")
    parser.add_argument("move", help="Computer move revealed after the round")
    parser.add_argument("tag", help="HMAC shown before you chose")
    args = parser.parse_args(argv)

    if verify_tag(key=args.key, move=args.move, tag=args.tag):
        print("OK")
        return 0
    print("MISMATCH")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
