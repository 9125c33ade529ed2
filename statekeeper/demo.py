"""Walk a holder through a few backup/mutate rounds and roll it back."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from statekeeper.config import log_level, token_length
from statekeeper.persist.history import History
from statekeeper.state.holder import StateHolder
from statekeeper.state.ids import seeded_tokens

DEFAULT_INITIAL_STATE = "Super-duper-super-puper-super."
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--initial", default=DEFAULT_INITIAL_STATE, help="initial holder state")
    parser.add_argument("--rounds", type=int, default=3, help="number of backup/mutate rounds")
    parser.add_argument("--undos", type=int, default=2, help="number of undo steps afterwards")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible state tokens")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="logging level (defaults to STATEKEEPER_LOG_LEVEL)",
    )
    return parser


def run(holder: StateHolder, history: History, *, rounds: int, undos: int) -> list[str]:
    """Run the scenario and return the holder state description after each undo."""

    for _ in range(rounds):
        history.backup()
        holder.mutate()
        print(f"state changed to: {holder.describe(holder.state)}")

    print("\nHistory:")
    for label in history.show_history():
        print(f"  {label}")

    restored: list[str] = []
    for index in range(undos):
        print("\nRolling back!" if index == 0 else "\nOnce more!")
        history.undo()
        current = holder.describe(holder.state)
        restored.append(current)
        print(f"state restored to: {current}")
    return restored


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.rounds < 0 or args.undos < 0:
        parser.error("--rounds and --undos must not be negative")

    level = args.log_level or log_level()
    if level not in LOG_LEVELS:
        parser.error(f"STATEKEEPER_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {level!r}")

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    generator = seeded_tokens(args.seed, token_length()) if args.seed is not None else None
    holder = StateHolder(args.initial, generator=generator)
    history = History(holder)
    print(f"initial state: {holder.describe(holder.state)}")
    run(holder, history, rounds=args.rounds, undos=args.undos)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
