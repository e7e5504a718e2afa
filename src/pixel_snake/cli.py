"""Command-line entry point for headless simulation and score inspection."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace

logger = logging.getLogger(__name__)

_DEFAULT_SCORES = "scores.json"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixel-snake",
        description="Pixel Snake headless simulation and score tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Run a headless session from a move script.",
    )
    sim_p.add_argument(
        "--moves", type=str, default="",
        help="One character per tick: L/R/U/D to turn, '.' for no input.",
    )
    sim_p.add_argument(
        "--ticks", type=int, default=None,
        help="Number of ticks to run (default: length of --moves).",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument("--width", type=int, default=None)
    sim_p.add_argument("--height", type=int, default=None)
    sim_p.add_argument(
        "--scores", type=str, default=None,
        help="Path to a JSON score file (default: scores are not kept).",
    )

    # --- scores ---
    scores_p = sub.add_parser("scores", help="Print the stored top scores.")
    scores_p.add_argument("--scores", type=str, default=_DEFAULT_SCORES)
    scores_p.add_argument("--key", type=str, default=None)

    return parser


def _run_simulate(args: argparse.Namespace) -> int:
    from pixel_snake.config import GameConfig
    from pixel_snake.scores import JsonScoreStore, MemoryScoreStore
    from pixel_snake.session import GameSession

    config = GameConfig.load(args.config) if args.config else GameConfig()
    overrides = {
        name: getattr(args, name)
        for name in ("seed", "width", "height")
        if getattr(args, name) is not None
    }
    if overrides:
        config = replace(config, **overrides)

    store = (
        JsonScoreStore(args.scores, config.score_capacity)
        if args.scores else MemoryScoreStore(config.score_capacity)
    )
    session = GameSession(config, store=store)
    session.start()

    moves = args.moves
    ticks = args.ticks if args.ticks is not None else len(moves)
    for i in range(ticks):
        if i < len(moves) and moves[i] != ".":
            session.propose(moves[i])
        session.tick()
        if session.ended:
            break
    session.end()

    print(json.dumps({  # noqa: T201
        "state": session.state.value,
        "ticks": session.ticks,
        "score": session.score,
        "fps": session.fps,
        "alive": session.alive,
        "head": list(session.snake.head),
        "length": len(session.snake),
        "target": list(session.target) if session.target is not None else None,
    }))
    return 0


def _run_scores(args: argparse.Namespace) -> int:
    from pixel_snake.scores import DEFAULT_KEY, JsonScoreStore

    store = JsonScoreStore(args.scores)
    records = store.load(args.key or DEFAULT_KEY)
    if not records:
        print("No scores recorded.")  # noqa: T201
        return 0
    for rank, record in enumerate(records, start=1):
        print(f"{rank}. {record.date}  {record.score}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``pixel-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "scores": _run_scores,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
