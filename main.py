"""CLI entrypoint for the word search solver."""

from __future__ import annotations

import argparse
import json
import sys
import time
from pathlib import Path
from typing import Any, Dict

from wordsearch.core.constants import DEFAULT_FILLER, DEFAULT_GRID_SIZE, RowPolicy, StepStatus
from wordsearch.core.exceptions import WordSearchError
from wordsearch.engine.grid import GridConfig
from wordsearch.engine.search import SearchConfig, SearchEngine
from wordsearch.engine.validator import ResultValidator
from wordsearch.io.puzzle_source import load_puzzle
from wordsearch.utils.logger import configure_logging
from wordsearch.utils.pretty import pretty_print_grid, print_search_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find listed words in a letter grid and spell the leftover solution",
    )
    parser.add_argument(
        "--words",
        type=str,
        required=True,
        metavar="SOURCE",
        help="Word list file or http(s) URL, one word per line",
    )
    parser.add_argument(
        "--grid",
        type=str,
        required=True,
        metavar="SOURCE",
        help="Grid file or http(s) URL, one row per line",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=DEFAULT_GRID_SIZE,
        help=f"Grid dimension in cells (default {DEFAULT_GRID_SIZE})",
    )
    parser.add_argument(
        "--pad-short-rows",
        action="store_true",
        help="Accept rows shorter than --size, leaving the filler in trailing cells",
    )
    parser.add_argument(
        "--filler",
        type=str,
        default=DEFAULT_FILLER,
        help="Placeholder letter for padded cells",
    )
    parser.add_argument(
        "--animate",
        action="store_true",
        help="Step through the search, redrawing the grid as words are found",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=0.05,
        help="Seconds between revealed words and solution letters with --animate",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="HTTP timeout in seconds for URL sources",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Run consistency checks on the finished search",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def animate(engine: SearchEngine, delay: float, stream=None) -> None:
    """Drive the engine one step at a time, pausing on visible changes."""
    stream = stream or sys.stdout
    solution = ""
    while True:
        step = engine.step()
        if step.status == StepStatus.ALL_DONE:
            break
        if step.status == StepStatus.WORD_FOUND:
            word = engine.words[step.word_index]
            pretty_print_grid(engine.grid, label=f"Found {word.text}", stream=stream)
        elif step.status == StepStatus.WORD_EXHAUSTED:
            word = engine.words[step.word_index]
            print(f"Missing {word.text}", file=stream)
        elif step.letter is not None:
            solution += step.letter
            print(f"Solution so far: {solution}", file=stream)
        else:
            continue
        if delay > 0:
            time.sleep(delay)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.size <= 0:
        parser.error("--size must be positive")
    if len(args.filler) != 1:
        parser.error("--filler must be a single character")
    if args.delay < 0:
        parser.error("--delay cannot be negative")

    config = GridConfig(
        size=args.size,
        row_policy=RowPolicy.PAD if args.pad_short_rows else RowPolicy.STRICT,
        filler=args.filler,
    )

    try:
        grid, words = load_puzzle(args.words, args.grid, config, timeout_seconds=args.timeout)
        engine = SearchEngine(grid, words, SearchConfig())
        if args.animate:
            animate(engine, args.delay)
        result = engine.run()
    except WordSearchError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    validation_messages = []
    if args.validate:
        validation = ResultValidator().validate(grid, result)
        validation_messages = validation.messages
        if not validation.ok:
            for message in validation_messages:
                print(f"validation: {message}", file=sys.stderr)

    if args.output:
        payload: Dict[str, Any] = result.to_jsonable()
        payload["grid"] = grid.to_jsonable()
        payload["validation"] = validation_messages
        args.output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    else:
        print_search_report(result, grid)

    return 1 if validation_messages else 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
