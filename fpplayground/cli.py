"""
Command line entry point.
"""

import argparse
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from returns.result import Failure
from rich.console import Console

from fpplayground.config import LOG_LEVELS, PlaygroundConfig
from fpplayground.core.pairing import PairingStrategy, pairwise_diff
from fpplayground.display import render_average_age, render_changes, render_failure
from fpplayground.models import normalize_countries
from fpplayground.observability import get_logger, setup_logging
from fpplayground.shell.aggregator import average_age
from fpplayground.shell.history import load_directory, load_history

logger = get_logger("cli")


def _aware_instant(value: str) -> datetime:
    """argparse type for timezone-aware ISO-8601 instants."""
    try:
        moment = datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO-8601 instant: {value!r}")
    if moment.tzinfo is None:
        raise argparse.ArgumentTypeError(f"instant needs a UTC offset or 'Z': {value!r}")
    return moment


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="fpplayground",
        description="Diff customer snapshots and aggregate fallible lookups",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="JSON config file (see PlaygroundConfig)",
    )

    parser.add_argument(
        "--log-level",
        choices=list(LOG_LEVELS),
        help="Log level (default: from config, else info)",
    )

    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=None,
        help="Emit logs as JSON lines on stderr",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    # Change report
    changes = commands.add_parser("changes", help="Describe changes between consecutive snapshots")
    changes.add_argument("history", type=Path, help='JSON file: {"customers": [...]}')
    changes.add_argument(
        "--strategy",
        choices=[strategy.value for strategy in PairingStrategy],
        help="Pairing strategy (default: from config, else zip)",
    )
    changes.add_argument(
        "--keep-empty",
        action="store_true",
        default=None,
        help="Keep pairs where nothing changed",
    )
    changes.add_argument(
        "--normalize-countries",
        action="store_true",
        help="Apply the configured country aliases before diffing",
    )

    # Average age
    ages = commands.add_parser("average-age", help="Average age of the customers behind some keys")
    ages.add_argument("directory", type=Path, help='JSON file: {"customers": {...}, "unavailable": [...]}')
    ages.add_argument("keys", nargs="*", help="Keys to look up (default: every key in the directory)")
    ages.add_argument(
        "--at",
        type=_aware_instant,
        required=True,
        help="Reference instant, e.g. 2020-12-31T00:00Z",
    )

    return parser


def run_changes(
    args: argparse.Namespace, config: PlaygroundConfig, console: Console, err_console: Console
) -> int:
    """Print the changes in an audit trail."""
    loaded = load_history(args.history)
    if isinstance(loaded, Failure):
        render_failure(err_console, loaded.failure())
        return 1

    history = loaded.unwrap()
    if args.normalize_countries:
        history = normalize_countries(history, config.country_aliases)

    diffs = pairwise_diff(history, config.pairing)
    changed = sum(1 for diff in diffs if diff)

    logger.info("changes_described", snapshots=len(history), changes=changed)
    render_changes(console, diffs, snapshots=len(history), keep_empty=config.keep_empty_diffs)
    return 0


def run_average_age(args: argparse.Namespace, console: Console, err_console: Console) -> int:
    """Print the average age of the looked-up customers."""
    loaded = load_directory(args.directory)
    if isinstance(loaded, Failure):
        render_failure(err_console, loaded.failure())
        return 1

    directory = loaded.unwrap()
    keys = args.keys or list(directory.keys)
    result = average_age(keys, directory, args.at)
    if isinstance(result, Failure):
        render_failure(err_console, str(result.failure()))
        return 1

    # Success means every key was looked up
    render_average_age(console, result.unwrap(), args.at, lookups=len(keys))
    return 0


def main(
    argv: Sequence[str] | None = None,
    console: Console | None = None,
    err_console: Console | None = None,
) -> int:
    """Parse arguments, run the command and return an exit code."""
    args = build_parser().parse_args(argv)
    if console is None:
        console = Console()
    if err_console is None:
        err_console = Console(stderr=True)

    config = PlaygroundConfig()
    if args.config:
        loaded = PlaygroundConfig.from_file(args.config)
        if isinstance(loaded, Failure):
            render_failure(err_console, loaded.failure())
            return 1
        config = loaded.unwrap()

    config = config.with_overrides(
        log_level=args.log_level,
        log_json=args.json_logs,
        pairing_strategy=getattr(args, "strategy", None),
        keep_empty_diffs=getattr(args, "keep_empty", None),
    )
    setup_logging(config.log_level, json_output=config.log_json)

    if args.command == "changes":
        return run_changes(args, config, console, err_console)
    return run_average_age(args, console, err_console)
