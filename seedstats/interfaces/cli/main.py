#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse
import logging

from seedstats import config
from seedstats.__version__ import __version__
from seedstats.interfaces.cli.commands.analyzers_cli import cmd_analyzers
from seedstats.interfaces.cli.commands.clean_cli import cmd_clean
from seedstats.interfaces.cli.commands.stats_cli import cmd_stats
from seedstats.interfaces.cli.ui import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="seedstats",
        description="seedstats - sample generated seeds and count how they classify",
        epilog="Examples:\n"
        "  seedstats stats job.yaml                   # Analyze the job's sample\n"
        "  seedstats stats job.yaml -n 1000           # Override the sample size\n"
        "  seedstats stats job.yaml --overwrite       # Regenerate every seed\n"
        "  seedstats clean job.yaml                   # Drop cached seeds for the job\n"
        "  seedstats analyzers                        # List available analyzers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="log debug messages")

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'seedstats <command> --help' for command-specific help)",
    )

    # stats: Run a stats job
    s = sub.add_parser("stats", help="Generate stats for a job file")
    s.add_argument("job", help="path to the YAML job file")
    s.add_argument("-n", "--sample-size", type=int, help="number of seeds to analyze (overrides the job)")
    s.add_argument("--overwrite", action="store_true", help="clean cached seeds and generate from scratch")
    s.add_argument("--output-dir", help="directory for CSV reports (default: config output_dir)")
    s.add_argument("--storage-dir", help="seed storage directory (default: config seed_storage_dir)")
    s.set_defaults(func=cmd_stats)

    # clean: Drop cached seeds
    s = sub.add_parser("clean", help="Remove cached seeds for a job's settings")
    s.add_argument("job", help="path to the YAML job file")
    s.add_argument("--storage-dir", help="seed storage directory (default: config seed_storage_dir)")
    s.set_defaults(func=cmd_clean)

    # analyzers: List analyzers
    s = sub.add_parser("analyzers", help="List analyzers available in job files")
    s.set_defaults(func=cmd_analyzers)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else str(config.get("log_level", "INFO")).upper())

    # If no command provided, show help
    if args.cmd is None:
        parser.print_help()
        return 0

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    raise SystemExit(main())
