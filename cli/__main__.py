#!/usr/bin/env python3
"""
LedgerLens CLI - Cash-flow analytics for a transaction history.

Usage:
    python -m cli <command> [options]

Commands:
    analyze      Analyze a transaction file
    demo         Analyze generated demo data

Examples:
    python -m cli analyze transactions.json
    python -m cli analyze basiq_export.json --source basiq
    python -m cli analyze transactions.json --json
    python -m cli demo --seed 42
"""

import sys
import argparse
from cli import analyze, demo
from config import load_config
from logger import setup_logging


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="ledgerlens",
        description="LedgerLens - Personal finance cash-flow analytics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    # Register each command's subparser
    analyze.setup_parser(subparsers)
    demo.setup_parser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)
            args.func(args, config)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
