#!/usr/bin/env python3

import random

from analytics import analyze
from cli.report import print_json, print_report
from ingestion.mock import generate_mock_transactions
from logger import get_logger

logger = get_logger()


def cmd_demo(args, config):
    """Analyze a generated six-month history."""
    rng = random.Random(args.seed)
    transactions = generate_mock_transactions(rng=rng)
    logger.debug(f"Generated {len(transactions)} mock transactions (seed={args.seed})")

    result = analyze(transactions)

    if args.json:
        print_json(result)
    else:
        print_report(result)


def setup_parser(subparsers):
    """Setup demo subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "demo",
        help="Analyze generated demo data",
        description="Generate six months of synthetic transactions and analyze them",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for repeatable demo data"
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the analysis as JSON"
    )
    parser.set_defaults(func=cmd_demo)
