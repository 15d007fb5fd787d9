#!/usr/bin/env python3

import sys
from pathlib import Path

from analytics import analyze
from cli.report import print_json, print_report
from ingestion import get_available_modules, get_ingestion_module
from logger import get_logger

logger = get_logger()


def cmd_analyze(args, config):
    """Ingest a transaction file and report on it."""
    file_path = Path(args.file)
    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        sys.exit(1)

    source = args.source or config.default_source
    ingestion_module = get_ingestion_module(source)

    logger.debug(f"Ingesting {file_path} with the {source} module")
    with open(file_path, "r", encoding="utf-8") as f:
        transactions = ingestion_module.ingest(f)

    result = analyze(transactions)

    if args.json:
        print_json(result)
    else:
        print_report(result)


def setup_parser(subparsers):
    """Setup analyze subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "analyze",
        help="Analyze a transaction file",
        description="Ingest transactions from a file and report cash flow, "
        "categories, subscriptions, projections and insights",
    )
    parser.add_argument("file", help="Path to the transaction file")
    parser.add_argument(
        "--source",
        choices=get_available_modules(),
        help="Ingestion module for the file (default: from config)",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the analysis as JSON"
    )
    parser.set_defaults(func=cmd_analyze)
