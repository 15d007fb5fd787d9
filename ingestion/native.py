import json
import logging
from typing import List, TextIO

from models.transaction import Transaction

logger = logging.getLogger(__name__)


def ingest(source: TextIO) -> List[Transaction]:
    """
    Ingest transactions stored in the native JSON format.

    Expected format: a JSON array of transaction objects, or an object with a
    "transactions" array. Each object carries
    id, merchant, category, amount, type, date, and optionally isRecurring and logo.
    """
    transactions = []

    try:
        payload = json.load(source)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON: {e}")
        return transactions

    if isinstance(payload, dict):
        records = payload.get("transactions", [])
    else:
        records = payload

    if not isinstance(records, list):
        logger.error(f"Expected a list of transactions, got {type(records).__name__}")
        return transactions

    for index, record in enumerate(records):
        if not isinstance(record, dict):
            logger.warning(f"Skipping malformed record {index}: {record!r}")
            continue

        try:
            transactions.append(Transaction.from_dict(record))
        except ValueError as e:
            logger.error(f"Error processing record {index}: {record} - {e}")
            continue

    logger.info(f"Successfully ingested {len(transactions)} transactions")
    return transactions
