import json
import logging
from decimal import Decimal, InvalidOperation
from typing import List, Optional, TextIO

from models.transaction import (
    EXPENSE,
    INCOME,
    SUBSCRIPTION,
    Transaction,
    parse_date,
)

logger = logging.getLogger(__name__)

SUBSCRIPTION_KEYWORDS = (
    "netflix",
    "spotify",
    "apple",
    "google",
    "amazon prime",
    "disney",
    "hulu",
    "adobe",
    "microsoft",
    "dropbox",
    "gym",
    "fitness",
    "subscription",
    "monthly",
    "recurring",
    "stan",
    "binge",
    "kayo",
    "foxtel",
    "audible",
)

CATEGORY_MAP = {
    "income": "Salary",
    "transfer": "Transfer",
    "payment": "Payment",
    "cash-withdrawal": "Cash",
    "bank-fee": "Fees",
    "food-and-drink": "Dining",
    "groceries": "Groceries",
    "transport": "Transportation",
    "entertainment": "Entertainment",
    "shopping": "Shopping",
    "health": "Health",
    "utilities": "Utilities",
    "housing": "Home",
    "insurance": "Insurance",
    "education": "Education",
}

DEFAULT_CATEGORY = "Other"


def is_subscription(description: Optional[str]) -> bool:
    """Check a transaction description for a known subscription keyword."""
    if not description:
        return False
    lowered = description.lower()
    return any(keyword in lowered for keyword in SUBSCRIPTION_KEYWORDS)


def map_category(class_type: Optional[dict], sub_class: Optional[dict]) -> str:
    """Map the provider's class/sub-class codes onto a category label.

    The sub-class wins over the class; unknown codes, and classifications
    that are not objects, map to "Other".
    """
    for classification in (sub_class, class_type):
        if not isinstance(classification, dict):
            continue
        code = classification.get("code")
        if isinstance(code, str) and code.lower() in CATEGORY_MAP:
            return CATEGORY_MAP[code.lower()]
    return DEFAULT_CATEGORY


def record_to_transaction(record: dict, index: int) -> Transaction:
    """Convert one provider transaction record into a Transaction.

    The provider signs amounts: positive is money in, negative is money out.

    Raises:
        ValueError: If the record has no date or its amount cannot be parsed.
    """
    try:
        signed_amount = Decimal(str(record.get("amount")))
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {record.get('amount')!r}")
    if not signed_amount.is_finite():
        raise ValueError(f"Invalid amount: {record.get('amount')!r}")

    raw_date = record.get("postDate") or record.get("transactionDate")
    if not raw_date:
        raise ValueError("Missing postDate/transactionDate")

    description = record.get("description")
    if description is not None and not isinstance(description, str):
        raise ValueError(f"Invalid description: {description!r}")
    recurring = is_subscription(description)

    if signed_amount > 0:
        transaction_type = INCOME
    elif recurring:
        transaction_type = SUBSCRIPTION
    else:
        transaction_type = EXPENSE

    return Transaction(
        id=str(record["id"]) if record.get("id") else f"txn_{index}",
        merchant=description or "Unknown",
        category=map_category(record.get("class"), record.get("subClass")),
        amount=abs(signed_amount),
        type=transaction_type,
        transaction_date=parse_date(raw_date),
        is_recurring=recurring,
    )


def transform(payload: dict) -> List[Transaction]:
    """Convert a provider transactions payload ({"data": [...]}) into Transactions."""
    transactions = []

    records = (payload or {}).get("data")
    if not records:
        logger.info("Payload has no transaction data")
        return transactions

    for index, record in enumerate(records):
        if not isinstance(record, dict):
            logger.warning(f"Skipping malformed record {index}: {record!r}")
            continue

        try:
            transactions.append(record_to_transaction(record, index))
        except ValueError as e:
            logger.error(f"Error processing record {index}: {record} - {e}")
            continue

    logger.info(f"Successfully ingested {len(transactions)} transactions")
    return transactions


def ingest(source: TextIO) -> List[Transaction]:
    """
    Ingest a bank-data provider transactions payload.

    Expected format: a JSON object whose "data" array holds records with
    id, description, amount (signed string), postDate/transactionDate,
    class {code} and subClass {code}.
    """
    try:
        payload = json.load(source)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON: {e}")
        return []

    if not isinstance(payload, dict):
        logger.error(f"Expected a JSON object, got {type(payload).__name__}")
        return []

    return transform(payload)
