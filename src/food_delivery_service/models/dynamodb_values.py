"""Helpers for reading DynamoDB attribute values back into Python types.

boto3 returns every number as ``Decimal`` and every binary as
``boto3.dynamodb.types.Binary``.
"""

from decimal import Decimal
from typing import Any

from boto3.dynamodb.types import Binary


def to_int(value: Any) -> int | None:
    """Convert a DynamoDB number to ``int``, passing ``None`` through."""
    if value is None:
        return None
    return int(value)


def to_decimal(value: Any) -> Decimal | None:
    """Convert a DynamoDB number to ``Decimal``, passing ``None`` through."""
    if value is None:
        return None
    return value if isinstance(value, Decimal) else Decimal(str(value))


def to_bytes(value: Any) -> bytes | None:
    """Convert a DynamoDB binary to ``bytes``, passing ``None`` through."""
    if value is None:
        return None
    if isinstance(value, Binary):
        return bytes(value.value)
    return bytes(value)


def lower_or_none(value: str | None) -> str | None:
    """Lower-case a string used for case-insensitive lookups."""
    return value.lower() if value is not None else None


def lower_index_key(value: str | None) -> str | None:
    """Lower-case a string stored as a secondary index key.

    DynamoDB rejects an empty string as an index key value, so ``""`` maps
    to ``None`` like an absent value.
    """
    return value.lower() if value else None
