"""Field types controlling how values appear in JSON responses."""

from decimal import Decimal
from typing import Annotated

from pydantic import PlainSerializer

# Kept as Decimal in Python and DynamoDB, written to JSON as a number
JsonNumber = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
