"""User and address models."""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field

from food_delivery_service.models.dynamodb_values import lower_index_key, to_decimal, to_int
from food_delivery_service.models.json_types import JsonNumber


class UserRequest(BaseModel):
    """Payload for creating or replacing a user."""

    user_name: str | None = Field(None, description="Display name")
    user_password: str | None = Field(None, description="Plain-text password")
    phone_number: str | None = Field(None, description="Contact phone number")
    user_email: str | None = Field(None, description="Email address, unique per user")
    user_role: str | None = Field(None, description="Role, e.g. 'USER' or 'OWNER'")


class WalletUpdate(BaseModel):
    """Payload for setting a user's wallet balance."""

    wallet: Decimal = Field(..., description="New wallet balance", ge=0)


class User(BaseModel):
    """Persisted user.

    ``user_password`` holds the encoded form. The lower-cased email is stored
    alongside for case-insensitive uniqueness lookups.
    """

    user_id: int | None = Field(None, description="Surrogate key, set on first save")
    user_name: str | None = Field(None, description="Display name")
    user_password: str | None = Field(None, description="Encoded password")
    phone_number: str | None = Field(None, description="Contact phone number")
    user_email: str | None = Field(None, description="Email address")
    user_role: str | None = Field(None, description="Role")
    wallet: Decimal | None = Field(None, description="Wallet balance")

    def to_dynamodb_item(self) -> dict[str, Any]:
        """Convert to DynamoDB item format.

        Returns:
            dict: DynamoDB-compatible representation
        """
        item = self.model_dump(exclude_none=True)
        email_key = lower_index_key(self.user_email)
        if email_key is not None:
            item["user_email_lower"] = email_key
        return item

    @classmethod
    def from_dynamodb_item(cls, item: dict[str, Any]) -> "User":
        """Create User from DynamoDB item.

        Args:
            item: DynamoDB item dictionary

        Returns:
            User: Parsed model instance
        """
        return cls(
            user_id=to_int(item.get("user_id")),
            user_name=item.get("user_name"),
            user_password=item.get("user_password"),
            phone_number=item.get("phone_number"),
            user_email=item.get("user_email"),
            user_role=item.get("user_role"),
            wallet=to_decimal(item.get("wallet")),
        )


class UserResponse(BaseModel):
    """User as returned to clients."""

    user_id: int | None = None
    user_name: str | None = None
    user_password: str | None = None
    phone_number: str | None = None
    user_email: str | None = None
    user_role: str | None = None
    wallet: JsonNumber | None = None


class AddressRequest(BaseModel):
    """Payload for creating or replacing an address."""

    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: int | None = None
    country: str | None = None
    user_id: int | None = Field(None, description="User owning the address")


class Address(BaseModel):
    """Persisted address, soft-linked to its user by ``user_id``."""

    address_id: int | None = Field(None, description="Surrogate key, set on first save")
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: int | None = None
    country: str | None = None
    user_id: int | None = Field(None, description="User owning the address")

    def to_dynamodb_item(self) -> dict[str, Any]:
        """Convert to DynamoDB item format.

        Returns:
            dict: DynamoDB-compatible representation
        """
        return self.model_dump(exclude_none=True)

    @classmethod
    def from_dynamodb_item(cls, item: dict[str, Any]) -> "Address":
        """Create Address from DynamoDB item.

        Args:
            item: DynamoDB item dictionary

        Returns:
            Address: Parsed model instance
        """
        return cls(
            address_id=to_int(item.get("address_id")),
            street=item.get("street"),
            city=item.get("city"),
            state=item.get("state"),
            zip_code=to_int(item.get("zip_code")),
            country=item.get("country"),
            user_id=to_int(item.get("user_id")),
        )


class AddressResponse(BaseModel):
    """Address as returned to clients."""

    address_id: int | None = None
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: int | None = None
    country: str | None = None
    user_id: int | None = None
