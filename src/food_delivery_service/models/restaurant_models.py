"""Restaurant, food category and menu item models.

Each entity has a request model (what clients send), the persisted entity
model and a response model (what clients receive). Request fields are all
optional: an empty request maps to an entity whose fields are all ``None``.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field

from food_delivery_service.models.dynamodb_values import (
    lower_or_none,
    to_bytes,
    to_decimal,
    to_int,
)
from food_delivery_service.models.json_types import JsonNumber


class FoodCategoryRequest(BaseModel):
    """Payload for creating a food category."""

    restaurant_id: int | None = Field(None, description="Restaurant owning the category")
    category_name: str | None = Field(None, description="Category name")


class CategoryNameUpdate(BaseModel):
    """Payload for renaming a food category."""

    category_name: str = Field(..., description="New category name")


class FoodCategory(BaseModel):
    """Persisted food category.

    Stored in DynamoDB with ``category_id`` as partition key. The lower-cased
    name is stored alongside for case-insensitive duplicate checks.
    """

    category_id: int | None = Field(None, description="Surrogate key, set on first save")
    restaurant_id: int | None = Field(None, description="Restaurant owning the category")
    category_name: str | None = Field(None, description="Category name")

    def to_dynamodb_item(self) -> dict[str, Any]:
        """Convert to DynamoDB item format.

        Returns:
            dict: DynamoDB-compatible representation
        """
        item = self.model_dump(exclude_none=True)
        if self.category_name is not None:
            item["category_name_lower"] = lower_or_none(self.category_name)
        return item

    @classmethod
    def from_dynamodb_item(cls, item: dict[str, Any]) -> "FoodCategory":
        """Create FoodCategory from DynamoDB item.

        Args:
            item: DynamoDB item dictionary

        Returns:
            FoodCategory: Parsed model instance
        """
        return cls(
            category_id=to_int(item.get("category_id")),
            restaurant_id=to_int(item.get("restaurant_id")),
            category_name=item.get("category_name"),
        )


class FoodCategoryResponse(BaseModel):
    """Food category as returned to clients."""

    category_id: int | None = None
    restaurant_id: int | None = None
    category_name: str | None = None


class MenuItemRequest(BaseModel):
    """Payload for creating or replacing a menu item."""

    item_name: str | None = Field(None, description="Item name")
    price: Decimal | None = Field(None, description="Item price", ge=0)
    description: str | None = Field(None, description="Item description")
    veg_non_veg: bool | None = Field(None, description="True for vegetarian items")
    category_id: int | None = Field(None, description="Category this item belongs to")
    restaurant_id: int | None = Field(None, description="Restaurant this item belongs to")


class MenuItem(BaseModel):
    """Persisted menu item, including its image bytes."""

    item_id: int | None = Field(None, description="Surrogate key, set on first save")
    item_name: str | None = Field(None, description="Item name")
    price: Decimal | None = Field(None, description="Item price", ge=0)
    description: str | None = Field(None, description="Item description")
    veg_non_veg: bool | None = Field(None, description="True for vegetarian items")
    category_id: int | None = Field(None, description="Category this item belongs to")
    restaurant_id: int | None = Field(None, description="Restaurant this item belongs to")
    item_image: bytes | None = Field(None, description="Raw image bytes")

    def to_dynamodb_item(self) -> dict[str, Any]:
        """Convert to DynamoDB item format.

        Returns:
            dict: DynamoDB-compatible representation
        """
        item = self.model_dump(exclude_none=True)
        if self.item_name is not None:
            item["item_name_lower"] = lower_or_none(self.item_name)
        return item

    @classmethod
    def from_dynamodb_item(cls, item: dict[str, Any]) -> "MenuItem":
        """Create MenuItem from DynamoDB item.

        Args:
            item: DynamoDB item dictionary

        Returns:
            MenuItem: Parsed model instance
        """
        return cls(
            item_id=to_int(item.get("item_id")),
            item_name=item.get("item_name"),
            price=to_decimal(item.get("price")),
            description=item.get("description"),
            veg_non_veg=item.get("veg_non_veg"),
            category_id=to_int(item.get("category_id")),
            restaurant_id=to_int(item.get("restaurant_id")),
            item_image=to_bytes(item.get("item_image")),
        )


class MenuItemResponse(BaseModel):
    """Menu item as returned to clients. Images are served separately."""

    item_id: int | None = None
    item_name: str | None = None
    price: JsonNumber | None = None
    description: str | None = None
    veg_non_veg: bool | None = None
    category_id: int | None = None
    restaurant_id: int | None = None


class RestaurantRequest(BaseModel):
    """Payload for creating or replacing a restaurant."""

    user_id: int | None = Field(None, description="User who owns the restaurant")
    restaurant_name: str | None = Field(None, description="Restaurant name")
    restaurant_address: str | None = Field(None, description="Street address")
    contact_number: str | None = Field(None, description="Contact phone number")
    restaurant_description: str | None = Field(None, description="Free-text description")
    opening_hour: str | None = Field(None, description="Opening hours, e.g. '09:00-22:00'")


class Restaurant(BaseModel):
    """Persisted restaurant, including its image bytes."""

    restaurant_id: int | None = Field(None, description="Surrogate key, set on first save")
    user_id: int | None = Field(None, description="User who owns the restaurant")
    restaurant_name: str | None = Field(None, description="Restaurant name")
    restaurant_address: str | None = Field(None, description="Street address")
    contact_number: str | None = Field(None, description="Contact phone number")
    restaurant_description: str | None = Field(None, description="Free-text description")
    opening_hour: str | None = Field(None, description="Opening hours")
    restaurant_image: bytes | None = Field(None, description="Raw image bytes")

    def to_dynamodb_item(self) -> dict[str, Any]:
        """Convert to DynamoDB item format.

        Returns:
            dict: DynamoDB-compatible representation
        """
        return self.model_dump(exclude_none=True)

    @classmethod
    def from_dynamodb_item(cls, item: dict[str, Any]) -> "Restaurant":
        """Create Restaurant from DynamoDB item.

        Args:
            item: DynamoDB item dictionary

        Returns:
            Restaurant: Parsed model instance
        """
        return cls(
            restaurant_id=to_int(item.get("restaurant_id")),
            user_id=to_int(item.get("user_id")),
            restaurant_name=item.get("restaurant_name"),
            restaurant_address=item.get("restaurant_address"),
            contact_number=item.get("contact_number"),
            restaurant_description=item.get("restaurant_description"),
            opening_hour=item.get("opening_hour"),
            restaurant_image=to_bytes(item.get("restaurant_image")),
        )


class RestaurantResponse(BaseModel):
    """Restaurant as returned to clients. Images are served separately."""

    restaurant_id: int | None = None
    user_id: int | None = None
    restaurant_name: str | None = None
    restaurant_address: str | None = None
    contact_number: str | None = None
    restaurant_description: str | None = None
    opening_hour: str | None = None
