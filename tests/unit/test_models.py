"""Unit tests for entity models and their DynamoDB item form."""

import json
from decimal import Decimal

import pytest
from boto3.dynamodb.types import Binary
from pydantic import ValidationError

from food_delivery_service.models.fetch_result import Found, Missing
from food_delivery_service.models.restaurant_models import (
    FoodCategory,
    MenuItem,
    MenuItemRequest,
    MenuItemResponse,
    Restaurant,
)
from food_delivery_service.models.user_models import Address, User, UserResponse, WalletUpdate


@pytest.mark.unit
class TestFoodCategory:
    """Test suite for FoodCategory model."""

    def test_converts_to_dynamodb_format(self) -> None:
        """Test that the lower-cased name is stored for duplicate checks."""
        category = FoodCategory(category_id=3, restaurant_id=1, category_name="Drinks")

        item = category.to_dynamodb_item()

        assert item == {
            "category_id": 3,
            "restaurant_id": 1,
            "category_name": "Drinks",
            "category_name_lower": "drinks",
        }

    def test_none_fields_are_omitted(self) -> None:
        """Test that DynamoDB never receives null attributes."""
        assert FoodCategory(category_id=3).to_dynamodb_item() == {"category_id": 3}

    def test_creates_from_dynamodb_format(self, mock_category_item: dict) -> None:
        """Test that Decimal numbers come back as ints."""
        category = FoodCategory.from_dynamodb_item(mock_category_item)

        assert category.category_id == 3
        assert isinstance(category.category_id, int)
        assert category.restaurant_id == 1
        assert category.category_name == "Drinks"


@pytest.mark.unit
class TestMenuItem:
    """Test suite for MenuItem model."""

    def test_rejects_negative_price(self) -> None:
        with pytest.raises(ValidationError):
            MenuItem(item_name="Burger", price=Decimal("-1"))

    def test_request_rejects_negative_price(self) -> None:
        with pytest.raises(ValidationError):
            MenuItemRequest(item_name="Burger", price=Decimal("-0.01"))

    def test_accepts_zero_price(self) -> None:
        assert MenuItem(item_name="Water", price=Decimal("0")).price == Decimal("0")

    def test_converts_to_dynamodb_format(self) -> None:
        item = MenuItem(
            item_id=5,
            item_name="Pizza",
            price=Decimal("15.99"),
            veg_non_veg=True,
            category_id=3,
            restaurant_id=1,
            item_image=b"\x01\x02\x03",
        )

        dynamodb_item = item.to_dynamodb_item()

        assert dynamodb_item["item_name_lower"] == "pizza"
        assert dynamodb_item["price"] == Decimal("15.99")
        assert dynamodb_item["item_image"] == b"\x01\x02\x03"
        assert "description" not in dynamodb_item

    def test_creates_from_dynamodb_format_with_binary_image(self) -> None:
        """Test that boto3 Binary values are unwrapped to bytes."""
        item = MenuItem.from_dynamodb_item(
            {
                "item_id": Decimal("5"),
                "item_name": "Pizza",
                "price": Decimal("15.99"),
                "veg_non_veg": False,
                "category_id": Decimal("3"),
                "restaurant_id": Decimal("1"),
                "item_image": Binary(b"\x01\x02\x03"),
            }
        )

        assert item.item_id == 5
        assert item.price == Decimal("15.99")
        assert item.veg_non_veg is False
        assert item.item_image == b"\x01\x02\x03"


@pytest.mark.unit
class TestRestaurant:
    """Test suite for Restaurant model."""

    def test_creates_from_partial_item(self) -> None:
        restaurant = Restaurant.from_dynamodb_item(
            {"restaurant_id": Decimal("4"), "restaurant_name": "Spice Hub"}
        )

        assert restaurant.restaurant_id == 4
        assert restaurant.restaurant_name == "Spice Hub"
        assert restaurant.user_id is None
        assert restaurant.restaurant_image is None


@pytest.mark.unit
class TestUser:
    """Test suite for User model."""

    def test_converts_to_dynamodb_format(self) -> None:
        user = User(user_id=7, user_email="Asha@Example.com", wallet=Decimal("1000.0"))

        item = user.to_dynamodb_item()

        assert item["user_email"] == "Asha@Example.com"
        assert item["user_email_lower"] == "asha@example.com"
        assert item["wallet"] == Decimal("1000.0")

    def test_empty_email_has_no_index_key(self) -> None:
        item = User(user_id=7, user_email="").to_dynamodb_item()

        assert item["user_email"] == ""
        assert "user_email_lower" not in item

    def test_creates_from_dynamodb_format(self, mock_user_item: dict) -> None:
        user = User.from_dynamodb_item(mock_user_item)

        assert user.user_id == 7
        assert user.user_email == "Asha@Example.com"
        assert user.wallet == Decimal("1000.0")

    def test_wallet_update_rejects_negative_balance(self) -> None:
        with pytest.raises(ValidationError):
            WalletUpdate(wallet=Decimal("-5"))


@pytest.mark.unit
class TestAddress:
    """Test suite for Address model."""

    def test_creates_from_dynamodb_format(self) -> None:
        address = Address.from_dynamodb_item(
            {"address_id": Decimal("2"), "zip_code": Decimal("411001"), "user_id": Decimal("7")}
        )

        assert address.address_id == 2
        assert address.zip_code == 411001
        assert address.city is None


@pytest.mark.unit
class TestFetchResult:
    """Test suite for Found / Missing."""

    def test_found_carries_value(self) -> None:
        result = Found(FoodCategory(category_id=1))

        assert isinstance(result, Found)
        assert result.value.category_id == 1

    def test_missing_carries_key(self) -> None:
        result = Missing(key=99)

        assert not isinstance(result, Found)
        assert result.key == 99


@pytest.mark.unit
class TestResponseNumbers:
    """Test that money fields are JSON numbers but stay Decimal in Python."""

    def test_menu_item_price_is_a_json_number(self) -> None:
        response = MenuItemResponse(item_id=5, price=Decimal("10.99"))

        assert response.model_dump()["price"] == Decimal("10.99")
        assert json.loads(response.model_dump_json())["price"] == 10.99

    def test_user_wallet_is_a_json_number(self) -> None:
        response = UserResponse(user_id=7, wallet=Decimal("1000.0"))

        assert response.model_dump(mode="json")["wallet"] == 1000.0
        assert isinstance(response.model_dump(mode="json")["wallet"], float)

    def test_absent_price_stays_null(self) -> None:
        assert json.loads(MenuItemResponse().model_dump_json())["price"] is None
