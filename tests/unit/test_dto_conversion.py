"""Unit tests for request/entity/response conversion."""

from decimal import Decimal

import pytest

from food_delivery_service.conversion.dto_conversion import (
    to_address_entity,
    to_address_response,
    to_food_category_entity,
    to_food_category_response,
    to_menu_item_entity,
    to_menu_item_response,
    to_restaurant_entity,
    to_restaurant_response,
    to_user_entity,
    to_user_response,
)
from food_delivery_service.models.restaurant_models import (
    FoodCategory,
    FoodCategoryRequest,
    MenuItem,
    MenuItemRequest,
    RestaurantRequest,
)
from food_delivery_service.models.user_models import (
    Address,
    AddressRequest,
    User,
    UserRequest,
)


@pytest.mark.unit
class TestFoodCategoryConversion:
    """Tests for food category conversion."""

    def test_request_to_entity(self) -> None:
        """Test that request fields are copied and no id is set."""
        request = FoodCategoryRequest(restaurant_id=1, category_name="Drinks")

        category = to_food_category_entity(request)

        assert category.category_id is None
        assert category.restaurant_id == 1
        assert category.category_name == "Drinks"

    def test_entity_to_response(self) -> None:
        """Test that entity fields are copied to the response."""
        category = FoodCategory(category_id=3, restaurant_id=1, category_name="Drinks")

        response = to_food_category_response(category)

        assert response.category_id == 3
        assert response.restaurant_id == 1
        assert response.category_name == "Drinks"

    def test_empty_request_produces_empty_entity(self) -> None:
        """Test that an all-None request maps to an all-None entity."""
        category = to_food_category_entity(FoodCategoryRequest())

        assert category.model_dump() == {
            "category_id": None,
            "restaurant_id": None,
            "category_name": None,
        }


@pytest.mark.unit
class TestMenuItemConversion:
    """Tests for menu item conversion."""

    def test_request_to_entity(self) -> None:
        """Test that every request field reaches the entity."""
        request = MenuItemRequest(
            item_name="Burger",
            price=Decimal("10.99"),
            description="Delicious beef burger",
            veg_non_veg=False,
            category_id=1,
            restaurant_id=2,
        )

        item = to_menu_item_entity(request)

        assert item.item_name == "Burger"
        assert item.price == Decimal("10.99")
        assert item.description == "Delicious beef burger"
        assert item.veg_non_veg is False
        assert item.category_id == 1
        assert item.restaurant_id == 2
        assert item.item_image is None

    def test_entity_to_response_drops_image(self) -> None:
        """Test that responses never carry image bytes."""
        item = MenuItem(item_id=5, item_name="Pizza", price=Decimal("15.99"), item_image=b"\x01\x02")

        response = to_menu_item_response(item)

        assert response.item_id == 5
        assert response.item_name == "Pizza"
        assert response.price == Decimal("15.99")
        assert "item_image" not in response.model_dump()

    def test_empty_request_produces_empty_entity(self) -> None:
        """Test that an all-None request maps to an all-None entity."""
        item = to_menu_item_entity(MenuItemRequest())

        assert all(value is None for value in item.model_dump().values())


@pytest.mark.unit
class TestRestaurantConversion:
    """Tests for restaurant conversion."""

    def test_round_trip_fields(self) -> None:
        """Test request -> entity -> response keeps every field."""
        request = RestaurantRequest(
            user_id=7,
            restaurant_name="Spice Hub",
            restaurant_address="12 Main St",
            contact_number="555-0100",
            restaurant_description="Indian cuisine",
            opening_hour="10:00-22:00",
        )

        response = to_restaurant_response(to_restaurant_entity(request))

        assert response.restaurant_id is None
        assert response.model_dump(exclude={"restaurant_id"}) == request.model_dump()

    def test_empty_request_produces_empty_entity(self) -> None:
        restaurant = to_restaurant_entity(RestaurantRequest())

        assert all(value is None for value in restaurant.model_dump().values())


@pytest.mark.unit
class TestUserConversion:
    """Tests for user conversion."""

    def test_request_to_entity_copies_password_verbatim(self) -> None:
        """Test that conversion does not encode the password or set a wallet."""
        request = UserRequest(
            user_name="Asha",
            user_password="secret",
            phone_number="9876543210",
            user_email="asha@example.com",
            user_role="USER",
        )

        user = to_user_entity(request)

        assert user.user_password == "secret"
        assert user.wallet is None
        assert user.user_email == "asha@example.com"

    def test_entity_to_response(self) -> None:
        user = User(
            user_id=7,
            user_name="Asha",
            user_password="c2VjcmV0",
            user_email="asha@example.com",
            wallet=Decimal("1000.0"),
        )

        response = to_user_response(user)

        assert response.user_id == 7
        assert response.user_password == "c2VjcmV0"
        assert response.wallet == Decimal("1000.0")

    def test_empty_request_produces_empty_entity(self) -> None:
        user = to_user_entity(UserRequest())

        assert all(value is None for value in user.model_dump().values())


@pytest.mark.unit
class TestAddressConversion:
    """Tests for address conversion."""

    def test_request_to_entity(self) -> None:
        request = AddressRequest(
            street="12 Main St",
            city="Pune",
            state="MH",
            zip_code=411001,
            country="India",
            user_id=7,
        )

        address = to_address_entity(request)

        assert address.address_id is None
        assert address.zip_code == 411001
        assert address.user_id == 7

    def test_entity_to_response(self) -> None:
        address = Address(address_id=2, street="12 Main St", city="Pune", user_id=7)

        response = to_address_response(address)

        assert response.address_id == 2
        assert response.street == "12 Main St"
        assert response.state is None

    def test_empty_request_produces_empty_entity(self) -> None:
        address = to_address_entity(AddressRequest())

        assert all(value is None for value in address.model_dump().values())
