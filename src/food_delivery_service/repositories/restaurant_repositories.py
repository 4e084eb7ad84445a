"""DynamoDB repositories for restaurants, food categories and menu items."""

from typing import Any

from food_delivery_service.models.dynamodb_values import lower_or_none
from food_delivery_service.models.restaurant_models import FoodCategory, MenuItem, Restaurant
from food_delivery_service.repositories.base_repository import EntityRepository


class FoodCategoryRepository(EntityRepository[FoodCategory]):
    """Repository for food categories.

    Table key: ``category_id``. GSI ``restaurant_id-index`` on ``restaurant_id``.
    """

    key_name = "category_id"
    counter_name = "food_category"
    entity_name = "food category"

    def _from_item(self, item: dict[str, Any]) -> FoodCategory:
        return FoodCategory.from_dynamodb_item(item)

    def find_by_restaurant_id(self, restaurant_id: int) -> list[FoodCategory]:
        """List all categories belonging to a restaurant.

        Args:
            restaurant_id: Restaurant identifier

        Returns:
            list: Categories in index order (empty list if none found)
        """
        return self._query_index("restaurant_id-index", "restaurant_id", restaurant_id)

    def exists_by_restaurant_id_and_category_name(
        self, restaurant_id: int | None, category_name: str | None
    ) -> bool:
        """Check for a category with this name in a restaurant, ignoring case.

        Args:
            restaurant_id: Restaurant identifier
            category_name: Category name to look for

        Returns:
            bool: True if a matching category exists
        """
        matches = self._query_index(
            "restaurant_id-index",
            "restaurant_id",
            restaurant_id,
            filter_attribute="category_name_lower",
            filter_value=lower_or_none(category_name),
        )
        return len(matches) > 0


class MenuItemRepository(EntityRepository[MenuItem]):
    """Repository for menu items.

    Table key: ``item_id``. GSIs ``restaurant_id-index`` and
    ``category_id-index``.
    """

    key_name = "item_id"
    counter_name = "menu_item"
    entity_name = "menu item"

    def _from_item(self, item: dict[str, Any]) -> MenuItem:
        return MenuItem.from_dynamodb_item(item)

    def find_by_restaurant_id(self, restaurant_id: int) -> list[MenuItem]:
        """List all menu items belonging to a restaurant."""
        return self._query_index("restaurant_id-index", "restaurant_id", restaurant_id)

    def find_by_category_id(self, category_id: int) -> list[MenuItem]:
        """List all menu items in a category."""
        return self._query_index("category_id-index", "category_id", category_id)

    def exists_by_restaurant_id_and_item_name(
        self, restaurant_id: int | None, item_name: str | None
    ) -> bool:
        """Check for an item with this name in a restaurant, ignoring case."""
        matches = self._query_index(
            "restaurant_id-index",
            "restaurant_id",
            restaurant_id,
            filter_attribute="item_name_lower",
            filter_value=lower_or_none(item_name),
        )
        return len(matches) > 0


class RestaurantRepository(EntityRepository[Restaurant]):
    """Repository for restaurants.

    Table key: ``restaurant_id``. GSI ``user_id-index`` on the owner.
    """

    key_name = "restaurant_id"
    counter_name = "restaurant"
    entity_name = "restaurant"

    def _from_item(self, item: dict[str, Any]) -> Restaurant:
        return Restaurant.from_dynamodb_item(item)

    def find_by_user_id(self, user_id: int) -> list[Restaurant]:
        """List all restaurants owned by a user."""
        return self._query_index("user_id-index", "user_id", user_id)
