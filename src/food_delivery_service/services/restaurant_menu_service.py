"""Service for menu item workflows."""

import logging

from food_delivery_service.constants import (
    MENU_CATEGORY_NOT_FOUND,
    MENU_ITEM_MESSAGES,
    EntityMessages,
)
from food_delivery_service.conversion.dto_conversion import (
    to_menu_item_entity,
    to_menu_item_response,
)
from food_delivery_service.exceptions import AlreadyExistsError, NotFoundError
from food_delivery_service.models.fetch_result import Missing
from food_delivery_service.models.restaurant_models import (
    MenuItem,
    MenuItemRequest,
    MenuItemResponse,
)
from food_delivery_service.observability import traced
from food_delivery_service.observability.metrics import (
    record_entity_created,
    record_entity_deleted,
    record_workflow_rejected,
)
from food_delivery_service.repositories.restaurant_repositories import (
    FoodCategoryRepository,
    MenuItemRepository,
)

logger = logging.getLogger(__name__)

ENTITY_TYPE = "menu_item"


class RestaurantMenuService:
    """Service for a restaurant's menu items and their images.

    Item names are unique per restaurant, ignoring case. Prices are validated
    as non-negative by the request model.
    """

    def __init__(
        self,
        menu_item_repository: MenuItemRepository,
        category_repository: FoodCategoryRepository,
        messages: EntityMessages = MENU_ITEM_MESSAGES,
    ) -> None:
        """Initialize the RestaurantMenuService.

        Args:
            menu_item_repository: Repository for menu items
            category_repository: Repository used to check category existence
            messages: Fixed messages for this entity kind
        """
        self.menu_item_repository = menu_item_repository
        self.category_repository = category_repository
        self.messages = messages

    def _get_existing(self, item_id: int) -> MenuItem:
        result = self.menu_item_repository.find_by_id(item_id)
        if isinstance(result, Missing):
            logger.error(f"Food item {item_id} not found")
            record_workflow_rejected(ENTITY_TYPE, "not_found")
            raise NotFoundError(self.messages.not_found)
        return result.value

    @traced("menu_item.add")
    def add_food_item(self, request: MenuItemRequest) -> MenuItemResponse:
        """Add a menu item. Its image is uploaded separately.

        Args:
            request: Item fields

        Returns:
            The persisted item

        Raises:
            AlreadyExistsError: If the restaurant already has an item with this
                name (case-insensitive)
        """
        logger.info(f"Adding food item {request.item_name!r} for restaurant {request.restaurant_id}")

        if self.menu_item_repository.exists_by_restaurant_id_and_item_name(
            request.restaurant_id, request.item_name
        ):
            logger.error(
                f"Duplicate food item: {request.item_name!r} already exists "
                f"for restaurant {request.restaurant_id}"
            )
            record_workflow_rejected(ENTITY_TYPE, "already_exists")
            raise AlreadyExistsError(self.messages.already_exists)

        saved_item = self.menu_item_repository.save(to_menu_item_entity(request))
        record_entity_created(ENTITY_TYPE)

        return to_menu_item_response(saved_item)

    @traced("menu_item.list_by_restaurant")
    def get_food_items_by_restaurant_id(self, restaurant_id: int) -> list[MenuItemResponse]:
        """List every menu item of a restaurant, in persistence order."""
        items = self.menu_item_repository.find_by_restaurant_id(restaurant_id)
        logger.info(f"Retrieved {len(items)} food items for restaurant {restaurant_id}")
        return [to_menu_item_response(item) for item in items]

    @traced("menu_item.list_by_category")
    def get_food_items_by_category_id(self, category_id: int) -> list[MenuItemResponse]:
        """List every menu item in a category.

        Raises:
            NotFoundError: If the category does not exist
        """
        if not self.category_repository.exists_by_id(category_id):
            logger.error(f"Food category {category_id} not found")
            record_workflow_rejected(ENTITY_TYPE, "not_found")
            raise NotFoundError(MENU_CATEGORY_NOT_FOUND)

        items = self.menu_item_repository.find_by_category_id(category_id)
        return [to_menu_item_response(item) for item in items]

    @traced("menu_item.get")
    def get_food_item_by_id(self, item_id: int) -> MenuItemResponse:
        return to_menu_item_response(self._get_existing(item_id))

    @traced("menu_item.update")
    def update_food_item(self, item_id: int, request: MenuItemRequest) -> MenuItemResponse:
        """Overwrite the fields supplied in ``request``; the image is kept.

        Raises:
            NotFoundError: If no item has this id
        """
        logger.info(f"Updating food item {item_id}")

        item = self._get_existing(item_id)
        for field, value in request.model_dump(exclude_unset=True).items():
            setattr(item, field, value)
        updated_item = self.menu_item_repository.save(item)

        logger.info(f"Food item {item_id} updated successfully")
        return to_menu_item_response(updated_item)

    @traced("menu_item.delete")
    def delete_food_item(self, item_id: int) -> None:
        """Delete a menu item by id.

        Raises:
            NotFoundError: If no item has this id
        """
        if not self.menu_item_repository.exists_by_id(item_id):
            logger.error(f"Food item {item_id} not found")
            record_workflow_rejected(ENTITY_TYPE, "not_found")
            raise NotFoundError(self.messages.not_found)

        self.menu_item_repository.delete_by_id(item_id)
        record_entity_deleted(ENTITY_TYPE)
        logger.info(f"Food item {item_id} deleted successfully")

    @traced("menu_item.get_image")
    def get_food_item_image(self, item_id: int) -> bytes:
        """Return the stored image bytes (empty if the item has none)."""
        return self._get_existing(item_id).item_image or b""

    @traced("menu_item.update_image")
    def update_food_item_image(self, item_id: int, image: bytes) -> MenuItemResponse:
        item = self._get_existing(item_id)
        item.item_image = image
        return to_menu_item_response(self.menu_item_repository.save(item))
