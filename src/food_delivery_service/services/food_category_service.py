"""Service for food category workflows."""

import logging

from food_delivery_service.constants import (
    CATEGORY_MESSAGES,
    CATEGORY_NOT_FOUND_WITH_ID,
    EntityMessages,
)
from food_delivery_service.conversion.dto_conversion import (
    to_food_category_entity,
    to_food_category_response,
)
from food_delivery_service.exceptions import AlreadyExistsError, NotFoundError
from food_delivery_service.models.fetch_result import Missing
from food_delivery_service.models.restaurant_models import (
    FoodCategoryRequest,
    FoodCategoryResponse,
)
from food_delivery_service.observability import traced
from food_delivery_service.observability.metrics import (
    record_entity_created,
    record_entity_deleted,
    record_workflow_rejected,
)
from food_delivery_service.repositories.restaurant_repositories import FoodCategoryRepository

logger = logging.getLogger(__name__)

ENTITY_TYPE = "food_category"


class FoodCategoryService:
    """Service for adding, listing, renaming and deleting food categories.

    Category names are unique per restaurant, ignoring case. The duplicate
    check runs before the insert and is not atomic with it: two concurrent
    adds of the same name can both pass the check.
    """

    def __init__(
        self,
        category_repository: FoodCategoryRepository,
        messages: EntityMessages = CATEGORY_MESSAGES,
    ) -> None:
        """Initialize the FoodCategoryService.

        Args:
            category_repository: Repository for food categories
            messages: Fixed messages for this entity kind
        """
        self.category_repository = category_repository
        self.messages = messages

    @traced("food_category.add")
    def add_food_category(self, request: FoodCategoryRequest) -> FoodCategoryResponse:
        """Add a new food category.

        Args:
            request: Owning restaurant id and category name

        Returns:
            The persisted category

        Raises:
            AlreadyExistsError: If the restaurant already has a category with
                this name (case-insensitive)
        """
        logger.info(f"Adding food category {request.category_name!r} for restaurant {request.restaurant_id}")

        exists = self.category_repository.exists_by_restaurant_id_and_category_name(
            request.restaurant_id,
            request.category_name,
        )
        if exists:
            logger.error(
                f"Duplicate category: {request.category_name!r} already exists "
                f"for restaurant {request.restaurant_id}"
            )
            record_workflow_rejected(ENTITY_TYPE, "already_exists")
            raise AlreadyExistsError(self.messages.already_exists)

        category = to_food_category_entity(request)
        saved_category = self.category_repository.save(category)
        record_entity_created(ENTITY_TYPE)

        return to_food_category_response(saved_category)

    @traced("food_category.delete")
    def delete_food_category(self, category_id: int) -> None:
        """Delete a food category by id.

        Raises:
            NotFoundError: If no category has this id
        """
        logger.info(f"Attempting to delete food category {category_id}")

        if not self.category_repository.exists_by_id(category_id):
            logger.error(f"Food category {category_id} not found")
            record_workflow_rejected(ENTITY_TYPE, "not_found")
            raise NotFoundError(self.messages.not_found)

        self.category_repository.delete_by_id(category_id)
        record_entity_deleted(ENTITY_TYPE)
        logger.info(f"Food category {category_id} deleted successfully")

    @traced("food_category.list_by_restaurant")
    def get_all_categories_by_restaurant_id(self, restaurant_id: int) -> list[FoodCategoryResponse]:
        """List every category of a restaurant, in persistence order."""
        logger.info(f"Retrieving food categories for restaurant {restaurant_id}")

        categories = self.category_repository.find_by_restaurant_id(restaurant_id)
        responses = [to_food_category_response(category) for category in categories]

        logger.info(f"Retrieved {len(responses)} food categories for restaurant {restaurant_id}")
        return responses

    @traced("food_category.update_name")
    def update_category_name(self, category_id: int, new_category_name: str) -> FoodCategoryResponse:
        """Rename an existing category.

        No duplicate check is made here, so a rename can produce two categories
        with the same name in one restaurant.

        Args:
            category_id: Category to rename
            new_category_name: Name to set

        Returns:
            The updated category

        Raises:
            NotFoundError: If no category has this id
        """
        logger.info(f"Updating name of food category {category_id} to {new_category_name!r}")

        result = self.category_repository.find_by_id(category_id)
        if isinstance(result, Missing):
            logger.error(f"Food category {category_id} not found")
            record_workflow_rejected(ENTITY_TYPE, "not_found")
            raise NotFoundError(self.messages.not_found)

        category = result.value
        category.category_name = new_category_name
        updated_category = self.category_repository.save(category)

        logger.info(f"Food category {category_id} renamed successfully")
        return to_food_category_response(updated_category)

    @traced("food_category.get")
    def get_food_category_by_id(self, category_id: int) -> FoodCategoryResponse:
        """Fetch one category.

        Raises:
            NotFoundError: If no category has this id; the message names the id
        """
        result = self.category_repository.find_by_id(category_id)
        if isinstance(result, Missing):
            record_workflow_rejected(ENTITY_TYPE, "not_found")
            raise NotFoundError(CATEGORY_NOT_FOUND_WITH_ID.format(category_id=category_id))

        return to_food_category_response(result.value)
