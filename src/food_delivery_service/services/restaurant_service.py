"""Service for restaurant workflows."""

import logging

from food_delivery_service.constants import RESTAURANT_MESSAGES, EntityMessages
from food_delivery_service.conversion.dto_conversion import (
    to_restaurant_entity,
    to_restaurant_response,
)
from food_delivery_service.exceptions import NotFoundError
from food_delivery_service.models.fetch_result import Missing
from food_delivery_service.models.restaurant_models import (
    Restaurant,
    RestaurantRequest,
    RestaurantResponse,
)
from food_delivery_service.observability import traced
from food_delivery_service.observability.metrics import (
    record_entity_created,
    record_entity_deleted,
    record_workflow_rejected,
)
from food_delivery_service.repositories.restaurant_repositories import RestaurantRepository

logger = logging.getLogger(__name__)

ENTITY_TYPE = "restaurant"


class RestaurantService:
    """Service for restaurants and their images.

    Restaurants carry no uniqueness rule; the owning ``user_id`` is a soft
    reference and is not checked.
    """

    def __init__(
        self,
        restaurant_repository: RestaurantRepository,
        messages: EntityMessages = RESTAURANT_MESSAGES,
    ) -> None:
        self.restaurant_repository = restaurant_repository
        self.messages = messages

    def _get_existing(self, restaurant_id: int) -> Restaurant:
        result = self.restaurant_repository.find_by_id(restaurant_id)
        if isinstance(result, Missing):
            logger.error(f"Restaurant {restaurant_id} not found")
            record_workflow_rejected(ENTITY_TYPE, "not_found")
            raise NotFoundError(self.messages.not_found)
        return result.value

    @traced("restaurant.add")
    def add_restaurant(self, request: RestaurantRequest) -> RestaurantResponse:
        logger.info(f"Adding restaurant {request.restaurant_name!r} for user {request.user_id}")

        saved_restaurant = self.restaurant_repository.save(to_restaurant_entity(request))
        record_entity_created(ENTITY_TYPE)

        return to_restaurant_response(saved_restaurant)

    @traced("restaurant.get")
    def get_restaurant_by_id(self, restaurant_id: int) -> RestaurantResponse:
        return to_restaurant_response(self._get_existing(restaurant_id))

    @traced("restaurant.list_by_user")
    def get_restaurants_by_user_id(self, user_id: int) -> list[RestaurantResponse]:
        restaurants = self.restaurant_repository.find_by_user_id(user_id)
        logger.info(f"Retrieved {len(restaurants)} restaurants for user {user_id}")
        return [to_restaurant_response(restaurant) for restaurant in restaurants]

    @traced("restaurant.update")
    def update_restaurant(self, restaurant_id: int, request: RestaurantRequest) -> RestaurantResponse:
        """Overwrite the fields supplied in ``request``; the image is kept.

        Raises:
            NotFoundError: If no restaurant has this id
        """
        restaurant = self._get_existing(restaurant_id)
        for field, value in request.model_dump(exclude_unset=True).items():
            setattr(restaurant, field, value)

        logger.info(f"Restaurant {restaurant_id} updated")
        return to_restaurant_response(self.restaurant_repository.save(restaurant))

    @traced("restaurant.delete")
    def delete_restaurant(self, restaurant_id: int) -> None:
        if not self.restaurant_repository.exists_by_id(restaurant_id):
            logger.error(f"Restaurant {restaurant_id} not found")
            record_workflow_rejected(ENTITY_TYPE, "not_found")
            raise NotFoundError(self.messages.not_found)

        self.restaurant_repository.delete_by_id(restaurant_id)
        record_entity_deleted(ENTITY_TYPE)
        logger.info(f"Restaurant {restaurant_id} deleted successfully")

    @traced("restaurant.get_image")
    def get_restaurant_image(self, restaurant_id: int) -> bytes:
        return self._get_existing(restaurant_id).restaurant_image or b""

    @traced("restaurant.update_image")
    def update_restaurant_image(self, restaurant_id: int, image: bytes) -> RestaurantResponse:
        restaurant = self._get_existing(restaurant_id)
        restaurant.restaurant_image = image
        return to_restaurant_response(self.restaurant_repository.save(restaurant))
