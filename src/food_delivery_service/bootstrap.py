"""Explicit wiring of repositories and services from environment configuration.

Environment variables:
    DYNAMODB_ENDPOINT: Local DynamoDB URL; unset means AWS
    AWS_REGION: Region for DynamoDB (default us-east-1)
    DYNAMODB_*_TABLE: Table names, see TABLE_DEFAULTS
    DEFAULT_WALLET_AMOUNT: Starting wallet balance for new users (default 1000.0)
"""

import logging
import os
from decimal import Decimal
from typing import Any

import boto3

from food_delivery_service.constants import DEFAULT_WALLET_AMOUNT
from food_delivery_service.repositories.base_repository import IdAllocator
from food_delivery_service.repositories.restaurant_repositories import (
    FoodCategoryRepository,
    MenuItemRepository,
    RestaurantRepository,
)
from food_delivery_service.repositories.user_repositories import (
    AddressRepository,
    UserRepository,
)
from food_delivery_service.services.address_service import AddressService
from food_delivery_service.services.food_category_service import FoodCategoryService
from food_delivery_service.services.restaurant_menu_service import RestaurantMenuService
from food_delivery_service.services.restaurant_service import RestaurantService
from food_delivery_service.services.user_service import UserService

logger = logging.getLogger(__name__)

# Environment variable -> default table name
TABLE_DEFAULTS = {
    "DYNAMODB_COUNTERS_TABLE": "food-delivery-counters",
    "DYNAMODB_FOOD_CATEGORIES_TABLE": "food-delivery-food-categories",
    "DYNAMODB_MENU_ITEMS_TABLE": "food-delivery-menu-items",
    "DYNAMODB_RESTAURANTS_TABLE": "food-delivery-restaurants",
    "DYNAMODB_USERS_TABLE": "food-delivery-users",
    "DYNAMODB_ADDRESSES_TABLE": "food-delivery-addresses",
}


def get_dynamodb_resource() -> Any:
    """Create DynamoDB resource with appropriate configuration.

    Returns:
        Boto3 DynamoDB resource configured for environment
    """
    endpoint_url = os.getenv("DYNAMODB_ENDPOINT")
    region = os.getenv("AWS_REGION", "us-east-1")

    if endpoint_url:
        # Local DynamoDB accepts any credentials
        logger.info(f"Using local DynamoDB at {endpoint_url}")
        return boto3.resource(
            "dynamodb",
            endpoint_url=endpoint_url,
            region_name=region,
            aws_access_key_id=os.getenv("AWS_ACCESS_KEY_ID", "dummy"),
            aws_secret_access_key=os.getenv("AWS_SECRET_ACCESS_KEY", "dummy"),
        )

    logger.info(f"Using AWS DynamoDB in region {region}")
    return boto3.resource("dynamodb", region_name=region)


def get_table_name(env_var: str) -> str:
    """Resolve a table name from the environment, falling back to its default."""
    return os.getenv(env_var, TABLE_DEFAULTS[env_var])


def create_services(dynamodb_resource: Any) -> dict[str, Any]:
    """Build every repository and service on top of one DynamoDB resource.

    Args:
        dynamodb_resource: Boto3 DynamoDB resource

    Returns:
        Services keyed by the ``create_app`` argument names
    """
    id_allocator = IdAllocator(dynamodb_resource, get_table_name("DYNAMODB_COUNTERS_TABLE"))

    category_repository = FoodCategoryRepository(
        dynamodb_resource, get_table_name("DYNAMODB_FOOD_CATEGORIES_TABLE"), id_allocator
    )
    menu_item_repository = MenuItemRepository(
        dynamodb_resource, get_table_name("DYNAMODB_MENU_ITEMS_TABLE"), id_allocator
    )
    restaurant_repository = RestaurantRepository(
        dynamodb_resource, get_table_name("DYNAMODB_RESTAURANTS_TABLE"), id_allocator
    )
    user_repository = UserRepository(
        dynamodb_resource, get_table_name("DYNAMODB_USERS_TABLE"), id_allocator
    )
    address_repository = AddressRepository(
        dynamodb_resource, get_table_name("DYNAMODB_ADDRESSES_TABLE"), id_allocator
    )

    wallet_amount = Decimal(os.getenv("DEFAULT_WALLET_AMOUNT", str(DEFAULT_WALLET_AMOUNT)))

    logger.info("Repositories configured")

    return {
        "category_service": FoodCategoryService(category_repository),
        "menu_service": RestaurantMenuService(menu_item_repository, category_repository),
        "restaurant_service": RestaurantService(restaurant_repository),
        "user_service": UserService(user_repository, default_wallet_amount=wallet_amount),
        "address_service": AddressService(address_repository, user_repository),
    }
