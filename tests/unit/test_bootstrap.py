"""Unit tests for repository and service wiring."""

import os
from decimal import Decimal
from unittest.mock import MagicMock, Mock, patch

import pytest

from food_delivery_service.bootstrap import create_services, get_dynamodb_resource, get_table_name
from food_delivery_service.services.address_service import AddressService
from food_delivery_service.services.food_category_service import FoodCategoryService
from food_delivery_service.services.restaurant_menu_service import RestaurantMenuService
from food_delivery_service.services.restaurant_service import RestaurantService
from food_delivery_service.services.user_service import UserService


@pytest.mark.unit
class TestGetDynamoDBResource:
    """Tests for get_dynamodb_resource function."""

    @patch.dict(os.environ, {"DYNAMODB_ENDPOINT": "", "AWS_REGION": "us-west-2"}, clear=True)
    @patch("food_delivery_service.bootstrap.boto3.resource")
    def test_creates_aws_resource_when_no_endpoint(self, mock_boto3_resource: Mock) -> None:
        """Test that AWS DynamoDB resource is created when no local endpoint configured."""
        mock_resource = MagicMock()
        mock_boto3_resource.return_value = mock_resource

        result = get_dynamodb_resource()

        mock_boto3_resource.assert_called_once_with("dynamodb", region_name="us-west-2")
        assert result == mock_resource

    @patch.dict(
        os.environ,
        {"DYNAMODB_ENDPOINT": "http://localhost:8000", "AWS_REGION": "us-east-1"},
        clear=True,
    )
    @patch("food_delivery_service.bootstrap.boto3.resource")
    def test_creates_local_resource_when_endpoint_provided(self, mock_boto3_resource: Mock) -> None:
        """Test that local DynamoDB resource is created when endpoint configured."""
        get_dynamodb_resource()

        mock_boto3_resource.assert_called_once_with(
            "dynamodb",
            endpoint_url="http://localhost:8000",
            region_name="us-east-1",
            aws_access_key_id="dummy",
            aws_secret_access_key="dummy",
        )

    @patch.dict(os.environ, {"DYNAMODB_ENDPOINT": ""}, clear=True)
    @patch("food_delivery_service.bootstrap.boto3.resource")
    def test_uses_default_region_when_not_specified(self, mock_boto3_resource: Mock) -> None:
        get_dynamodb_resource()

        mock_boto3_resource.assert_called_once_with("dynamodb", region_name="us-east-1")


@pytest.mark.unit
class TestCreateServices:
    """Tests for create_services function."""

    @patch.dict(os.environ, {}, clear=True)
    def test_uses_default_table_names(self) -> None:
        mock_dynamodb = MagicMock()

        create_services(mock_dynamodb)

        table_names = {call.args[0] for call in mock_dynamodb.Table.call_args_list}
        assert table_names == {
            "food-delivery-counters",
            "food-delivery-food-categories",
            "food-delivery-menu-items",
            "food-delivery-restaurants",
            "food-delivery-users",
            "food-delivery-addresses",
        }

    @patch.dict(
        os.environ,
        {"DYNAMODB_USERS_TABLE": "test-users", "DEFAULT_WALLET_AMOUNT": "500"},
        clear=True,
    )
    def test_reads_overrides_from_environment(self) -> None:
        services = create_services(MagicMock())

        user_service = services["user_service"]
        assert isinstance(user_service, UserService)
        assert user_service.user_repository.table_name == "test-users"
        assert user_service.default_wallet_amount == Decimal("500")

    @patch.dict(os.environ, {}, clear=True)
    def test_returns_every_service(self) -> None:
        services = create_services(MagicMock())

        assert isinstance(services["category_service"], FoodCategoryService)
        assert isinstance(services["menu_service"], RestaurantMenuService)
        assert isinstance(services["restaurant_service"], RestaurantService)
        assert isinstance(services["address_service"], AddressService)
        assert services["user_service"].default_wallet_amount == Decimal("1000.0")
        # The menu service checks categories through the same repository
        assert services["menu_service"].category_repository is services["category_service"].category_repository

    @patch.dict(os.environ, {"DYNAMODB_ADDRESSES_TABLE": "custom-addresses"}, clear=True)
    def test_get_table_name(self) -> None:
        assert get_table_name("DYNAMODB_ADDRESSES_TABLE") == "custom-addresses"
        assert get_table_name("DYNAMODB_USERS_TABLE") == "food-delivery-users"
