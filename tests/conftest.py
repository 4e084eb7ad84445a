"""Shared pytest fixtures and configuration for all tests."""

import os

import pytest

# Entry-point modules skip wiring real AWS resources in test mode
os.environ.setdefault("ENVIRONMENT", "test")


@pytest.fixture
def mock_restaurant_id() -> int:
    """Fixture providing a standard test restaurant ID."""
    return 1


@pytest.fixture
def mock_user_id() -> int:
    """Fixture providing a standard test user ID."""
    return 7


@pytest.fixture
def mock_category_item() -> dict:
    """Fixture providing a food category as DynamoDB returns it."""
    from decimal import Decimal

    return {
        "category_id": Decimal("3"),
        "restaurant_id": Decimal("1"),
        "category_name": "Drinks",
        "category_name_lower": "drinks",
    }


@pytest.fixture
def mock_user_item() -> dict:
    """Fixture providing a user as DynamoDB returns it."""
    from decimal import Decimal

    return {
        "user_id": Decimal("7"),
        "user_name": "Asha",
        "user_password": "c2VjcmV0",
        "phone_number": "9876543210",
        "user_email": "Asha@Example.com",
        "user_email_lower": "asha@example.com",
        "user_role": "USER",
        "wallet": Decimal("1000.0"),
    }
