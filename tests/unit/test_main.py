"""Unit tests for main application entry point."""

import os
from unittest.mock import MagicMock, Mock, patch

import pytest
from fastapi import FastAPI

from src.main import create_application


@pytest.mark.unit
class TestCreateApplication:
    """Tests for create_application function."""

    @patch("src.main.setup_observability")
    @patch("src.main.configure_logging")
    @patch("src.main.get_dynamodb_resource")
    @patch("src.main.create_services")
    @patch("src.main.create_app")
    @patch.dict(os.environ, {"LOG_LEVEL": "DEBUG"}, clear=True)
    def test_creates_application_with_all_dependencies(
        self,
        mock_create_app: Mock,
        mock_create_services: Mock,
        mock_get_dynamodb: Mock,
        mock_configure_logging: Mock,
        mock_setup_observability: Mock,
    ) -> None:
        """Test that application is created with all dependencies properly wired."""
        mock_dynamodb = MagicMock()
        mock_get_dynamodb.return_value = mock_dynamodb

        mock_services = {
            "category_service": MagicMock(),
            "menu_service": MagicMock(),
            "restaurant_service": MagicMock(),
            "user_service": MagicMock(),
            "address_service": MagicMock(),
        }
        mock_create_services.return_value = mock_services

        mock_app = MagicMock(spec=FastAPI)
        mock_create_app.return_value = mock_app

        result = create_application()

        mock_configure_logging.assert_called_once_with("DEBUG")
        mock_get_dynamodb.assert_called_once()
        mock_create_services.assert_called_once_with(mock_dynamodb)
        mock_create_app.assert_called_once_with(**mock_services)
        mock_setup_observability.assert_called_once_with(mock_app)
        assert result == mock_app

    @patch("src.main.setup_observability")
    @patch("src.main.configure_logging")
    @patch("src.main.get_dynamodb_resource")
    @patch.dict(os.environ, {}, clear=True)
    def test_builds_real_routes_over_mocked_dynamodb(
        self,
        mock_get_dynamodb: Mock,
        mock_configure_logging: Mock,
        mock_setup_observability: Mock,
    ) -> None:
        """Test that the wired app exposes the workflow routes."""
        mock_get_dynamodb.return_value = MagicMock()

        app = create_application()

        paths = {route.path for route in app.routes}
        assert "/health" in paths
        assert "/foodCategories/add" in paths
        assert "/users/{user_id}/wallet" in paths
        mock_configure_logging.assert_called_once_with("INFO")
