"""Cached dependency factory for the Lambda handler.

Dependencies are created once and reused across invocations within the same
Lambda container.
"""

import logging
import os
from typing import Any

from fastapi import FastAPI

from food_delivery_service import bootstrap
from food_delivery_service.handlers.api_handler import create_app
from food_delivery_service.observability import configure_logging, setup_observability

logger = logging.getLogger(__name__)

# Module-level caches for Lambda container reuse
_dynamodb_resource: Any | None = None
_fastapi_app: FastAPI | None = None


def get_dynamodb_resource() -> Any:
    """Create or retrieve cached DynamoDB resource.

    Returns:
        Boto3 DynamoDB resource configured for environment
    """
    global _dynamodb_resource

    if _dynamodb_resource is None:
        _dynamodb_resource = bootstrap.get_dynamodb_resource()

    return _dynamodb_resource


def get_fastapi_app() -> FastAPI:
    """Create or retrieve cached FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    global _fastapi_app

    if _fastapi_app is not None:
        return _fastapi_app

    services = bootstrap.create_services(get_dynamodb_resource())
    _fastapi_app = create_app(**services)
    setup_observability(_fastapi_app)

    logger.info("FastAPI application initialized")
    return _fastapi_app


def initialize_lambda_environment() -> None:
    """Initialize Lambda environment with logging.

    Should be called once during Lambda cold start.
    """
    configure_logging(os.getenv("LOG_LEVEL", "INFO"))

    logger.info("Lambda environment initialized")
