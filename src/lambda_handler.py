"""AWS Lambda handler for API Gateway requests.

Requests are passed to the FastAPI application through the Mangum ASGI
adapter. The app and its dependencies are built once per container.
"""

import logging
import os
from typing import Any

from mangum import Mangum

from lambda_dependencies import get_fastapi_app, initialize_lambda_environment

logger = logging.getLogger(__name__)

# Build during cold start, skipped in test mode
if os.getenv("ENVIRONMENT") != "test":
    initialize_lambda_environment()
    app = get_fastapi_app()
    mangum_handler = Mangum(app, lifespan="off")
else:
    app = None  # type: ignore
    mangum_handler = None  # type: ignore


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Lambda entry point for API Gateway events.

    Args:
        event: The API Gateway event payload
        context: The Lambda context object

    Returns:
        API Gateway response dict with statusCode and body
    """
    logger.info(f"Received Lambda invocation, request_id: {context.aws_request_id}")

    result: dict[str, Any] = mangum_handler(event, context)
    return result
