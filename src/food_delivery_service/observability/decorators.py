"""OpenTelemetry tracing decorators."""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from opentelemetry import trace

F = TypeVar("F", bound=Callable[..., Any])


def traced(span_name: str | None = None, service_name: str = "food-delivery-svc") -> Callable[[F], F]:
    """Decorator to run a workflow method inside an OpenTelemetry span.

    Classified failures (``NotFoundError``, ``AlreadyExistsError``) are recorded
    on the span like any other exception and re-raised unchanged.

    Args:
        span_name: Name for the span (defaults to function name if not provided)
        service_name: Service name for span attributes

    Returns:
        Decorated function with tracing

    Example:
        @traced("food_category.add")
        def add_food_category(self, request: FoodCategoryRequest) -> FoodCategoryResponse:
            ...
    """

    def decorator(func: F) -> F:
        name = span_name or func.__name__
        tracer = trace.get_tracer(service_name)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with tracer.start_as_current_span(name) as span:
                span.set_attribute("service.name", service_name)
                if span_name:
                    span.set_attribute("function.name", func.__name__)

                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    span.set_attribute("success", False)
                    span.set_attribute("error.type", type(e).__name__)
                    span.set_attribute("error.message", str(e))
                    span.record_exception(e)
                    raise

                span.set_attribute("success", True)
                return result

        return wrapper  # type: ignore

    return decorator
