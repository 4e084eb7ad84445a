"""Named error kinds surfaced by the service workflows.

Only two outcomes are classified: a referenced id does not exist, or a
uniqueness rule would be broken. Anything else (DynamoDB faults, unexpected
nulls) propagates unchanged to the HTTP layer.
"""


class FoodDeliveryError(Exception):
    """Base class for classified workflow failures."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(FoodDeliveryError):
    """Raised when a referenced entity id does not exist."""

    status_code = 404


class AlreadyExistsError(FoodDeliveryError):
    """Raised when an add would violate a uniqueness rule."""

    status_code = 409
