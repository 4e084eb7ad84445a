"""DynamoDB repositories for users and addresses."""

from typing import Any

from food_delivery_service.models.dynamodb_values import lower_index_key
from food_delivery_service.models.user_models import Address, User
from food_delivery_service.repositories.base_repository import EntityRepository


class UserRepository(EntityRepository[User]):
    """Repository for users.

    Table key: ``user_id``. GSI ``user_email_lower-index`` on the lower-cased
    email.
    """

    key_name = "user_id"
    counter_name = "user"
    entity_name = "user"

    def _from_item(self, item: dict[str, Any]) -> User:
        return User.from_dynamodb_item(item)

    def find_all(self) -> list[User]:
        """List every user, in table scan order."""
        return self._scan_all()

    def exists_by_email(self, user_email: str | None) -> bool:
        """Check whether any user has this email, ignoring case.

        Args:
            user_email: Email address to look for

        Returns:
            bool: True if a user with the email exists
        """
        matches = self._query_index(
            "user_email_lower-index", "user_email_lower", lower_index_key(user_email)
        )
        return len(matches) > 0


class AddressRepository(EntityRepository[Address]):
    """Repository for addresses.

    Table key: ``address_id``. GSI ``user_id-index`` on the owning user.
    """

    key_name = "address_id"
    counter_name = "address"
    entity_name = "address"

    def _from_item(self, item: dict[str, Any]) -> Address:
        return Address.from_dynamodb_item(item)

    def find_by_user_id(self, user_id: int) -> list[Address]:
        """List all addresses belonging to a user."""
        return self._query_index("user_id-index", "user_id", user_id)
