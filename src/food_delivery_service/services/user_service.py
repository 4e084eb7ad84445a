"""Service for user workflows."""

import logging
from decimal import Decimal

from food_delivery_service.constants import DEFAULT_WALLET_AMOUNT, USER_MESSAGES, EntityMessages
from food_delivery_service.conversion.dto_conversion import to_user_entity, to_user_response
from food_delivery_service.exceptions import AlreadyExistsError, NotFoundError
from food_delivery_service.models.fetch_result import Missing
from food_delivery_service.models.user_models import User, UserRequest, UserResponse
from food_delivery_service.observability import traced
from food_delivery_service.observability.metrics import (
    record_entity_created,
    record_entity_deleted,
    record_workflow_rejected,
)
from food_delivery_service.repositories.user_repositories import UserRepository
from food_delivery_service.security.password_encoding import encode_password

logger = logging.getLogger(__name__)

ENTITY_TYPE = "user"


class UserService:
    """Service for registering, reading, updating and deleting users.

    Emails are unique across users, ignoring case. Passwords are stored in
    their encoded form and every new user starts with the configured wallet
    amount.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        messages: EntityMessages = USER_MESSAGES,
        default_wallet_amount: Decimal = DEFAULT_WALLET_AMOUNT,
    ) -> None:
        """Initialize the UserService.

        Args:
            user_repository: Repository for users
            messages: Fixed messages for this entity kind
            default_wallet_amount: Starting wallet balance for new users
        """
        self.user_repository = user_repository
        self.messages = messages
        self.default_wallet_amount = default_wallet_amount

    def _get_existing(self, user_id: int) -> User:
        result = self.user_repository.find_by_id(user_id)
        if isinstance(result, Missing):
            logger.error(f"User {user_id} not found")
            record_workflow_rejected(ENTITY_TYPE, "not_found")
            raise NotFoundError(self.messages.not_found)
        return result.value

    @traced("user.add")
    def add_user(self, request: UserRequest) -> UserResponse:
        """Register a new user.

        Args:
            request: User fields, with a plain-text password

        Returns:
            The persisted user (password in encoded form)

        Raises:
            AlreadyExistsError: If another user has this email (case-insensitive)
        """
        logger.info("Adding a new user")

        if self.user_repository.exists_by_email(request.user_email):
            logger.error("User registration rejected: email already registered")
            record_workflow_rejected(ENTITY_TYPE, "already_exists")
            raise AlreadyExistsError(self.messages.already_exists)

        user = to_user_entity(request)
        if user.user_password is not None:
            user.user_password = encode_password(user.user_password)
        user.wallet = self.default_wallet_amount

        saved_user = self.user_repository.save(user)
        record_entity_created(ENTITY_TYPE)
        logger.info(f"User {saved_user.user_id} added successfully")

        return to_user_response(saved_user)

    @traced("user.get")
    def get_user_by_id(self, user_id: int) -> UserResponse:
        return to_user_response(self._get_existing(user_id))

    @traced("user.list")
    def get_all_users(self) -> list[UserResponse]:
        return [to_user_response(user) for user in self.user_repository.find_all()]

    @traced("user.update")
    def update_user(self, user_id: int, request: UserRequest) -> UserResponse:
        """Overwrite the fields supplied in ``request``.

        A supplied password is encoded before storage. The email is not
        re-checked for uniqueness.

        Raises:
            NotFoundError: If no user has this id
        """
        user = self._get_existing(user_id)

        updates = request.model_dump(exclude_unset=True)
        if updates.get("user_password") is not None:
            updates["user_password"] = encode_password(updates["user_password"])
        for field, value in updates.items():
            setattr(user, field, value)

        logger.info(f"User {user_id} updated")
        return to_user_response(self.user_repository.save(user))

    @traced("user.update_wallet")
    def update_wallet(self, user_id: int, wallet: Decimal) -> UserResponse:
        """Set a user's wallet balance.

        Raises:
            NotFoundError: If no user has this id
        """
        user = self._get_existing(user_id)
        user.wallet = wallet

        logger.info(f"Wallet of user {user_id} set to {wallet}")
        return to_user_response(self.user_repository.save(user))

    @traced("user.delete")
    def delete_user(self, user_id: int) -> None:
        if not self.user_repository.exists_by_id(user_id):
            logger.error(f"User {user_id} not found")
            record_workflow_rejected(ENTITY_TYPE, "not_found")
            raise NotFoundError(self.messages.not_found)

        self.user_repository.delete_by_id(user_id)
        record_entity_deleted(ENTITY_TYPE)
        logger.info(f"User {user_id} deleted successfully")
