"""Service for address workflows."""

import logging

from food_delivery_service.constants import ADDRESS_MESSAGES, USER_MESSAGES, EntityMessages
from food_delivery_service.conversion.dto_conversion import (
    to_address_entity,
    to_address_response,
)
from food_delivery_service.exceptions import NotFoundError
from food_delivery_service.models.fetch_result import Missing
from food_delivery_service.models.user_models import Address, AddressRequest, AddressResponse
from food_delivery_service.observability import traced
from food_delivery_service.observability.metrics import (
    record_entity_created,
    record_entity_deleted,
    record_workflow_rejected,
)
from food_delivery_service.repositories.user_repositories import (
    AddressRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)

ENTITY_TYPE = "address"


class AddressService:
    """Service for user addresses.

    An address can only be added for a user that exists at the time of the
    add. Later deletes of the user leave its addresses in place.
    """

    def __init__(
        self,
        address_repository: AddressRepository,
        user_repository: UserRepository,
        messages: EntityMessages = ADDRESS_MESSAGES,
        user_messages: EntityMessages = USER_MESSAGES,
    ) -> None:
        """Initialize the AddressService.

        Args:
            address_repository: Repository for addresses
            user_repository: Repository used to check the owning user exists
            messages: Fixed messages for addresses
            user_messages: Fixed messages used when the owning user is absent
        """
        self.address_repository = address_repository
        self.user_repository = user_repository
        self.messages = messages
        self.user_messages = user_messages

    def _get_existing(self, address_id: int) -> Address:
        result = self.address_repository.find_by_id(address_id)
        if isinstance(result, Missing):
            logger.error(f"Address {address_id} not found")
            record_workflow_rejected(ENTITY_TYPE, "not_found")
            raise NotFoundError(self.messages.not_found)
        return result.value

    @traced("address.add")
    def add_address(self, request: AddressRequest) -> AddressResponse:
        """Add an address for an existing user.

        Raises:
            NotFoundError: If the owning user does not exist
        """
        logger.info(f"Adding address for user {request.user_id}")

        if request.user_id is None or not self.user_repository.exists_by_id(request.user_id):
            logger.error(f"User {request.user_id} not found, address rejected")
            record_workflow_rejected(ENTITY_TYPE, "not_found")
            raise NotFoundError(self.user_messages.not_found)

        saved_address = self.address_repository.save(to_address_entity(request))
        record_entity_created(ENTITY_TYPE)

        return to_address_response(saved_address)

    @traced("address.list_by_user")
    def get_addresses_by_user_id(self, user_id: int) -> list[AddressResponse]:
        addresses = self.address_repository.find_by_user_id(user_id)
        logger.info(f"Retrieved {len(addresses)} addresses for user {user_id}")
        return [to_address_response(address) for address in addresses]

    @traced("address.get")
    def get_address_by_id(self, address_id: int) -> AddressResponse:
        return to_address_response(self._get_existing(address_id))

    @traced("address.update")
    def update_address(self, address_id: int, request: AddressRequest) -> AddressResponse:
        """Overwrite the fields supplied in ``request``.

        Raises:
            NotFoundError: If no address has this id
        """
        address = self._get_existing(address_id)
        for field, value in request.model_dump(exclude_unset=True).items():
            setattr(address, field, value)

        return to_address_response(self.address_repository.save(address))

    @traced("address.delete")
    def delete_address(self, address_id: int) -> None:
        if not self.address_repository.exists_by_id(address_id):
            logger.error(f"Address {address_id} not found")
            record_workflow_rejected(ENTITY_TYPE, "not_found")
            raise NotFoundError(self.messages.not_found)

        self.address_repository.delete_by_id(address_id)
        record_entity_deleted(ENTITY_TYPE)
        logger.info(f"Address {address_id} deleted successfully")
