"""Shared DynamoDB plumbing for the entity repositories.

Every entity table is keyed by a surrogate integer id. DynamoDB has no
auto-increment, so ids come from an atomic ``ADD`` on a counter item.

Unlike lookups that may legitimately find nothing, DynamoDB faults are not
expected outcomes: they are logged and re-raised unchanged.
"""

import logging
from typing import Any, ClassVar, Generic, TypeVar

from botocore.exceptions import ClientError
from mypy_boto3_dynamodb.service_resource import DynamoDBServiceResource, Table
from pydantic import BaseModel

from food_delivery_service.models.fetch_result import FetchResult, Found, Missing

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseModel)


class IdAllocator:
    """Allocates surrogate integer ids from a DynamoDB counter table.

    The counter table has ``counter_name`` as partition key and keeps the last
    issued id in ``current_value``.
    """

    def __init__(self, dynamodb_resource: DynamoDBServiceResource, table_name: str) -> None:
        """Initialize allocator.

        Args:
            dynamodb_resource: Boto3 DynamoDB resource
            table_name: Name of the counter table
        """
        self.table_name = table_name
        self.table: Table = dynamodb_resource.Table(table_name)

    def next_id(self, counter_name: str) -> int:
        """Atomically increment and return the counter for ``counter_name``.

        Args:
            counter_name: Counter to advance, one per entity kind

        Returns:
            int: The newly issued id (the first id is 1)
        """
        try:
            response = self.table.update_item(
                Key={"counter_name": counter_name},
                UpdateExpression="ADD current_value :inc",
                ExpressionAttributeValues={":inc": 1},
                ReturnValues="UPDATED_NEW",
            )
        except ClientError as e:
            logger.error(f"Failed to allocate id for {counter_name}: {e}")
            raise

        return int(response["Attributes"]["current_value"])


class EntityRepository(Generic[E]):
    """Base repository for one entity kind stored in its own table.

    Subclasses set ``key_name`` (partition key attribute), ``counter_name``
    and ``entity_name``, and implement ``_from_item``.
    """

    key_name: ClassVar[str]
    counter_name: ClassVar[str]
    entity_name: ClassVar[str]

    def __init__(
        self,
        dynamodb_resource: DynamoDBServiceResource,
        table_name: str,
        id_allocator: IdAllocator,
    ) -> None:
        """Initialize repository.

        Args:
            dynamodb_resource: Boto3 DynamoDB resource
            table_name: Name of the DynamoDB table
            id_allocator: Source of surrogate ids for new entities
        """
        self.dynamodb = dynamodb_resource
        self.table_name = table_name
        self.table: Table = dynamodb_resource.Table(table_name)
        self.id_allocator = id_allocator

    def _from_item(self, item: dict[str, Any]) -> E:
        raise NotImplementedError

    def find_by_id(self, entity_id: int) -> FetchResult[E]:
        """Retrieve an entity by id.

        Args:
            entity_id: Surrogate key

        Returns:
            Found with the entity, or Missing if no item has that key
        """
        try:
            response = self.table.get_item(Key={self.key_name: entity_id})
        except ClientError as e:
            logger.error(f"Failed to get {self.entity_name} {entity_id}: {e}")
            raise

        if "Item" not in response:
            return Missing(key=entity_id)

        return Found(self._from_item(response["Item"]))

    def exists_by_id(self, entity_id: int) -> bool:
        """Check whether an entity with the given id exists.

        Args:
            entity_id: Surrogate key

        Returns:
            bool: True if the item exists
        """
        try:
            response = self.table.get_item(
                Key={self.key_name: entity_id},
                ProjectionExpression="#k",
                ExpressionAttributeNames={"#k": self.key_name},
            )
        except ClientError as e:
            logger.error(f"Failed to check {self.entity_name} {entity_id}: {e}")
            raise

        return "Item" in response

    def save(self, entity: E) -> E:
        """Insert or overwrite an entity.

        An entity without an id is assigned a fresh one before writing.

        Args:
            entity: Entity to persist

        Returns:
            The persisted entity, carrying its id
        """
        if getattr(entity, self.key_name) is None:
            new_id = self.id_allocator.next_id(self.counter_name)
            entity = entity.model_copy(update={self.key_name: new_id})

        try:
            self.table.put_item(Item=entity.to_dynamodb_item())  # type: ignore[attr-defined]
        except ClientError as e:
            logger.error(f"Failed to save {self.entity_name}: {e}")
            raise

        return entity

    def delete_by_id(self, entity_id: int) -> None:
        """Delete an entity by id. Deleting an absent key is a no-op.

        Args:
            entity_id: Surrogate key
        """
        try:
            self.table.delete_item(Key={self.key_name: entity_id})
        except ClientError as e:
            logger.error(f"Failed to delete {self.entity_name} {entity_id}: {e}")
            raise

    def _query_index(
        self,
        index_name: str,
        key_attribute: str,
        key_value: Any,
        filter_attribute: str | None = None,
        filter_value: Any = None,
    ) -> list[E]:
        """Query a global secondary index, following pagination.

        Args:
            index_name: GSI to query
            key_attribute: Partition key attribute of the index
            key_value: Value to match
            filter_attribute: Optional non-key attribute to filter on
            filter_value: Value the filter attribute must equal

        Returns:
            list: Matching entities in index order (empty list if none)
        """
        # Items lacking the key attribute are never in the index
        if key_value is None:
            return []

        params: dict[str, Any] = {
            "IndexName": index_name,
            "KeyConditionExpression": "#k = :k",
            "ExpressionAttributeNames": {"#k": key_attribute},
            "ExpressionAttributeValues": {":k": key_value},
        }
        if filter_attribute is not None:
            params["FilterExpression"] = "#f = :f"
            params["ExpressionAttributeNames"]["#f"] = filter_attribute
            params["ExpressionAttributeValues"][":f"] = filter_value

        return self._collect_pages(self.table.query, params)

    def _scan_all(self) -> list[E]:
        """Scan the whole table, following pagination."""
        return self._collect_pages(self.table.scan, {})

    def _collect_pages(self, operation: Any, params: dict[str, Any]) -> list[E]:
        entities: list[E] = []
        try:
            while True:
                response = operation(**params)
                entities.extend(self._from_item(item) for item in response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                params["ExclusiveStartKey"] = last_key
        except ClientError as e:
            logger.error(f"Failed to read {self.entity_name} items: {e}")
            raise

        return entities
