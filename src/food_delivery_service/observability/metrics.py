"""Custom metrics for the food delivery service."""

from opentelemetry import metrics

meter = metrics.get_meter("food-delivery-svc")

entity_created_counter = meter.create_counter(
    name="entity_created_total",
    description="Total number of entities created by entity type",
    unit="1",
)

entity_deleted_counter = meter.create_counter(
    name="entity_deleted_total",
    description="Total number of entities deleted by entity type",
    unit="1",
)

# Adds and lookups rejected with NotFound or AlreadyExists
workflow_rejected_counter = meter.create_counter(
    name="workflow_rejected_total",
    description="Total number of rejected workflows by entity type and reason",
    unit="1",
)


def record_entity_created(entity_type: str) -> None:
    """Record a successful add.

    Args:
        entity_type: Entity kind, e.g. "food_category"
    """
    entity_created_counter.add(1, {"entity_type": entity_type})


def record_entity_deleted(entity_type: str) -> None:
    """Record a successful delete.

    Args:
        entity_type: Entity kind, e.g. "food_category"
    """
    entity_deleted_counter.add(1, {"entity_type": entity_type})


def record_workflow_rejected(entity_type: str, reason: str) -> None:
    """Record a workflow rejected before any write.

    Args:
        entity_type: Entity kind
        reason: "not_found" or "already_exists"
    """
    workflow_rejected_counter.add(1, {"entity_type": entity_type, "reason": reason})
