"""Fixed user-facing messages and default values.

Each service receives its own ``EntityMessages`` at construction time, so no
module-level state is mutated at runtime.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class EntityMessages:
    """Messages attached to the errors and successes of one entity kind.

    Attributes:
        not_found: Message carried by NotFoundError
        already_exists: Message carried by AlreadyExistsError
        add_success: Message returned by the add endpoint
        delete_success: Message returned by the delete endpoint
    """

    not_found: str
    already_exists: str
    add_success: str
    delete_success: str


CATEGORY_MESSAGES = EntityMessages(
    not_found="Food category not found",
    already_exists="Category already exists",
    add_success="Food category added successfully",
    delete_success="Food category deleted successfully.",
)

# Get-by-id uses a message that carries the id
CATEGORY_NOT_FOUND_WITH_ID = "Food Category not found with id {category_id}"

MENU_ITEM_MESSAGES = EntityMessages(
    not_found="Food item not found",
    already_exists="Food item already exists",
    add_success="Food item added successfully",
    delete_success="Food item deleted successfully.",
)

# Raised when listing menu items for a category that does not exist
MENU_CATEGORY_NOT_FOUND = "Category not found"

RESTAURANT_MESSAGES = EntityMessages(
    not_found="Restaurant not found",
    already_exists="Restaurant already exists",
    add_success="Restaurant added successfully",
    delete_success="Restaurant deleted successfully.",
)

USER_MESSAGES = EntityMessages(
    not_found="User not found",
    already_exists="Email already exists",
    add_success="User added successfully",
    delete_success="User deleted successfully.",
)

ADDRESS_MESSAGES = EntityMessages(
    not_found="Address not found",
    already_exists="Address already exists",
    add_success="Address added successfully",
    delete_success="Address deleted successfully.",
)

DEFAULT_WALLET_AMOUNT = Decimal("1000.0")
