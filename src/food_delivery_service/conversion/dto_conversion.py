"""Field-for-field conversion between request, entity and response models.

These functions copy fields and nothing else: no validation, no derived
values. Password encoding and wallet defaults belong to the user service.
"""

from food_delivery_service.models.restaurant_models import (
    FoodCategory,
    FoodCategoryRequest,
    FoodCategoryResponse,
    MenuItem,
    MenuItemRequest,
    MenuItemResponse,
    Restaurant,
    RestaurantRequest,
    RestaurantResponse,
)
from food_delivery_service.models.user_models import (
    Address,
    AddressRequest,
    AddressResponse,
    User,
    UserRequest,
    UserResponse,
)


def to_food_category_entity(request: FoodCategoryRequest) -> FoodCategory:
    """Build a new food category from an add request.

    Args:
        request: Category fields sent by the client

    Returns:
        FoodCategory: Unsaved category without ``category_id``
    """
    return FoodCategory(
        restaurant_id=request.restaurant_id,
        category_name=request.category_name,
    )


def to_food_category_response(category: FoodCategory) -> FoodCategoryResponse:
    """Expose a stored food category to clients.

    Args:
        category: Category as read from or written to DynamoDB

    Returns:
        FoodCategoryResponse: Category fields including its id
    """
    return FoodCategoryResponse(
        category_id=category.category_id,
        restaurant_id=category.restaurant_id,
        category_name=category.category_name,
    )


def to_menu_item_entity(request: MenuItemRequest) -> MenuItem:
    """Build a new menu item from an add request.

    Args:
        request: Menu item fields sent by the client

    Returns:
        MenuItem: Unsaved item without ``item_id`` or image
    """
    return MenuItem(
        item_name=request.item_name,
        price=request.price,
        description=request.description,
        veg_non_veg=request.veg_non_veg,
        category_id=request.category_id,
        restaurant_id=request.restaurant_id,
    )


def to_menu_item_response(item: MenuItem) -> MenuItemResponse:
    """Expose a stored menu item to clients.

    Args:
        item: Menu item as stored

    Returns:
        MenuItemResponse: Item fields without the image bytes
    """
    return MenuItemResponse(
        item_id=item.item_id,
        item_name=item.item_name,
        price=item.price,
        description=item.description,
        veg_non_veg=item.veg_non_veg,
        category_id=item.category_id,
        restaurant_id=item.restaurant_id,
    )


def to_restaurant_entity(request: RestaurantRequest) -> Restaurant:
    """Build a new restaurant from an add request.

    Args:
        request: Restaurant fields sent by the client

    Returns:
        Restaurant: Unsaved restaurant without ``restaurant_id`` or image
    """
    return Restaurant(
        user_id=request.user_id,
        restaurant_name=request.restaurant_name,
        restaurant_address=request.restaurant_address,
        contact_number=request.contact_number,
        restaurant_description=request.restaurant_description,
        opening_hour=request.opening_hour,
    )


def to_restaurant_response(restaurant: Restaurant) -> RestaurantResponse:
    """Expose a stored restaurant to clients.

    Args:
        restaurant: Restaurant as stored

    Returns:
        RestaurantResponse: Restaurant fields without the image bytes
    """
    return RestaurantResponse(
        restaurant_id=restaurant.restaurant_id,
        user_id=restaurant.user_id,
        restaurant_name=restaurant.restaurant_name,
        restaurant_address=restaurant.restaurant_address,
        contact_number=restaurant.contact_number,
        restaurant_description=restaurant.restaurant_description,
        opening_hour=restaurant.opening_hour,
    )


def to_user_entity(request: UserRequest) -> User:
    """Build a new user from an add request.

    The password is copied as sent. Encoding it is left to the caller.

    Args:
        request: User fields sent by the client

    Returns:
        User: Unsaved user without ``user_id`` or wallet
    """
    return User(
        user_name=request.user_name,
        user_password=request.user_password,
        phone_number=request.phone_number,
        user_email=request.user_email,
        user_role=request.user_role,
    )


def to_user_response(user: User) -> UserResponse:
    """Expose a stored user to clients.

    Args:
        user: User as stored, with the encoded password

    Returns:
        UserResponse: User fields including the encoded password and wallet
    """
    return UserResponse(
        user_id=user.user_id,
        user_name=user.user_name,
        user_password=user.user_password,
        phone_number=user.phone_number,
        user_email=user.user_email,
        user_role=user.user_role,
        wallet=user.wallet,
    )


def to_address_entity(request: AddressRequest) -> Address:
    """Build a new address from an add request.

    Args:
        request: Address fields sent by the client

    Returns:
        Address: Unsaved address without ``address_id``
    """
    return Address(
        street=request.street,
        city=request.city,
        state=request.state,
        zip_code=request.zip_code,
        country=request.country,
        user_id=request.user_id,
    )


def to_address_response(address: Address) -> AddressResponse:
    """Expose a stored address to clients.

    Args:
        address: Address as stored

    Returns:
        AddressResponse: Address fields including its id and owner
    """
    return AddressResponse(
        address_id=address.address_id,
        street=address.street,
        city=address.city,
        state=address.state,
        zip_code=address.zip_code,
        country=address.country,
        user_id=address.user_id,
    )
