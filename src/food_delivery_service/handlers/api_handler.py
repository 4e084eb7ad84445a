"""FastAPI application exposing the food delivery workflows over HTTP.

Routes are thin: each one calls a single service method. The two classified
errors are mapped to JSON error bodies here; every other exception
propagates to the server as a 500.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, ValidationError

from food_delivery_service.exceptions import FoodDeliveryError
from food_delivery_service.models.restaurant_models import (
    CategoryNameUpdate,
    FoodCategoryRequest,
    FoodCategoryResponse,
    MenuItemRequest,
    MenuItemResponse,
    RestaurantRequest,
    RestaurantResponse,
)
from food_delivery_service.models.user_models import (
    AddressRequest,
    AddressResponse,
    UserRequest,
    UserResponse,
    WalletUpdate,
)
from food_delivery_service.services.address_service import AddressService
from food_delivery_service.services.food_category_service import FoodCategoryService
from food_delivery_service.services.restaurant_menu_service import RestaurantMenuService
from food_delivery_service.services.restaurant_service import RestaurantService
from food_delivery_service.services.user_service import UserService

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str


class SuccessResponse(BaseModel):
    """Confirmation message for adds and deletes."""

    message: str


class ErrorResponse(BaseModel):
    """Body returned for NotFound and AlreadyExists outcomes."""

    status: int
    message: str


def create_app(
    category_service: FoodCategoryService,
    menu_service: RestaurantMenuService,
    restaurant_service: RestaurantService,
    user_service: UserService,
    address_service: AddressService,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        category_service: Food category workflows
        menu_service: Menu item workflows
        restaurant_service: Restaurant workflows
        user_service: User workflows
        address_service: Address workflows

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Food Delivery Service API",
        description="Restaurants, menus, users and addresses for food delivery",
        version="1.0.0",
    )

    # Route handlers read services from app state so tests can swap them
    app.state.category_service = category_service
    app.state.menu_service = menu_service
    app.state.restaurant_service = restaurant_service
    app.state.user_service = user_service
    app.state.address_service = address_service

    @app.exception_handler(FoodDeliveryError)
    async def handle_food_delivery_error(request: Request, exc: FoodDeliveryError) -> JSONResponse:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(status=exc.status_code, message=exc.message).model_dump(),
        )

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy")

    _register_category_routes(app)
    _register_menu_routes(app)
    _register_restaurant_routes(app)
    _register_user_routes(app)
    _register_address_routes(app)

    return app


def _register_category_routes(app: FastAPI) -> None:
    tags = ["Food Categories"]

    @app.post("/foodCategories/add", response_model=SuccessResponse, status_code=201, tags=tags)
    def add_food_category(request: FoodCategoryRequest) -> SuccessResponse:
        """Add a food category to a restaurant.

        Returns 409 if the restaurant already has a category with this name.
        """
        service: FoodCategoryService = app.state.category_service
        service.add_food_category(request)
        logger.info("Food category added successfully")
        return SuccessResponse(message=service.messages.add_success)

    @app.delete("/foodCategories/delete/{category_id}", response_model=SuccessResponse, tags=tags)
    def delete_food_category(category_id: int) -> SuccessResponse:
        service: FoodCategoryService = app.state.category_service
        service.delete_food_category(category_id)
        return SuccessResponse(message=service.messages.delete_success)

    @app.get(
        "/foodCategories/restaurant/{restaurant_id}",
        response_model=list[FoodCategoryResponse],
        tags=tags,
    )
    def get_categories_by_restaurant(restaurant_id: int) -> list[FoodCategoryResponse]:
        categories: list[FoodCategoryResponse] = (
            app.state.category_service.get_all_categories_by_restaurant_id(restaurant_id)
        )
        return categories

    @app.get("/foodCategories/{category_id}", response_model=FoodCategoryResponse, tags=tags)
    def get_food_category(category_id: int) -> FoodCategoryResponse:
        category: FoodCategoryResponse = app.state.category_service.get_food_category_by_id(category_id)
        return category

    @app.put("/foodCategories/{category_id}/name", response_model=FoodCategoryResponse, tags=tags)
    async def update_category_name(category_id: int, request: Request) -> FoodCategoryResponse:
        """Rename a category.

        The new name is the raw text body. A JSON body of the form
        ``{"category_name": ...}`` is also accepted.
        """
        logger.info(f"Request to rename food category {category_id}")
        new_name = _read_category_name(request.headers.get("content-type", ""), await request.body())
        category: FoodCategoryResponse = await run_in_threadpool(
            app.state.category_service.update_category_name, category_id, new_name
        )
        return category


def _read_category_name(content_type: str, body: bytes) -> str:
    if content_type.startswith("application/json"):
        try:
            return CategoryNameUpdate.model_validate_json(body).category_name
        except ValidationError as e:
            raise RequestValidationError(e.errors(include_url=False)) from e

    try:
        new_name = body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise RequestValidationError(
            [{"type": "unicode_error", "loc": ("body",), "msg": "Body must be UTF-8 text", "input": None}]
        ) from e

    if not new_name:
        raise RequestValidationError([{"type": "missing", "loc": ("body",), "msg": "Field required", "input": None}])
    return new_name


def _register_menu_routes(app: FastAPI) -> None:
    tags = ["Food Items"]

    @app.post("/foodItems/add", response_model=SuccessResponse, status_code=201, tags=tags)
    def add_food_item(request: MenuItemRequest) -> SuccessResponse:
        """Add a menu item. Upload its image afterwards with PUT /foodItems/{id}/image."""
        service: RestaurantMenuService = app.state.menu_service
        service.add_food_item(request)
        return SuccessResponse(message=service.messages.add_success)

    @app.get(
        "/foodItems/getFoodItems/{restaurant_id}",
        response_model=list[MenuItemResponse],
        tags=tags,
    )
    def get_food_items_by_restaurant(restaurant_id: int) -> list[MenuItemResponse]:
        items: list[MenuItemResponse] = app.state.menu_service.get_food_items_by_restaurant_id(
            restaurant_id
        )
        return items

    @app.get("/foodItems/category/{category_id}", response_model=list[MenuItemResponse], tags=tags)
    def get_food_items_by_category(category_id: int) -> list[MenuItemResponse]:
        items: list[MenuItemResponse] = app.state.menu_service.get_food_items_by_category_id(category_id)
        return items

    @app.get("/foodItems/{item_id}", response_model=MenuItemResponse, tags=tags)
    def get_food_item(item_id: int) -> MenuItemResponse:
        item: MenuItemResponse = app.state.menu_service.get_food_item_by_id(item_id)
        return item

    @app.put("/foodItems/update/{item_id}", response_model=MenuItemResponse, tags=tags)
    def update_food_item(item_id: int, request: MenuItemRequest) -> MenuItemResponse:
        item: MenuItemResponse = app.state.menu_service.update_food_item(item_id, request)
        return item

    @app.delete("/foodItems/delete/{item_id}", response_model=SuccessResponse, tags=tags)
    def delete_food_item(item_id: int) -> SuccessResponse:
        service: RestaurantMenuService = app.state.menu_service
        service.delete_food_item(item_id)
        return SuccessResponse(message=service.messages.delete_success)

    @app.get("/foodItems/{item_id}/image", tags=tags)
    def get_food_item_image(item_id: int) -> Response:
        image: bytes = app.state.menu_service.get_food_item_image(item_id)
        return Response(content=image, media_type="image/jpeg")

    @app.put("/foodItems/{item_id}/image", response_model=MenuItemResponse, tags=tags)
    async def upload_food_item_image(item_id: int, request: Request) -> MenuItemResponse:
        """Replace the item's image with the raw request body."""
        image = await request.body()
        item: MenuItemResponse = await run_in_threadpool(
            app.state.menu_service.update_food_item_image, item_id, image
        )
        return item


def _register_restaurant_routes(app: FastAPI) -> None:
    tags = ["Restaurants"]

    @app.post("/restaurants/add", response_model=SuccessResponse, status_code=201, tags=tags)
    def add_restaurant(request: RestaurantRequest) -> SuccessResponse:
        service: RestaurantService = app.state.restaurant_service
        service.add_restaurant(request)
        return SuccessResponse(message=service.messages.add_success)

    @app.get("/restaurants/user/{user_id}", response_model=list[RestaurantResponse], tags=tags)
    def get_restaurants_by_user(user_id: int) -> list[RestaurantResponse]:
        restaurants: list[RestaurantResponse] = app.state.restaurant_service.get_restaurants_by_user_id(
            user_id
        )
        return restaurants

    @app.get("/restaurants/{restaurant_id}", response_model=RestaurantResponse, tags=tags)
    def get_restaurant(restaurant_id: int) -> RestaurantResponse:
        restaurant: RestaurantResponse = app.state.restaurant_service.get_restaurant_by_id(restaurant_id)
        return restaurant

    @app.put("/restaurants/update/{restaurant_id}", response_model=RestaurantResponse, tags=tags)
    def update_restaurant(restaurant_id: int, request: RestaurantRequest) -> RestaurantResponse:
        restaurant: RestaurantResponse = app.state.restaurant_service.update_restaurant(
            restaurant_id, request
        )
        return restaurant

    @app.delete("/restaurants/delete/{restaurant_id}", response_model=SuccessResponse, tags=tags)
    def delete_restaurant(restaurant_id: int) -> SuccessResponse:
        service: RestaurantService = app.state.restaurant_service
        service.delete_restaurant(restaurant_id)
        return SuccessResponse(message=service.messages.delete_success)

    @app.get("/restaurants/{restaurant_id}/image", tags=tags)
    def get_restaurant_image(restaurant_id: int) -> Response:
        image: bytes = app.state.restaurant_service.get_restaurant_image(restaurant_id)
        return Response(content=image, media_type="image/jpeg")

    @app.put("/restaurants/{restaurant_id}/image", response_model=RestaurantResponse, tags=tags)
    async def upload_restaurant_image(restaurant_id: int, request: Request) -> RestaurantResponse:
        image = await request.body()
        restaurant: RestaurantResponse = await run_in_threadpool(
            app.state.restaurant_service.update_restaurant_image, restaurant_id, image
        )
        return restaurant


def _register_user_routes(app: FastAPI) -> None:
    tags = ["Users"]

    @app.post("/users/add", response_model=SuccessResponse, status_code=201, tags=tags)
    def add_user(request: UserRequest) -> SuccessResponse:
        """Register a user. Returns 409 if the email is already registered."""
        service: UserService = app.state.user_service
        service.add_user(request)
        return SuccessResponse(message=service.messages.add_success)

    @app.get("/users/", response_model=list[UserResponse], tags=tags)
    def get_all_users() -> list[UserResponse]:
        users: list[UserResponse] = app.state.user_service.get_all_users()
        return users

    @app.get("/users/{user_id}", response_model=UserResponse, tags=tags)
    def get_user(user_id: int) -> UserResponse:
        user: UserResponse = app.state.user_service.get_user_by_id(user_id)
        return user

    @app.put("/users/update/{user_id}", response_model=UserResponse, tags=tags)
    def update_user(user_id: int, request: UserRequest) -> UserResponse:
        user: UserResponse = app.state.user_service.update_user(user_id, request)
        return user

    @app.put("/users/{user_id}/wallet", response_model=UserResponse, tags=tags)
    def update_wallet(user_id: int, update: WalletUpdate) -> UserResponse:
        user: UserResponse = app.state.user_service.update_wallet(user_id, update.wallet)
        return user

    @app.delete("/users/delete/{user_id}", response_model=SuccessResponse, tags=tags)
    def delete_user(user_id: int) -> SuccessResponse:
        service: UserService = app.state.user_service
        service.delete_user(user_id)
        return SuccessResponse(message=service.messages.delete_success)


def _register_address_routes(app: FastAPI) -> None:
    tags = ["Addresses"]

    @app.post("/addresses/add", response_model=SuccessResponse, status_code=201, tags=tags)
    def add_address(request: AddressRequest) -> SuccessResponse:
        service: AddressService = app.state.address_service
        service.add_address(request)
        return SuccessResponse(message=service.messages.add_success)

    @app.get("/addresses/user/{user_id}", response_model=list[AddressResponse], tags=tags)
    def get_addresses_by_user(user_id: int) -> list[AddressResponse]:
        addresses: list[AddressResponse] = app.state.address_service.get_addresses_by_user_id(user_id)
        return addresses

    @app.get("/addresses/{address_id}", response_model=AddressResponse, tags=tags)
    def get_address(address_id: int) -> AddressResponse:
        address: AddressResponse = app.state.address_service.get_address_by_id(address_id)
        return address

    @app.put("/addresses/update/{address_id}", response_model=AddressResponse, tags=tags)
    def update_address(address_id: int, request: AddressRequest) -> AddressResponse:
        address: AddressResponse = app.state.address_service.update_address(address_id, request)
        return address

    @app.delete("/addresses/delete/{address_id}", response_model=SuccessResponse, tags=tags)
    def delete_address(address_id: int) -> SuccessResponse:
        service: AddressService = app.state.address_service
        service.delete_address(address_id)
        return SuccessResponse(message=service.messages.delete_success)
