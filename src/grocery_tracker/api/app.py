"""FastAPI application factory."""

import logging
import time
from collections.abc import Awaitable, Callable

from fastapi import Depends, FastAPI, Path, Request, Response
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from grocery_tracker.api.auth import require_user
from grocery_tracker.api.errors import (
    BadRequestError,
    UnsupportedMediaTypeError,
    format_validation_errors,
    register_error_handlers,
)
from grocery_tracker.api.schemas import (
    FoodCreateRequest,
    FoodIdResponse,
    FoodItemResponse,
)
from grocery_tracker.app_logging import configure_logging
from grocery_tracker.containers import AppContainer

JSON_MEDIA_TYPE = "application/json"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Grocery Tracker")
    app.state.container = container
    register_error_handlers(app)

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.info(
                "%s %s %s %.1fms",
                request.method,
                request.url.path,
                status_code,
                elapsed_ms,
            )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/food/", dependencies=[Depends(require_user)])
    async def create_food(request: Request) -> FoodIdResponse:
        """Create a food item from a JSON body and return its id."""
        _require_json(request.headers.get("content-type"))
        body = await request.body()
        try:
            payload = FoodCreateRequest.model_validate_json(body)
        except ValidationError as exc:
            raise BadRequestError(format_validation_errors(exc.errors())) from exc

        state_container: AppContainer = request.app.state.container
        food_id = await run_in_threadpool(
            state_container.store.create,
            payload.name,
            payload.description,
            payload.ingredients,
            payload.expiration,
            payload.nutrition.to_domain(),
        )
        logger.info("Created food %d for user %s", food_id, request.state.user)
        return FoodIdResponse(id=food_id)

    @app.get("/food/")
    def list_foods(request: Request) -> list[FoodItemResponse]:
        """Return every food item in the store."""
        state_container: AppContainer = request.app.state.container
        return FoodItemResponse.from_domain_list(state_container.store.list_all())

    @app.delete("/food/")
    def delete_all_foods(request: Request) -> Response:
        """Delete every food item in the store."""
        state_container: AppContainer = request.app.state.container
        state_container.store.delete_all()
        return Response()

    @app.get("/food/{food_id}")
    def get_food(request: Request, food_id: int = Path(ge=0)) -> FoodItemResponse:
        """Return a single food item by id."""
        state_container: AppContainer = request.app.state.container
        return FoodItemResponse.from_domain(state_container.store.get(food_id))

    @app.delete("/food/{food_id}")
    def delete_food(request: Request, food_id: int = Path(ge=0)) -> Response:
        """Delete a single food item by id."""
        state_container: AppContainer = request.app.state.container
        state_container.store.delete(food_id)
        return Response()

    @app.get("/ing/{ingredient}")
    def foods_by_ingredient(
        request: Request, ingredient: str
    ) -> list[FoodItemResponse]:
        """Return food items containing the exact ingredient."""
        state_container: AppContainer = request.app.state.container
        return FoodItemResponse.from_domain_list(
            state_container.store.find_by_ingredient(ingredient)
        )

    @app.get("/exp/{year}/{month}/{day}")
    def foods_by_expiration(
        request: Request,
        year: int,
        day: int,
        month: int = Path(ge=1, le=12),
    ) -> list[FoodItemResponse]:
        """Return food items expiring on the given calendar date."""
        state_container: AppContainer = request.app.state.container
        return FoodItemResponse.from_domain_list(
            state_container.store.find_by_expiration_date(year, month, day)
        )

    return app


def _require_json(content_type: str | None) -> None:
    """Reject request bodies that are not declared as JSON."""
    if not content_type:
        raise BadRequestError("missing Content-Type header")
    media_type = content_type.split(";", maxsplit=1)[0].strip().lower()
    if not media_type or "/" not in media_type:
        raise BadRequestError(f"malformed Content-Type {content_type!r}")
    if media_type != JSON_MEDIA_TYPE:
        raise UnsupportedMediaTypeError(f"expect {JSON_MEDIA_TYPE} Content-Type")
