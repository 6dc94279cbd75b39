"""Shared test fixtures."""

from datetime import UTC, datetime

import pytest
from fastapi.testclient import TestClient

from grocery_tracker.api.app import create_app
from grocery_tracker.config import Settings
from grocery_tracker.containers import AppContainer
from grocery_tracker.domain.models import Nutrition
from grocery_tracker.services.auth import CredentialStore
from grocery_tracker.services.store import GroceryItemStore

USERNAME = "joe"
PASSWORD = "1234"


@pytest.fixture
def settings() -> Settings:
    return Settings(api_credentials=f"{USERNAME}:{PASSWORD},mary:5678")


@pytest.fixture
def store() -> GroceryItemStore:
    return GroceryItemStore()


@pytest.fixture
def nutrition() -> Nutrition:
    return Nutrition(calories=95, protein=0.5, carbohydrates=25.0, fat=0.3, fiber=4.4)


@pytest.fixture
def expiration() -> datetime:
    return datetime(2020, 12, 1, 9, 30, tzinfo=UTC)


@pytest.fixture
def container(settings: Settings, store: GroceryItemStore) -> AppContainer:
    return AppContainer(
        settings=settings,
        store=store,
        credential_verifier=CredentialStore.from_plaintext(
            {USERNAME: PASSWORD, "mary": "5678"}
        ),
    )


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container), raise_server_exceptions=False)


@pytest.fixture
def auth() -> tuple[str, str]:
    return (USERNAME, PASSWORD)


def food_payload(**overrides: object) -> dict[str, object]:
    """Return a valid food creation body."""
    payload: dict[str, object] = {
        "name": "Apple pie",
        "description": "Homemade",
        "ingredients": ["Apples", "Flour", "Butter"],
        "expiration": "2020-12-01T10:00:00Z",
        "nutrition": {
            "calories": 237,
            "protein": 1.9,
            "carbohydrates": 34.0,
            "fat": 11.0,
            "fiber": 1.6,
        },
    }
    payload.update(overrides)
    return payload
