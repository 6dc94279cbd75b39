"""Tests for container wiring."""

from grocery_tracker.config import Settings
from grocery_tracker.containers import build_container


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert container.store.list_all() == []
    assert container.credential_verifier.verify("joe", "1234")
    assert not container.credential_verifier.verify("joe", "5678")


def test_build_container_stores_are_independent(settings: Settings) -> None:
    first = build_container(settings)
    second = build_container(settings)

    assert first.store is not second.store


def test_build_container_applies_id_limit() -> None:
    container = build_container(Settings(max_food_id=5, _env_file=None))

    assert container.store._max_id == 5
