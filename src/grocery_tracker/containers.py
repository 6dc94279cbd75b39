"""Dependency container wiring for the application."""

from dataclasses import dataclass

from grocery_tracker.config import Settings, parse_credentials
from grocery_tracker.services.auth import CredentialStore, CredentialVerifier
from grocery_tracker.services.store import GroceryItemStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: GroceryItemStore
    credential_verifier: CredentialVerifier


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store = GroceryItemStore(max_id=resolved_settings.max_food_id)
    credential_store = CredentialStore.from_plaintext(
        parse_credentials(resolved_settings.api_credentials)
    )
    return AppContainer(
        settings=resolved_settings,
        store=store,
        credential_verifier=credential_store,
    )
