"""Credential verification for the authenticated API routes."""

import hashlib
import hmac
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

_ITERATIONS = 100_000
_SALT_BYTES = 16


def hash_password(password: str, salt: bytes | None = None) -> str:
    """Hash a password with PBKDF2-HMAC-SHA256 as ``salt$hash`` in hex."""
    salt = salt if salt is not None else os.urandom(_SALT_BYTES)
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), salt, _ITERATIONS
    )
    return f"{salt.hex()}${digest.hex()}"


def verify_password(password: str, hashed: str) -> bool:
    """Check a plain password against a stored ``salt$hash`` string."""
    salt_hex, sep, digest_hex = hashed.partition("$")
    if not sep:
        return False
    try:
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(digest_hex)
    except ValueError:
        return False
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), salt, _ITERATIONS
    )
    return hmac.compare_digest(digest, expected)


class CredentialVerifier(Protocol):
    """Interface for validating a user/password pair."""

    def verify(self, user: str, password: str) -> bool:
        """Return true when the password is valid for the user."""


@dataclass
class CredentialStore(CredentialVerifier):
    """In-memory user database holding salted password hashes."""

    _hashes: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_plaintext(cls, credentials: Mapping[str, str]) -> "CredentialStore":
        """Build a store by hashing each user's plain password."""
        return cls({user: hash_password(pw) for user, pw in credentials.items()})

    def __contains__(self, user: object) -> bool:
        return user in self._hashes

    def __len__(self) -> int:
        return len(self._hashes)

    def verify(self, user: str, password: str) -> bool:
        """Verify the user exists and the password matches its hash."""
        hashed = self._hashes.get(user)
        if hashed is None:
            return False
        return verify_password(password, hashed)
