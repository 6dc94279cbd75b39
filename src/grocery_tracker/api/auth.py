"""HTTP Basic authentication for gated routes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

if TYPE_CHECKING:
    from grocery_tracker.containers import AppContainer

logger = logging.getLogger(__name__)

_basic = HTTPBasic(auto_error=False)


def require_user(
    request: Request,
    credentials: HTTPBasicCredentials | None = Depends(_basic),
) -> str:
    """Ensure requests carry a user:password pair known to the verifier.

    The authenticated username is stored on ``request.state.user``.
    """
    container: AppContainer = request.app.state.container
    if credentials is None or not container.credential_verifier.verify(
        credentials.username, credentials.password
    ):
        logger.info("Rejected credentials for %s", request.url.path)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": 'Basic realm="api"'},
        )
    request.state.user = credentials.username
    return credentials.username
