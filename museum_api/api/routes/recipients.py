"""Recipient Route: registers an email against a theme.

Invariants:
    - POST only; other methods answered 405 by the router (error_handlers.py)
    - Body decoded as JSON whatever the Content-Type header says
    - Malformed JSON / missing or empty fields -> 400 before any store access
    - Store failure is logged with its cause; the client sees a generic 500
    - Duplicate registrations are accepted

Design Decisions:
    - Unlike read routes, write failures never echo store detail to the client
"""

import logging

from fastapi import APIRouter, Depends, status

from museum_api.api.dependencies import get_repository, recipient_body
from museum_api.api.routes import MuseumRoute
from museum_api.core.errors import (
    ErrorContext, RecipientRegistrationError, StoreError,
)
from museum_api.core.repository_protocols import ExhibitRepository
from museum_api.schemas.exhibit import RecipientAck, RecipientCreate

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api", tags=["recipients"], route_class=MuseumRoute,
)


@router.post(
    "/recipient", response_model=RecipientAck,
    status_code=status.HTTP_201_CREATED,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": RecipientCreate.model_json_schema(),
                },
            },
        },
    },
)
async def add_recipient(
    body: RecipientCreate = Depends(recipient_body),
    repo: ExhibitRepository = Depends(get_repository),
):
    """Store one Recipient row with a store-assigned date and time."""
    try:
        await repo.add_recipient(body.theme_id, body.email)
    except StoreError as e:
        logger.error(
            f"Recipient registration failed: {e.message}",
            extra={
                "error_code": e.code,
                "operation": e.operation,
                "theme_id": body.theme_id,
            },
        )
        raise RecipientRegistrationError(
            ErrorContext(path="/api/recipient", theme_id=body.theme_id),
        ) from e
    return RecipientAck()
