"""Route Dependencies: wires the concrete repository into handlers.

Invariants:
    - Routes receive an ExhibitRepository, never an AsyncSession
    - Tests override get_repository to substitute a stub store
    - Client input is validated before get_repository opens a session
"""

from fastapi import Depends, Query, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from museum_api.core.errors import InputValidationError
from museum_api.core.repository_protocols import ExhibitRepository
from museum_api.infrastructure.database import get_db
from museum_api.repositories.exhibit_repo import SQLExhibitRepository
from museum_api.schemas.exhibit import RecipientCreate


async def get_repository(
    db: AsyncSession = Depends(get_db),
) -> ExhibitRepository:
    return SQLExhibitRepository(db)


def required_theme_id(theme_id: str | None = Query(None)) -> str:
    """theme_id query parameter; missing or empty is a client error.

    Must precede get_repository in route signatures: a rejected request
    opens no database session.
    """
    if not theme_id:
        raise InputValidationError(
            "theme_id query parameter is required", field="theme_id",
        )
    return theme_id


async def recipient_body(request: Request) -> RecipientCreate:
    """Registration body, JSON-decoded regardless of Content-Type.

    Browsers posting a string body send text/plain; the payload is still JSON.
    """
    try:
        return RecipientCreate.model_validate_json(await request.body())
    except ValidationError as e:
        raise RequestValidationError([
            {**err, "loc": ("body", *err["loc"])}
            for err in e.errors(include_url=False)
        ]) from e
