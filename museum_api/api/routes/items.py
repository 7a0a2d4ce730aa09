"""Items Routes: items of a theme, and single-item lookup by sequence number.

Invariants:
    - /api/items: theme_id required (400 before any store access), ordered by item_seq
    - /api/items: unknown theme -> 200 [] (no 404)
    - /api/items answers any HTTP method; /api/data is GET only
    - /api/data: item_seq (alias id) must be an integer; absent item -> 404
    - /api/data: store failures logged, client gets a generic 500
"""

import logging

from fastapi import APIRouter, Depends, Query

from museum_api.api.dependencies import get_repository, required_theme_id
from museum_api.api.routes import AnyMethodRoute, MuseumRoute
from museum_api.core.errors import (
    ErrorContext, InputValidationError, ItemLookupError,
    ResourceNotFoundError, StoreError,
)
from museum_api.core.repository_protocols import ExhibitRepository
from museum_api.schemas.exhibit import ItemOut

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api", tags=["items"], route_class=MuseumRoute,
)


async def list_items(
    theme_id: str = Depends(required_theme_id),
    repo: ExhibitRepository = Depends(get_repository),
):
    """Items of a theme ordered by sequence number."""
    return await repo.get_items_by_theme(theme_id)


router.add_api_route(
    "/items", list_items, methods=["GET"], response_model=list[ItemOut],
    route_class_override=AnyMethodRoute,
)


@router.get("/data", response_model=ItemOut)
async def get_item(
    item_seq: str | None = Query(None),
    id_: str | None = Query(None, alias="id"),
    repo: ExhibitRepository = Depends(get_repository),
):
    """Single item by sequence number (?item_seq=N or ?id=N)."""
    raw = id_ or item_seq
    if not raw:
        raise InputValidationError(
            "item_seq query parameter is required (e.g. ?item_seq=1)",
            field="item_seq",
        )
    try:
        seq = int(raw)
    except ValueError:
        raise InputValidationError(
            f"item_seq must be an integer, got '{raw}'", field="item_seq",
        )

    try:
        item = await repo.get_item_by_seq(seq)
    except StoreError as e:
        logger.error(
            f"Item lookup failed: {e.message}",
            extra={"error_code": e.code, "operation": e.operation},
        )
        raise ItemLookupError(ErrorContext(path="/api/data")) from e

    if item is None:
        raise ResourceNotFoundError("Item", str(seq))
    return item
