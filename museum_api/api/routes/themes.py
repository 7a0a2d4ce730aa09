"""Themes Route: full theme listing.

Invariants:
    - Method-agnostic: any HTTP method returns the listing
    - Store failure surfaces as 500 with the underlying failure text
"""

from fastapi import APIRouter, Depends

from museum_api.api.dependencies import get_repository
from museum_api.api.routes import AnyMethodRoute
from museum_api.core.repository_protocols import ExhibitRepository
from museum_api.schemas.exhibit import ThemeOut

router = APIRouter(
    prefix="/api", tags=["themes"], route_class=AnyMethodRoute,
)


@router.get("/themes", response_model=list[ThemeOut])
async def list_themes(repo: ExhibitRepository = Depends(get_repository)):
    """Every theme, null descriptions as ""."""
    return await repo.get_all_themes()
