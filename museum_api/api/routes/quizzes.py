"""Quizzes Route: quizzes of a theme ordered by quiz number."""

from fastapi import APIRouter, Depends

from museum_api.api.dependencies import get_repository, required_theme_id
from museum_api.api.routes import AnyMethodRoute
from museum_api.core.repository_protocols import ExhibitRepository
from museum_api.schemas.exhibit import QuizOut

router = APIRouter(
    prefix="/api", tags=["quizzes"], route_class=AnyMethodRoute,
)


@router.get("/quizzes", response_model=list[QuizOut])
async def list_quizzes(
    theme_id: str = Depends(required_theme_id),
    repo: ExhibitRepository = Depends(get_repository),
):
    return await repo.get_quizzes_by_theme(theme_id)
