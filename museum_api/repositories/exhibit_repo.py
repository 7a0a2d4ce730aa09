"""SQL Exhibit Repository: SQLAlchemy implementation of ExhibitRepository.

Invariants:
    - One statement per operation; nothing to roll back across statements
    - Nullable text -> "", nullable coordinates -> 0.0, applied in the query
    - Items ordered by ITEM_SEQ, quizzes by QUIZ_NO, themes by THEME_ID
    - Recipient dates come from the store clock (CURRENT_DATE / CURRENT_TIME)
    - Every SQLAlchemy failure leaves as StoreError
"""

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from museum_api.core.errors import StoreError
from museum_api.infrastructure.database import store_errors
from museum_api.models import Item, Quiz, Recipient, Theme
from museum_api.schemas.exhibit import ItemOut, QuizOut, ThemeOut

_ITEM_COLUMNS = (
    Item.theme_id,
    Item.item_seq,
    Item.item_name,
    func.coalesce(Item.item_desc, "").label("item_desc"),
    func.coalesce(Item.script_child, "").label("script_child"),
    func.coalesce(Item.script_general, "").label("script_general"),
    func.coalesce(Item.latitude, 0.0).label("latitude"),
    func.coalesce(Item.longitude, 0.0).label("longitude"),
)


class SQLExhibitRepository:
    """Exhibit reads and recipient writes over one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def get_all_themes(self) -> list[ThemeOut]:
        query = select(
            Theme.theme_id,
            Theme.theme_name,
            func.coalesce(Theme.theme_desc, "").label("theme_desc"),
        ).order_by(Theme.theme_id)
        with store_errors("get_all_themes"):
            result = await self._db.execute(query)
            return [ThemeOut.model_validate(row) for row in result.all()]

    async def get_items_by_theme(self, theme_id: str) -> list[ItemOut]:
        query = (
            select(*_ITEM_COLUMNS)
            .where(Item.theme_id == theme_id)
            .order_by(Item.item_seq.asc())
        )
        with store_errors("get_items_by_theme"):
            result = await self._db.execute(query)
            return [ItemOut.model_validate(row) for row in result.all()]

    async def get_quizzes_by_theme(self, theme_id: str) -> list[QuizOut]:
        query = (
            select(
                Quiz.theme_id,
                Quiz.quiz_no,
                Quiz.question,
                Quiz.answer,
                func.coalesce(Quiz.options, "").label("options"),
                func.coalesce(Quiz.quiz_desc, "").label("quiz_desc"),
            )
            .where(Quiz.theme_id == theme_id)
            .order_by(Quiz.quiz_no.asc())
        )
        with store_errors("get_quizzes_by_theme"):
            result = await self._db.execute(query)
            return [QuizOut.model_validate(row) for row in result.all()]

    async def add_recipient(self, theme_id: str, email: str) -> None:
        statement = insert(Recipient).values(
            theme_id=theme_id,
            email=email,
            recv_date=func.current_date(),
            recv_time=func.current_time(),
        )
        try:
            with store_errors("add_recipient"):
                await self._db.execute(statement)
                await self._db.commit()
        except StoreError:
            await self._db.rollback()
            raise

    async def get_item_by_seq(self, item_seq: int) -> ItemOut | None:
        query = (
            select(*_ITEM_COLUMNS)
            .where(Item.item_seq == item_seq)
            .order_by(Item.theme_id)
            .limit(1)
        )
        with store_errors("get_item_by_seq"):
            result = await self._db.execute(query)
            row = result.first()
        return ItemOut.model_validate(row) if row else None
