"""Boundary Protocols: contracts between the HTTP layer and the store.

Invariants:
    - Routes depend on ExhibitRepository, never on a concrete store
    - Every method is async; awaiting it is the request's cancellable context
    - Failures surface as StoreError (core/errors.py), never as driver exceptions

Design Decisions:
    - Protocol over ABC: structural subtyping, test stubs need no inheritance
"""

from typing import Protocol

from museum_api.schemas.exhibit import ItemOut, QuizOut, ThemeOut


class ExhibitRepository(Protocol):
    """Contract for exhibit content reads and recipient writes."""
    async def get_all_themes(self) -> list[ThemeOut]: ...
    async def get_items_by_theme(self, theme_id: str) -> list[ItemOut]: ...
    async def get_quizzes_by_theme(self, theme_id: str) -> list[QuizOut]: ...
    async def add_recipient(self, theme_id: str, email: str) -> None: ...
    async def get_item_by_seq(self, item_seq: int) -> ItemOut | None: ...
