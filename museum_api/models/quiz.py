"""Quiz ORM: a question/answer unit belonging to a Theme.

Invariants:
    - Always belongs to a Theme (THEME_ID FK)
    - Ordered within a theme by QUIZ_NO ascending
    - OPTIONS is a free-form string (e.g. a serialized list), never parsed here
"""

from sqlalchemy import String, Text, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from museum_api.db.base import Base


class Quiz(Base):
    """Quiz entity."""
    __tablename__ = "Quiz"

    theme_id: Mapped[str] = mapped_column(
        "THEME_ID", String(50), ForeignKey("Theme.THEME_ID"), primary_key=True,
    )
    quiz_no: Mapped[int] = mapped_column(
        "QUIZ_NO", Integer, primary_key=True, autoincrement=False,
    )
    question: Mapped[str] = mapped_column("QUESTION", Text, nullable=False)
    answer: Mapped[str] = mapped_column("ANSWER", Text, nullable=False)
    options: Mapped[str | None] = mapped_column("OPTIONS", Text, nullable=True)
    quiz_desc: Mapped[str | None] = mapped_column(
        "QUIZ_DESC", Text, nullable=True,
    )
