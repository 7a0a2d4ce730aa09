"""Theme ORM: top-level grouping of exhibit content.

Invariants:
    - THEME_ID is the primary key, assigned out-of-band (no write path in the API)
    - THEME_DESC is nullable; the API surfaces null as ""
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from museum_api.db.base import Base


class Theme(Base):
    """Theme entity: owns Items and Quizzes."""
    __tablename__ = "Theme"

    theme_id: Mapped[str] = mapped_column(
        "THEME_ID", String(50), primary_key=True,
    )
    theme_name: Mapped[str] = mapped_column(
        "THEME_NAME", String(200), nullable=False,
    )
    theme_desc: Mapped[str | None] = mapped_column(
        "THEME_DESC", Text, nullable=True,
    )
