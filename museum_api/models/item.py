"""Item ORM: a single exhibit/location belonging to a Theme.

Invariants:
    - Always belongs to a Theme (THEME_ID FK, enforced by the store)
    - Ordered within a theme by ITEM_SEQ ascending
    - Narration text and coordinates are nullable; surfaced as "" / 0.0

Design Decisions:
    - Composite identity (THEME_ID, ITEM_SEQ): the table has no surrogate key
"""

from sqlalchemy import String, Text, Integer, Float, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from museum_api.db.base import Base


class Item(Base):
    """Item entity: exhibit with child/general narration and a coordinate."""
    __tablename__ = "Item"

    theme_id: Mapped[str] = mapped_column(
        "THEME_ID", String(50), ForeignKey("Theme.THEME_ID"), primary_key=True,
    )
    item_seq: Mapped[int] = mapped_column(
        "ITEM_SEQ", Integer, primary_key=True, autoincrement=False,
    )
    item_name: Mapped[str] = mapped_column(
        "ITEM_NAME", String(200), nullable=False,
    )
    item_desc: Mapped[str | None] = mapped_column(
        "ITEM_DESC", Text, nullable=True,
    )
    script_child: Mapped[str | None] = mapped_column(
        "SCRIPT_CHILD", Text, nullable=True,
    )
    script_general: Mapped[str | None] = mapped_column(
        "SCRIPT_GENERAL", Text, nullable=True,
    )
    latitude: Mapped[float | None] = mapped_column(
        "LATITUDE", Float, nullable=True,
    )
    longitude: Mapped[float | None] = mapped_column(
        "LONGITUDE", Float, nullable=True,
    )
