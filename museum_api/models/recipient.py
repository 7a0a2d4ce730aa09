"""Recipient ORM: write-only record of an email registered against a Theme.

Invariants:
    - RECV_DATE / RECV_TIME are assigned by the store at insert time
    - No uniqueness: duplicate (THEME_ID, EMAIL) registrations are accepted
    - Never read back by the API

Design Decisions:
    - The table has no primary key constraint. The mapper identity spans all
      four columns so the ORM can load rows (tests) without adding a column.
"""

from datetime import date, time

from sqlalchemy import String, Date, Time
from sqlalchemy.orm import Mapped, mapped_column

from museum_api.db.base import Base


class Recipient(Base):
    """Recipient entity."""
    __tablename__ = "Recipient"

    theme_id: Mapped[str] = mapped_column(
        "THEME_ID", String(50), nullable=False,
    )
    email: Mapped[str] = mapped_column("EMAIL", String(320), nullable=False)
    recv_date: Mapped[date] = mapped_column("RECV_DATE", Date, nullable=False)
    recv_time: Mapped[time] = mapped_column("RECV_TIME", Time, nullable=False)

    __mapper_args__ = {
        "primary_key": [theme_id, email, recv_date, recv_time],
    }
