"""ORM Models: SQLAlchemy declarative models for the exhibit schema.

Invariants:
    - All models inherit from Base (db/base.py)
    - Table and column names match the persisted schema exactly (THEME_ID, ...)

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before create_all
      and alembic autogenerate
"""

from museum_api.models.theme import Theme  # noqa: F401
from museum_api.models.item import Item  # noqa: F401
from museum_api.models.quiz import Quiz  # noqa: F401
from museum_api.models.recipient import Recipient  # noqa: F401
