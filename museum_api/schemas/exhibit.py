"""Exhibit Schemas: Pydantic models for the exhibit API boundary.

Invariants:
    - Response models never carry None: nullable columns arrive already
      coalesced to "" / 0.0 from the repository query
    - RecipientCreate rejects missing or empty theme_id / email

Design Decisions:
    - Separate from ORM models: schemas are the JSON contract, models are persistence
    - from_attributes: rows from select() map directly via model_validate
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ThemeOut(BaseModel):
    """A Theme as returned by GET /api/themes."""
    model_config = ConfigDict(from_attributes=True)

    theme_id: str
    theme_name: str
    theme_desc: str = ""


class ItemOut(BaseModel):
    """An Item as returned by GET /api/items and GET /api/data."""
    model_config = ConfigDict(from_attributes=True)

    theme_id: str
    item_seq: int
    item_name: str
    item_desc: str = ""
    script_child: str = ""
    script_general: str = ""
    latitude: float = 0.0
    longitude: float = 0.0


class QuizOut(BaseModel):
    """A Quiz as returned by GET /api/quizzes."""
    model_config = ConfigDict(from_attributes=True)

    theme_id: str
    quiz_no: int
    question: str
    answer: str
    options: str = ""
    quiz_desc: str = ""


class RecipientCreate(BaseModel):
    """POST /api/recipient body."""
    theme_id: str = Field(min_length=1)
    email: str = Field(min_length=1)


class RecipientAck(BaseModel):
    """Fixed acknowledgement for a stored registration."""
    message: Literal["success"] = "success"
