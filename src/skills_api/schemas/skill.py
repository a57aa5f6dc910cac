"""Skill Pydantic schemas."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from skills_api.schemas.common import ID_MAX, ID_MIN

LEVEL_MIN = 0
LEVEL_MAX = 100

# Integer the store can bind; larger JSON numbers are rejected as a 400
StoreId = Annotated[int, Field(ge=ID_MIN, le=ID_MAX)]


class SkillCreate(BaseModel):
    """Schema for creating a new skill."""

    skill: str | None = None
    level: int | None = None
    theme_id: StoreId | None = None


class SkillUpdate(BaseModel):
    """
    Schema for a partial skill update.

    Only ``skill`` and ``level`` can change; any other key in the body,
    ``theme_id`` included, is ignored.  A ``skill`` that is sent but blank
    is rejected rather than skipped.
    """

    skill: str | None = None
    level: int | None = None


class Skill(BaseModel):
    """Complete skill schema with database fields."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    skill: str
    level: int
    theme_id: int


class SkillMutation(BaseModel):
    """Envelope returned by create, update and delete."""

    message: str
    data: Skill
