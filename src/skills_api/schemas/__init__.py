"""Pydantic schemas package."""

from skills_api.schemas.common import ErrorResponse
from skills_api.schemas.skill import (
    Skill,
    SkillCreate,
    SkillMutation,
    SkillUpdate,
)
from skills_api.schemas.theme import Theme, ThemeCreate, ThemeMutation, ThemeUpdate

__all__ = [
    "ErrorResponse",
    "Skill",
    "SkillCreate",
    "SkillMutation",
    "SkillUpdate",
    "Theme",
    "ThemeCreate",
    "ThemeMutation",
    "ThemeUpdate",
]
