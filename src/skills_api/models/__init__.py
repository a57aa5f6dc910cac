"""Database models package."""

from skills_api.models.skill import Skill
from skills_api.models.theme import Theme

__all__ = ["Skill", "Theme"]
