"""Services package."""

from skills_api.services.skill_service import SkillService
from skills_api.services.theme_service import ThemeService

__all__ = ["SkillService", "ThemeService"]
