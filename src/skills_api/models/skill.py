"""Skill database model."""

from sqlalchemy import Column, ForeignKey, Integer, String

from skills_api.database import Base


class Skill(Base):
    """
    Skill model representing a competency and its proficiency level.

    Attributes:
        id: Primary key
        skill: Skill display name
        level: Proficiency from 0 to 100
        theme_id: Foreign key to Themes table
    """

    __tablename__ = "Skills"

    id = Column(Integer, primary_key=True, autoincrement=True)
    skill = Column(String, nullable=False)
    level = Column(Integer, nullable=False)
    theme_id = Column(Integer, ForeignKey("Themes.id"), nullable=False, index=True)

    def __repr__(self) -> str:
        """String representation of Skill."""
        return f"<Skill(id={self.id}, skill='{self.skill}', level={self.level}, theme_id={self.theme_id})>"
