"""Theme database model."""

from sqlalchemy import Column, Integer, String

from skills_api.database import Base


class Theme(Base):
    """
    Theme model representing a named category of skills.

    Attributes:
        id: Primary key
        name: Display name, matched by the board against section headings
    """

    __tablename__ = "Themes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)

    def __repr__(self) -> str:
        """String representation of Theme."""
        return f"<Theme(id={self.id}, name='{self.name}')>"
