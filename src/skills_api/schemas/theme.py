"""Theme Pydantic schemas."""

from pydantic import BaseModel, ConfigDict


class ThemeCreate(BaseModel):
    """
    Schema for creating a new theme.

    ``name`` is optional here so a missing value is reported by the service
    as a 400 rather than rejected by the framework.
    """

    name: str | None = None


class ThemeUpdate(ThemeCreate):
    """Schema for renaming a theme."""

    pass


class Theme(BaseModel):
    """Complete theme schema with database fields."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class ThemeMutation(BaseModel):
    """Envelope returned by create, update and delete."""

    message: str
    data: Theme
