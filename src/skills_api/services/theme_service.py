"""Theme data-access service."""

from __future__ import annotations

import logging

from sqlalchemy import delete, insert, select, update

from skills_api.errors import NotFoundError, ValidationError
from skills_api.models.theme import Theme
from skills_api.schemas.theme import Theme as ThemeSchema
from skills_api.schemas.theme import ThemeCreate, ThemeUpdate
from skills_api.services.base import BaseService, is_blank, parse_id

logger = logging.getLogger(__name__)

NOT_FOUND = "Theme not found"
NAME_REQUIRED = 'Field "name" is required'


class ThemeService(BaseService):
    """
    Service for reading and writing Theme rows.

    Every write is a single statement with ``RETURNING`` so the caller gets
    the row exactly as the store holds it.
    """

    def list_themes(self) -> list[ThemeSchema]:
        """
        List every theme.

        Returns:
            Themes ordered by ascending id
        """
        with self.store("listing themes"):
            rows = self.db.scalars(select(Theme).order_by(Theme.id)).all()
            return [ThemeSchema.model_validate(row) for row in rows]

    def get_theme(self, theme_id: str | int) -> ThemeSchema:
        """
        Fetch a single theme.

        Args:
            theme_id: Id from the request path

        Returns:
            The matching theme

        Raises:
            NotFoundError: If no theme has this id
        """
        parsed = parse_id(theme_id)
        if parsed is None:
            raise NotFoundError(NOT_FOUND)

        with self.store("fetching a theme"):
            row = self.db.scalars(select(Theme).where(Theme.id == parsed)).first()
            if row is None:
                raise NotFoundError(NOT_FOUND)
            return ThemeSchema.model_validate(row)

    def create_theme(self, payload: ThemeCreate) -> ThemeSchema:
        """
        Insert a new theme.

        Args:
            payload: Request body

        Returns:
            The stored theme including its assigned id

        Raises:
            ValidationError: If ``name`` is missing or blank
        """
        if is_blank(payload.name):
            raise ValidationError(NAME_REQUIRED)

        with self.store("creating a theme"):
            row = self.db.execute(
                insert(Theme).values(name=payload.name).returning(Theme.id, Theme.name)
            ).one()
            theme = ThemeSchema.model_validate(row._asdict())
            self.db.commit()

        logger.info("Created theme %s (%s)", theme.id, theme.name)
        return theme

    def update_theme(self, theme_id: str | int, payload: ThemeUpdate) -> ThemeSchema:
        """
        Rename a theme.

        Args:
            theme_id: Id from the request path
            payload: Request body

        Returns:
            The updated theme

        Raises:
            ValidationError: If ``name`` is missing or blank
            NotFoundError: If no theme has this id
        """
        if is_blank(payload.name):
            raise ValidationError(NAME_REQUIRED)

        parsed = parse_id(theme_id)
        if parsed is None:
            raise NotFoundError(NOT_FOUND)

        with self.store("updating a theme"):
            row = self.db.execute(
                update(Theme)
                .where(Theme.id == parsed)
                .values(name=payload.name)
                .returning(Theme.id, Theme.name)
            ).first()
            if row is None:
                self.db.rollback()
                raise NotFoundError(NOT_FOUND)
            theme = ThemeSchema.model_validate(row._asdict())
            self.db.commit()

        logger.info("Updated theme %s", theme.id)
        return theme

    def delete_theme(self, theme_id: str | int) -> ThemeSchema:
        """
        Delete a theme.

        Skills referencing the theme are left to the store's foreign-key policy.

        Args:
            theme_id: Id from the request path

        Returns:
            The theme as it was before deletion

        Raises:
            NotFoundError: If no theme has this id
        """
        parsed = parse_id(theme_id)
        if parsed is None:
            raise NotFoundError(NOT_FOUND)

        with self.store("deleting a theme"):
            row = self.db.execute(
                delete(Theme).where(Theme.id == parsed).returning(Theme.id, Theme.name)
            ).first()
            if row is None:
                self.db.rollback()
                raise NotFoundError(NOT_FOUND)
            theme = ThemeSchema.model_validate(row._asdict())
            self.db.commit()

        logger.info("Deleted theme %s", theme.id)
        return theme
