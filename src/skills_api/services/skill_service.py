"""Skill data-access service."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import delete, insert, select, update

from skills_api.errors import NotFoundError, ValidationError
from skills_api.models.skill import Skill
from skills_api.schemas.skill import LEVEL_MAX, LEVEL_MIN, SkillCreate, SkillUpdate
from skills_api.schemas.skill import Skill as SkillSchema
from skills_api.services.base import BaseService, is_blank, parse_id

logger = logging.getLogger(__name__)

NOT_FOUND = "Skill not found"
FIELDS_REQUIRED = 'Fields "skill", "level", and "theme_id" are required'
LEVEL_OUT_OF_RANGE = f"Level must be between {LEVEL_MIN} and {LEVEL_MAX}"
NOTHING_TO_UPDATE = 'You must provide at least "skill" or "level"'
SKILL_BLANK = 'Field "skill" cannot be empty'

_COLUMNS = (Skill.id, Skill.skill, Skill.level, Skill.theme_id)


def check_level(level: int) -> None:
    """
    Ensure a proficiency level lies within the accepted range.

    Raises:
        ValidationError: If ``level`` is below 0 or above 100
    """
    if not LEVEL_MIN <= level <= LEVEL_MAX:
        raise ValidationError(LEVEL_OUT_OF_RANGE)


def build_changes(payload: SkillUpdate) -> dict[str, Any]:
    """
    Collect the columns a partial update should touch.

    Fields that are missing or null are left out so the store keeps its
    current value for them.  A ``skill`` that is sent but blank is an error.

    Args:
        payload: Request body

    Returns:
        Mapping of column name to new value, in a stable order

    Raises:
        ValidationError: If ``skill`` is supplied but blank

    Examples:
        >>> build_changes(SkillUpdate(level=50))
        {'level': 50}
    """
    changes: dict[str, Any] = {}
    if payload.skill is not None:
        if is_blank(payload.skill):
            raise ValidationError(SKILL_BLANK)
        changes["skill"] = payload.skill
    if payload.level is not None:
        changes["level"] = payload.level
    return changes


class SkillService(BaseService):
    """Service for reading and writing Skill rows."""

    def list_skills(self) -> list[SkillSchema]:
        """
        List every skill.

        Returns:
            Skills ordered by ascending id
        """
        with self.store("listing skills"):
            rows = self.db.scalars(select(Skill).order_by(Skill.id)).all()
            return [SkillSchema.model_validate(row) for row in rows]

    def get_skill(self, skill_id: str | int) -> SkillSchema:
        """
        Fetch a single skill.

        Raises:
            NotFoundError: If no skill has this id
        """
        parsed = parse_id(skill_id)
        if parsed is None:
            raise NotFoundError(NOT_FOUND)

        with self.store("fetching a skill"):
            row = self.db.scalars(select(Skill).where(Skill.id == parsed)).first()
            if row is None:
                raise NotFoundError(NOT_FOUND)
            return SkillSchema.model_validate(row)

    def create_skill(self, payload: SkillCreate) -> SkillSchema:
        """
        Insert a new skill.

        ``level`` and ``theme_id`` are checked against None, not truthiness,
        so a level of 0 is accepted.

        Args:
            payload: Request body

        Returns:
            The stored skill including its assigned id

        Raises:
            ValidationError: If a field is missing or ``level`` is out of range
        """
        if is_blank(payload.skill) or payload.level is None or payload.theme_id is None:
            raise ValidationError(FIELDS_REQUIRED)
        check_level(payload.level)

        # theme_id is not checked against Themes; the store's FK policy decides
        with self.store("creating a skill"):
            row = self.db.execute(
                insert(Skill)
                .values(skill=payload.skill, level=payload.level, theme_id=payload.theme_id)
                .returning(*_COLUMNS)
            ).one()
            skill = SkillSchema.model_validate(row._asdict())
            self.db.commit()

        logger.info("Created skill %s (%s, level %s)", skill.id, skill.skill, skill.level)
        return skill

    def update_skill(self, skill_id: str | int, payload: SkillUpdate) -> SkillSchema:
        """
        Apply a partial update to a skill.

        Only the supplied fields appear in the SET clause of the single
        UPDATE statement.

        Args:
            skill_id: Id from the request path
            payload: Request body with ``skill`` and/or ``level``

        Returns:
            The updated skill

        Raises:
            ValidationError: If no field is supplied, ``skill`` is blank or
                ``level`` is out of range
            NotFoundError: If no skill has this id
        """
        changes = build_changes(payload)
        if not changes:
            raise ValidationError(NOTHING_TO_UPDATE)
        if "level" in changes:
            check_level(changes["level"])

        parsed = parse_id(skill_id)
        if parsed is None:
            raise NotFoundError(NOT_FOUND)

        with self.store("updating a skill"):
            row = self.db.execute(
                update(Skill).where(Skill.id == parsed).values(**changes).returning(*_COLUMNS)
            ).first()
            if row is None:
                self.db.rollback()
                raise NotFoundError(NOT_FOUND)
            skill = SkillSchema.model_validate(row._asdict())
            self.db.commit()

        logger.info("Updated skill %s (%s)", skill.id, ", ".join(changes))
        return skill

    def delete_skill(self, skill_id: str | int) -> SkillSchema:
        """
        Delete a skill.

        Returns:
            The skill as it was before deletion

        Raises:
            NotFoundError: If no skill has this id
        """
        parsed = parse_id(skill_id)
        if parsed is None:
            raise NotFoundError(NOT_FOUND)

        with self.store("deleting a skill"):
            row = self.db.execute(
                delete(Skill).where(Skill.id == parsed).returning(*_COLUMNS)
            ).first()
            if row is None:
                self.db.rollback()
                raise NotFoundError(NOT_FOUND)
            skill = SkillSchema.model_validate(row._asdict())
            self.db.commit()

        logger.info("Deleted skill %s", skill.id)
        return skill
