"""Skills API router - list, detail, create, partial update and delete endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from skills_api.database import get_db
from skills_api.schemas.common import ErrorResponse
from skills_api.schemas.skill import Skill, SkillCreate, SkillMutation, SkillUpdate
from skills_api.services.skill_service import SkillService

router = APIRouter(prefix="/skills", tags=["Skills"])

_NOT_FOUND = {404: {"model": ErrorResponse}}
_INVALID = {400: {"model": ErrorResponse}}
_STORE = {500: {"model": ErrorResponse}}


@router.get("", response_model=list[Skill], responses=_STORE)
def list_skills(db: Session = Depends(get_db)) -> list[Skill]:
    """
    List all skills.

    Returns:
        Skills ordered by id.
    """
    return SkillService(db).list_skills()


@router.get("/{skill_id}", response_model=Skill, responses={**_NOT_FOUND, **_STORE})
def get_skill(skill_id: str, db: Session = Depends(get_db)) -> Skill:
    """Get a single skill."""
    return SkillService(db).get_skill(skill_id)


@router.post(
    "", status_code=201, response_model=SkillMutation, responses={**_INVALID, **_STORE}
)
def create_skill(payload: SkillCreate, db: Session = Depends(get_db)) -> SkillMutation:
    """
    Create a skill.

    Raises:
        ValidationError: If a field is missing or ``level`` is outside 0-100.
    """
    skill = SkillService(db).create_skill(payload)
    return SkillMutation(message="Skill created successfully", data=skill)


@router.put(
    "/{skill_id}",
    response_model=SkillMutation,
    responses={**_INVALID, **_NOT_FOUND, **_STORE},
)
def update_skill(
    skill_id: str,
    payload: SkillUpdate,
    db: Session = Depends(get_db),
) -> SkillMutation:
    """
    Update the name and/or level of a skill.

    Fields left out of the body keep their stored values.

    Raises:
        ValidationError: If neither field is given or ``level`` is outside 0-100.
        NotFoundError: If the skill does not exist.
    """
    skill = SkillService(db).update_skill(skill_id, payload)
    return SkillMutation(message="Skill updated successfully", data=skill)


@router.delete(
    "/{skill_id}", response_model=SkillMutation, responses={**_NOT_FOUND, **_STORE}
)
def delete_skill(skill_id: str, db: Session = Depends(get_db)) -> SkillMutation:
    """Delete a skill and return its last stored values."""
    skill = SkillService(db).delete_skill(skill_id)
    return SkillMutation(message="Skill deleted successfully", data=skill)
