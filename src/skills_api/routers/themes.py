"""Themes API router - list, detail, create, update and delete endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from skills_api.database import get_db
from skills_api.schemas.common import ErrorResponse
from skills_api.schemas.theme import Theme, ThemeCreate, ThemeMutation, ThemeUpdate
from skills_api.services.theme_service import ThemeService

router = APIRouter(prefix="/themes", tags=["Themes"])

_NOT_FOUND = {404: {"model": ErrorResponse}}
_INVALID = {400: {"model": ErrorResponse}}
_STORE = {500: {"model": ErrorResponse}}


@router.get("", response_model=list[Theme], responses=_STORE)
def list_themes(db: Session = Depends(get_db)) -> list[Theme]:
    """
    List all themes.

    Returns:
        Themes ordered by id.
    """
    return ThemeService(db).list_themes()


@router.get("/{theme_id}", response_model=Theme, responses={**_NOT_FOUND, **_STORE})
def get_theme(theme_id: str, db: Session = Depends(get_db)) -> Theme:
    """
    Get a single theme.

    Raises:
        NotFoundError: If the theme does not exist.
    """
    return ThemeService(db).get_theme(theme_id)


@router.post(
    "", status_code=201, response_model=ThemeMutation, responses={**_INVALID, **_STORE}
)
def create_theme(payload: ThemeCreate, db: Session = Depends(get_db)) -> ThemeMutation:
    """
    Create a theme.

    Raises:
        ValidationError: If ``name`` is missing.
    """
    theme = ThemeService(db).create_theme(payload)
    return ThemeMutation(message="Theme created successfully", data=theme)


@router.put(
    "/{theme_id}",
    response_model=ThemeMutation,
    responses={**_INVALID, **_NOT_FOUND, **_STORE},
)
def update_theme(
    theme_id: str,
    payload: ThemeUpdate,
    db: Session = Depends(get_db),
) -> ThemeMutation:
    """
    Rename a theme.

    Raises:
        ValidationError: If ``name`` is missing.
        NotFoundError: If the theme does not exist.
    """
    theme = ThemeService(db).update_theme(theme_id, payload)
    return ThemeMutation(message="Theme updated successfully", data=theme)


@router.delete(
    "/{theme_id}", response_model=ThemeMutation, responses={**_NOT_FOUND, **_STORE}
)
def delete_theme(theme_id: str, db: Session = Depends(get_db)) -> ThemeMutation:
    """
    Delete a theme and return its last stored values.

    Raises:
        NotFoundError: If the theme does not exist.
    """
    theme = ThemeService(db).delete_theme(theme_id)
    return ThemeMutation(message="Theme deleted successfully", data=theme)
