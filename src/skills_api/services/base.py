"""Shared plumbing for the data-access services."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from skills_api.errors import InternalError
from skills_api.schemas.common import ID_MAX, ID_MIN

logger = logging.getLogger(__name__)

_ID_PATTERN = re.compile(r"-?[0-9]+")


def parse_id(raw: str | int) -> int | None:
    """
    Convert a path id into an integer the store can be queried with.

    Args:
        raw: Id as received in the request path

    Returns:
        The integer id, or None when ``raw`` cannot match any row

    Examples:
        >>> parse_id("42")
        42
        >>> parse_id("abc") is None
        True
        >>> parse_id("0_1") is None
        True
    """
    text = str(raw).strip()
    # ASCII digits only; int() would also take "+1", "0_1" and non-ASCII digits
    if not _ID_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if not ID_MIN <= value <= ID_MAX:
        return None
    return value


def is_blank(value: str | None) -> bool:
    """Return True when a text field is missing or holds only whitespace."""
    return value is None or not value.strip()


class BaseService:
    """Holds the request session and converts store failures."""

    def __init__(self, db: Session) -> None:
        """
        Initialize the service.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    @contextmanager
    def store(self, action: str) -> Iterator[None]:
        """
        Run store work, turning any SQLAlchemy failure into an InternalError.

        The session is rolled back before the error propagates so the
        connection goes back to the pool clean.

        Args:
            action: Short description used in the log line
        """
        try:
            yield
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Store error while %s", action)
            message = str(exc.orig) if getattr(exc, "orig", None) is not None else str(exc)
            raise InternalError(message) from exc
