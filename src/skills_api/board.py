"""Terminal skills board.

Fetches themes and skills from the API, groups skills under their theme and
renders one progress bar per skill.  Also submits new skills.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Any

import httpx

from skills_api.config import settings
from skills_api.logging_config import setup_logging

logger = logging.getLogger(__name__)

BAR_WIDTH = 20


class BoardClientError(Exception):
    """Raised when the API rejects or fails a write."""


class BoardClient:
    """
    Thin async client over the Skills and Themes API.

    Reads degrade to an empty list so a broken API never breaks rendering;
    writes raise ``BoardClientError`` so the caller can report them.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: API root (defaults to ``settings.api_url``)
            timeout: Per-request timeout in seconds
            transport: Optional transport, used by tests
        """
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self.transport
        )

    async def _fetch_list(self, path: str) -> list[dict[str, Any]]:
        try:
            async with self._client() as client:
                response = await client.get(path)
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Error fetching %s: %s", path, exc)
            return []
        if not isinstance(data, list):
            logger.error("Error fetching %s: expected a list, got %s", path, type(data).__name__)
            return []
        return data

    async def fetch_skills(self) -> list[dict[str, Any]]:
        """Return every skill, or an empty list if the API is unreachable."""
        return await self._fetch_list("/skills")

    async def fetch_themes(self) -> list[dict[str, Any]]:
        """Return every theme, or an empty list if the API is unreachable."""
        return await self._fetch_list("/themes")

    async def _post(self, path: str, body: dict[str, Any]) -> dict[str, Any]:
        try:
            async with self._client() as client:
                response = await client.post(path, json=body)
        except httpx.HTTPError as exc:
            logger.error("Error posting to %s: %s", path, exc)
            raise BoardClientError(str(exc)) from exc

        if response.is_error:
            try:
                message = response.json().get("error") or response.text
            except ValueError:
                message = response.text
            logger.error("Error posting to %s: %s %s", path, response.status_code, message)
            raise BoardClientError(message)
        return response.json()

    async def create_skill(self, skill: str, level: int, theme_id: int) -> dict[str, Any]:
        """
        Create a skill.

        Returns:
            The ``{message, data}`` envelope from the API

        Raises:
            BoardClientError: If the request fails or is rejected
        """
        return await self._post("/skills", {"skill": skill, "level": level, "theme_id": theme_id})

    async def create_theme(self, name: str) -> dict[str, Any]:
        """
        Create a theme.

        Raises:
            BoardClientError: If the request fails or is rejected
        """
        return await self._post("/themes", {"name": name})


def group_skills_by_theme(
    themes: list[dict[str, Any]], skills: list[dict[str, Any]]
) -> list[tuple[dict[str, Any], list[dict[str, Any]]]]:
    """
    Attach skills to their theme.

    Args:
        themes: Theme rows in display order
        skills: Skill rows

    Returns:
        ``(theme, skills)`` pairs in theme order; skills pointing at an
        unknown theme are dropped

    Examples:
        >>> group_skills_by_theme([{"id": 1, "name": "Backend"}],
        ...                       [{"id": 7, "skill": "Go", "level": 70, "theme_id": 1}])
        [({'id': 1, 'name': 'Backend'}, [{'id': 7, 'skill': 'Go', 'level': 70, 'theme_id': 1}])]
    """
    by_theme: dict[Any, list[dict[str, Any]]] = {}
    for skill in skills:
        by_theme.setdefault(skill.get("theme_id"), []).append(skill)
    return [(theme, by_theme.get(theme.get("id"), [])) for theme in themes]


def render_progress_bar(level: int | None, width: int = BAR_WIDTH) -> str:
    """
    Draw a fixed-width bar for a 0-100 level; a missing level draws empty.

    Examples:
        >>> render_progress_bar(50, width=10)
        '[#####.....]  50%'
    """
    clamped = max(0, min(100, int(level or 0)))
    filled = round(clamped * width / 100)
    return f"[{'#' * filled}{'.' * (width - filled)}] {clamped:>3}%"


def render_board(themes: list[dict[str, Any]], skills: list[dict[str, Any]]) -> str:
    """
    Render the whole board as text.

    Args:
        themes: Theme rows
        skills: Skill rows

    Returns:
        One section per theme with a line per skill
    """
    if not themes:
        return "No themes available."

    groups = group_skills_by_theme(themes, skills)
    name_width = max(
        (len(str(skill.get("skill", ""))) for _, members in groups for skill in members),
        default=0,
    )

    sections: list[str] = []
    for theme, members in groups:
        lines = [str(theme.get("name", ""))]
        if not members:
            lines.append("  (no skills yet)")
        for skill in members:
            label = str(skill.get("skill", "")).ljust(name_width)
            lines.append(f"  {label}  {render_progress_bar(skill.get('level') or 0)}")
        sections.append("\n".join(lines))
    return "\n\n".join(sections)


def render_theme_options(themes: list[dict[str, Any]]) -> str:
    """List themes as ``id  name`` lines for picking a theme id."""
    if not themes:
        return "No themes available."
    return "\n".join(f"{str(theme.get('id')):>4}  {theme.get('name')}" for theme in themes)


async def show_board(client: BoardClient) -> str:
    """Fetch both collections and render them."""
    skills = await client.fetch_skills()
    themes = await client.fetch_themes()
    return render_board(themes, skills)


def validate_new_skill(skill: str, level: int, theme_id: int | None) -> str | None:
    """
    Check a new skill before it is sent.

    Returns:
        A message describing the problem, or None when the input is usable
    """
    if not theme_id:
        return "Please select a theme"
    if not skill.strip():
        return "Please enter a skill name"
    if not 0 <= level <= 100:
        return "Level must be between 0 and 100"
    return None


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(prog="skills-board", description="Show and add skills.")
    parser.add_argument("--api-url", default=None, help="API root (defaults to API_URL)")
    commands = parser.add_subparsers(dest="command")

    commands.add_parser("show", help="Render the skills board (default)")
    commands.add_parser("themes", help="List themes and their ids")

    add = commands.add_parser("add", help="Add a skill and re-render the board")
    add.add_argument("skill", help="Skill name")
    add.add_argument("level", type=int, help="Proficiency from 0 to 100")
    add.add_argument("theme_id", type=int, help="Id of the theme it belongs to")
    return parser


async def main(argv: list[str] | None = None) -> int:
    """
    Run the board CLI.

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    client = BoardClient(base_url=args.api_url)

    if args.command == "themes":
        print(render_theme_options(await client.fetch_themes()))
        return 0

    if args.command == "add":
        problem = validate_new_skill(args.skill, args.level, args.theme_id)
        if problem:
            print(f"❌  {problem}", file=sys.stderr)
            return 1
        try:
            await client.create_skill(args.skill.strip(), args.level, args.theme_id)
        except BoardClientError as exc:
            print(f"❌  Error adding skill: {exc}", file=sys.stderr)
            return 1
        print("✅  Skill added successfully!")
        print()

    print(await show_board(client))
    return 0


def run() -> None:
    """Console script entry point."""
    setup_logging(level="WARNING")
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
