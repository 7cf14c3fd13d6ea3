"""Client-held sessions: a name and a team carried in two cookies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .codec import parse_cookie_header, percent_decode, percent_encode

NAME_COOKIE = "name"
TEAM_COOKIE = "team"
DEFAULT_MAX_AGE = 3600


class Team(str, Enum):
    PLUS = "plus"
    MINUS = "minus"


@dataclass(frozen=True)
class Session:
    """Identity reconstructed from the request cookies."""

    name: str
    team: str

    @property
    def team_enum(self) -> Team | None:
        """The recognised team, or None for any other cookie value."""
        try:
            return Team(self.team)
        except ValueError:
            return None

    @property
    def increments(self) -> bool:
        # Only "plus" increments; every other non-empty team decrements.
        return self.team == Team.PLUS.value


def resolve_session(cookie_header: str | None) -> tuple[str, str, bool]:
    """Extract ``(name, team, ok)`` from a raw Cookie header.

    ``name`` is percent-decoded, ``team`` is returned raw. ``ok`` is true
    only when both are non-empty.
    """
    cookies = parse_cookie_header(cookie_header)
    name = percent_decode(cookies.get(NAME_COOKIE, ""))
    team = cookies.get(TEAM_COOKIE, "")
    return name, team, bool(name and team)


def session_from_cookies(cookie_header: str | None) -> Session | None:
    name, team, ok = resolve_session(cookie_header)
    if not ok:
        return None
    return Session(name=name, team=team)


def is_cookie_safe(value: str) -> bool:
    """True when ``value`` can go into a Set-Cookie header without escaping."""
    try:
        return percent_encode(value) == value
    except UnicodeEncodeError:
        return False


def session_cookies(name: str, team: str, max_age: int = DEFAULT_MAX_AGE) -> list[str]:
    """Build the two ``Set-Cookie`` header values that establish a session."""
    attributes = f"Path=/; Max-Age={max_age}"
    return [
        f"{NAME_COOKIE}={percent_encode(name)}; {attributes}",
        f"{TEAM_COOKIE}={team}; {attributes}",
    ]
