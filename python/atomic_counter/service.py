"""Request orchestration for the shared counter.

``CounterService`` owns the counter and the event log. One instance is built
at startup and handed to every request handler; the handlers only translate
HTTP in and out of :meth:`CounterService.render` and
:meth:`CounterService.apply`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .codec import parse_form_body, percent_decode
from .counter import AtomicCounter
from .errors import ConfigError, InvalidFormError
from .events import Action, Event, EventLog
from .logger import get_logger
from .session import (
    DEFAULT_MAX_AGE,
    Team,
    is_cookie_safe,
    session_cookies,
    session_from_cookies,
)

logger = get_logger(__name__)

ACTION_FIELD = "perform_action"
HOME_LOCATION = "/"


@dataclass(frozen=True)
class SetupView:
    """Shown when the request carries no usable session."""


@dataclass(frozen=True)
class CounterView:
    name: str
    team: str
    value: int
    events: list[Event] = field(default_factory=list)

    @property
    def increments(self) -> bool:
        return self.team == Team.PLUS.value


class Intent(str, Enum):
    IDENTIFY = "identify"
    ACT = "act"


@dataclass(frozen=True)
class ApplyResult:
    """Outcome of a POST. Both intents redirect back to the counter page."""

    intent: Intent
    location: str = HOME_LOCATION
    cookies: list[str] = field(default_factory=list)
    event: Event | None = None

    @property
    def status_code(self) -> int:
        return 302


class CounterService:
    """Shared counter, its event history and the two request entry points."""

    def __init__(
        self,
        counter: AtomicCounter | None = None,
        events: EventLog | None = None,
        *,
        history_size: int | None = None,
        session_max_age: int = DEFAULT_MAX_AGE,
    ):
        if events is not None and history_size is not None:
            raise ConfigError("Pass either events or history_size, not both")
        if events is None:
            if history_size is not None and history_size <= 0:
                raise ConfigError(f"history_size must be positive, got {history_size}")
            events = EventLog(history_size) if history_size else EventLog()
        self._counter = counter or AtomicCounter()
        self._events = events
        self._session_max_age = session_max_age

    @property
    def value(self) -> int:
        return self._counter.value

    def events(self) -> list[Event]:
        return self._events.snapshot()

    def render(self, cookie_header: str | None) -> SetupView | CounterView:
        """Build the view model for ``GET /``. Never mutates state."""
        session = session_from_cookies(cookie_header)
        if session is None:
            return SetupView()
        return CounterView(
            name=session.name,
            team=session.team,
            value=self._counter.value,
            events=self._events.snapshot(),
        )

    def apply(self, body: str | None, cookie_header: str | None) -> ApplyResult:
        """Handle ``POST /``.

        The presence of ``perform_action`` selects the Act branch regardless of
        other fields. Otherwise a non-empty ``name`` and ``team`` select
        Identify. Anything else raises :class:`InvalidFormError`.
        """
        form = parse_form_body(body)

        if ACTION_FIELD in form:
            return ApplyResult(intent=Intent.ACT, event=self._act(cookie_header))

        name = percent_decode(form.get("name", ""))
        team = form.get("team", "")
        if name and team:
            # The team cookie is written raw, so it must not need escaping.
            if not is_cookie_safe(team):
                logger.warning("Rejected identity with unsafe team value: %r", team)
                raise InvalidFormError()
            logger.info("Session issued for name=%r team=%r", name, team)
            return ApplyResult(
                intent=Intent.IDENTIFY,
                cookies=session_cookies(name, team, self._session_max_age),
            )

        logger.warning("Rejected form without action or identity: %r", body)
        raise InvalidFormError()

    def _act(self, cookie_header: str | None) -> Event | None:
        session = session_from_cookies(cookie_header)
        if session is None:
            logger.debug("Ignoring action from request without session cookies")
            return None

        if session.increments:
            value = self._counter.increment()
            action = Action.INCREMENT
        else:
            value = self._counter.decrement()
            action = Action.DECREMENT

        event = self._events.record(session.name, action, value)
        logger.info("%s by %r -> %d", action.value, session.name, value)
        return event
