"""Shared counter service: one process-wide integer, two teams, a short history."""

from .codec import parse_cookie_header, parse_form_body, parse_pairs, percent_decode, percent_encode
from .config import CounterSettings
from .counter import AtomicCounter
from .errors import ConfigError, CounterError, InvalidFormError
from .events import Action, Event, EventLog
from .server import create_app
from .service import ApplyResult, CounterService, CounterView, Intent, SetupView
from .session import (
    Session,
    Team,
    is_cookie_safe,
    resolve_session,
    session_cookies,
    session_from_cookies,
)

__all__ = [
    # Codec
    "percent_encode",
    "percent_decode",
    "parse_pairs",
    "parse_cookie_header",
    "parse_form_body",
    # Sessions
    "Session",
    "Team",
    "resolve_session",
    "is_cookie_safe",
    "session_from_cookies",
    "session_cookies",
    # Counter and history
    "AtomicCounter",
    "Action",
    "Event",
    "EventLog",
    # Orchestration
    "CounterService",
    "ApplyResult",
    "Intent",
    "SetupView",
    "CounterView",
    # Errors
    "CounterError",
    "InvalidFormError",
    "ConfigError",
    # Application
    "CounterSettings",
    "create_app",
]
