# player/__init__.py
from .constants import WebPlayerEvent, WebPlayerParam
from .event_parser import EventParser, parse_event
from .models import (
    ErrorEvent,
    NamedEvent,
    PlayerError,
    PlayerEvent,
    PlayerStatus,
    TimeEvent,
    VerificationScriptInfo,
)

__all__ = [
    "EventParser",
    "parse_event",
    "PlayerEvent",
    "TimeEvent",
    "ErrorEvent",
    "NamedEvent",
    "PlayerError",
    "PlayerStatus",
    "VerificationScriptInfo",
    "WebPlayerEvent",
    "WebPlayerParam",
]
