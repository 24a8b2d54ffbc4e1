"""Document lifecycle state machine."""

from .state_machine import (
    TRANSITIONS,
    allowed_events,
    can_transition,
    happy_path,
    replay,
    transition,
)

__all__ = [
    "TRANSITIONS",
    "transition",
    "can_transition",
    "allowed_events",
    "replay",
    "happy_path",
]
