"""Finite state machine governing document lifecycle transitions."""

from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping

from ..middleware.exceptions import IllegalStateTransitionError
from ..models.domain.enums import DocumentEventType, DocumentLifecycleState

State = DocumentLifecycleState
Event = DocumentEventType

# Source state -> accepted event -> target state. Anything missing is rejected.
_TABLE = {
    State.CREATED: {
        Event.SAVE_TO_DATABASE: State.PERSISTING_DATABASE,
        Event.PROCESS_FAILED: State.FAILED,
    },
    State.PERSISTING_DATABASE: {
        Event.SAVE_TO_STORAGE: State.PERSISTING_STORAGE,
        Event.PROCESS_FAILED: State.FAILED,
    },
    State.PERSISTING_STORAGE: {
        Event.SAVE_COMPLETE: State.SAVED,
        Event.PROCESS_FAILED: State.FAILED,
    },
    State.SAVED: {
        Event.PROCESS_START: State.PROCESSING,
        Event.PROCESS_FAILED: State.FAILED,
    },
    State.PROCESSING: {
        Event.PROCESS_COMPLETE: State.PROCESSED,
        Event.PROCESS_FAILED: State.FAILED,
    },
    State.PROCESSED: {
        Event.INDEX_COMPLETE: State.INDEXED,
        Event.PROCESS_FAILED: State.FAILED,
    },
    State.INDEXED: {},  # Terminal state
    State.FAILED: {},  # Terminal state
}

TRANSITIONS: Mapping[State, Mapping[Event, State]] = MappingProxyType(
    {state: MappingProxyType(dict(targets)) for state, targets in _TABLE.items()}
)


def transition(
    state: DocumentLifecycleState, event: DocumentEventType
) -> DocumentLifecycleState:
    """Compute the state that follows ``state`` once ``event`` is applied.

    Pure and deterministic: no side effects, no I/O. Callers are expected to
    serialize events per document.

    Args:
        state: Current lifecycle state of the document
        event: Event type to apply

    Returns:
        The next lifecycle state

    Raises:
        IllegalStateTransitionError: If the event is not accepted in ``state``,
            including any event on a terminal state
    """
    target = TRANSITIONS[state].get(event)
    if target is None:
        raise IllegalStateTransitionError(state, event)
    return target


def can_transition(state: DocumentLifecycleState, event: DocumentEventType) -> bool:
    """Check if ``event`` is accepted in ``state``."""
    return event in TRANSITIONS[state]


def allowed_events(state: DocumentLifecycleState) -> FrozenSet[DocumentEventType]:
    """Events accepted in ``state``; empty for terminal states."""
    return frozenset(TRANSITIONS[state])


def replay(
    events: Iterable[DocumentEventType],
    start: DocumentLifecycleState = DocumentLifecycleState.CREATED,
) -> DocumentLifecycleState:
    """Fold a sequence of event types over ``start``.

    Raises:
        IllegalStateTransitionError: On the first rejected event
    """
    state = start
    for event in events:
        state = transition(state, event)
    return state


def happy_path() -> Dict[DocumentLifecycleState, DocumentLifecycleState]:
    """Successor of each state along non-failure edges."""
    return {
        source: target
        for source, targets in TRANSITIONS.items()
        for event, target in targets.items()
        if event is not DocumentEventType.PROCESS_FAILED
    }
