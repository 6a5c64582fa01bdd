"""Per-document configuration state machine."""

from __future__ import annotations

from enum import Enum, auto
import logging

logger = logging.getLogger(__name__)


class BufferState(Enum):
    UNRESOLVED = auto()
    RESOLVING = auto()
    ACTIVE = auto()
    DISABLED = auto()


class BufferEvent(Enum):
    REQUEST = auto()
    ENABLED = auto()
    DISABLED = auto()
    FAILED = auto()
    INVALIDATE = auto()


_TRANSITIONS = {
    BufferState.UNRESOLVED: {
        BufferEvent.REQUEST: BufferState.RESOLVING,
        BufferEvent.INVALIDATE: BufferState.UNRESOLVED,
    },
    BufferState.RESOLVING: {
        BufferEvent.ENABLED: BufferState.ACTIVE,
        BufferEvent.DISABLED: BufferState.DISABLED,
        BufferEvent.FAILED: BufferState.UNRESOLVED,
        BufferEvent.INVALIDATE: BufferState.UNRESOLVED,
    },
    BufferState.ACTIVE: {
        BufferEvent.INVALIDATE: BufferState.UNRESOLVED,
    },
    # Terminal until invalidated
    BufferState.DISABLED: {
        BufferEvent.INVALIDATE: BufferState.UNRESOLVED,
    },
}


class BufferStateMachine:
    def __init__(self):
        self.state = BufferState.UNRESOLVED

    def transition(self, event: BufferEvent) -> BufferState:
        allowed = _TRANSITIONS[self.state]
        if event not in allowed:
            logger.warning("Ignoring %s while %s", event.name, self.state.name)
            return self.state
        self.state = allowed[event]
        return self.state
