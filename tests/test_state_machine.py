from spellscope.core.state_machine import BufferEvent, BufferState, BufferStateMachine


def test_state_machine_active_path():
    sm = BufferStateMachine()
    assert sm.state == BufferState.UNRESOLVED

    sm.transition(BufferEvent.REQUEST)
    assert sm.state == BufferState.RESOLVING

    sm.transition(BufferEvent.ENABLED)
    assert sm.state == BufferState.ACTIVE

    sm.transition(BufferEvent.INVALIDATE)
    assert sm.state == BufferState.UNRESOLVED


def test_state_machine_disabled_is_terminal_until_invalidated():
    sm = BufferStateMachine()
    sm.transition(BufferEvent.REQUEST)
    sm.transition(BufferEvent.DISABLED)
    assert sm.state == BufferState.DISABLED

    sm.transition(BufferEvent.REQUEST)
    sm.transition(BufferEvent.ENABLED)
    assert sm.state == BufferState.DISABLED

    sm.transition(BufferEvent.INVALIDATE)
    assert sm.state == BufferState.UNRESOLVED


def test_state_machine_failed_resolution_returns_to_unresolved():
    sm = BufferStateMachine()
    sm.transition(BufferEvent.REQUEST)
    sm.transition(BufferEvent.FAILED)
    assert sm.state == BufferState.UNRESOLVED


def test_state_machine_logs_invalid_transition(caplog):
    sm = BufferStateMachine()
    sm.transition(BufferEvent.ENABLED)
    assert sm.state == BufferState.UNRESOLVED
    assert "Ignoring ENABLED while UNRESOLVED" in caplog.text
