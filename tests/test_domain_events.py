from core.events.domain_events import DomainEvents
from core.events.signal import Signal


def test_domain_event_signal_connect_emit_disconnect():
    events = DomainEvents()
    seen: list[tuple[str, ...]] = []

    def _handler(ids: tuple[str, ...]) -> None:
        seen.append(ids)

    events.budgets_changed.connect(_handler)
    events.budgets_changed.emit(("b1",))
    events.budgets_changed.disconnect(_handler)
    events.budgets_changed.emit(("b2",))

    assert seen == [("b1",)]


def test_registries_are_isolated():
    first, second = DomainEvents(), DomainEvents()
    first.reports_changed.connect(lambda _id: None)

    assert len(first.reports_changed) == 1
    assert len(second.reports_changed) == 0
    assert [s.name for s in first.signals()] == [
        "budgets_changed",
        "projects_changed",
        "reports_changed",
        "selection_changed",
        "simulation_ticked",
    ]


def test_signal_emit_prunes_deleted_qt_like_callbacks():
    signal: Signal[str] = Signal()
    seen: list[str] = []

    class _DeletedQtObjectCallback:
        def __init__(self) -> None:
            self.calls = 0

        def __call__(self, _payload: str) -> None:
            self.calls += 1
            raise RuntimeError("Internal C++ object (PySide6.QtCore.QObject) already deleted.")

    deleted = _DeletedQtObjectCallback()

    def _ok(payload: str) -> None:
        seen.append(payload)

    signal.connect(deleted)
    signal.connect(_ok)

    signal.emit("tick-1")
    signal.emit("tick-2")

    assert deleted.calls == 1
    assert seen == ["tick-1", "tick-2"]


def test_signal_emit_keeps_non_deleted_runtime_errors_visible():
    signal: Signal[str] = Signal()

    def _boom(_payload: str) -> None:
        raise RuntimeError("boom")

    signal.connect(_boom)

    try:
        signal.emit("x")
        assert False, "Expected RuntimeError to propagate"
    except RuntimeError as exc:
        assert str(exc) == "boom"


def test_disconnect_all():
    signal: Signal[int] = Signal("n")
    signal.connect(lambda _n: None)
    signal.disconnect_all()
    assert len(signal) == 0
