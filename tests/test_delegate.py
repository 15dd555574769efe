from ponggame.delegate import Delegate


class _Recorder:
    def __init__(self, log, name):
        self.log = log
        self.name = name

    def handle(self, *args):
        self.log.append((self.name, args))


def test_broadcast_calls_in_bind_order_with_args():
    log = []
    first, second = _Recorder(log, "first"), _Recorder(log, "second")
    delegate = Delegate()
    delegate.bind(first, first.handle)
    delegate.bind(second, second.handle)
    assert delegate.is_bound() is True
    delegate.broadcast(1, "x")
    assert log == [("first", (1, "x")), ("second", (1, "x"))]


def test_remove_drops_all_callbacks_of_owner():
    log = []
    owner, other = _Recorder(log, "owner"), _Recorder(log, "other")
    delegate = Delegate()
    delegate.bind(owner, owner.handle)
    delegate.bind(other, other.handle)
    delegate.bind(owner, lambda *a: log.append(("owner-extra", a)))
    delegate.remove(owner)
    delegate.broadcast()
    assert log == [("other", ())]


def test_remove_uses_identity_not_equality():
    log = []
    delegate = Delegate()
    a, b = [], []
    delegate.bind(a, lambda: log.append("a"))
    delegate.bind(b, lambda: log.append("b"))
    delegate.remove(b)
    delegate.broadcast()
    assert log == ["a"]


def test_is_bound_and_clear():
    delegate = Delegate()
    assert delegate.is_bound() is False
    delegate.bind(object(), lambda: None)
    assert delegate.is_bound() is True
    delegate.clear()
    assert delegate.is_bound() is False


def test_listener_removed_during_broadcast_still_runs_once():
    log = []
    delegate = Delegate()
    owner = object()

    def handler():
        log.append("called")
        delegate.remove(owner)

    delegate.bind(owner, handler)
    delegate.broadcast()
    assert delegate.is_bound() is False
    delegate.broadcast()
    assert log == ["called"]