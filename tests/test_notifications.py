"""
Tests for the token-guarded notification banner
"""
from codereg.core.notifications import Notifier


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def test_tokens_increase():
    """Each post gets a larger token"""
    notifier = Notifier(clock=FakeClock())
    first = notifier.post("one")
    second = notifier.post("two", "success")
    assert second.token > first.token
    assert notifier.current() == second


def test_expires_after_ttl():
    """Banner disappears once ttl has elapsed"""
    clock = FakeClock()
    notifier = Notifier(ttl=3.0, clock=clock)
    notifier.post("hello")

    clock.now += 2.9
    assert notifier.current().message == "hello"
    clock.now += 0.1
    assert notifier.current() is None


def test_clear_matching_token():
    notifier = Notifier(clock=FakeClock())
    shown = notifier.post("hello")
    assert notifier.clear(shown.token) is True
    assert notifier.current() is None


def test_stale_clear_keeps_newer_message():
    """An earlier message's timer cannot blank a later message"""
    notifier = Notifier(clock=FakeClock())
    old = notifier.post("first")
    new = notifier.post("second")

    assert notifier.clear(old.token) is False
    assert notifier.current() == new


def test_clear_when_empty():
    notifier = Notifier(clock=FakeClock())
    assert notifier.clear(1) is False


def test_newer_message_gets_full_ttl():
    """A message posted late lives its own ttl"""
    clock = FakeClock()
    notifier = Notifier(ttl=3.0, clock=clock)
    notifier.post("first")
    clock.now += 2.0
    notifier.post("second")
    clock.now += 2.0
    assert notifier.current().message == "second"
