import threading

from factory_game.command_queue import CommandQueue
from factory_game.events import EventDispatcher, XAxisEvent


def test_pop_all_returns_commands_in_order_and_empties():
    q = CommandQueue()
    ran = []
    for n in range(3):
        q.push(lambda n=n: ran.append(n))
    assert len(q) == 3
    for cmd in q.pop_all():
        cmd()
    assert ran == [0, 1, 2]
    assert len(q) == 0
    assert q.pop_all() == []


def test_pop_is_fifo():
    q = CommandQueue()
    first = lambda: None  # noqa: E731
    second = lambda: None  # noqa: E731
    q.push(first)
    q.push(second)
    assert q.pop() is first
    assert q.pop() is second
    assert len(q) == 0


def test_pop_waits_for_push_from_other_thread():
    q = CommandQueue()
    result = []

    def consumer():
        result.append(q.pop())

    t = threading.Thread(target=consumer)
    t.start()
    cmd = lambda: None  # noqa: E731
    q.push(cmd)
    t.join(timeout=5)
    assert not t.is_alive()
    assert result == [cmd]


def test_push_event_dispatches_when_run():
    q = CommandQueue()
    d = EventDispatcher()
    got = []
    d.subscribe(XAxisEvent, lambda e: got.append(e.val))
    q.push_event(d, XAxisEvent(-1.0))
    assert got == []
    for cmd in q.pop_all():
        cmd()
    assert got == [-1.0]