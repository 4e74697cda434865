import queue
import threading
import time

from cync.watcher import Watcher


class FakeClipboard:
    def __init__(self, value=""):
        self._lock = threading.Lock()
        self._value = value
        self.reads = 0
        self.first_read = threading.Event()

    def set(self, value):
        with self._lock:
            self._value = value

    def read(self):
        with self._lock:
            self.reads += 1
            self.first_read.set()
            return self._value


def test_change_triggers_callback():
    clip = FakeClipboard("first")
    changes = queue.Queue()
    with Watcher(read=clip.read, interval=0.01) as watcher:
        watcher.start(changes.put)
        assert clip.first_read.wait(2)
        clip.set("second")
        assert changes.get(timeout=2) == "second"


def test_no_callback_when_unchanged():
    clip = FakeClipboard("same")
    changes = queue.Queue()
    with Watcher(read=clip.read, interval=0.01) as watcher:
        watcher.start(changes.put)
        time.sleep(0.15)
    assert clip.reads > 1
    assert changes.empty()


def test_initial_content_is_not_reported():
    clip = FakeClipboard("already there")
    changes = queue.Queue()
    with Watcher(read=clip.read, interval=0.01) as watcher:
        watcher.start(changes.put)
        assert clip.first_read.wait(2)
        time.sleep(0.05)
    assert changes.empty()


def test_changes_reported_in_order():
    values = iter(["a", "a", "b", "b", "c"])
    last = ["c"]

    def read():
        try:
            last[0] = next(values)
        except StopIteration:
            pass
        return last[0]

    changes = queue.Queue()
    with Watcher(read=read, interval=0.01) as watcher:
        watcher.start(changes.put)
        got = [changes.get(timeout=2), changes.get(timeout=2)]
    assert got == ["b", "c"]


def test_second_start_is_ignored():
    clip = FakeClipboard("x")
    first = queue.Queue()
    second = queue.Queue()
    with Watcher(read=clip.read, interval=0.01) as watcher:
        watcher.start(first.put)
        watcher.start(second.put)
        assert clip.first_read.wait(2)
        clip.set("y")
        assert first.get(timeout=2) == "y"
    assert second.empty()


def test_stop_halts_polling():
    clip = FakeClipboard("x")
    changes = queue.Queue()
    watcher = Watcher(read=clip.read, interval=0.01)
    watcher.start(changes.put)
    assert clip.first_read.wait(2)
    watcher.stop()
    reads_after_stop = clip.reads
    clip.set("changed")
    time.sleep(0.1)
    assert clip.reads == reads_after_stop
    assert changes.empty()


def test_restart_after_stop():
    clip = FakeClipboard("x")
    changes = queue.Queue()
    watcher = Watcher(read=clip.read, interval=0.01)
    watcher.start(changes.put)
    watcher.stop()
    clip.first_read.clear()
    watcher.start(changes.put)
    assert clip.first_read.wait(2)
    clip.set("again")
    try:
        assert changes.get(timeout=2) == "again"
    finally:
        watcher.stop()


def test_none_callback_still_polls():
    clip = FakeClipboard("x")
    with Watcher(read=clip.read, interval=0.01) as watcher:
        watcher.start(None)
        assert clip.first_read.wait(2)
        clip.set("y")
        time.sleep(0.05)
    assert clip.reads > 1