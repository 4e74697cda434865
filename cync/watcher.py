"""Poll the clipboard in a background thread and report changes."""

from __future__ import annotations

import threading
from typing import Callable, Optional

from cync.clipboard import get_text

ClipboardChangeCallback = Callable[[str], None]


class Watcher:
    """Calls a callback with the new clipboard content whenever it changes."""

    def __init__(
        self,
        read: Optional[Callable[[], str]] = None,
        interval: float = 1.0,
    ) -> None:
        self._read = read if read is not None else get_text
        self._interval = interval
        self._callback: Optional[ClipboardChangeCallback] = None
        self._running = False
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._lock = threading.Lock()

    def start(self, callback: Optional[ClipboardChangeCallback]) -> None:
        """Start watching in a background thread; does nothing if already running."""
        with self._lock:
            if self._running:
                return
            self._callback = callback
            self._running = True
            self._stop_event.clear()
            self._thread = threading.Thread(target=self._watch_loop, daemon=True)
            self._thread.start()

    def stop(self) -> None:
        """Stop watching and wait for the background thread to finish."""
        with self._lock:
            self._running = False
            self._stop_event.set()
            thread = self._thread
            self._thread = None
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def __enter__(self) -> "Watcher":
        return self

    def __exit__(self, *args) -> None:
        self.stop()

    def _watch_loop(self) -> None:
        last_content = self._read()
        while not self._stop_event.wait(self._interval):
            new_content = self._read()
            if new_content != last_content:
                last_content = new_content
                if self._callback is not None:
                    self._callback(last_content)