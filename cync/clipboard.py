"""Read and write the system clipboard through external command-line tools."""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
from dataclasses import dataclass


def command_exists(cmd: str) -> bool:
    """Return True if ``cmd`` can be found as an executable on the PATH."""
    return shutil.which(cmd) is not None


def _debug(message: str) -> None:
    print(f"[Cync DEBUG] {message}", file=sys.stderr, flush=True)


@dataclass(frozen=True)
class ClipboardBackend:
    """A clipboard reached through one command that prints it and one that stores stdin."""

    get_command: tuple[str, ...]
    set_command: tuple[str, ...]

    def available(self) -> bool:
        """Return True if both the reading and the writing command exist."""
        return command_exists(self.get_command[0]) and command_exists(self.set_command[0])

    def get(self) -> str:
        """Return the clipboard text, or an empty string if it cannot be read."""
        program = self.get_command[0]
        if not command_exists(program):
            _debug(f"{program} command not found!")
            return ""
        try:
            completed = subprocess.run(
                self.get_command, stdout=subprocess.PIPE, check=False
            )
        except OSError:
            return ""
        if completed.returncode != 0:
            _debug(f"{program} exited with error status: {completed.returncode}")
        return completed.stdout.decode("utf-8", errors="replace")

    def set(self, text: str) -> None:
        """Store ``text`` on the clipboard."""
        program = self.set_command[0]
        if not command_exists(program):
            _debug(f"{program} command not found!")
            return
        try:
            completed = subprocess.run(
                self.set_command, input=text.encode("utf-8"), check=False
            )
        except OSError:
            return
        if completed.returncode != 0:
            _debug(f"{program} exited with error status: {completed.returncode}")


WAYLAND = ClipboardBackend(get_command=("wl-paste", "-n"), set_command=("wl-copy",))
TERMUX = ClipboardBackend(
    get_command=("termux-clipboard-get",), set_command=("termux-clipboard-set",)
)


def _on_android() -> bool:
    return hasattr(sys, "getandroidapilevel") or "ANDROID_ROOT" in os.environ


def default_backend() -> ClipboardBackend:
    """Return the clipboard backend suited to the running platform."""
    return TERMUX if _on_android() else WAYLAND


def get_text() -> str:
    """Return the text held on the system clipboard."""
    return default_backend().get()


def set_text(text: str) -> None:
    """Place ``text`` on the system clipboard."""
    default_backend().set(text)