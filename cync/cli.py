"""Command-line entry point that prints clipboard changes as they happen."""

from __future__ import annotations

import argparse
import time
from typing import Optional, Sequence

from cync.watcher import Watcher


def on_clipboard_change(content: str) -> None:
    """Print the new clipboard content between banner lines."""
    print("\n--- Clipboard Changed! ---", flush=True)
    print(content, flush=True)
    print("--------------------------", flush=True)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Watch the clipboard until interrupted."""
    parser = argparse.ArgumentParser(
        prog="cync", description="Print clipboard contents whenever they change."
    )
    parser.parse_args(argv)

    with Watcher() as watcher:
        watcher.start(on_clipboard_change)
        print("Clipboard watcher started. Monitoring for changes...")
        print("Try copying something to your clipboard.")
        print("(Press Ctrl+C to exit)", flush=True)
        try:
            while True:
                time.sleep(60)
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())