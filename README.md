# cync

`cync` watches the system clipboard and tells you whenever its text changes.

It reaches the clipboard through the usual command-line helpers:

- on Wayland desktops, `wl-paste -n` to read and `wl-copy` to write (from the
  `wl-clipboard` package);
- on Android under Termux, `termux-clipboard-get` and `termux-clipboard-set`
  (from the `termux-api` package).

The Termux helpers are used when Python reports an Android platform or the
`ANDROID_ROOT` environment variable is set; otherwise the Wayland helpers are
used.

If a helper is missing, reads give back an empty string and writes do nothing,
and a `[Cync DEBUG] ... command not found!` message goes to standard error. If
a helper exits with a non-zero status, that status is reported on standard
error too; whatever it printed is still returned.

## Installing

```
pip install .
```

## Running the watcher

```
cync
```

The watcher reads the clipboard once a second. Each time the text differs from
the last text it saw, it prints the new text between two marker lines:

```
--- Clipboard Changed! ---
whatever you just copied
--------------------------
```

Press Ctrl+C to stop it. The command takes no options besides `--help`.

## Using it from Python

Reading and writing the clipboard:

```python
from cync.clipboard import get_text, set_text

set_text("Hello from cync!")
print(get_text())
```

`default_backend()` returns the `ClipboardBackend` chosen for this system
(`WAYLAND` or `TERMUX`). A `ClipboardBackend` holds the command that prints the
clipboard and the command that stores its standard input; it has `get()`,
`set(text)` and `available()`, which is true when both commands are on the
`PATH`. `command_exists(cmd)` tells you whether a single command is on the
`PATH`.

Watching for changes with your own callback:

```python
from cync.clipboard import get_text
from cync.watcher import Watcher

with Watcher(get_text, 1.0) as watcher:
    watcher.start(lambda text: print("new clipboard text:", text))
    input("Press Enter to stop watching\n")
```

`Watcher(read, interval)` calls `read` once on start and then every `interval`
seconds; both arguments are optional and default to `get_text` and one second.
`Watcher.start` runs the polling loop on a background thread; calling it again
while the watcher is running does nothing. `Watcher.stop`, or leaving the
`with` block, ends the loop and waits for the thread to finish.

## What it does not do

- It only reports changes on the machine it runs on; it does not send
  clipboard text to other devices.
- It supports only the Wayland and Termux helpers listed above. There is no
  support for the Windows or X11 clipboards.
- It handles text only, not images or other clipboard formats.

## Running the tests

```
pip install ".[test]"
pytest
```