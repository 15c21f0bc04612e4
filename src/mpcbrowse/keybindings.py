"""Fixed single-byte key bindings for the browser."""

from __future__ import annotations

from mpcbrowse.keys import Key, ctrl_key

DEFAULT_KEYBINDINGS: dict[int, str] = {
    ord("q"): Key.quit,
    # Movement
    ord("h"): Key.left,
    ord("j"): Key.down,
    ord("k"): Key.up,
    ord("l"): Key.right,
    ctrl_key("b"): Key.page_up,
    ctrl_key("f"): Key.page_down,
    # Actions
    ord("p"): Key.play,
    ord("/"): Key.search,
}

# Second and third byte of an arrow key sequence (ESC [ X).
ARROW_SEQUENCES: dict[bytes, str] = {
    b"[D": Key.left,
    b"[B": Key.down,
    b"[A": Key.up,
    b"[C": Key.right,
}
