"""mpcbrowse: full-screen terminal browser for a list of text rows."""

import logging

# Browser
from mpcbrowse.browser import Browser

# Configuration
from mpcbrowse.config import Config

# Key decoding
from mpcbrowse.decoder import KeyDecoder
from mpcbrowse.keybindings import ARROW_SEQUENCES, DEFAULT_KEYBINDINGS
from mpcbrowse.keys import Key, KeyEvent

# Errors
from mpcbrowse.errors import BackendError, BrowseError, TerminalError

# External programs
from mpcbrowse.backend import (
    ActionInvoker,
    CommandActionInvoker,
    CommandRowProvider,
    RowProvider,
)

# Rendering
from mpcbrowse.output_buffer import OutputBuffer
from mpcbrowse.renderer import Renderer

# Prompt and search
from mpcbrowse.prompt import PromptEngine, PromptObserver
from mpcbrowse.search import make_search_observer, search

# State
from mpcbrowse.rows import Row, RowStore
from mpcbrowse.state import BrowserState, StatusMessage
from mpcbrowse.viewport import (
    CursorPosition,
    ScreenGeometry,
    ViewportOffset,
    move_cursor,
    move_page,
    recompute,
)

# Terminal
from mpcbrowse.terminal import ProcessTerminal, Terminal

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ARROW_SEQUENCES",
    "ActionInvoker",
    "BackendError",
    "Browser",
    "BrowseError",
    "BrowserState",
    "CommandActionInvoker",
    "CommandRowProvider",
    "Config",
    "CursorPosition",
    "DEFAULT_KEYBINDINGS",
    "Key",
    "KeyDecoder",
    "KeyEvent",
    "OutputBuffer",
    "ProcessTerminal",
    "PromptEngine",
    "PromptObserver",
    "Renderer",
    "Row",
    "RowProvider",
    "RowStore",
    "ScreenGeometry",
    "StatusMessage",
    "Terminal",
    "TerminalError",
    "ViewportOffset",
    "make_search_observer",
    "move_cursor",
    "move_page",
    "recompute",
    "search",
]
