"""Command line entry point for mpcbrowse."""

from __future__ import annotations

import argparse
import logging
import sys

from mpcbrowse.backend import CommandActionInvoker, CommandRowProvider
from mpcbrowse.browser import Browser
from mpcbrowse.config import LOG_FILE_ENV, Config
from mpcbrowse.decoder import KeyDecoder
from mpcbrowse.errors import BrowseError
from mpcbrowse.state import DEFAULT_MESSAGE_TTL, BrowserState
from mpcbrowse.terminal import ProcessTerminal

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mpcbrowse",
        description="Full-screen terminal browser for the MPD song list",
    )
    parser.add_argument(
        "--list-command",
        help="Command that prints one row per line (default: 'mpc listall')",
    )
    parser.add_argument(
        "--play-command",
        help="Command run with the 1-based row number appended (default: 'mpc play')",
    )
    parser.add_argument(
        "--message-ttl",
        type=float,
        default=DEFAULT_MESSAGE_TTL,
        help=f"Seconds a status message stays visible (default: {DEFAULT_MESSAGE_TTL:g})",
    )
    parser.add_argument(
        "--status-label",
        default="songs",
        help="Noun shown after the row count in the status bar",
    )
    parser.add_argument(
        "--log-file",
        help=f"Write a debug log to this file (or set {LOG_FILE_ENV})",
    )
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["debug", "info", "warning", "error"],
    )
    return parser.parse_args(argv)


def configure_logging(config: Config) -> None:
    # stdout and stderr belong to the full-screen UI, so only log to a file.
    if not config.log_file:
        return
    logging.basicConfig(
        filename=config.log_file,
        level=getattr(logging, config.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run(config: Config, terminal: ProcessTerminal) -> None:
    terminal.enable()
    rows, columns = terminal.query_size()
    logger.info("terminal is %dx%d", rows, columns)

    state = BrowserState.for_terminal_size(
        rows,
        columns,
        message_ttl=config.message_ttl,
        status_label=config.status_label,
    )
    browser = Browser(
        state,
        terminal,
        KeyDecoder(terminal),
        CommandRowProvider(config.list_command),
        CommandActionInvoker(config.play_command),
    )
    browser.open()
    browser.run()


def main(argv: list[str] | None = None) -> int:
    config = Config.from_args(parse_args(argv))
    configure_logging(config)

    terminal = ProcessTerminal()
    try:
        run(config, terminal)
    except BrowseError as exc:
        logger.error("fatal: %s", exc, exc_info=True)
        terminal.reset_screen()
        try:
            terminal.disable()
        except BrowseError:
            logger.error("could not restore terminal attributes", exc_info=True)
        print(f"mpcbrowse: {exc}", file=sys.stderr)
        return 1
    return 0
