"""Configuration for the browser entry point."""

from __future__ import annotations

import argparse
import os
import shlex
from dataclasses import dataclass, field

from mpcbrowse.backend import DEFAULT_LIST_COMMAND, DEFAULT_PLAY_COMMAND
from mpcbrowse.state import DEFAULT_MESSAGE_TTL

LOG_FILE_ENV = "MPCBROWSE_LOG_FILE"


@dataclass
class Config:
    """Settings resolved from the command line."""

    list_command: list[str] = field(default_factory=lambda: list(DEFAULT_LIST_COMMAND))
    play_command: list[str] = field(default_factory=lambda: list(DEFAULT_PLAY_COMMAND))
    message_ttl: float = DEFAULT_MESSAGE_TTL
    status_label: str = "songs"
    log_file: str | None = None
    log_level: str = "info"

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> Config:
        config = cls(
            message_ttl=args.message_ttl,
            status_label=args.status_label,
            log_file=args.log_file or os.environ.get(LOG_FILE_ENV) or None,
            log_level=args.log_level,
        )
        if args.list_command:
            config.list_command = shlex.split(args.list_command)
        if args.play_command:
            config.play_command = shlex.split(args.play_command)
        return config
