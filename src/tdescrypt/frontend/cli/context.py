"""Small helper to turn parsed command-line arguments into a run context."""

from __future__ import annotations

import argparse
import getpass
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from tdescrypt.core.exceptions import UsageError
from tdescrypt.core.models import CHUNK_SIZE, Direction


@dataclass
class RunContext:
    """Everything one encrypt / decrypt run needs."""

    direction: Direction
    input_path: Path
    output_path: Path
    password: str
    chunk_size: int = CHUNK_SIZE
    log_level: int = logging.WARNING


def build_context(
    args: argparse.Namespace,
    prompt: Optional[Callable[[str], str]] = None,
) -> RunContext:
    """
    Validate parsed arguments and build a RunContext.

    Direction, input and output are required. When no password was passed on
    the command line the user is asked for one with ``prompt`` (getpass by
    default), so it does not end up in the shell history or process list.
    An empty password is allowed; it derives a key like any other.
    """
    if args.direction is None:
        raise UsageError("one of -e or -d is required")
    if not args.input or not args.output:
        raise UsageError("both -i and -o are required")
    if args.chunk_size <= 0:
        raise UsageError("--chunk-size must be positive")

    password = args.password
    if password is None:
        try:
            password = (prompt or getpass.getpass)("Password: ")
        except (EOFError, KeyboardInterrupt) as e:
            raise UsageError("no password given") from e

    return RunContext(
        direction=Direction(args.direction),
        input_path=Path(args.input),
        output_path=Path(args.output),
        password=password,
        chunk_size=args.chunk_size,
        log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )
