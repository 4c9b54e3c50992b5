"""Command-line entry point: encrypt or decrypt a file with a password.

    tdescrypt -e -i notes.txt -o notes.enc -p secret
    tdescrypt -d -i notes.enc -o notes.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from tdescrypt.core.exceptions import InvalidPaddingError, TdesCryptError, UsageError
from tdescrypt.core.models import CHUNK_SIZE, Direction
from tdescrypt.security.crypto import decrypt_file_stream, encrypt_file_stream

from .context import build_context
from .logging_config import configure_logging


logger = logging.getLogger(__name__)


class _Parser(argparse.ArgumentParser):
    # bad options go through the same usage / exit 1 path as missing ones
    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="tdescrypt",
        description="Encrypt or decrypt a file with 3DES-CBC using a key derived from a password.",
    )
    # -e and -d share one destination, the last one given wins
    parser.add_argument("-e", "--encrypt", dest="direction", action="store_const", const=Direction.SEAL.value,
                        help="encrypt the file")
    parser.add_argument("-d", "--decrypt", dest="direction", action="store_const", const=Direction.OPEN.value,
                        help="decrypt the file")
    parser.add_argument("-i", "--input", default=None, help="input file")
    parser.add_argument("-o", "--output", default=None, help="output file")
    parser.add_argument("-p", "--password", default=None,
                        help="password for encryption or decryption (prompted for if omitted)")
    parser.add_argument("--chunk-size", type=int, default=CHUNK_SIZE, help="read size in bytes")
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress to stderr")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()

    try:
        ctx = build_context(parser.parse_args(argv))
    except UsageError as e:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: {e}", file=sys.stderr)
        return 1

    configure_logging(ctx.log_level)

    run = encrypt_file_stream if ctx.direction is Direction.SEAL else decrypt_file_stream
    try:
        run(str(ctx.input_path), str(ctx.output_path), ctx.password, chunk_size=ctx.chunk_size)
    except InvalidPaddingError:
        print("Error occurred: decryption failed", file=sys.stderr)
        return 1
    except TdesCryptError as e:
        logger.debug("run failed", exc_info=True)
        print(f"Error occurred: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
