"""
Out module for the script engine: a text sink exposed to scripts as ``out``.
"""

import sys
from collections.abc import Callable
from typing import IO


def make_out_writer(stream: IO[str] | None = None) -> Callable[[str], None]:
    """
    Build the host side of ``out``: write(text).
    With no stream, sys.stdout is looked up on every write so redirection is honoured.
    """

    def write(text: str) -> None:
        target = stream if stream is not None else sys.stdout
        target.write(text)
        target.flush()

    return write
