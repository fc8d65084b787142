"""Console sink for account messages."""

import sys
from typing import TextIO


class ConsoleSink:
    """Print account messages to stdout, one per line."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize console sink.

        Parameters
        ----------
        stream : TextIO | None
            Output stream. Resolved at write time when omitted, so output
            follows any later redirection of ``sys.stdout``.
        """
        self.stream = stream
        self.count = 0

    def write(self, message: str) -> None:
        """Write a single message line."""
        print(message, file=self.stream or sys.stdout)
        self.count += 1
