"""Message sink protocol."""

from typing import Protocol


class MessageSink(Protocol):
    """Anything that accepts account message lines."""

    def write(self, message: str) -> None: ...
