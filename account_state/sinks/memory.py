"""In-memory sinks for capturing account messages."""

from account_state.sinks.base import MessageSink


class MemorySink:
    """Collect account messages in a list."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def write(self, message: str) -> None:
        self.messages.append(message)

    def drain(self) -> list[str]:
        """Return collected messages and reset the buffer."""
        messages, self.messages = self.messages, []
        return messages


class TeeSink:
    """Forward every message to several sinks in order."""

    def __init__(self, *sinks: MessageSink) -> None:
        self.sinks = sinks

    def write(self, message: str) -> None:
        for sink in self.sinks:
            sink.write(message)
