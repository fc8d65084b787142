"""Output sinks for account messages."""

from account_state.sinks.base import MessageSink
from account_state.sinks.console import ConsoleSink
from account_state.sinks.memory import MemorySink, TeeSink

__all__ = ["ConsoleSink", "MemorySink", "MessageSink", "TeeSink"]
