"""Tests for message sinks."""

import io

import pytest

from account_state.sinks import ConsoleSink, MemorySink, TeeSink


class TestConsoleSink:
    """Tests for ConsoleSink."""

    def test_init_default(self) -> None:
        sink = ConsoleSink()

        assert sink.stream is None
        assert sink.count == 0

    def test_write_to_stdout(self, capsys: pytest.CaptureFixture) -> None:
        sink = ConsoleSink()
        sink.write("Account is already closed!")
        captured = capsys.readouterr()

        assert captured.out == "Account is already closed!\n"
        assert sink.count == 1

    def test_write_to_stream(self) -> None:
        stream = io.StringIO()
        sink = ConsoleSink(stream=stream)
        sink.write("one")
        sink.write("two")

        assert stream.getvalue() == "one\ntwo\n"
        assert sink.count == 2


class TestMemorySink:
    """Tests for MemorySink."""

    def test_collects_messages(self) -> None:
        sink = MemorySink()
        sink.write("a")
        sink.write("b")

        assert sink.messages == ["a", "b"]

    def test_drain_resets(self) -> None:
        sink = MemorySink()
        sink.write("a")

        assert sink.drain() == ["a"]
        assert sink.messages == []


class TestTeeSink:
    """Tests for TeeSink."""

    def test_forwards_in_order(self, capsys: pytest.CaptureFixture) -> None:
        first = MemorySink()
        second = MemorySink()
        tee = TeeSink(first, ConsoleSink(), second)

        tee.write("hello")

        assert first.messages == ["hello"]
        assert second.messages == ["hello"]
        assert capsys.readouterr().out == "hello\n"
