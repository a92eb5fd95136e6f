"""Tests for sealed.output.console module."""

from __future__ import annotations

import pytest

from sealed.output.console import ConsoleProtocol, MockConsole, RichConsole


class TestMockConsole:
    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("It worked!")
        assert console.outputs == ["It worked!"]

    def test_text_joins_lines(self) -> None:
        console = MockConsole()
        console.print("a")
        console.print("b")
        assert console.messages == ["a", "b"]
        assert console.text == "a\nb"

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.print("x")


class TestRichConsole:
    def test_markup_and_emoji_codes_are_verbatim(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().print("[bold]Boj![/bold] :smile: Exception: Gone wrong!")
        out = capsys.readouterr().out
        assert out == "[bold]Boj![/bold] :smile: Exception: Gone wrong!\n"

    def test_tabs_and_trailing_spaces_are_kept(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().print("Boj!\tException: x  ")
        assert capsys.readouterr().out == "Boj!\tException: x  \n"

    def test_long_line_is_not_wrapped(self, capsys: pytest.CaptureFixture[str]) -> None:
        line = ("word " * 60).strip()
        RichConsole().print(line)
        assert capsys.readouterr().out == line + "\n"

    def test_nothing_on_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().print("It worked!")
        assert capsys.readouterr().err == ""
