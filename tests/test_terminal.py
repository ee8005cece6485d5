import sys

import pytest

from flowkit import terminal


@pytest.fixture
def unix(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")


@pytest.fixture
def windows(monkeypatch):
    monkeypatch.setattr(sys, "platform", "win32")


@pytest.mark.parametrize(
    "func, code",
    [
        (terminal.red, "\033[31m"),
        (terminal.green, "\033[32m"),
        (terminal.magenta, "\033[35m"),
        (terminal.bold, "\033[1m"),
        (terminal.italic, "\033[3m"),
    ],
)
def test_colors_wrap_message_on_unix(unix, func, code):
    assert func("hello") == f"{code}hello\033[0m"


@pytest.mark.parametrize(
    "func",
    [terminal.red, terminal.green, terminal.magenta, terminal.bold, terminal.italic],
)
def test_colors_are_plain_on_windows(windows, func):
    assert func("hello") == "hello"


@pytest.mark.parametrize(
    "func, symbol",
    [
        (terminal.error_emoji, "❌"),
        (terminal.try_emoji, "🙏"),
        (terminal.warning_emoji, "❗ "),
        (terminal.save_emoji, "💾"),
        (terminal.stop_emoji, "🔴️"),
        (terminal.go_emoji, "🟢"),
        (terminal.ok_emoji, "✅"),
        (terminal.success_emoji, "🎉"),
    ],
)
def test_emoji_on_unix(unix, func, symbol):
    assert func() == symbol


@pytest.mark.parametrize(
    "func",
    [
        terminal.error_emoji,
        terminal.try_emoji,
        terminal.warning_emoji,
        terminal.save_emoji,
        terminal.stop_emoji,
        terminal.go_emoji,
        terminal.ok_emoji,
        terminal.success_emoji,
    ],
)
def test_emoji_empty_on_windows(windows, func):
    assert func() == ""