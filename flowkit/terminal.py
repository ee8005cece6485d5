"""Terminal colouring and emoji helpers that degrade to plain text on Windows."""

from __future__ import annotations

import sys

_RED = "\033[31m"
_GREEN = "\033[32m"
_MAGENTA = "\033[35m"
_BOLD = "\033[1m"
_ITALIC = "\033[3m"
_RESET = "\033[0m"


def _plain() -> bool:
    return sys.platform == "win32"


def _paint(msg: str, color: str) -> str:
    if _plain():
        return msg
    return f"{color}{msg}{_RESET}"


def _emoji(symbol: str) -> str:
    return "" if _plain() else symbol


def red(msg: str) -> str:
    """Return ``msg`` coloured red."""
    return _paint(msg, _RED)


def green(msg: str) -> str:
    """Return ``msg`` coloured green."""
    return _paint(msg, _GREEN)


def magenta(msg: str) -> str:
    """Return ``msg`` coloured magenta."""
    return _paint(msg, _MAGENTA)


def bold(msg: str) -> str:
    """Return ``msg`` in bold."""
    return _paint(msg, _BOLD)


def italic(msg: str) -> str:
    """Return ``msg`` in italics."""
    return _paint(msg, _ITALIC)


def error_emoji() -> str:
    return _emoji("❌")


def try_emoji() -> str:
    return _emoji("🙏")


def warning_emoji() -> str:
    return _emoji("❗ ")


def save_emoji() -> str:
    return _emoji("💾")


def stop_emoji() -> str:
    return _emoji("🔴️")


def go_emoji() -> str:
    return _emoji("🟢")


def ok_emoji() -> str:
    return _emoji("✅")


def success_emoji() -> str:
    return _emoji("🎉")