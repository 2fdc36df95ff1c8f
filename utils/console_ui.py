"""Console presentation helpers for the RSA demo."""
from __future__ import annotations

import os
import shutil
import sys
from typing import Optional

import colorama
import pyfiglet
from colorama import Fore, Style

__all__ = [
    "init",
    "banner",
    "section",
    "kv",
    "success",
    "warning",
    "error",
    "rule",
    "line",
]

_width = 100
_plain_mode = False
_symbols = {"success": "✓", "warning": "!", "error": "✗"}
_colors = {"success": "", "warning": "", "error": "", "key": ""}


def init(plain: bool = False) -> None:
    """Initialise console helpers; colour is dropped for plain mode, NO_COLOR or non-TTY output."""

    global _width, _plain_mode, _symbols, _colors

    _width = shutil.get_terminal_size(fallback=(100, 24)).columns or 100

    isatty = getattr(sys.stdout, "isatty", None)
    is_tty = bool(isatty()) if callable(isatty) else False
    _plain_mode = plain or bool(os.environ.get("NO_COLOR")) or not is_tty

    if _plain_mode:
        _symbols = {"success": "[OK]", "warning": "[!]", "error": "[X]"}
        _colors = {"success": "", "warning": "", "error": "", "key": ""}
        return

    colorama.init(autoreset=True)
    _symbols = {"success": "✓", "warning": "!", "error": "✗"}
    _colors = {
        "success": Fore.GREEN + Style.BRIGHT,
        "warning": Fore.YELLOW + Style.BRIGHT,
        "error": Fore.RED + Style.BRIGHT,
        "key": Fore.CYAN,
    }


def _apply(style: str, message: str) -> str:
    if not style:
        return message
    return f"{style}{message}{Style.RESET_ALL}"


def rule(char: str = "=", width: Optional[int] = None) -> None:
    """Print a horizontal rule spanning the console width."""

    count = width if width is not None else _width
    print(char * max(1, count))


def banner(title: str) -> None:
    """Display a figlet banner, or a centred heading in plain mode."""

    if _plain_mode:
        print(f"=== {title} ===".center(_width))
        return
    print(pyfiglet.figlet_format(title, width=_width))


def section(title: str) -> None:
    rule("=")
    print(f" {title.upper()}")
    rule("=")


def kv(key: str, value: str) -> None:
    """Print a key-value line."""

    print(f"{_apply(_colors['key'], key)}: {value}")


def _status(kind: str, msg: str) -> None:
    print(_apply(_colors[kind], f"{_symbols[kind]} {msg}"))


def success(msg: str) -> None:
    _status("success", msg)


def warning(msg: str) -> None:
    _status("warning", msg)


def error(msg: str) -> None:
    _status("error", msg)


def line() -> None:
    """Print a thin separator line."""

    rule("-")
