# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

from rich.rule import Rule
from rich.text import Text

from ...runtime.console.manager import get_console_manager


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_emoji: bool,
    use_color: bool,
    stderr: bool = False,
) -> None:
    """Render ``msg`` using the shared console for the given preferences.

    Args:
        msg: Message text to print.
        style: Rich style applied when colour output is active.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Flag indicating whether colour output is desired.
        stderr: Route the message to standard error.
    """

    console = get_console_manager().get(color=use_color, emoji=use_emoji, stderr=stderr)
    text = Text(msg)
    if style and use_color:
        text.stylize(style)
    console.print(text)


def section(title: str, *, use_color: bool) -> None:
    """Render a section header delineating console output blocks.

    Args:
        title: Section title displayed to the user.
        use_color: Flag indicating whether colour output is desired.
    """

    console = get_console_manager().get(color=use_color, emoji=False)
    if use_color:
        console.print()
        console.print(Rule(title))
    else:
        console.print(f"\n--- {title} ---")


def info(msg: str, *, use_emoji: bool, use_color: bool = False) -> None:
    """Emit an informational message."""

    prefix = emoji("ℹ️ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="cyan", use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool = False) -> None:
    """Emit a success message."""

    prefix = emoji("✅ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="green", use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool = False, stderr: bool = False) -> None:
    """Emit a warning message.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Flag indicating whether colour output is desired.
        stderr: Route the warning to the diagnostic channel.
    """

    prefix = emoji("⚠️ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="yellow", use_emoji=use_emoji, use_color=use_color, stderr=stderr)


def fail(msg: str, *, use_emoji: bool, use_color: bool = False, stderr: bool = False) -> None:
    """Emit an error message."""

    prefix = emoji("❌ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="red", use_emoji=use_emoji, use_color=use_color, stderr=stderr)
