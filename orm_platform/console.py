"""Shared Rich consoles and styled diagnostic output.

Formatting helpers return ANSI strings so callers can embed them in their
own messages; the ``log_*`` helpers print directly to the shared console.
Colors are dropped when NO_COLOR is set.
"""

from enum import Enum
from io import StringIO
from typing import Any

from pygments.token import Comment
from pygments.token import Keyword
from pygments.token import Literal
from pygments.token import Name
from pygments.token import String
from rich.cells import cell_len
from rich.console import Console
from rich.style import Style
from rich.syntax import ANSISyntaxTheme
from rich.syntax import Syntax
from rich.text import Text

from .utils.error_format import format_error_message

console = Console()
error_console = Console(stderr=True)


class ContentKind(str, Enum):
    """Kinds of content the formatter knows how to highlight."""

    SQL = "sql"
    JSON = "json"
    PLAIN = "plain"


SQL_THEME = ANSISyntaxTheme(
    {
        Keyword: Style(color="bright_blue"),
        Literal: Style(color="bright_blue"),
        String: Style(color="white"),
        Keyword.Type: Style(color="bright_magenta"),
        Name.Builtin: Style(color="bright_magenta"),
        Comment: Style(color="grey50"),
    }
)
JSON_THEME = "ansi_dark"


def _render(text: Text) -> str:
    """Render to an ANSI string without wrapping or a trailing newline."""
    # Wider than the longest line so rich never inserts a break
    width = max((cell_len(line) for line in text.plain.splitlines()), default=0) + 1
    render_console = Console(file=StringIO(), force_terminal=True, color_system="standard", width=max(width, 80))
    with render_console.capture() as capture:
        render_console.print(text, end="", soft_wrap=True, highlight=False)
    return capture.get()


def _highlight(code: str, lexer: str, theme: ANSISyntaxTheme | str) -> Text:
    highlighted = Syntax(code, lexer, theme=theme).highlight(code)
    # Some rich versions append a newline the source did not have
    trailing = len(code) - len(code.rstrip("\n"))
    while len(highlighted.plain) - len(highlighted.plain.rstrip("\n")) > trailing:
        highlighted.right_crop(1)
    return highlighted


def highlight_sql(sql: str) -> str:
    """Highlight a SQL string for terminal display."""
    return _render(_highlight(sql, "sql", SQL_THEME))


def highlight_json(json_text: str) -> str:
    """Highlight a JSON string for terminal display."""
    return _render(_highlight(json_text, "json", JSON_THEME))


def format_content(text: str, kind: ContentKind | str = ContentKind.PLAIN) -> str:
    """Style text according to its content kind."""
    if not isinstance(kind, ContentKind):
        kind = ContentKind(kind.lower())
    if kind is ContentKind.SQL:
        return highlight_sql(text)
    if kind is ContentKind.JSON:
        return highlight_json(text)
    return text


def info(message: Any) -> str:
    return _render(Text(str(message), style="grey50"))


def warn(message: Any) -> str:
    return _render(Text(str(message), style="yellow"))


def error(message: Any) -> str:
    if isinstance(message, BaseException):
        message = format_error_message(message)
    return _render(Text(str(message), style="red"))


def _describe(value: Any) -> Any:
    if isinstance(value, BaseException):
        return format_error_message(value)
    return value


def log_info(prefix: str, value: Any) -> None:
    console.print(Text(prefix, style="grey50 underline"), _describe(value), markup=False)


def log_warn(prefix: str, value: Any) -> None:
    console.print(Text(prefix, style="yellow underline"), _describe(value), markup=False)


def log_error(prefix: str, value: Any) -> None:
    console.print(Text(prefix, style="red underline"), _describe(value), markup=False)


def log(message: str) -> None:
    console.print(Text(message, style="underline"), markup=False)


def log_cmd_err(prefix: str, err: Any = None) -> None:
    """Print a command failure banner, followed by the error on stderr."""
    console.print(Text(prefix, style="black on red"), markup=False)
    if err:
        error_console.print(_describe(err), markup=False)


__all__ = [
    "ContentKind",
    "console",
    "error_console",
    "format_content",
    "highlight_json",
    "highlight_sql",
    "info",
    "warn",
    "error",
    "log",
    "log_info",
    "log_warn",
    "log_error",
    "log_cmd_err",
]
