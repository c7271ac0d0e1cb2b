"""Error message formatting for driver load failures.

Import and filesystem errors often carry their useful detail on attributes
(``ImportError.name``/``path``, ``OSError.filename``) rather than in str(),
so the message shown for a failed attempt is built from both.
"""

from __future__ import annotations


def _detail(e: BaseException) -> str:
    message = str(e)
    if message:
        return message
    if isinstance(e, ImportError) and e.name:
        return f"cannot import '{e.name}'"
    if isinstance(e, OSError) and e.filename:
        return f"{e.strerror or 'cannot access'}: {e.filename}"
    return "(no additional details)"


def format_error_message(e: BaseException) -> str:
    """Format an exception as ``Type: detail``, never empty.

    Import errors raised while loading from a file also name that file.

    Examples:
        >>> format_error_message(ModuleNotFoundError(name="psycopg2"))
        "ModuleNotFoundError: cannot import 'psycopg2'"

        >>> format_error_message(ImportError("bad magic number", path="/vendor/pg.pyc"))
        'ImportError: bad magic number (from /vendor/pg.pyc)'
    """
    message = f"{type(e).__name__}: {_detail(e)}"
    if isinstance(e, ImportError) and e.path and e.path not in message:
        message += f" (from {e.path})"
    return message
