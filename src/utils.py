"""Shared utilities for vueindex."""

from __future__ import annotations

from pathlib import PurePosixPath

_QUOTES = ("'", '"', "`")


def unquote_string(text: str) -> str:
    """Strip one pair of matching quotes from `text`.

    Examples:
        >>> unquote_string('"my-button"')
        'my-button'
        >>> unquote_string("'x'")
        'x'
        >>> unquote_string("plain")
        'plain'
    """
    if len(text) >= 2 and text[0] in _QUOTES and text[-1] == text[0]:
        return text[1:-1]
    if text and text[0] in _QUOTES:
        # unterminated literal
        return text[1:]
    return text


def name_without_extension(file_name: str) -> str:
    """Return a file's base name with its last extension removed.

    Examples:
        >>> name_without_extension("components/TodoItem.vue")
        'TodoItem'
        >>> name_without_extension("app.component.vue")
        'app.component'
        >>> name_without_extension(".vue")
        ''
    """
    base = PurePosixPath(file_name.replace("\\", "/")).name
    dot = base.rfind(".")
    if dot < 0:
        return base
    return base[:dot]
