"""
Literal (non-regex, non-locale) string operations.

Each helper accepts ``str`` or ``bytes``; all arguments of one call must
be the same kind. Only the four ASCII characters space, tab, newline and
carriage return count as whitespace for trim().
"""

from __future__ import annotations

from typing import AnyStr

from pynumerics.core.exceptions import ValidationError


_WHITESPACE = " \t\n\r"
_WHITESPACE_BYTES = b" \t\n\r"


def _check_kind(name: str, value: object, like: object | None = None) -> None:
    if not isinstance(value, (str, bytes)):
        raise ValidationError(
            f"{name}: expected str or bytes, got {type(value).__name__}"
        )
    if like is not None and type(value) is not type(like):
        raise ValidationError(
            f"{name}: cannot mix {type(like).__name__} and {type(value).__name__}"
        )


def trim(s: AnyStr) -> AnyStr:
    """
    Strip leading and trailing space, tab, newline and carriage return.

    Other whitespace (form feed, vertical tab, non-ASCII spaces) is kept.
    Returns an empty string if nothing else remains.
    """
    _check_kind('s', s)
    if isinstance(s, bytes):
        return s.strip(_WHITESPACE_BYTES)
    return s.strip(_WHITESPACE)


def split(s: AnyStr, delim: AnyStr) -> list[AnyStr]:
    """
    Split ``s`` on literal occurrences of ``delim``.

    - empty ``s`` gives ``[]``
    - empty ``delim`` gives one token per element of ``s``: one byte each
      for ``bytes``, one code point each for ``str``. Pass ``bytes`` (e.g.
      ``s.encode()``) to split multi-byte UTF-8 text byte by byte.
    - consecutive delimiters give empty tokens, and a trailing delimiter
      gives a trailing empty token

    Joining the tokens with ``delim`` reconstructs ``s``.
    """
    _check_kind('s', s)
    _check_kind('delim', delim, like=s)
    if not s:
        return []
    if not delim:
        # bytes iterate as ints; slice to keep single-byte tokens
        return [s[i:i + 1] for i in range(len(s))]
    return s.split(delim)


def starts_with(s: AnyStr, prefix: AnyStr) -> bool:
    """True if ``s`` begins with ``prefix``; an empty prefix always matches."""
    _check_kind('s', s)
    _check_kind('prefix', prefix, like=s)
    if len(prefix) > len(s):
        return False
    return s[:len(prefix)] == prefix


def ends_with(s: AnyStr, suffix: AnyStr) -> bool:
    """True if ``s`` ends with ``suffix``; an empty suffix always matches."""
    _check_kind('s', s)
    _check_kind('suffix', suffix, like=s)
    if len(suffix) > len(s):
        return False
    return s[len(s) - len(suffix):] == suffix
