"""
String helpers.

Public API:
    trim(s)                - strip ASCII space/tab/newline/carriage return
    split(s, delim)        - literal split keeping empty tokens
    starts_with(s, prefix) - exact prefix test
    ends_with(s, suffix)   - exact suffix test

All helpers work on str or bytes.
"""

from pynumerics.text._ops import trim, split, starts_with, ends_with

__all__ = [
    "trim",
    "split",
    "starts_with",
    "ends_with",
]
