"""Utilities for word games."""

from __future__ import annotations


def is_palindrome_naive(s: str) -> bool:
    """Compare UTF-8 bytes at each character start with their mirror byte.

    This first attempt is case sensitive, counts punctuation and spaces,
    and mishandles multi-byte characters.
    """
    data = s.encode("utf-8")
    last = len(data) - 1
    offset = 0
    for ch in s:
        if data[offset] != data[last - offset]:
            return False
        offset += len(ch.encode("utf-8"))
    return True


def is_palindrome(s: str) -> bool:
    """Report whether ``s`` reads the same both ways, ignoring case and non-letters."""
    letters = [ch.lower() for ch in s if ch.isalpha()]
    return letters == letters[::-1]