"""Small text helpers."""

from __future__ import annotations


def split(text: str, delims: str = " ") -> list[str]:
    """Split on any of the delimiter characters, dropping empty pieces."""
    tokens: list[str] = []
    current: list[str] = []
    for char in text:
        if char in delims:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        tokens.append("".join(current))
    return tokens