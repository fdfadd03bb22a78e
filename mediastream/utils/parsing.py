"""Shared parsing utilities for playlist lines."""

import re
from typing import Dict, Optional, Tuple

# key="value" pairs; keys can't contain whitespace, '=' or '"'
ATTRIBUTE_REGEX = re.compile(r'([^\s="]+)="(.*?)"')

# Plain float literal: no whitespace, no digit-group underscores
DURATION_REGEX = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def parse_attributes(text: str) -> Dict[str, str]:
    """Extract all quoted ``key="value"`` pairs from a text fragment.

    Pairs are collected left to right. A key seen more than once keeps
    the value of its last occurrence. Anything that doesn't match the
    pattern (bare tokens, unquoted values, ``="value"`` without a key)
    is skipped.

    Args:
        text: Arbitrary text, typically the tail of a directive line

    Returns:
        Mapping of attribute name to raw value

    Examples:
        >>> parse_attributes('tvg-id="a" group-title="News"')
        {'tvg-id': 'a', 'group-title': 'News'}

        >>> parse_attributes('A="1" A="2"')
        {'A': '2'}

        >>> parse_attributes('no pairs here')
        {}
    """
    result: Dict[str, str] = {}
    for match in ATTRIBUTE_REGEX.finditer(text):
        result[match.group(1)] = match.group(2)
    return result


def split_directive(line: str) -> Tuple[str, Optional[str]]:
    """Split a directive line into its name and optional value.

    The leading ``#`` is dropped from the name. The value is ``None`` when
    the line has no ``:`` at all, and ``""`` when nothing follows it.

    Examples:
        >>> split_directive("#EXT-X-VERSION:6")
        ('EXT-X-VERSION', '6')

        >>> split_directive("#EXT-X-ENDLIST")
        ('EXT-X-ENDLIST', None)

        >>> split_directive("#EXTGRP:")
        ('EXTGRP', '')
    """
    key, sep, value = line.partition(":")
    key = key[1:] if key.startswith("#") else key
    return key, (value if sep else None)


def parse_duration(token: str) -> float:
    """Parse an ``#EXTINF`` duration token.

    Stricter than ``float()``: surrounding whitespace and ``_`` digit
    separators are rejected.

    Raises:
        ValueError: The token isn't a plain float literal

    Examples:
        >>> parse_duration("6.006")
        6.006

        >>> parse_duration("-1")
        -1.0
    """
    if not DURATION_REGEX.fullmatch(token):
        raise ValueError(f"Not a duration: {token!r}")
    return float(token)
