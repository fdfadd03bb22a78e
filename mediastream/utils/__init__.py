"""Utility functions for mediastream."""

from mediastream.utils.parsing import (
    parse_attributes,
    parse_duration,
    split_directive,
)

__all__ = [
    "parse_attributes",
    "parse_duration",
    "split_directive",
]
