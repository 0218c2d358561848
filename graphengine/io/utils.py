"""Utility functions for the edge-list import/export module.

This module provides helpers for parsing header flags, counts, and edge
weights, and for formatting weights on export.
"""

from __future__ import annotations

import math
import re

_WEIGHT_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


class GraphParseError(ValueError):
    """Raised when edge-list text is malformed."""


def parse_flag(token: str, field: str) -> bool:
    """
    Parse a ``0``/``1`` header flag.

    Parameters
    ----------
    token : str
        Raw token.
    field : str
        Field name used in the error message.

    Returns
    -------
    bool

    Raises
    ------
    GraphParseError
        If the token is anything other than "0" or "1".
    """
    if token == "0":
        return False
    if token == "1":
        return True
    raise GraphParseError(f"Invalid value for {field}: {token!r}. Expected '0' or '1'.")


def parse_count(token: str, field: str) -> int:
    """
    Parse a non-negative integer count.

    Raises
    ------
    GraphParseError
        If the token is not a non-negative integer.
    """
    if not re.fullmatch(r"\d+", token, re.ASCII):
        raise GraphParseError(f"Invalid value for {field}: {token!r}. Expected a non-negative integer.")
    return int(token)


def parse_weight(token: str) -> float:
    """
    Parse an edge weight.

    Accepts plain decimals, the leading-dot shorthand (``.5`` means 0.5),
    signs, and exponents. NaN and infinities are rejected.

    Parameters
    ----------
    token : str
        Raw weight token.

    Returns
    -------
    float
        Parsed weight.

    Raises
    ------
    GraphParseError
        If the token is not a finite decimal number.
    """
    token = token.strip()
    if not _WEIGHT_PATTERN.match(token):
        raise GraphParseError(f"Invalid edge weight: {token!r}")

    weight = float(token)
    if not math.isfinite(weight):
        raise GraphParseError(f"Edge weight out of range: {token!r}")
    return weight


def format_weight(weight: float) -> str:
    """Format a weight for export: integral values drop the fractional part."""
    if float(weight).is_integer():
        return str(int(weight))
    return repr(float(weight))


def sort_labels(labels: list[str]) -> list[str]:
    """
    Order vertex labels for insertion.

    Labels are sorted numerically when every label is an integer; otherwise
    first-appearance order is kept.
    """
    if labels and all(re.fullmatch(r"[+-]?\d+", label, re.ASCII) for label in labels):
        return sorted(labels, key=int)
    return list(labels)


__all__ = [
    "GraphParseError",
    "parse_flag",
    "parse_count",
    "parse_weight",
    "format_weight",
    "sort_labels",
]
