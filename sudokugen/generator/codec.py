"""Reversible URL-safe identifiers for solved grids."""

from __future__ import annotations

import base64
import binascii
import re

from ..solver.backtracking import Grid

_URLSAFE_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")
_CELL_COUNT = 81
_DIGITS = frozenset(b"123456789")


class InvalidIdentifier(ValueError):
    """Raised when an identifier does not decode to a solved grid."""


def to_urlsafe(b64: str) -> str:
    return b64.replace("+", "-").replace("/", "_").rstrip("=")


def from_urlsafe(token: str) -> str:
    b64 = token.replace("-", "+").replace("_", "/")
    return b64 + "=" * (-len(b64) % 4)


def encode_grid(grid: Grid) -> str:
    """Flatten a solved grid row-major and encode it as base64url."""
    flat = "".join(str(cell) for row in grid for cell in row)
    return to_urlsafe(base64.b64encode(flat.encode("ascii")).decode("ascii"))


def decode_identifier(identifier: str) -> Grid:
    """
    Decode an identifier produced by :func:`encode_grid`.

    Raises:
        InvalidIdentifier: on malformed base64, a decoded length other than 81,
            or any decoded character outside '1'..'9'.
    """
    if not isinstance(identifier, str) or not _URLSAFE_PATTERN.match(identifier):
        raise InvalidIdentifier("Invalid ID")

    try:
        raw = base64.b64decode(from_urlsafe(identifier), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidIdentifier("Invalid ID") from exc

    if len(raw) != _CELL_COUNT:
        raise InvalidIdentifier("Invalid ID")
    if any(byte not in _DIGITS for byte in raw):
        raise InvalidIdentifier("Invalid ID")

    digits = [byte - ord("0") for byte in raw]
    return [digits[i * 9:(i + 1) * 9] for i in range(9)]
