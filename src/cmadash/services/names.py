"""Conversion between worksheet-encoded names and display names.

Worksheets encode a person as ``I/LAST/FIRST/INITIAL@``; everything shown to
users and stored in the hierarchy uses ``FIRST INITIAL. LAST``.
"""

from __future__ import annotations

import re
from typing import NamedTuple

_WS_RE = re.compile(r"\s+")
_PREFIX = "I/"


class WorksheetName(NamedTuple):
    last_name: str
    first_name: str
    initial: str
    display_name: str


def _split_worksheet(code: str) -> list[str] | None:
    if not code or not code.startswith(_PREFIX):
        return None
    body = code[len(_PREFIX):]
    if body.endswith("@"):
        body = body[:-1]
    parts = body.split("/")
    return parts if len(parts) >= 3 else None


def to_display(code: str) -> str:
    """``I/GONZALES/ANALYN/D@`` -> ``ANALYN D. GONZALES``.

    Anything not in worksheet form is returned unchanged.
    """
    parts = _split_worksheet(code)
    if parts is None:
        return code
    last, first, initial = (p.strip() for p in parts[:3])
    if initial:
        return f"{first} {initial}. {last}".strip()
    return f"{first} {last}".strip()


def to_worksheet_format(display: str) -> str:
    """Best-effort inverse of :func:`to_display`.

    Lossy: the first token is taken as the first name and the last token as
    the last name, so multi-word first or last names do not round-trip.
    """
    if not display:
        return ""
    tokens = display.split()
    if len(tokens) < 2:
        return display
    first, last = tokens[0], tokens[-1]
    initial = ""
    for token in tokens[1:-1]:
        stripped = token.removesuffix(".")
        if len(stripped) == 1:
            initial = stripped
            break
    return f"I/{last.upper()}/{first.upper()}/{initial.upper()}@"


def parse_worksheet_name(code: str) -> WorksheetName | None:
    parts = _split_worksheet(code)
    if parts is None:
        return None
    last, first, initial = (p.strip() for p in parts[:3])
    return WorksheetName(last, first, initial, to_display(code))


def normalize(name: str) -> str:
    """Comparison key: trimmed, upper-cased, inner whitespace collapsed."""
    return _WS_RE.sub(" ", name.strip().upper())
