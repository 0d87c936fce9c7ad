"""Text cleanup helpers shared by the report and transcript parsers."""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")
_PAGE_BREAK_RE = re.compile(r"^[ \t]*-- \d+ of \d+ --[ \t]*(?:\n|$)", re.MULTILINE)
_DOTTED_DATE_RE = re.compile(r"^(\d{1,2})\.(\d{1,2})\.(\d{4}|\d{2})$", re.ASCII)
_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)
_LEADING_INT_RE = re.compile(r"^\s*(\d+)", re.ASCII)

# Typographic punctuation emitted by PDF text extraction -> ASCII
_PUNCTUATION_MAP = str.maketrans(
    {
        "“": '"',
        "”": '"',
        "„": '"',
        "‘": "'",
        "’": "'",
        "‚": "'",
        "…": "...",
        "–": "-",
        "—": "-",
        "―": "-",
    }
)


def collapse_whitespace(text: str) -> str:
    """Flatten *text* to one line with single spaces, leaving punctuation alone."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def clean_text(text: str) -> str:
    """Collapse whitespace, map typographic punctuation to ASCII and trim.

    Idempotent: ``clean_text(clean_text(x)) == clean_text(x)``.
    """
    return collapse_whitespace(text.translate(_PUNCTUATION_MAP))


def strip_page_breaks(text: str) -> str:
    """Remove ``-- N of M --`` page-break marker lines."""
    return _PAGE_BREAK_RE.sub("", text)


def normalize_date(raw: str) -> str:
    """Convert a dotted ``D.M.YY`` / ``D.M.YYYY`` date to ``YYYY-MM-DD``.

    Day and month are zero-padded and two-digit years are prefixed with
    ``20``. Anything that is not three numeric dot-separated parts is
    returned unchanged.

    >>> normalize_date("8.12.25")
    '2025-12-08'
    """
    value = raw.strip()
    if not value:
        return ""

    match = _DOTTED_DATE_RE.match(value)
    if match is None:
        return raw

    day, month, year = match.groups()
    if len(year) == 2:
        year = f"20{year}"
    return f"{year}-{month.zfill(2)}-{day.zfill(2)}"


def is_iso_date(value: str) -> bool:
    return bool(_ISO_DATE_RE.fullmatch(value))


def dedupe_first_name(name: str) -> str:
    """Collapse an immediately repeated first token.

    PDF table extraction sometimes doubles the first cell word:
    ``"Mike Mike Arshinskiy"`` -> ``"Mike Arshinskiy"``.
    """
    words = name.split()
    if len(words) >= 2 and words[0] == words[1]:
        return " ".join(words[1:])
    return name


def parse_leading_int(value: str) -> int | None:
    """Return the integer a header value starts with (``"10 (Promoter)"`` -> 10)."""
    match = _LEADING_INT_RE.match(value)
    return int(match.group(1)) if match else None
