"""Decoder for the coded interview filenames shared by reports and transcripts.

Grammar: ``{R|T}{id}_NPS{score}_{REGION}_{SOLUTION}_{ACCOUNT}_{MON}{YY}.pdf``,
e.g. ``R29_NPS10_NA_CONSULTING_HOUSE_DEC25.pdf``.
"""

from __future__ import annotations

import logging
import re
from pathlib import PurePath

from src.ingestion.models import FilenameMetadata

logger = logging.getLogger(__name__)

MONTH_MAP: dict[str, str] = {
    "JAN": "01",
    "FEB": "02",
    "MAR": "03",
    "APR": "04",
    "MAY": "05",
    "JUN": "06",
    "JUL": "07",
    "AUG": "08",
    "SEP": "09",
    "OCT": "10",
    "NOV": "11",
    "DEC": "12",
}

SOLUTION_MAP: dict[str, str] = {
    "ES": "Executive Search",
    "PS": "Professional Search",
    "CONSULTING": "Consulting",
}

ACCOUNT_TYPE_MAP: dict[str, str] = {
    "HOUSE": "House",
    "DIAMOND": "Diamond",
    "MARQUEE": "Marquee",
    "REGIONAL": "Regional",
}

DEFAULT_MONTH = "01"
TOKEN_COUNT = 6

_PDF_SUFFIX_RE = re.compile(r"\.pdf$", re.IGNORECASE)
_SCORE_RE = re.compile(r"^NPS(\d+)$", re.ASCII)
_YEAR_RE = re.compile(r"^\d{2}$", re.ASCII)


class InvalidFilenameFormat(ValueError):
    """Raised when a filename does not follow the coded interview grammar."""

    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(f"Invalid interview filename {filename!r}: {reason}")
        self.filename = filename
        self.reason = reason


def _split_tokens(filename: str) -> list[str]:
    basename = _PDF_SUFFIX_RE.sub("", PurePath(filename).name)
    return basename.split("_")


def decode_filename(filename: str) -> FilenameMetadata:
    """Decode a coded interview filename into :class:`FilenameMetadata`.

    Unknown solution and account-type keys pass through unchanged; an
    unknown month code falls back to January.

    Raises:
        InvalidFilenameFormat: If the name does not have exactly six
            underscore-separated tokens, the score token is not ``NPS0``
            to ``NPS10``, or the month-year token lacks a two-digit year.
    """
    tokens = _split_tokens(filename)
    if len(tokens) != TOKEN_COUNT:
        raise InvalidFilenameFormat(
            filename, f"expected {TOKEN_COUNT} underscore-separated tokens, got {len(tokens)}"
        )

    code, score_token, region, solution_key, account_key, month_year_key = tokens

    score_match = _SCORE_RE.match(score_token)
    if score_match is None:
        raise InvalidFilenameFormat(filename, f"score token {score_token!r} is not NPS<score>")
    score = int(score_match.group(1))
    if not 0 <= score <= 10:
        raise InvalidFilenameFormat(filename, f"score {score} is outside 0-10")

    month_code, year_short = month_year_key[:-2], month_year_key[-2:]
    if not _YEAR_RE.match(year_short):
        raise InvalidFilenameFormat(
            filename, f"month-year token {month_year_key!r} does not end in a two-digit year"
        )

    month = MONTH_MAP.get(month_code.upper())
    if month is None:
        logger.warning("Unknown month code %r in %s; defaulting to %s", month_code, filename, DEFAULT_MONTH)
        month = DEFAULT_MONTH

    return FilenameMetadata(
        code=code,
        score=score,
        region=region,
        solution=SOLUTION_MAP.get(solution_key, solution_key),
        account_type=ACCOUNT_TYPE_MAP.get(account_key, account_key),
        month_year=f"20{year_short}-{month}",
    )


def is_coded_filename(filename: str) -> bool:
    """Return True if *filename* decodes without error."""
    try:
        decode_filename(filename)
    except InvalidFilenameFormat:
        return False
    return True
