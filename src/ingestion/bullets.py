"""Split a report section's undelimited prose into bullet points.

In the source PDFs every bullet opens with a short bold lead-in phrase
("Candidate quality. ", "Work closely with clients on candidate quality - ")
followed by body text. Text extraction loses the bold face and the line
structure, so the bullets arrive as one run-on paragraph. Split points are
recovered from the shape of those lead-ins alone.
"""

from __future__ import annotations

import logging
import re
from itertools import pairwise

from src.config import settings
from src.ingestion.text import clean_text, collapse_whitespace

logger = logging.getLogger(__name__)

# A capitalised phrase ending in ". ", ": " or a spaced dash, preceded by the
# start of text or by sentence-ending punctuation / a closing quote and a space.
_LEAD_IN_RE = re.compile(
    r"(?:^|[.\"“”]\s+)"
    r"([A-Z][A-Za-z][A-Za-z\s,/&'()\[\]‘’–—-]{8,118}?"
    r"(?:\.\s|:\s|\s[–—―-]\s))"
)

# Words that open ordinary sentences in this corpus but never a lead-in.
NON_LEAD_IN_STARTERS: frozenset[str] = frozenset(
    {
        "They", "And", "The", "But", "It", "We", "He", "She", "That", "This",
        "However", "Also", "Not", "For", "As", "If", "When", "Where", "While",
        "Although", "Because", "Since", "Or", "So", "Yet", "Both", "Each",
        "Over", "From", "With", "Into", "After", "Before", "Upon",
    }
)  # fmt: skip

_FIRST_WORD_RE = re.compile(r"[\s,]")


def find_split_points(flat_text: str) -> list[int]:
    """Return start offsets of accepted lead-ins in single-line *flat_text*.

    Offset 0 is never returned; the first bullet always starts there.
    """
    points: list[int] = []
    for match in _LEAD_IN_RE.finditer(flat_text):
        lead_in = match.group(1)
        first_word = _FIRST_WORD_RE.split(lead_in, maxsplit=1)[0]
        if first_word in NON_LEAD_IN_STARTERS:
            continue
        start = match.start(1)
        if start > 0:
            points.append(start)
    return points


def split_bullets(section_text: str, min_length: int | None = None) -> list[str]:
    """Divide one section's text into cleaned bullet strings.

    Lead-ins are found on the whitespace-flattened text; each slice is
    cleaned afterwards. Slices no longer than *min_length* characters
    (default ``settings.min_bullet_length``) are dropped. If that leaves
    nothing, the whole cleaned section becomes a single bullet, provided it
    is itself longer than *min_length*.
    """
    limit = settings.min_bullet_length if min_length is None else min_length

    flat = collapse_whitespace(section_text)
    if not flat:
        return []

    bounds = [0, *find_split_points(flat), len(flat)]
    bullets: list[str] = []
    for start, end in pairwise(bounds):
        chunk = clean_text(flat[start:end])
        if len(chunk) > limit:
            bullets.append(chunk)

    if not bullets:
        whole = clean_text(flat)
        if len(whole) > limit:
            bullets.append(whole)

    logger.debug("Split section of %d chars into %d bullets", len(flat), len(bullets))
    return bullets
