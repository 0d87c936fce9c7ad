"""Report section segmentation by known headings."""

from __future__ import annotations

import logging
import re

from src.ingestion.models import SectionKey, SectionSpan

logger = logging.getLogger(__name__)

_FLAGS = re.IGNORECASE | re.MULTILINE


def _heading(body: str) -> re.Pattern[str]:
    # A heading occupies whole lines; internal \s allows line breaks inside it.
    return re.compile(rf"^[ \t]*{body}[ \t]*(?:\n|$)", _FLAGS)


# Headings may wrap in the extracted text, e.g. "Challenges/ Pain\nPoints".
SECTION_HEADINGS: list[tuple[SectionKey, re.Pattern[str]]] = [
    (SectionKey.OVERVIEW, _heading(r"Overview")),
    (SectionKey.WHAT_WENT_WELL, _heading(r"What\s+Went\s+Well")),
    (SectionKey.CHALLENGES_PAIN_POINTS, _heading(r"Challenges[ \t]*/?\s*Pain\s*Points")),
    (
        SectionKey.GAPS_IDENTIFIED,
        _heading(r"Gaps\s+Identified(?:\s*\(?\s*raised\s+by\s+interviewee\s*\)?)?"),
    ),
    (SectionKey.KEY_THEMES, _heading(r"Key\s+Themes")),
    (SectionKey.ACTIONS_RECOMMENDATIONS, _heading(r"Actions\s*(?:&|and)?\s*Recommendations")),
    (SectionKey.ADDITIONAL_INSIGHT, _heading(r"Additional\s+Insights?")),
]


def find_section_spans(text: str) -> list[SectionSpan]:
    """Locate the first match of each known heading and return ordered spans.

    Spans are sorted by offset regardless of table order; each span ends
    where the next one starts (or at end of text), so together they cover
    everything after the first heading without gaps or overlaps.
    """
    found: list[tuple[int, int, SectionKey]] = []
    for key, pattern in SECTION_HEADINGS:
        match = pattern.search(text)
        if match:
            found.append((match.end(), match.start(), key))

    found.sort()

    spans: list[SectionSpan] = []
    for i, (start, heading_start, key) in enumerate(found):
        end = found[i + 1][0] if i + 1 < len(found) else len(text)
        spans.append(
            SectionSpan(key=key, heading_offset=heading_start, start_offset=start, end_offset=end)
        )
    return spans


def segment_sections(text: str) -> dict[SectionKey, str]:
    """Slice *text* into section bodies keyed by :class:`SectionKey`.

    Each body runs from just past its heading to the start of the next
    found heading, trimmed. Headings that are not found produce no entry.
    """
    spans = find_section_spans(text)
    sections: dict[SectionKey, str] = {}
    for i, span in enumerate(spans):
        body_end = spans[i + 1].heading_offset if i + 1 < len(spans) else span.end_offset
        sections[span.key] = text[span.start_offset : max(body_end, span.start_offset)].strip()

    logger.debug("Found %d of %d report sections", len(sections), len(SECTION_HEADINGS))
    return sections
