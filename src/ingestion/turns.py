"""Speaker-turn segmentation for interview transcript text."""

from __future__ import annotations

import logging
import re

from src.ingestion.models import TranscriptTurn
from src.ingestion.text import clean_text

logger = logging.getLogger(__name__)

_TRANSCRIPT_MARKER_RE = re.compile(r"FULL TRANSCRIPT\s*", re.IGNORECASE)

# A line holding only a speaker label and an optional m:ss timestamp:
# "Interviewer", "Interviewer 1:53", "Speaker 1", "Speaker 1 2:16", "Speaker 2:16".
_SPEAKER_LINE_RE = re.compile(
    r"^[ \t]*(Interviewer|Speaker(?:[ \t]+\d+)?)[ \t]*(?:(\d{1,2}:\d{2})[ \t]*)?$",
    re.MULTILINE,
)


def _speaker_label(label: str, timestamp: str | None) -> str:
    label = " ".join(label.split())
    return f"{label} {timestamp}" if timestamp else label


def segment_turns(body: str) -> list[TranscriptTurn]:
    """Extract speaker turns from the ``FULL TRANSCRIPT`` section of *body*.

    Each speaker line opens a turn whose text runs to the next speaker line
    or end of text. The timestamp, when present, stays part of the speaker
    label (``"Speaker 1 2:16"``). Turns with no text are dropped; without
    the marker there are no turns.
    """
    marker = _TRANSCRIPT_MARKER_RE.search(body)
    if marker is None:
        logger.debug("No FULL TRANSCRIPT marker found")
        return []

    transcript = body[marker.end() :]
    markers = list(_SPEAKER_LINE_RE.finditer(transcript))

    turns: list[TranscriptTurn] = []
    for i, match in enumerate(markers):
        text_end = markers[i + 1].start() if i + 1 < len(markers) else len(transcript)
        text = clean_text(transcript[match.end() : text_end])
        if not text:
            continue
        turns.append(TranscriptTurn(speaker=_speaker_label(match.group(1), match.group(2)), text=text))

    logger.debug("Segmented %d speaker turns", len(turns))
    return turns
