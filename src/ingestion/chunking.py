"""Prepare parsed documents as chunks for the embedding collaborator."""

from __future__ import annotations

from src.config import settings
from src.ingestion.models import (
    Chunk,
    DocumentKind,
    ParsedReportDocument,
    ParsedTranscriptDocument,
)

MIN_CHUNK_CHARS = 20

# (report attribute, section type) for the bullet-list sections
_REPORT_BULLET_SECTIONS: list[tuple[str, str]] = [
    ("what_went_well", "what_went_well"),
    ("challenges_pain_points", "challenges"),
    ("gaps_identified", "gaps"),
    ("key_themes", "key_themes"),
    ("actions_recommendations", "actions"),
]


def report_chunks(report: ParsedReportDocument, interview_id: str) -> list[Chunk]:
    """One chunk for the overview, one per bullet, one for the additional insight."""
    pieces: list[tuple[str, str]] = []
    if report.overview:
        pieces.append(("overview", report.overview))
    for attr, section_type in _REPORT_BULLET_SECTIONS:
        pieces.extend((section_type, bullet) for bullet in getattr(report, attr))
    if report.additional_insight:
        pieces.append(("additional_insight", report.additional_insight))

    return [
        Chunk(
            chunk_id=f"{interview_id}-rc-{idx}",
            content=content,
            source=DocumentKind.REPORT,
            section_type=section_type,
            chunk_index=idx,
        )
        for idx, (section_type, content) in enumerate(pieces)
    ]


def turn_chunks(transcript: ParsedTranscriptDocument, interview_id: str) -> list[Chunk]:
    """One atomic chunk per speaker turn."""
    return [
        Chunk(
            chunk_id=f"{interview_id}-turn-{idx}",
            content=turn.text,
            source=DocumentKind.TRANSCRIPT,
            section_type="turn",
            speaker=turn.speaker,
            chunk_index=idx,
        )
        for idx, turn in enumerate(transcript.turns)
    ]


def transcript_chunks(
    transcript: ParsedTranscriptDocument,
    interview_id: str,
    max_words: int | None = None,
    overlap_words: int | None = None,
) -> list[Chunk]:
    """Window ``"{speaker}: {text}"`` lines into chunks of about *max_words* words.

    When a turn would push the window past *max_words*, the window is
    emitted and the next one starts with its last *overlap_words* words.
    Records without turns fall back to word windows over ``raw_text``. That
    branch only serves records built elsewhere, e.g. loaded back from
    storage; ``parse_transcript`` derives ``raw_text`` from the turns, so
    its output without turns has no text to window.

    Args:
        transcript: Parsed transcript.
        interview_id: Id used to prefix chunk ids.
        max_words: Window size (default ``settings.chunk_max_words``).
        overlap_words: Words carried into the next window
            (default ``settings.chunk_overlap_words``).

    Returns:
        List of :class:`Chunk` instances with ``section_type="transcript_segment"``.
    """
    max_words = settings.chunk_max_words if max_words is None else max_words
    overlap_words = settings.chunk_overlap_words if overlap_words is None else overlap_words

    texts: list[str] = []
    if transcript.turns:
        window: list[str] = []
        word_count = 0
        for turn in transcript.turns:
            line = f"{turn.speaker}: {turn.text}"
            line_words = len(line.split())
            if window and word_count + line_words > max_words:
                texts.append("\n".join(window))
                carried = " ".join(" ".join(window).split()[-overlap_words:]) if overlap_words > 0 else ""
                window = [carried] if carried else []
                word_count = len(carried.split())
            window.append(line)
            word_count += line_words
        if window:
            texts.append("\n".join(window))
    elif transcript.raw_text:
        words = transcript.raw_text.split()
        step = max(1, max_words - overlap_words)
        for start in range(0, len(words), step):
            text = " ".join(words[start : start + max_words])
            if len(text) > MIN_CHUNK_CHARS:
                texts.append(text)
            if start + max_words >= len(words):
                break

    return [
        Chunk(
            chunk_id=f"{interview_id}-tc-{idx}",
            content=text,
            source=DocumentKind.TRANSCRIPT,
            section_type="transcript_segment",
            chunk_index=idx,
        )
        for idx, text in enumerate(texts)
    ]
