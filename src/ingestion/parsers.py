"""Assemble structured interview records from PDF-extracted text."""

from __future__ import annotations

import logging
from collections.abc import Callable

from src.ingestion.bullets import split_bullets
from src.ingestion.fields import extract_client_from_title, extract_field, split_client_field
from src.ingestion.filenames import decode_filename
from src.ingestion.models import (
    DocumentKind,
    IngestedDocument,
    ParsedReportDocument,
    ParsedTranscriptDocument,
    SectionKey,
)
from src.ingestion.sections import segment_sections
from src.ingestion.text import (
    clean_text,
    is_iso_date,
    normalize_date,
    parse_leading_int,
    strip_page_breaks,
)
from src.ingestion.turns import segment_turns

logger = logging.getLogger(__name__)


def _interview_date(raw: str) -> str:
    """Normalised ``YYYY-MM-DD`` date, or ``""`` when *raw* cannot be read as one."""
    date = normalize_date(raw)
    if date and not is_iso_date(date):
        logger.debug("Unparseable interview date %r; leaving it empty", raw)
        return ""
    return date


def parse_report(text: str) -> ParsedReportDocument:
    """Parse the text of an interview report.

    The text has a loose but consistent structure:

    - a title line ending in "Interview Report"
    - header fields: Client (sometimes unlabelled), NPS (optional),
      Engagement, Interview Date
    - sections: Overview, What Went Well, Challenges/ Pain Points,
      Gaps Identified, Key Themes, Actions & Recommendations,
      Additional Insight
    - page breaks as "-- N of M --"

    Missing fields and sections come back empty; this never raises.
    """
    cleaned = strip_page_breaks(text)

    client_value = extract_field(cleaned, "Client")
    if not client_value:
        client_value = extract_client_from_title(cleaned)
        if client_value:
            logger.info("Recovered unlabelled client field from title block: %r", client_value)
    client = split_client_field(client_value)

    sections = segment_sections(cleaned)

    def bullets(key: SectionKey) -> list[str]:
        return split_bullets(sections.get(key, ""))

    report = ParsedReportDocument(
        client=client.name,
        client_title=client.title,
        company=client.company,
        engagement=extract_field(cleaned, "Engagement"),
        interview_date=_interview_date(extract_field(cleaned, "Interview Date")),
        score=parse_leading_int(extract_field(cleaned, "NPS")),
        overview=clean_text(sections.get(SectionKey.OVERVIEW, "")),
        what_went_well=bullets(SectionKey.WHAT_WENT_WELL),
        challenges_pain_points=bullets(SectionKey.CHALLENGES_PAIN_POINTS),
        gaps_identified=bullets(SectionKey.GAPS_IDENTIFIED),
        key_themes=bullets(SectionKey.KEY_THEMES),
        actions_recommendations=bullets(SectionKey.ACTIONS_RECOMMENDATIONS),
        additional_insight=clean_text(sections.get(SectionKey.ADDITIONAL_INSIGHT, "")),
    )
    logger.debug("Parsed report for %r with %d sections", report.client, len(sections))
    return report


def parse_transcript(text: str) -> ParsedTranscriptDocument:
    """Parse the text of an interview transcript.

    Expected layout: an "NPS Interview Transcript" title, header fields
    Interview Date / Client ("Name, Title, Company") / Project / Score, a
    "FULL TRANSCRIPT" heading, then speaker lines such as
    "Interviewer 1:53" or "Speaker 1 2:16" each followed by their dialogue.

    ``raw_text`` joins ``"{speaker}: {text}"`` per turn with newlines for
    downstream indexing. Never raises.
    """
    client = split_client_field(extract_field(text, "Client"))
    turns = segment_turns(text)

    return ParsedTranscriptDocument(
        client_name=client.name,
        client_title=client.title,
        company=client.company,
        project=extract_field(text, "Project"),
        interview_date=_interview_date(extract_field(text, "Interview Date")),
        score=parse_leading_int(extract_field(text, "Score")),
        turns=turns,
        raw_text="\n".join(f"{turn.speaker}: {turn.text}" for turn in turns),
    )


def parse_document(filename: str, text: str) -> IngestedDocument:
    """Decode *filename* and parse *text* with the parser for its document kind.

    Args:
        filename: Coded filename, e.g. ``"T29_NPS10_NA_CONSULTING_HOUSE_DEC25.pdf"``.
        text: Plain text extracted from the PDF.

    Returns:
        The filename metadata and parsed record.

    Raises:
        InvalidFilenameFormat: If *filename* does not follow the coded grammar.
        ValueError: If the filename code prefix is neither ``R`` nor ``T``.
    """
    dispatch: dict[DocumentKind, Callable[[str], ParsedReportDocument | ParsedTranscriptDocument]] = {
        DocumentKind.REPORT: parse_report,
        DocumentKind.TRANSCRIPT: parse_transcript,
    }

    metadata = decode_filename(filename)
    parser = dispatch.get(metadata.kind) if metadata.kind else None
    if parser is None:
        msg = f"Unknown document code {metadata.code!r} in {filename!r}. Supported prefixes: R, T"
        raise ValueError(msg)

    return IngestedDocument(filename=filename, metadata=metadata, document=parser(text))
