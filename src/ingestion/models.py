"""Data models for the document normalization pipeline.

Records handed to the storage and indexing collaborators are frozen Pydantic
models with camelCase aliases, so ``model_dump(by_alias=True)`` produces the
stored JSON shape. Transient internal types are plain dataclasses.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DocumentKind(StrEnum):
    """Kind of interview document, encoded by the filename code prefix."""

    REPORT = "report"
    TRANSCRIPT = "transcript"


class SectionKey(StrEnum):
    """Report sections, in their usual document order."""

    OVERVIEW = "overview"
    WHAT_WENT_WELL = "what_went_well"
    CHALLENGES_PAIN_POINTS = "challenges_pain_points"
    GAPS_IDENTIFIED = "gaps_identified"
    KEY_THEMES = "key_themes"
    ACTIONS_RECOMMENDATIONS = "actions_recommendations"
    ADDITIONAL_INSIGHT = "additional_insight"


class NpsCategory(StrEnum):
    PROMOTER = "promoter"
    PASSIVE = "passive"
    DETRACTOR = "detractor"


_CODE_PREFIXES: dict[str, DocumentKind] = {
    "R": DocumentKind.REPORT,
    "T": DocumentKind.TRANSCRIPT,
}
_CODE_RE = re.compile(r"^([A-Za-z]+)(\d+)$")


class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class FilenameMetadata(_Record):
    """Metadata decoded from a coded filename such as ``R29_NPS10_NA_CONSULTING_HOUSE_DEC25.pdf``."""

    code: str
    score: int
    region: str
    solution: str
    account_type: str
    month_year: str  # "YYYY-MM"

    @property
    def kind(self) -> DocumentKind | None:
        match = _CODE_RE.match(self.code)
        if match is None:
            return None
        return _CODE_PREFIXES.get(match.group(1).upper())

    @property
    def interview_number(self) -> int | None:
        """Numeric id shared by a report and its transcript (``R29`` -> 29)."""
        match = _CODE_RE.match(self.code)
        return int(match.group(2)) if match else None

    @property
    def paired_code(self) -> str | None:
        """Code of the counterpart document (``T29`` <-> ``R29``)."""
        kind = self.kind
        if kind is None:
            return None
        prefix = "T" if kind is DocumentKind.REPORT else "R"
        return f"{prefix}{self.interview_number}"

    @property
    def nps_category(self) -> NpsCategory:
        if self.score >= 9:
            return NpsCategory.PROMOTER
        if self.score >= 7:
            return NpsCategory.PASSIVE
        return NpsCategory.DETRACTOR


class TranscriptTurn(_Record):
    """One contiguous span of dialogue attributed to a speaker marker."""

    speaker: str
    text: str


class ParsedReportDocument(_Record):
    """Structured record recovered from an interview report's text."""

    client: str = ""
    client_title: str = ""
    company: str = ""
    engagement: str = ""
    interview_date: str = ""  # "YYYY-MM-DD" or ""
    score: int | None = None
    overview: str = ""
    what_went_well: list[str] = []
    challenges_pain_points: list[str] = []
    gaps_identified: list[str] = []
    key_themes: list[str] = []
    actions_recommendations: list[str] = []
    additional_insight: str = ""


class ParsedTranscriptDocument(_Record):
    """Structured record recovered from an interview transcript's text."""

    client_name: str = ""
    client_title: str = ""
    company: str = ""
    project: str = ""
    interview_date: str = ""  # "YYYY-MM-DD" or ""
    score: int | None = None
    turns: list[TranscriptTurn] = []
    raw_text: str = ""


class IngestedDocument(_Record):
    """A parsed document together with the metadata decoded from its filename."""

    filename: str
    metadata: FilenameMetadata
    document: ParsedReportDocument | ParsedTranscriptDocument

    @property
    def kind(self) -> DocumentKind:
        if isinstance(self.document, ParsedReportDocument):
            return DocumentKind.REPORT
        return DocumentKind.TRANSCRIPT

    @property
    def interview_date(self) -> str:
        """Body date when present, otherwise the first day of the filename month."""
        return self.document.interview_date or f"{self.metadata.month_year}-01"


@dataclass(frozen=True)
class SectionSpan:
    """Offsets of one report section within the page-break-free text.

    ``heading_offset`` is where the section's heading match begins;
    ``start_offset`` is just past it. Spans tile the text: each span's
    ``end_offset`` is the next span's ``start_offset``.
    """

    key: SectionKey
    heading_offset: int
    start_offset: int
    end_offset: int


@dataclass
class Chunk:
    """A chunk of document text prepared for the embedding collaborator."""

    chunk_id: str
    content: str
    source: DocumentKind
    section_type: str
    speaker: str | None = None
    chunk_index: int = 0
