"""Tests for report section segmentation."""

from __future__ import annotations

from src.ingestion.models import SectionKey
from src.ingestion.sections import find_section_spans, segment_sections

REPORT_BODY = """Interview Report
Overview
Broadly positive about the search.
What Went Well
Strong candidate-side experience. Candidates felt well briefed.
Challenges/ Pain
Points
Pace of the longlist. It arrived late.
Gaps Identified
(raised by interviewee)
Market mapping depth. Wanted more adjacent sectors.
Key Themes
Partnership and trust. Felt like a partnership.
Actions &
Recommendations
Share weekly progress updates - Agree a cadence at kickoff.
Additional Insight
Would use the firm again.
"""


class TestSegmentSections:
    def test_all_sections_found(self) -> None:
        sections = segment_sections(REPORT_BODY)
        assert set(sections) == set(SectionKey)
        assert sections[SectionKey.OVERVIEW] == "Broadly positive about the search."
        assert sections[SectionKey.CHALLENGES_PAIN_POINTS] == "Pace of the longlist. It arrived late."
        assert sections[SectionKey.GAPS_IDENTIFIED] == "Market mapping depth. Wanted more adjacent sectors."
        assert sections[SectionKey.ACTIONS_RECOMMENDATIONS] == (
            "Share weekly progress updates - Agree a cadence at kickoff."
        )
        assert sections[SectionKey.ADDITIONAL_INSIGHT] == "Would use the firm again."

    def test_next_heading_not_in_body(self) -> None:
        sections = segment_sections(REPORT_BODY)
        assert "What Went Well" not in sections[SectionKey.OVERVIEW]
        assert "Challenges" not in sections[SectionKey.WHAT_WENT_WELL]

    def test_missing_sections_have_no_entry(self) -> None:
        text = "Overview\nJust an overview.\nKey Themes\nOne theme here.\n"
        sections = segment_sections(text)
        assert set(sections) == {SectionKey.OVERVIEW, SectionKey.KEY_THEMES}
        assert sections[SectionKey.OVERVIEW] == "Just an overview."
        assert sections[SectionKey.KEY_THEMES] == "One theme here."

    def test_out_of_order_sections(self) -> None:
        text = "Key Themes\nThemes first.\nOverview\nOverview second.\n"
        sections = segment_sections(text)
        assert sections[SectionKey.KEY_THEMES] == "Themes first."
        assert sections[SectionKey.OVERVIEW] == "Overview second."

    def test_case_insensitive_headings(self) -> None:
        sections = segment_sections("WHAT WENT WELL\nEverything.\n")
        assert sections[SectionKey.WHAT_WENT_WELL] == "Everything."

    def test_heading_words_inside_prose_are_ignored(self) -> None:
        sections = segment_sections("Overview\nThe overview of what went well is short.\n")
        assert set(sections) == {SectionKey.OVERVIEW}

    def test_no_headings(self) -> None:
        assert segment_sections("Nothing structured here.") == {}
        assert segment_sections("") == {}


class TestFindSectionSpans:
    def test_spans_sorted_by_offset(self) -> None:
        text = "Key Themes\nA.\nOverview\nB.\nWhat Went Well\nC.\n"
        keys = [span.key for span in find_section_spans(text)]
        assert keys == [SectionKey.KEY_THEMES, SectionKey.OVERVIEW, SectionKey.WHAT_WENT_WELL]

    def test_spans_tile_text_after_first_heading(self) -> None:
        for text in (REPORT_BODY, "Key Themes\nA.\nOverview\nB.\n", "Overview\nonly one\n"):
            spans = find_section_spans(text)
            assert spans
            rebuilt = "".join(text[s.start_offset : s.end_offset] for s in spans)
            assert rebuilt == text[spans[0].start_offset :]
            for current, following in zip(spans, spans[1:], strict=False):
                assert current.end_offset == following.start_offset
            assert spans[-1].end_offset == len(text)

    def test_heading_offset_precedes_start(self) -> None:
        spans = find_section_spans(REPORT_BODY)
        for span in spans:
            assert span.heading_offset < span.start_offset
            assert REPORT_BODY[span.heading_offset : span.start_offset].strip()
