"""Tests for coded filename decoding."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.ingestion.filenames import InvalidFilenameFormat, decode_filename, is_coded_filename
from src.ingestion.models import DocumentKind, FilenameMetadata, NpsCategory


class TestDecodeFilename:
    def test_report_filename(self) -> None:
        meta = decode_filename("R29_NPS10_NA_CONSULTING_HOUSE_DEC25.pdf")
        assert meta == FilenameMetadata(
            code="R29",
            score=10,
            region="NA",
            solution="Consulting",
            account_type="House",
            month_year="2025-12",
        )

    def test_transcript_filename(self) -> None:
        meta = decode_filename("T1_NPS6_EMEA_ES_HOUSE_SEP25.pdf")
        assert meta.code == "T1"
        assert meta.score == 6
        assert meta.region == "EMEA"
        assert meta.solution == "Executive Search"
        assert meta.month_year == "2025-09"

    def test_suffix_case_insensitive_and_directory_ignored(self) -> None:
        meta = decode_filename("data/reports/R20_NPS10_EMEA_PS_REGIONAL_OCT25.PDF")
        assert meta.code == "R20"
        assert meta.solution == "Professional Search"
        assert meta.account_type == "Regional"
        assert meta.month_year == "2025-10"

    def test_unknown_keys_pass_through(self) -> None:
        meta = decode_filename("R5_NPS8_APAC_INTERIM_NEWCO_JAN26.pdf")
        assert meta.solution == "INTERIM"
        assert meta.account_type == "NEWCO"
        assert meta.month_year == "2026-01"

    def test_unknown_month_defaults_to_january(self) -> None:
        meta = decode_filename("R5_NPS8_LATAM_ES_DIAMOND_XYZ25.pdf")
        assert meta.month_year == "2025-01"

    def test_serializes_with_camel_case(self) -> None:
        meta = decode_filename("R29_NPS10_NA_CONSULTING_HOUSE_DEC25.pdf")
        assert meta.model_dump(by_alias=True) == {
            "code": "R29",
            "score": 10,
            "region": "NA",
            "solution": "Consulting",
            "accountType": "House",
            "monthYear": "2025-12",
        }

    def test_immutable(self) -> None:
        meta = decode_filename("R29_NPS10_NA_CONSULTING_HOUSE_DEC25.pdf")
        with pytest.raises(ValidationError):
            meta.score = 3  # type: ignore[misc]


class TestInvalidFilenames:
    @pytest.mark.parametrize(
        "filename",
        [
            "R1_NPS6_EMEA_ES.pdf",
            "R1_NPS6_EMEA_ES_HOUSE_SEP25_EXTRA.pdf",
            "notes.pdf",
            "",
        ],
    )
    def test_wrong_token_count(self, filename: str) -> None:
        with pytest.raises(InvalidFilenameFormat, match="underscore-separated tokens"):
            decode_filename(filename)

    def test_bad_score_token(self) -> None:
        with pytest.raises(InvalidFilenameFormat, match="NPS<score>"):
            decode_filename("R1_SCORE6_EMEA_ES_HOUSE_SEP25.pdf")

    def test_score_out_of_range(self) -> None:
        with pytest.raises(InvalidFilenameFormat, match="outside 0-10"):
            decode_filename("R1_NPS11_EMEA_ES_HOUSE_SEP25.pdf")

    def test_missing_year(self) -> None:
        with pytest.raises(InvalidFilenameFormat, match="two-digit year"):
            decode_filename("R1_NPS6_EMEA_ES_HOUSE_SEPT.pdf")

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            decode_filename("R1.pdf")

    def test_is_coded_filename(self) -> None:
        assert is_coded_filename("R29_NPS10_NA_CONSULTING_HOUSE_DEC25.pdf")
        assert not is_coded_filename("R29.pdf")


class TestFilenameMetadataProperties:
    def test_kind_and_pairing(self) -> None:
        report = decode_filename("R29_NPS10_NA_CONSULTING_HOUSE_DEC25.pdf")
        transcript = decode_filename("T29_NPS10_NA_CONSULTING_HOUSE_DEC25.pdf")
        assert report.kind is DocumentKind.REPORT
        assert transcript.kind is DocumentKind.TRANSCRIPT
        assert report.interview_number == transcript.interview_number == 29
        assert report.paired_code == "T29"
        assert transcript.paired_code == "R29"

    def test_unknown_prefix(self) -> None:
        meta = decode_filename("X3_NPS5_NA_ES_HOUSE_MAR25.pdf")
        assert meta.kind is None
        assert meta.paired_code is None

    @pytest.mark.parametrize(
        ("score", "category"),
        [
            (10, NpsCategory.PROMOTER),
            (9, NpsCategory.PROMOTER),
            (8, NpsCategory.PASSIVE),
            (7, NpsCategory.PASSIVE),
            (6, NpsCategory.DETRACTOR),
            (0, NpsCategory.DETRACTOR),
        ],
    )
    def test_nps_category(self, score: int, category: NpsCategory) -> None:
        meta = decode_filename(f"R1_NPS{score}_NA_ES_HOUSE_MAR25.pdf")
        assert meta.nps_category is category
