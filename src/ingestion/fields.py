"""Header field extraction for report and transcript text."""

from __future__ import annotations

import re
from dataclasses import dataclass

from src.ingestion.text import clean_text, dedupe_first_name

_TITLE_LINE_RE = re.compile(r"^[^\n]*Interview Report[ \t]*$", re.MULTILINE)
_HEADER_LABEL_RE = re.compile(r"[ \t]*(?:Client|NPS|Engagement|Interview Date)\b")
# Labels that close the client block under the title
_BLOCK_END_RE = re.compile(r"[ \t]*(?:NPS|Engagement|Interview Date)\b")

MAX_CLIENT_BLOCK_LINES = 3


@dataclass(frozen=True)
class ClientField:
    """A client header value split into its parts."""

    name: str
    title: str = ""
    company: str = ""


def extract_field(text: str, field_name: str) -> str:
    """Return the value of a ``Field: value`` or ``Field value`` header line.

    The colon form is tried first; the bare form covers PDFs whose text
    extraction dropped the punctuation. Returns ``""`` when absent.
    """
    label = re.escape(field_name)
    patterns = (
        re.compile(rf"^[ \t]*{label}[ \t]*:[ \t]*(\S.*?)[ \t]*$", re.MULTILINE),
        re.compile(rf"^[ \t]*{label}[ \t]+(\S.*?)[ \t]*$", re.MULTILINE),
    )
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return clean_text(match.group(1))
    return ""


def _client_block(lines: list[str]) -> str:
    # One to three non-blank lines, closed by a header label line.
    if not lines or _HEADER_LABEL_RE.match(lines[0]):
        return ""
    block: list[str] = []
    for line in lines:
        if block and _BLOCK_END_RE.match(line):
            return clean_text(" ".join(block))
        if not line.strip() or len(block) == MAX_CLIENT_BLOCK_LINES:
            return ""
        block.append(line)
    return ""


def extract_client_from_title(text: str) -> str:
    """Recover the client block for reports that have no ``Client`` label.

    Some reports print the client directly under the title line, e.g.
    ``"...Interview Report\\nMike Mike Arshinskiy, Acme\\nNPS 9"``.
    """
    for title in _TITLE_LINE_RE.finditer(text):
        if title.end() == len(text):
            break
        following = text[title.end() + 1 :].split("\n", MAX_CLIENT_BLOCK_LINES + 1)
        block = _client_block(following[: MAX_CLIENT_BLOCK_LINES + 1])
        if block:
            return block
    return ""


def split_client_field(value: str) -> ClientField:
    """Split ``"Name, Title, Company"`` into its parts.

    Three or more parts give name, title (middle parts) and company. Two
    parts are read as name and company. A single part is the name. The
    name has a duplicated first token removed.
    """
    parts = [p.strip() for p in value.split(",")]

    if len(parts) >= 3:
        return ClientField(
            name=dedupe_first_name(parts[0]),
            title=", ".join(parts[1:-1]),
            company=parts[-1],
        )
    if len(parts) == 2:
        return ClientField(name=dedupe_first_name(parts[0]), company=parts[1])
    return ClientField(name=dedupe_first_name(value.strip()))
