"""Decoder for the TITLE / SUMMARY / ADDITIONAL ADVICE reply layout.

The layout is requested through the system prompt and nothing enforces it, so
the parser is lenient: unknown lines continue the previous bullet, and a reply
with neither a title nor summary bullets is reported as unstructured.
"""

from enum import Enum
from typing import List, Optional, Tuple

from kisan_assistant.models.advice import DashboardInsights, ParsedResponse

TITLE_MARKER = "TITLE:"
SUMMARY_MARKER = "SUMMARY:"
ADDITIONAL_MARKERS = ("ADDITIONAL ADVICE:", "OPTIONAL:")
BULLET_MARKER = "-"


class Section(str, Enum):
    NONE = "none"
    TITLE = "title"
    SUMMARY = "summary"
    ADDITIONAL = "additional"


def parse_response(text: str) -> ParsedResponse:
    title = ""
    summary: List[str] = []
    additional: List[str] = []
    section = Section.NONE

    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if not line:
            continue

        if line.startswith(TITLE_MARKER):
            title = line[len(TITLE_MARKER):].strip()
            section = Section.TITLE
        elif line.startswith(SUMMARY_MARKER):
            section = Section.SUMMARY
        elif line.startswith(ADDITIONAL_MARKERS):
            section = Section.ADDITIONAL
        elif line.startswith(BULLET_MARKER):
            content = line[len(BULLET_MARKER):].strip()
            if section == Section.SUMMARY:
                summary.append(content)
            elif section == Section.ADDITIONAL:
                additional.append(content)
        else:
            # Continuation of the previous bullet; dropped when the section has none yet.
            if section == Section.SUMMARY and summary:
                summary[-1] += " " + line
            elif section == Section.ADDITIONAL and additional:
                additional[-1] += " " + line

    return ParsedResponse(title=title, summary=summary, additional=additional)


def parse_structured(text: str) -> Optional[ParsedResponse]:
    """Return the parsed layout, or None when the text must be rendered verbatim."""
    parsed = parse_response(text)
    return parsed if parsed.is_structured else None


def split_dashboard_insights(text: str, separator: str = "|||") -> DashboardInsights:
    parts: Tuple[str, ...] = tuple(part.strip() for part in text.split(separator))
    tip = parts[0] if parts and parts[0] else None
    market = parts[1] if len(parts) > 1 and parts[1] else None
    return DashboardInsights(tip=tip, market=market)
