"""
Column Span Resolution and Row Decoding.

Mainframe list reports are fixed-width tables whose header labels do not
always line up with the data underneath them. This module turns a header
line into character spans and applies those spans to data lines.

Two header algorithms:
    - token spans: one span per whitespace-delimited header label
    - anchored spans: token spans on either side of a literal banner
      (e.g. "--------- Attributes ---------") plus one span for the banner

Two row strategies:
    - boundary decoding: contiguous spans, widened by one character where
      a data value overruns its header label
    - anchored scanning: grow each span left and right until a space, so
      a label centred over a narrower or wider value still finds it

Example:
    >>> resolver = HeaderSpanResolver()
    >>> spans = resolver.contiguous_spans("Volume Unit")
    >>> RowDecoder().decode_boundary("XRFS79 3390", spans)
    ['XRFS79', '3390']
"""

import re
from dataclasses import dataclass
from typing import Optional

from mf_ftp.core.base import ParseError


@dataclass(frozen=True)
class ColumnSpan:
    """
    Character range of one column within a report line.

    Attributes:
        name: Header label of the column
        start: First character index (inclusive)
        end: Last character index (exclusive); None runs to end of line
    """
    name: str
    start: int
    end: Optional[int]

    def slice(self, line: str) -> str:
        """Return the trimmed text of this column in the given line."""
        return line[self.start:self.end].strip()


class HeaderSpanResolver:
    """
    Computes column spans from a report header line.

    Header labels are located by their actual position, so a label that is
    a substring of an earlier label still resolves to its own column.
    """

    TOKEN_PATTERN = re.compile(r"\S+")

    def token_spans(self, header: str, base: int = 0) -> list[ColumnSpan]:
        """
        Resolve one span per whitespace-delimited header label.

        Args:
            header: Header text
            base: Offset added to every position

        Returns:
            Spans covering exactly each label
        """
        return [
            ColumnSpan(match.group(0), base + match.start(), base + match.end())
            for match in self.TOKEN_PATTERN.finditer(header)
        ]

    def contiguous_spans(self, header: str) -> list[ColumnSpan]:
        """
        Resolve spans that tile the line from column 0.

        Each span starts where the previous label ended and ends where its
        own label ends, which suits right-aligned numeric columns.

        Args:
            header: Header line

        Returns:
            Contiguous spans, the last one running to end of line
        """
        spans = []
        previous_end = 0
        tokens = self.token_spans(header)
        for index, token in enumerate(tokens):
            end = None if index == len(tokens) - 1 else token.end
            spans.append(ColumnSpan(token.name, previous_end, end))
            previous_end = token.end
        return spans

    def anchored_spans(
        self,
        header: str,
        banner: re.Pattern,
        banner_name: str,
    ) -> list[ColumnSpan]:
        """
        Resolve spans for a header embedding a fixed-width banner.

        Args:
            header: Header line
            banner: Pattern locating the banner text
            banner_name: Column name to give the banner region

        Returns:
            Left spans, the banner span, then right spans

        Raises:
            ParseError: If the banner is not present in the header
        """
        match = banner.search(header)
        if not match:
            raise ParseError(f"Banner {banner_name!r} not found in header: {header!r}")

        spans = self.token_spans(header[:match.start()])
        spans.append(ColumnSpan(banner_name, match.start(), match.end()))
        spans.extend(self.token_spans(header[match.end():], base=match.end()))
        return spans


class RowDecoder:
    """Applies column spans to one data line."""

    def correct_spans(self, line: str, spans: list[ColumnSpan]) -> list[ColumnSpan]:
        """
        Widen spans whose data overruns the header label by one character.

        When the character at a span's end is not a space but the one after
        it is, the value is one character wider than its label: the span is
        extended by one and the next span starts there instead. The last
        span always runs to end of line.

        Args:
            line: Data line
            spans: Contiguous spans from the header

        Returns:
            A new, corrected span list for this line
        """
        corrected = []
        carried_start: Optional[int] = None
        for index, span in enumerate(spans):
            start = span.start if carried_start is None else carried_start
            carried_start = None

            if index == len(spans) - 1 or span.end is None:
                corrected.append(ColumnSpan(span.name, start, None))
                continue

            end = span.end
            if len(line) > end + 1 and line[end] != " " and line[end + 1] == " ":
                end += 1
                carried_start = end
            corrected.append(ColumnSpan(span.name, start, end))
        return corrected

    def decode_boundary(self, line: str, spans: list[ColumnSpan]) -> list[str]:
        """
        Decode a line using boundary-corrected contiguous spans.

        Columns starting beyond the end of a short line are not produced,
        so a truncated line yields fewer fields than the header has.

        Args:
            line: Data line
            spans: Contiguous spans from the header

        Returns:
            Trimmed field strings in column order
        """
        return [
            span.slice(line)
            for span in self.correct_spans(line, spans)
            if span.start < len(line)
        ]

    def scan_field(self, line: str, span: ColumnSpan) -> str:
        """
        Find the value under a span by scanning outwards to spaces.

        Args:
            line: Data line
            span: Column span

        Returns:
            Trimmed field string
        """
        if span.start >= len(line):
            return ""

        start = span.start
        while start >= 0 and line[start] != " ":
            start -= 1

        end = len(line) if span.end is None else span.end
        while end < len(line) and line[end] != " ":
            end += 1

        return line[max(start, 0):end].strip()

    def decode_anchored(self, line: str, spans: list[ColumnSpan]) -> list[str]:
        """
        Decode a line by scanning outwards from each span.

        Args:
            line: Data line
            spans: Spans from the header

        Returns:
            Trimmed field strings in column order
        """
        return [self.scan_field(line, span) for span in spans]


def parse_int(text: Optional[str], base: int = 10) -> Optional[int]:
    """
    Parse an integer field, returning None for blank or malformed text.

    Args:
        text: Field text
        base: Number base (16 for load-library sizes)

    Returns:
        Parsed integer or None
    """
    if not text:
        return None
    try:
        return int(text.strip(), base)
    except ValueError:
        return None
