"""
JES Spool File Table Parser.

Parses the spool table that follows a finished job's status line:

             ID  STEPNAME PROCSTEP C DDNAME   BYTE-COUNT
             001 JES2        N/A   H JESMSGLG      1582
             002 JES2        N/A   H JESJCL         324
    2 spool files

Columns are fixed character ranges taken from the header, since data
values in adjacent columns can touch.
"""

import logging
import re
from typing import Callable, Any

from mf_ftp.core.models import SpoolFile
from mf_ftp.parsers.columns import ColumnSpan, parse_int

logger = logging.getLogger(__name__)


class SpoolTableParser:
    """Parser for JES spool file tables."""

    FOOTER_PATTERN = re.compile(r"\d+ spool files")

    COLUMN_MAP: dict[str, tuple[str, Callable[[str], Any]]] = {
        "ID": ("id", parse_int),
        "STEPNAME": ("step_name", str),
        "PROCSTEP": ("proc_step", str),
        "C": ("spool_class", str),
        "DDNAME": ("dd_name", str),
        "BYTE-COUNT": ("byte_count", parse_int),
    }

    def __init__(self, keep_raw_fields: bool = False):
        self.keep_raw_fields = keep_raw_fields

    def column_ranges(self, header: str) -> list[ColumnSpan]:
        """
        Split a header into fixed column ranges.

        A column ends where the next label begins, so each range covers
        its label plus the whitespace before the next one. Leading
        whitespace belongs to the first column. The last range runs to
        end of line.

        Args:
            header: Spool table header line

        Returns:
            Spans named by upper-cased header label
        """
        spans = []
        range_start = 0
        previous = " "
        for index, char in enumerate(header):
            if previous.isspace() and not char.isspace():
                label = header[range_start:index].strip()
                if label:
                    spans.append(ColumnSpan(label.upper(), range_start, index))
                    range_start = index
            previous = char

        label = header[range_start:].strip()
        if label:
            spans.append(ColumnSpan(label.upper(), range_start, None))
        return spans

    def parse_lines(self, lines: list[str]) -> list[SpoolFile]:
        """
        Parse a spool table.

        Args:
            lines: Table lines, header first; parsing stops at the
                "N spool files" footer

        Returns:
            Spool files in listed order
        """
        if not lines:
            return []

        spans = self.column_ranges(lines[0])
        for span in spans:
            if span.name not in self.COLUMN_MAP:
                logger.debug("Ignoring unrecognised spool column %r", span.name)

        spool_files = []
        for line in lines[1:]:
            if self.FOOTER_PATTERN.search(line):
                break
            if not line.strip():
                continue
            spool_files.append(self.parse_row(line, spans))
        return spool_files

    def parse_row(self, line: str, spans: list[ColumnSpan]) -> SpoolFile:
        """Parse one spool table row."""
        values: dict[str, Any] = {}
        raw_fields = {}
        for span in spans:
            text = span.slice(line)
            if self.keep_raw_fields:
                raw_fields[span.name.lower()] = text
            mapping = self.COLUMN_MAP.get(span.name)
            if mapping:
                attribute, convert = mapping
                values[attribute] = convert(text)

        if values.get("id") is None:
            values["id"] = -1
        return SpoolFile(raw_fields=raw_fields, **values)
