"""
Partitioned Dataset Member Parsers.

Parses the two member list shapes returned for "<pds>(*)":

Source library (ISPF statistics):

     Name     VV.MM   Created       Changed      Size  Init   Mod   Id
    JVBR30    01.01 2018/09/07 2018/09/07 03:52    13    13     0 USER

Load library:

     Name      Size     TTR   Alias-of AC --------- Attributes --------- Amode Rmode
    DD        03DBD8   031506 IRRENV00 01 FO             RN RU            31    24

The "Changed" column holds a date and a time separated by a space, so
source-library rows are split on whitespace that is not followed by a
time of day. Load-library values are located by scanning outwards from
each header label, because labels sit centred over values of a
different width.

Example:
    >>> parser = LoadLibMemberParser()
    >>> members = parser.parse_file("loadlib.txt")
    >>> members[0].size
    252888
"""

import logging
import re
from typing import Callable, Any

from mf_ftp.core.base import BaseListingParser
from mf_ftp.core.models import DatasetMemberEntry, LoadLibMemberEntry
from mf_ftp.parsers.columns import ColumnSpan, HeaderSpanResolver, RowDecoder, parse_int

logger = logging.getLogger(__name__)


def _parse_hex(text: str) -> Any:
    return parse_int(text, 16)


class MemberListParser(BaseListingParser):
    """
    Parser for source-library member lists with ISPF statistics.

    Attributes:
        keep_raw_fields: Whether to fill each entry's raw_fields map
    """

    # Whitespace not followed by "hh:" keeps "2018/09/07 03:52" together
    FIELD_SEPARATOR = re.compile(r"\s+(?!\d+:)")

    COLUMN_MAP: dict[str, tuple[str, Callable[[str], Any]]] = {
        "NAME": ("name", str),
        "VV.MM": ("version", str),
        "CREATED": ("created", str),
        "CHANGED": ("changed", str),
        "SIZE": ("size", parse_int),
        "INIT": ("init_lines", parse_int),
        "MOD": ("modified_lines", parse_int),
        "ID": ("user_id", str),
    }

    def __init__(self, keep_raw_fields: bool = False):
        self.keep_raw_fields = keep_raw_fields

    def parse_lines(self, lines: list[str]) -> list[DatasetMemberEntry]:
        """
        Parse a member list.

        Args:
            lines: Response lines, header first

        Returns:
            One entry per member row
        """
        if not lines:
            return []

        headers = lines[0].split()
        return [self.parse_row(line, headers) for line in lines[1:] if line.strip()]

    def split_row(self, line: str) -> list[str]:
        """Split a member row into its field strings."""
        return self.FIELD_SEPARATOR.split(line.strip())

    def parse_row(self, line: str, headers: list[str]) -> DatasetMemberEntry:
        """
        Parse one member row.

        Args:
            line: Data line
            headers: Header labels

        Returns:
            Decoded entry, or a raw-only entry when the field count differs
        """
        fields = self.split_row(line)
        if len(fields) != len(headers):
            logger.debug(
                "Member row has %d of %d fields, keeping raw text only: %r",
                len(fields), len(headers), line,
            )
            return DatasetMemberEntry(raw_text=line)

        values: dict[str, Any] = {}
        for header_name, text in zip(headers, fields):
            mapping = self.COLUMN_MAP.get(header_name.upper())
            if mapping:
                attribute, convert = mapping
                values[attribute] = convert(text)

        return DatasetMemberEntry(
            raw_text=line,
            field_names=tuple(headers),
            raw_fields=dict(zip(headers, fields)) if self.keep_raw_fields else {},
            **values,
        )

    def decode_fields(self, header: str, entry: DatasetMemberEntry) -> dict[str, str]:
        """Re-decode an entry's raw text against its header."""
        decoded = dict(zip(header.split(), self.split_row(entry.raw_text)))
        return {name: decoded[name] for name in entry.field_names}


class LoadLibMemberParser(BaseListingParser):
    """
    Parser for load-library member lists.

    Attributes:
        keep_raw_fields: Whether to fill each entry's raw_fields map
    """

    ATTRIBUTES_BANNER = re.compile(r"-+ Attributes -+")
    ATTRIBUTES_COLUMN = "Attributes"

    COLUMN_MAP: dict[str, tuple[str, Callable[[str], Any]]] = {
        "NAME": ("name", str),
        "SIZE": ("size", _parse_hex),
        "TTR": ("ttr", str),
        "ALIAS-OF": ("alias_of", str),
        "AC": ("ac", parse_int),
        "ATTRIBUTES": ("attributes", str),
        "AMODE": ("amode", str),
        "RMODE": ("rmode", str),
    }

    def __init__(self, keep_raw_fields: bool = False):
        self.keep_raw_fields = keep_raw_fields
        self.resolver = HeaderSpanResolver()
        self.decoder = RowDecoder()

    def header_spans(self, header: str) -> list[ColumnSpan]:
        """Resolve the column spans of a load-library header."""
        return self.resolver.anchored_spans(
            header, self.ATTRIBUTES_BANNER, self.ATTRIBUTES_COLUMN
        )

    def parse_lines(self, lines: list[str]) -> list[LoadLibMemberEntry]:
        """
        Parse a load-library member list.

        Args:
            lines: Response lines, header first

        Returns:
            One entry per member row

        Raises:
            ParseError: If the header has no attributes banner
        """
        if not lines:
            return []

        spans = self.header_spans(lines[0])
        return [self.parse_row(line, spans) for line in lines[1:] if line.strip()]

    def parse_row(self, line: str, spans: list[ColumnSpan]) -> LoadLibMemberEntry:
        """Parse one load-library member row."""
        fields = self.decoder.decode_anchored(line, spans)
        names = tuple(span.name for span in spans)

        values: dict[str, Any] = {}
        for header_name, text in zip(names, fields):
            mapping = self.COLUMN_MAP.get(header_name.upper())
            if mapping:
                attribute, convert = mapping
                values[attribute] = convert(text)

        return LoadLibMemberEntry(
            raw_text=line,
            field_names=names,
            raw_fields=dict(zip(names, fields)) if self.keep_raw_fields else {},
            **values,
        )

    def decode_fields(self, header: str, entry: LoadLibMemberEntry) -> dict[str, str]:
        """Re-decode an entry's raw text against its header."""
        spans = self.header_spans(header)
        decoded = dict(zip(
            (span.name for span in spans),
            self.decoder.decode_anchored(entry.raw_text, spans),
        ))
        return {name: decoded[name] for name in entry.field_names}
