"""
MVS Dataset Listing Parser.

Parses the dataset list returned for a dataset-name pattern:

    Volume Unit    Referred Ext Used Recfm Lrecl BlkSz Dsorg Dsname
    F1DBAR 3390   2016/12/19  3   19  FB      80  3120  PO  CB12V51.CNTL
    XRFS95 3390   2017/08/04  313875  FB    1024 27648  PS  'USER.T2.HISPAXZ'
                                                       VSAM DDIR
    Migrated                                                CPPOBJS.OBJ
    250 List completed successfully.

Columns are decoded positionally (see RowDecoder.decode_boundary): the
"Ext" and "Used" values above abut when the extent count has one digit
more than fits under its label.

Example:
    >>> parser = DatasetListParser()
    >>> entries = parser.parse_file("datasets.txt")
    >>> [e.name for e in entries if not e.is_migrated]
"""

import logging
from typing import Callable, Any

from mf_ftp.core.base import BaseListingParser
from mf_ftp.core.models import DatasetEntry
from mf_ftp.parsers.columns import ColumnSpan, HeaderSpanResolver, RowDecoder, parse_int
from mf_ftp.utils.dsn import strip_quotes

logger = logging.getLogger(__name__)


class DatasetListParser(BaseListingParser):
    """
    Parser for MVS dataset listings.

    Attributes:
        keep_raw_fields: Whether to fill each entry's raw_fields map
    """

    FOOTER_TEXT = "list completed successfully"
    MIGRATED_MARKER = "Migrated"

    # Upper-cased header label -> (attribute, converter)
    COLUMN_MAP: dict[str, tuple[str, Callable[[str], Any]]] = {
        "VOLUME": ("volume", str),
        "UNIT": ("unit", str),
        "REFERRED": ("referred", str),
        "EXT": ("extents", parse_int),
        "USED": ("used_tracks", parse_int),
        "RECFM": ("record_format", str),
        "LRECL": ("record_length", parse_int),
        "BLKSZ": ("block_size", parse_int),
        "DSORG": ("ds_org", str),
        "DSNAME": ("name", strip_quotes),
    }

    def __init__(self, keep_raw_fields: bool = False):
        self.keep_raw_fields = keep_raw_fields
        self.resolver = HeaderSpanResolver()
        self.decoder = RowDecoder()

    def parse_lines(self, lines: list[str]) -> list[DatasetEntry]:
        """
        Parse a dataset listing.

        Args:
            lines: Response lines, header first, optional footer last

        Returns:
            One entry per data row
        """
        if not lines:
            return []

        header = lines[0]
        rows = list(lines[1:])
        if rows and self.FOOTER_TEXT in rows[-1].lower():
            logger.debug("Dropping listing footer: %s", rows[-1].strip())
            rows.pop()

        spans = self.resolver.contiguous_spans(header)
        return [self.parse_row(line, spans) for line in rows if line.strip()]

    def parse_row(self, line: str, spans: list[ColumnSpan]) -> DatasetEntry:
        """
        Parse one data row.

        Args:
            line: Data line
            spans: Contiguous spans resolved from the header

        Returns:
            DatasetEntry (migrated, decoded, or raw-only)
        """
        tokens = line.split()
        if len(tokens) > 1 and tokens[0] == self.MIGRATED_MARKER:
            return self._migrated_entry(line, tokens, spans)

        fields = self.decoder.decode_boundary(line, spans)
        if len(fields) != len(spans):
            logger.debug(
                "Row has %d of %d columns, keeping raw text only: %r",
                len(fields), len(spans), line,
            )
            return DatasetEntry(raw_text=line, is_migrated=False)

        names = tuple(span.name for span in spans)
        values: dict[str, Any] = {}
        for header_name, text in zip(names, fields):
            mapping = self.COLUMN_MAP.get(header_name.upper())
            if mapping is None:
                continue
            attribute, convert = mapping
            values[attribute] = convert(text) if text else None

        raw_fields = {}
        if self.keep_raw_fields:
            raw_fields = {
                name: strip_quotes(text) if name.upper() == "DSNAME" else text
                for name, text in zip(names, fields)
            }

        values["name"] = values.get("name") or ""
        return DatasetEntry(
            raw_text=line,
            field_names=names,
            raw_fields=raw_fields,
            is_migrated=False,
            **values,
        )

    def decode_fields(self, header: str, entry: DatasetEntry) -> dict[str, str]:
        """
        Re-decode an entry's raw text against a header.

        Args:
            header: Header line the entry was parsed under
            entry: Previously parsed entry

        Returns:
            Header name -> decoded text for the entry's field names
        """
        spans = self.resolver.contiguous_spans(header)
        fields = self.decoder.decode_boundary(entry.raw_text, spans)
        decoded = dict(zip((span.name for span in spans), fields))
        return {
            name: strip_quotes(decoded[name]) if name.upper() == "DSNAME" else decoded[name]
            for name in entry.field_names
        }

    def _migrated_entry(
        self,
        line: str,
        tokens: list[str],
        spans: list[ColumnSpan],
    ) -> DatasetEntry:
        name = strip_quotes(tokens[-1])
        raw_fields: dict[str, str] = {}
        if self.keep_raw_fields and spans:
            raw_fields = {spans[0].name: tokens[0], "Dsname": name}
        return DatasetEntry(
            raw_text=line,
            raw_fields=raw_fields,
            name=name,
            is_migrated=True,
        )
