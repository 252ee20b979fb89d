"""
Unix-Subsystem Directory Listing Parser.

Parses "ls -l" style listings:

    total 554
    lrwxrwxrwx   1 CLASGEN  GRP2611        9 Jul 13 19:13 $SYSNAME -> $SYSNAME/
    drwxr-xr-x   2 CEC3     GRP2611     8192 Oct 10  2017 CEC3
    -rwx------   1 USER     GRP2611     1749 Aug 25  2004 DetailMerge

The "total" count line is optional: a listing of a single file or link
starts directly with its entry.

Example:
    >>> parser = USSListParser(current_year=2024)
    >>> entries = parser.parse_file("ls.txt")
    >>> [e.name for e in entries if e.file_type is FileType.DIRECTORY]
"""

import logging
import re
from datetime import date
from typing import Optional

from mf_ftp.core.base import BaseListingParser, FileType
from mf_ftp.core.models import USSEntry
from mf_ftp.parsers.columns import parse_int

logger = logging.getLogger(__name__)


MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

FILE_MODE_PATTERN = re.compile(r"^[dlrwx-]+$")

# Type character and nine permission characters, including setuid,
# setgid and sticky bits
ENTRY_MODE_PATTERN = re.compile(r"^[-dlcbps][-rwxsStT]{9}$")


class USSListParser(BaseListingParser):
    """
    Parser for Unix-subsystem directory listings.

    Attributes:
        keep_raw_fields: Whether to fill each entry's raw_fields map
        current_year: Year given to entries listed with a time of day
            instead of a year; defaults to the current year
    """

    COLUMNS = ["permissions", "links", "owner", "group", "size"]
    LINK_SEPARATOR = " -> "
    TOTAL_PREFIX = "total"

    # Mode string's first character -> entry type
    FILE_TYPES = {
        "d": FileType.DIRECTORY,
        "l": FileType.LINK,
        "-": FileType.FILE,
    }

    def __init__(self, keep_raw_fields: bool = False, current_year: Optional[int] = None):
        self.keep_raw_fields = keep_raw_fields
        self.current_year = current_year

    def parse_lines(self, lines: list[str]) -> list[USSEntry]:
        """
        Parse a directory listing.

        Args:
            lines: Response lines, optionally starting with "total N"

        Returns:
            One entry per file line
        """
        rows = list(lines)
        if rows and rows[0].startswith(self.TOTAL_PREFIX):
            rows.pop(0)

        entries = []
        for line in rows:
            entry = self.parse_row(line)
            if entry is not None:
                entries.append(entry)
        return entries

    def parse_row(self, line: str) -> Optional[USSEntry]:
        """
        Parse one file line.

        Args:
            line: Data line

        Returns:
            Decoded entry, a raw-only entry when the line is too short,
            or None when the line does not start with a file mode
        """
        fields = line.split()
        if not fields or not ENTRY_MODE_PATTERN.match(fields[0]):
            logger.debug("Skipping non-entry line: %r", line)
            return None

        if len(fields) < 9:
            logger.debug("USS line has %d fields, keeping raw text only: %r", len(fields), line)
            return USSEntry(raw_text=line)

        permissions, links, owner, group, size = fields[:5]
        file_type = self.FILE_TYPES.get(permissions[0], FileType.FILE)

        name = " ".join(fields[8:])
        link_to = None
        if file_type is FileType.LINK and self.LINK_SEPARATOR in name:
            name, link_to = name.split(self.LINK_SEPARATOR, 1)

        raw_fields = {}
        if self.keep_raw_fields:
            raw_fields = dict(zip(self.COLUMNS, fields[:5]))

        return USSEntry(
            raw_text=line,
            field_names=tuple(self.COLUMNS),
            raw_fields=raw_fields,
            name=name,
            file_type=file_type,
            permissions=permissions,
            links=parse_int(links),
            owner=owner,
            group=group,
            size=parse_int(size),
            last_modified=self.parse_date(fields[5], fields[6], fields[7]),
            link_to=link_to,
        )

    def parse_date(self, month: str, day: str, year_or_time: str) -> Optional[date]:
        """
        Build the modification date from "Mon D YYYY" or "Mon D HH:MM".

        Args:
            month: Abbreviated English month name
            day: Day of month
            year_or_time: Four-digit year, or a time of day

        Returns:
            Date, or None when the month or day is not recognised
        """
        if month not in MONTHS or not day.isdigit():
            return None

        if ":" in year_or_time:
            year = self.current_year or date.today().year
        else:
            year = parse_int(year_or_time)
            if year is None:
                return None

        try:
            return date(year, MONTHS.index(month) + 1, int(day))
        except ValueError:
            return None

    def decode_fields(self, entry: USSEntry) -> dict[str, str]:
        """Re-decode an entry's fixed columns from its raw text."""
        decoded = dict(zip(self.COLUMNS, entry.raw_text.split()))
        return {name: decoded[name] for name in entry.field_names}
