"""
Listing Classification and Dispatch.

A LIST reply carries no explicit type, so its shape is decided from the
header line and the matching parser is applied:

    "total ..."                      -> USS directory listing
    contains "Volume" and "Dsname"   -> MVS dataset listing
    contains "Name" and "Id"         -> PDS member listing
    contains "Name" and "Amode"      -> load-library member listing
    first token is a file mode       -> USS listing without a total line

Checks are case-sensitive substring tests applied in that order.

Example:
    >>> TableClassifier().classify(["Volume Unit    Referred Ext Used ... Dsname"])
    <ListingKind.DATASET: 'dataset'>
    >>> entries = parse_listing(lines, keep_raw_fields=True)
"""

import logging
import re
from typing import Any, Optional

from mf_ftp.core.base import BaseListingParser, ClassificationError, ListingKind
from mf_ftp.parsers.dataset_parser import DatasetListParser
from mf_ftp.parsers.member_parser import LoadLibMemberParser, MemberListParser
from mf_ftp.parsers.uss_parser import FILE_MODE_PATTERN, USSListParser

logger = logging.getLogger(__name__)


class TableClassifier:
    """Decides the ListingKind of a raw listing from its first line."""

    TOTAL_PREFIX = "total"

    # (kind, labels that must all appear in the header)
    SIGNATURES: list[tuple[ListingKind, tuple[str, ...]]] = [
        (ListingKind.DATASET, ("Volume", "Dsname")),
        (ListingKind.MEMBER, ("Name", "Id")),
        (ListingKind.LOADLIB, ("Name", "Amode")),
    ]

    def classify(self, lines: list[str]) -> ListingKind:
        """
        Classify a listing.

        Args:
            lines: Response lines

        Returns:
            ListingKind; UNRECOGNIZED when no signature matches
        """
        if not lines:
            return ListingKind.UNRECOGNIZED

        header = lines[0]
        if header.startswith(self.TOTAL_PREFIX):
            return ListingKind.USS

        for kind, labels in self.SIGNATURES:
            if all(label in header for label in labels):
                return kind

        if " " in header and FILE_MODE_PATTERN.match(header.split()[0]):
            return ListingKind.USS

        return ListingKind.UNRECOGNIZED


def parser_for(
    kind: ListingKind,
    keep_raw_fields: bool = False,
    current_year: Optional[int] = None,
) -> BaseListingParser:
    """
    Return the parser for a listing kind.

    Args:
        kind: Classified listing kind
        keep_raw_fields: Whether parsers fill raw_fields
        current_year: Year override for USS dates

    Returns:
        Parser instance

    Raises:
        ValueError: For ListingKind.UNRECOGNIZED
    """
    if kind is ListingKind.DATASET:
        return DatasetListParser(keep_raw_fields=keep_raw_fields)
    if kind is ListingKind.MEMBER:
        return MemberListParser(keep_raw_fields=keep_raw_fields)
    if kind is ListingKind.LOADLIB:
        return LoadLibMemberParser(keep_raw_fields=keep_raw_fields)
    if kind is ListingKind.USS:
        return USSListParser(keep_raw_fields=keep_raw_fields, current_year=current_year)
    raise ValueError(f"No parser for listing kind {kind.value!r}")


def parse_listing(
    lines: list[str],
    keep_raw_fields: bool = False,
    current_year: Optional[int] = None,
) -> list[Any]:
    """
    Classify and parse a listing.

    Args:
        lines: Response lines
        keep_raw_fields: Whether entries carry the raw_fields map
        current_year: Year override for USS dates

    Returns:
        Parsed entries; empty for an empty reply

    Raises:
        ClassificationError: If the header matches no known listing
    """
    if not lines:
        return []

    kind = TableClassifier().classify(lines)
    if kind is ListingKind.UNRECOGNIZED:
        raise ClassificationError(lines[0])

    logger.debug("Classified listing as %s", kind.value)
    parser = parser_for(kind, keep_raw_fields=keep_raw_fields, current_year=current_year)
    return parser.parse_lines(lines)
