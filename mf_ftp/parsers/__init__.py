"""
Parsers Module.

Provides parsers for the reply formats of a mainframe FTP service:
    - DatasetListParser: MVS dataset listings
    - MemberListParser: PDS member listings with ISPF statistics
    - LoadLibMemberParser: Load-library member listings
    - USSListParser: Unix-subsystem directory listings
    - SpoolTableParser: JES spool file tables
    - RCExtractor: Return codes from JESMSGLG text

Example:
    >>> from mf_ftp.parsers import parse_listing
    >>> entries = parse_listing(lines)
    >>> for entry in entries:
    ...     print(entry.name)
"""

from mf_ftp.parsers.columns import ColumnSpan, HeaderSpanResolver, RowDecoder
from mf_ftp.parsers.dataset_parser import DatasetListParser
from mf_ftp.parsers.member_parser import LoadLibMemberParser, MemberListParser
from mf_ftp.parsers.uss_parser import USSListParser
from mf_ftp.parsers.spool_parser import SpoolTableParser
from mf_ftp.parsers.job_parser import JobLineParser, parse_job_line, parse_job_list, parse_submit_reply
from mf_ftp.parsers.jes_log import RCExtractor, split_spool_files, spool_file_address
from mf_ftp.parsers.listing import TableClassifier, parse_listing

__all__ = [
    "ColumnSpan",
    "HeaderSpanResolver",
    "RowDecoder",
    "DatasetListParser",
    "MemberListParser",
    "LoadLibMemberParser",
    "USSListParser",
    "SpoolTableParser",
    "JobLineParser",
    "parse_job_line",
    "parse_job_list",
    "parse_submit_reply",
    "RCExtractor",
    "split_spool_files",
    "spool_file_address",
    "TableClassifier",
    "parse_listing",
]
