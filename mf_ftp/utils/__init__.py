"""
Utilities Module.

Provides utility functions for report handling:
    - dsn: Dataset name quoting
    - encoding: Job log decoding (EBCDIC code pages, CCSIDs)
    - file_utils: Saved report and manifest files
    - log: Logging configuration for the CLI

Example:
    >>> from mf_ftp.utils import ensure_fully_qualified
    >>> ensure_fully_qualified("USER.CNTL")
    "'USER.CNTL'"
"""

from mf_ftp.utils.dsn import ensure_fully_qualified, is_fully_qualified, remove_quotes, strip_quotes
from mf_ftp.utils.encoding import CCSID_CODECS, decode_text
from mf_ftp.utils.file_utils import ensure_directory, read_report

__all__ = [
    "ensure_fully_qualified",
    "is_fully_qualified",
    "remove_quotes",
    "strip_quotes",
    "CCSID_CODECS",
    "decode_text",
    "ensure_directory",
    "read_report",
]
