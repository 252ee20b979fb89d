"""
Mainframe FTP Report Parsing Framework.

Turns the line-oriented replies of a mainframe FTP service (dataset,
member and USS listings, JES job lists, job status and job logs) into
typed records, and classifies submitted jobs into lifecycle states.

Architecture:
    mf_ftp/
    ├── core/           # Records, errors, job state resolution, accessor
    ├── parsers/        # Column decoding and per-listing parsers
    ├── converters/     # Record to Spark schema conversion
    ├── utils/          # DSN quoting, encoding, files, logging
    └── config/         # Configuration management

Usage:
    from mf_ftp import MainframeAccessor, parse_listing

    entries = parse_listing(lines)
    accessor = MainframeAccessor(transport)
    state = accessor.query_job("JOB00083")
"""

__version__ = "1.0.0"
__author__ = "Mainframe Migration Team"

from mf_ftp.core.accessor import MainframeAccessor
from mf_ftp.core.base import JobState
from mf_ftp.parsers.listing import parse_listing
from mf_ftp.config.settings import ParserConfig

__all__ = [
    "MainframeAccessor",
    "JobState",
    "parse_listing",
    "ParserConfig",
    "__version__",
]
