"""
Core module for records, job state resolution and remote queries.

This module provides:
    - Record types and errors shared by all parsers
    - JobStatusResolver: JES job state machine
    - MainframeAccessor: Query front end over an FtpTransport
"""

from mf_ftp.core.base import (
    BaseListingParser,
    ClassificationError,
    FileType,
    JobState,
    ListingKind,
    MissingJobHeaderError,
    NoDataFoundError,
    OutputFormat,
    ParseError,
)
from mf_ftp.core.models import (
    DatasetEntry,
    DatasetMemberEntry,
    Job,
    JobStatus,
    LoadLibMemberEntry,
    NumericRC,
    SpoolFile,
    SymbolicRC,
    USSEntry,
)
from mf_ftp.core.resolver import JobStatusResolver
from mf_ftp.core.transport import FtpTransport
from mf_ftp.core.accessor import MainframeAccessor

__all__ = [
    "BaseListingParser",
    "ClassificationError",
    "FileType",
    "JobState",
    "ListingKind",
    "MissingJobHeaderError",
    "NoDataFoundError",
    "OutputFormat",
    "ParseError",
    "DatasetEntry",
    "DatasetMemberEntry",
    "Job",
    "JobStatus",
    "LoadLibMemberEntry",
    "NumericRC",
    "SpoolFile",
    "SymbolicRC",
    "USSEntry",
    "JobStatusResolver",
    "FtpTransport",
    "MainframeAccessor",
]
