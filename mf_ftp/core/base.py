"""
Base classes for report parsing operations.

Provides the enumerations, error types and abstract parser base used
across all listing parsers (datasets, members, USS files, JES jobs).
"""

from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Any


class FileType(Enum):
    """Type of a Unix-subsystem directory entry."""
    FILE = "file"
    DIRECTORY = "directory"
    LINK = "link"


class ListingKind(Enum):
    """Shape of a raw listing, decided once from its header line."""
    DATASET = "dataset"
    MEMBER = "member"
    LOADLIB = "loadlib"
    USS = "uss"
    UNRECOGNIZED = "unrecognized"


class JobState(Enum):
    """Lifecycle state of a submitted batch job."""
    SUCCESS = "success"
    ACTIVE = "active"
    FAIL = "fail"
    WAITING = "waiting"
    NOT_FOUND = "not found"

    @property
    def is_terminal(self) -> bool:
        """Check if the job will not change state on a later query."""
        return self in (JobState.SUCCESS, JobState.FAIL, JobState.NOT_FOUND)


class OutputFormat(Enum):
    """Supported export formats."""
    JSON = "json"
    PARQUET = "parquet"
    CSV = "csv"


class ParseError(ValueError):
    """Raised when a report cannot be decoded without guessing."""


class ClassificationError(ParseError):
    """
    Raised when no listing signature matches the header line.

    Attributes:
        header: The header line that failed classification
    """

    def __init__(self, header: str):
        super().__init__(f"Unrecognized file list header: {header!r}")
        self.header = header


class MissingJobHeaderError(ParseError):
    """
    Raised when a job status response has no JOBNAME header line.

    Attributes:
        job_id: Job ID that was queried
    """

    def __init__(self, job_id: str):
        super().__init__(f"Cannot find job header line for {job_id}")
        self.job_id = job_id


class NoDataFoundError(Exception):
    """
    Signal raised by a transport when the remote side found nothing.

    This covers replies such as "No data sets found" or "No members found".
    It is not a failure: listing queries translate it to an empty list.
    """


class BaseListingParser(ABC):
    """
    Abstract base class for all listing parsers.

    Subclasses implement parse_lines(); file and string input are
    provided here so every parser accepts the same three input shapes.

    Example:
        >>> class EchoParser(BaseListingParser):
        ...     def parse_lines(self, lines):
        ...         return list(lines)
        >>> EchoParser().parse_content("a\\nb")
        ['a', 'b']
    """

    @abstractmethod
    def parse_lines(self, lines: list[str]) -> list[Any]:
        """
        Parse the response lines of one query.

        Args:
            lines: Response lines, header first

        Returns:
            List of parsed records
        """
        pass

    def parse_content(self, content: str) -> list[Any]:
        """
        Parse a listing held in a single string.

        Args:
            content: Raw listing text

        Returns:
            List of parsed records
        """
        return self.parse_lines(split_report_lines(content))

    def parse_file(self, filepath: str) -> list[Any]:
        """
        Parse a listing saved to a local file.

        Args:
            filepath: Path to the saved listing

        Returns:
            List of parsed records

        Raises:
            FileNotFoundError: If the file doesn't exist
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Listing not found: {filepath}")

        content = path.read_text(encoding="utf-8", errors="replace")
        return self.parse_content(content)


def split_report_lines(content: str) -> list[str]:
    """
    Split report text into lines, dropping CR and trailing blank lines.

    Args:
        content: Raw report text

    Returns:
        Report lines
    """
    lines = [line.rstrip("\r") for line in content.split("\n")]
    while lines and not lines[-1].strip():
        lines.pop()
    return lines
