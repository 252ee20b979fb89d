"""
JES Job Log Utilities.

Recovers a job's return code from its JESMSGLG text, builds spool file
addresses, and splits a concatenated all-files log.

Eye-catchers searched for in each log line:

    $HASP395 TESTJOB1 ENDED - RC=0008          -> NumericRC(8)
    $HASP395 SLEEP    ENDED - ABEND=S222       -> SymbolicRC("ABEND S222")
    ... SUBMITTER IS NOT AUTHORIZED BY USER    -> SymbolicRC("SEC ERROR")

Example:
    >>> RCExtractor().extract(log_text)
    NumericRC(value=8)
"""

import logging
import re
from typing import Optional

from mf_ftp.core.models import NumericRC, ReturnCode, SymbolicRC

logger = logging.getLogger(__name__)


SPOOL_SEPARATOR = "!! END OF JES SPOOL FILE !!"
ALL_SPOOL_FILES = "x"


class RCExtractor:
    """
    Scans job log text for terminal return code eye-catchers.

    Lines are checked top to bottom; on each line the first eye-catcher
    found wins, and the last matching line in the log decides the result.
    """

    RC_EYE_CATCHER = "ENDED - RC="
    ABEND_EYE_CATCHER = "ENDED - ABEND="
    SECURITY_EYE_CATCHER = "NOT AUTHORIZED"
    SECURITY_ERROR = "SEC ERROR"

    RC_PATTERN = re.compile(r"ENDED - RC=\s*(\d+)")
    ABEND_PATTERN = re.compile(r"ENDED - ABEND=\s*(.*)$")

    def extract_line(self, line: str) -> Optional[ReturnCode]:
        """
        Read a return code from one log line.

        Args:
            line: Log line

        Returns:
            Return code, or None when the line has no usable eye-catcher
        """
        if self.RC_EYE_CATCHER in line:
            match = self.RC_PATTERN.search(line)
            if not match:
                logger.debug("RC eye-catcher without digits: %r", line)
                return None
            return NumericRC(int(match.group(1)))
        if self.ABEND_EYE_CATCHER in line:
            match = self.ABEND_PATTERN.search(line)
            return SymbolicRC(f"ABEND {match.group(1).strip()}")
        if self.SECURITY_EYE_CATCHER in line:
            return SymbolicRC(self.SECURITY_ERROR)
        return None

    def extract(self, log_text: str) -> Optional[ReturnCode]:
        """
        Read the final return code from a job log.

        Args:
            log_text: Decoded JESMSGLG text

        Returns:
            Last return code found, or None when the log has none
        """
        rc = None
        for line in log_text.splitlines():
            found = self.extract_line(line)
            if found is not None:
                rc = found
        return rc


def spool_file_address(job_id: str, file_id: Optional[int] = None) -> str:
    """
    Build the remote name of a job's spool file.

    Args:
        job_id: JES job ID
        file_id: Spool file index; None (or -1) for all files concatenated

    Returns:
        "<jobId>.<n>" or "<jobId>.x"
    """
    if file_id is None or file_id < 0:
        return f"{job_id}.{ALL_SPOOL_FILES}"
    return f"{job_id}.{file_id}"


def split_spool_files(log_text: str) -> list[str]:
    """
    Split a concatenated log into its spool files.

    Args:
        log_text: Text fetched from "<jobId>.x"

    Returns:
        Spool file contents in order, without the separator lines
    """
    parts = log_text.split(SPOOL_SEPARATOR)
    if parts and not parts[-1].strip():
        parts.pop()
    return [part.strip("\r\n") for part in parts]
