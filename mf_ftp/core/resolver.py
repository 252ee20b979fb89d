"""
Job State Resolution.

Turns JES job summary lines and job status responses into a JobState.

State rules, keyed by status and then by the trailing text:

    INPUT                      -> WAITING
    HELD                       -> FAIL
    ACTIVE                     -> ACTIVE
    OUTPUT + RC=nnnn           -> SUCCESS if nnnn is 0, else FAIL
    OUTPUT + ABEND=            -> FAIL
    OUTPUT + (JCL error)       -> FAIL
    OUTPUT otherwise           -> undecided; read the RC from JESMSGLG
    any other status           -> FAIL
    job ID not listed          -> NOT_FOUND

Example:
    >>> resolver = JobStatusResolver()
    >>> resolver.classify(parse_job_line("HELLO JOB00083 USER1 OUTPUT A ABEND=806"))
    <JobState.FAIL: 'fail'>
"""

import logging
import re
from dataclasses import replace
from typing import Optional

from mf_ftp.core.base import JobState, MissingJobHeaderError
from mf_ftp.core.models import (
    Job,
    JobStatus,
    NumericRC,
    ReturnCode,
    SpoolFile,
    SymbolicRC,
)
from mf_ftp.parsers.job_parser import parse_job_line
from mf_ftp.parsers.spool_parser import SpoolTableParser

logger = logging.getLogger(__name__)


class JobStatusResolver:
    """
    Classifies jobs and assembles JobStatus records.

    Attributes:
        keep_raw_fields: Whether spool files carry their raw_fields map
    """

    HEADER_PATTERN = re.compile(r"^\s*JOBNAME\s+", re.IGNORECASE)
    SPOOL_HEADER_PATTERN = re.compile(r"^\s+ID\s+", re.IGNORECASE)
    RC_PATTERN = re.compile(r"(?:^|\s)RC=(\d+)", re.IGNORECASE)
    ABEND_PATTERN = re.compile(r"ABEND=(\S+)")

    JCL_ERROR = "JCL ERROR"
    MESSAGE_LOG_DD = "JESMSGLG"

    def __init__(self, keep_raw_fields: bool = False):
        self.keep_raw_fields = keep_raw_fields

    def find_job(self, jobs: list[Job], job_id: str) -> Optional[Job]:
        """Return the job whose ID matches, ignoring case."""
        wanted = job_id.upper()
        for job in jobs:
            if job.job_id and job.job_id.upper() == wanted:
                return job
        return None

    def classify(self, job: Job) -> Optional[JobState]:
        """
        Classify one job from its summary line.

        Args:
            job: Parsed job line

        Returns:
            JobState, or None for an OUTPUT job whose line carries no
            return code (the caller reads JESMSGLG)
        """
        status = job.status
        extra = job.extra or ""

        if status == "INPUT":
            return JobState.WAITING
        if status == "HELD":
            return JobState.FAIL
        if status == "ACTIVE":
            return JobState.ACTIVE
        if status != "OUTPUT":
            return JobState.FAIL

        rc_match = self.RC_PATTERN.search(extra)
        if rc_match:
            return JobState.SUCCESS if int(rc_match.group(1)) == 0 else JobState.FAIL
        if "ABEND=" in extra or "JCL error" in extra:
            return JobState.FAIL
        return None

    def resolve(self, jobs: list[Job], job_id: str) -> Optional[JobState]:
        """
        Resolve a job's state from a job list.

        Args:
            jobs: Parsed job list
            job_id: Job ID to look for

        Returns:
            JobState, or None when the RC must be read from the job log
        """
        job = self.find_job(jobs, job_id)
        if job is None:
            return JobState.NOT_FOUND
        return self.classify(job)

    def state_for_rc(self, rc: Optional[ReturnCode]) -> JobState:
        """
        Map a return code recovered from a job log to a final state.

        Args:
            rc: Return code, None when the log had no eye-catcher

        Returns:
            SUCCESS for a numeric zero, FAIL otherwise
        """
        if rc is None:
            logger.warning("No return code found in job log, treating job as failed")
            return JobState.FAIL
        return JobState.SUCCESS if isinstance(rc, NumericRC) and rc.is_zero else JobState.FAIL

    def build_status(self, lines: list[str], job_id: str) -> JobStatus:
        """
        Assemble a JobStatus from a job status response.

        Args:
            lines: Response lines for the job ID
            job_id: Queried job ID

        Returns:
            JobStatus; rc is None when the caller must read JESMSGLG

        Raises:
            MissingJobHeaderError: If no JOBNAME header line is present
        """
        header_index = next(
            (i for i, line in enumerate(lines) if self.HEADER_PATTERN.match(line)),
            None,
        )
        if header_index is None or header_index + 1 >= len(lines):
            raise MissingJobHeaderError(job_id)

        job = parse_job_line(lines[header_index + 1].strip())
        if job is None:
            raise MissingJobHeaderError(job_id)

        rc, retcode = self.rc_from_extra(job.extra)
        return JobStatus(
            job_name=job.job_name,
            job_id=job.job_id,
            owner=job.owner,
            status=job.status,
            job_class=job.job_class,
            extra=job.extra,
            rc=rc,
            retcode=retcode,
            spool_files=tuple(self.spool_files(lines)),
        )

    def rc_from_extra(self, extra: Optional[str]) -> tuple[Optional[ReturnCode], Optional[str]]:
        """
        Read the return code carried by a job line's trailing text.

        Args:
            extra: Trailing text of the job line

        Returns:
            (rc, retcode); both None when the text carries no code
        """
        if not extra:
            return None, None

        if "error" in extra:
            return SymbolicRC(self.JCL_ERROR), self.JCL_ERROR

        abend = self.ABEND_PATTERN.search(extra)
        if abend:
            rc = SymbolicRC(f"ABEND {abend.group(1)}")
            return rc, rc.render()

        for token in extra.split():
            key, sep, value = token.partition("=")
            if sep and key.upper() == "RC" and value.isdigit():
                return NumericRC(int(value)), f"{key} {value}"
        return None, None

    def spool_files(self, lines: list[str]) -> list[SpoolFile]:
        """Parse the spool table of a status response, if it has one."""
        for index, line in enumerate(lines):
            if self.SPOOL_HEADER_PATTERN.match(line):
                parser = SpoolTableParser(keep_raw_fields=self.keep_raw_fields)
                return parser.parse_lines(lines[index:])
        return []

    def message_log_file(self, status: JobStatus) -> Optional[SpoolFile]:
        """
        Return the spool file to read the RC from, if one is needed.

        Args:
            status: Assembled job status

        Returns:
            The JESMSGLG spool file of a finished job without an RC
        """
        if status.status != "OUTPUT" or status.rc is not None:
            return None
        for spool_file in status.spool_files:
            if spool_file.dd_name == self.MESSAGE_LOG_DD:
                return spool_file
        return None

    def apply_log_rc(self, status: JobStatus, rc: Optional[ReturnCode]) -> JobStatus:
        """
        Attach a return code recovered from the job log.

        Args:
            status: Job status without an RC
            rc: Code found in JESMSGLG, or None

        Returns:
            New JobStatus carrying rc and its rendering
        """
        if rc is None:
            logger.debug("Job %s finished without a recognisable return code", status.job_id)
            return status
        return replace(status, rc=rc, retcode=rc.render())
