"""
JES Job List Parser.

Parses job summary lines returned in JES mode:

    JOBNAME  JOBID    OWNER    STATUS CLASS
    HRECALLW JOB31062 LIANGQI  OUTPUT U        RC=0000
    --------
             ID  STEPNAME PROCSTEP C DDNAME   BYTE-COUNT
             001 JES2        N/A   H JESMSGLG      1584
    1 spool files

Only the lines above the "--------" separator are job lines; the detail
block under it belongs to the last job and is read by JobStatusResolver.

parse_submit_reply reads the job ID from the reply to a JCL submission.

Example:
    >>> job = parse_job_line("HRECALLW JOB31062 LIANGQI  OUTPUT U  RC=0000")
    >>> job.extra
    'RC=0000'
"""

import re
from typing import Optional

from mf_ftp.core.base import BaseListingParser, ParseError
from mf_ftp.core.models import Job


DETAIL_SEPARATOR = "--------"

# "250-It is known to JES as JOB12345"
SUBMIT_REPLY_PATTERN = re.compile(r"JES as (\w+)(?:\s|$)", re.IGNORECASE)


def parse_job_line(line: str) -> Optional[Job]:
    """
    Parse one job summary line.

    Args:
        line: Line with JOBNAME, JOBID, OWNER, STATUS, CLASS and optional
            trailing text

    Returns:
        Job, or None if the line has fewer than four fields
    """
    fields = line.split()
    if len(fields) < 4:
        return None

    return Job(
        job_name=fields[0],
        job_id=fields[1],
        owner=fields[2],
        status=fields[3],
        job_class=fields[4] if len(fields) > 4 else None,
        extra=" ".join(fields[5:]) or None,
    )


def parse_job_list(lines: list[str]) -> list[Job]:
    """
    Parse a job list response.

    Args:
        lines: Response lines, column header first

    Returns:
        Jobs above the detail separator
    """
    jobs = []
    for line in lines[1:]:
        if line.startswith(DETAIL_SEPARATOR):
            break
        job = parse_job_line(line)
        if job is not None:
            jobs.append(job)
    return jobs


class JobLineParser(BaseListingParser):
    """Listing parser front end for JES job lists."""

    def parse_lines(self, lines: list[str]) -> list[Job]:
        return parse_job_list(lines)


def parse_submit_reply(text: str) -> str:
    """
    Read the job ID assigned to a submitted job.

    Args:
        text: Server reply to the STOR that submitted the JCL

    Returns:
        Job ID, e.g. "JOB12345"

    Raises:
        ParseError: If the reply names no job ID
    """
    match = SUBMIT_REPLY_PATTERN.search(text or "")
    if not match:
        raise ParseError(f"Failed to submit JCL, job ID not found in reply: {text!r}")
    return match.group(1)
