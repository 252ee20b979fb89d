"""
Mainframe Accessor.

Runs listing and job queries against an FtpTransport and turns the
replies into records. Each query is a short serial chain: a SITE
directive, a LIST or RETR, and for finished jobs without a return code
one more SITE + RETR for the JESMSGLG spool file. There is no polling;
callers re-query while a job is ACTIVE or WAITING.

Example:
    >>> accessor = MainframeAccessor(transport, ParserConfig(default_owner="USER1"))
    >>> accessor.list_datasets("USER1.*")
    >>> job_id = accessor.submit_jcl(jcl_text)
    >>> accessor.query_job("JOB00083")
    <JobState.FAIL: 'fail'>
"""

import logging
import re
from typing import Any, Optional

from mf_ftp.config.settings import ParserConfig
from mf_ftp.core.base import JobState, NoDataFoundError
from mf_ftp.core.models import (
    DatasetEntry,
    DatasetMemberEntry,
    Job,
    JobStatus,
    LoadLibMemberEntry,
    ReturnCode,
    USSEntry,
)
from mf_ftp.core.resolver import JobStatusResolver
from mf_ftp.core.transport import (
    FtpTransport,
    delete_directives,
    job_detail_directives,
    job_list_directives,
    listing_directives,
    submit_directives,
)
from mf_ftp.parsers.jes_log import RCExtractor, spool_file_address
from mf_ftp.parsers.job_parser import parse_job_list, parse_submit_reply
from mf_ftp.parsers.listing import parse_listing
from mf_ftp.utils.dsn import ensure_fully_qualified, remove_quotes
from mf_ftp.utils.encoding import decode_text

logger = logging.getLogger(__name__)


class MainframeAccessor:
    """
    Query front end over one FTP transport session.

    A transport runs one command at a time, so an accessor must not be
    shared by concurrent callers.

    Attributes:
        transport: Connected FtpTransport
        config: Parser configuration
        resolver: Job state resolver
    """

    # Remote name for submitted JCL; JES ignores it
    SUBMIT_PLACEHOLDER = "PLACEHOL"
    LINE_END_PATTERN = re.compile(r"\r?\n")

    def __init__(self, transport: FtpTransport, config: Optional[ParserConfig] = None):
        self.transport = transport
        self.config = config or ParserConfig()
        self.resolver = JobStatusResolver(keep_raw_fields=self.config.keep_raw_fields)
        self.rc_extractor = RCExtractor()

    def _owner(self, owner: Optional[str]) -> str:
        return owner or self.config.default_owner

    def list_path(self, path: str) -> list[Any]:
        """
        List datasets, members or USS files under a path.

        Args:
            path: Dataset name pattern, "<pds>(*)", or USS path

        Returns:
            Parsed entries; empty when the remote side found nothing

        Raises:
            ClassificationError: If the reply has an unknown header
        """
        self.transport.site(listing_directives())
        remote_path = ensure_fully_qualified(path)
        logger.info("Listing %s", remote_path)
        try:
            lines = self.transport.list(remote_path)
        except NoDataFoundError:
            logger.info("Nothing found for %s", remote_path)
            return []

        return parse_listing(
            lines,
            keep_raw_fields=self.config.keep_raw_fields,
            current_year=self.config.current_year,
        )

    def list_datasets(self, dsn: str) -> list[DatasetEntry]:
        """List datasets matching a name pattern (wildcards * and ?)."""
        return self.list_path(dsn)

    def list_members(self, pds: str) -> list[Any]:
        """
        List the members of a partitioned dataset.

        Args:
            pds: Dataset name, quoted or not

        Returns:
            DatasetMemberEntry or LoadLibMemberEntry records
        """
        entries: list[Any] = self.list_path(f"{remove_quotes(pds)}(*)")
        return [e for e in entries if isinstance(e, (DatasetMemberEntry, LoadLibMemberEntry))]

    def list_files(self, path: str) -> list[USSEntry]:
        """List a USS directory, or a single USS file or link."""
        return self.list_path(path)

    def list_jobs(
        self,
        job_name: str = "*",
        owner: Optional[str] = None,
        status: str = "ALL",
        job_id: Optional[str] = None,
    ) -> list[Job]:
        """
        List JES jobs.

        Args:
            job_name: Job name pattern
            owner: Owner pattern; defaults to config.default_owner
            status: INPUT, ACTIVE, OUTPUT or ALL
            job_id: Restrict the list to one job ID

        Returns:
            Jobs; empty when none matched
        """
        self.transport.site(job_list_directives(job_name or "*", self._owner(owner), status or "ALL"))
        logger.info("Listing jobs %s owned by %s", job_id or job_name, self._owner(owner))
        try:
            lines = self.transport.list(job_id or "*")
        except NoDataFoundError:
            logger.info("No jobs found")
            return []
        return parse_job_list(lines)

    def submit_jcl(self, jcl_text: str) -> str:
        """
        Submit JCL as a batch job.

        Args:
            jcl_text: JCL source; line ends are sent as CRLF

        Returns:
            Job ID assigned by JES

        Raises:
            ParseError: If the reply names no job ID
        """
        data = self.LINE_END_PATTERN.sub("\r\n", jcl_text).encode("utf-8")
        self.transport.site(submit_directives())
        reply = self.transport.store(self.SUBMIT_PLACEHOLDER, data)
        job_id = parse_submit_reply(reply)
        logger.info("Submitted job %s", job_id)
        return job_id

    def delete_job(self, job_id: str) -> None:
        """
        Purge a job and its spool files from the JES queue.

        Args:
            job_id: JES job ID

        Raises:
            ValueError: If job_id is empty
        """
        if not job_id:
            raise ValueError("The job ID is required.")

        self.transport.site(delete_directives())
        logger.info("Deleting job %s", job_id)
        self.transport.delete(job_id)

    def get_job_status(self, job_id: str, owner: Optional[str] = None) -> JobStatus:
        """
        Get the detailed status of one job.

        For a finished job whose status line carries no return code, the
        code is read from its JESMSGLG spool file.

        Args:
            job_id: JES job ID
            owner: Owner filter; defaults to config.default_owner

        Returns:
            JobStatus with spool files

        Raises:
            ValueError: If job_id is empty
            MissingJobHeaderError: If the reply has no job header line
        """
        if not job_id:
            raise ValueError("The job ID is required.")

        self.transport.site(job_detail_directives(self._owner(owner)))
        logger.info("Querying status of %s", job_id)
        lines = self.transport.list(job_id)
        status = self.resolver.build_status(lines, job_id)

        message_log = self.resolver.message_log_file(status)
        if message_log is not None:
            rc = self.get_rc_from_jesmsglg(job_id, message_log.id, owner)
            status = self.resolver.apply_log_rc(status, rc)
        return status

    def query_job(self, job_id: str, owner: Optional[str] = None) -> JobState:
        """
        Resolve the lifecycle state of one job.

        Args:
            job_id: JES job ID
            owner: Owner filter; defaults to config.default_owner

        Returns:
            JobState; ACTIVE and WAITING mean the caller should ask again
        """
        jobs = self.list_jobs(owner=owner, job_id=job_id)
        state = self.resolver.resolve(jobs, job_id)
        if state is not None:
            return state

        status = self.get_job_status(job_id, owner)
        return self.resolver.state_for_rc(status.rc)

    def get_job_log(self, job_id: str, file_id: Optional[int] = None, owner: Optional[str] = None) -> str:
        """
        Fetch one spool file, or all of them concatenated.

        Args:
            job_id: JES job ID
            file_id: Spool file index; None for all files joined with
                "!! END OF JES SPOOL FILE !!"
            owner: Owner filter; defaults to config.default_owner

        Returns:
            Log text

        Raises:
            ValueError: If job_id is empty
        """
        if not job_id:
            raise ValueError("The job ID is required.")

        self.transport.site(job_detail_directives(self._owner(owner)))
        address = spool_file_address(job_id, file_id)
        logger.info("Retrieving spool file %s", address)
        return decode_text(self.transport.retrieve(address), self.config.log_encoding)

    def get_rc_from_jesmsglg(
        self,
        job_id: str,
        file_id: Optional[int] = None,
        owner: Optional[str] = None,
    ) -> Optional[ReturnCode]:
        """
        Read a job's return code from its message log.

        Args:
            job_id: JES job ID
            file_id: Index of the JESMSGLG spool file
            owner: Owner filter; defaults to config.default_owner

        Returns:
            Return code, or None when the log carries no eye-catcher
        """
        rc = self.rc_extractor.extract(self.get_job_log(job_id, file_id, owner))
        if rc is None:
            logger.warning("No return code eye-catcher in log of %s", job_id)
        return rc
