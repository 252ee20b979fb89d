"""
Transport boundary for the mainframe FTP service.

The parsers never talk to the network. An accessor drives an object
implementing FtpTransport: it first sends a SITE directive selecting
the reply mode, then lists or retrieves. Session setup, TLS, passive
mode and retries belong to the transport implementation.

Directives used:

    FILETYPE=SEQ ISPFSTATS                                   dataset/member/USS lists
    FILETYPE=JES JESJOBNAME=<n> JESOWNER=<o> JESSTATUS=<s>   job lists
    FILETYPE=JES SBSENDEOL=CRLF JESJOBNAME=* JESOWNER=<o>    job status and logs
    FILETYPE=JES                                             job submission
    FILETYPE=JES JESJOBNAME=*                                job deletion
"""

from typing import Optional, Protocol, Union


class FtpTransport(Protocol):
    """
    Operations the accessor needs from an FTP session.

    Implementations raise NoDataFoundError when the remote side replies
    that nothing matched, and any other exception for real failures.
    """

    def site(self, directives: str) -> str:
        """Send a SITE command and return the reply text."""
        ...

    def list(self, path: str) -> list[str]:
        """LIST a path and return the reply lines."""
        ...

    def retrieve(self, path: str) -> Union[bytes, str]:
        """RETR a remote file and return its content."""
        ...

    def store(self, path: str, data: bytes) -> str:
        """STOR data in ASCII mode and return the final reply text."""
        ...

    def delete(self, path: str) -> str:
        """DELE a remote name and return the reply text."""
        ...


def listing_directives() -> str:
    """Directive for sequential dataset, member and USS listings."""
    return "FILETYPE=SEQ ISPFSTATS"


def job_list_directives(job_name: str = "*", owner: str = "*", status: str = "ALL") -> str:
    """
    Directive filtering a JES job list.

    Args:
        job_name: Job name pattern
        owner: Owner pattern
        status: INPUT, ACTIVE, OUTPUT or ALL

    Returns:
        SITE directive string
    """
    return " ".join([
        "FILETYPE=JES",
        f"JESJOBNAME={job_name}",
        f"JESOWNER={owner}",
        f"JESSTATUS={status}",
    ])


def job_detail_directives(owner: Optional[str] = None) -> str:
    """Directive for job status queries and spool file retrieval."""
    return f"FILETYPE=JES SBSENDEOL=CRLF JESJOBNAME=* JESOWNER={owner or '*'}"


def submit_directives() -> str:
    """Directive under which a stored file is submitted as a job."""
    return "FILETYPE=JES"


def delete_directives() -> str:
    """Directive for purging a job from the JES queue."""
    return "FILETYPE=JES JESJOBNAME=*"
