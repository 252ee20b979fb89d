"""
Record types produced by the report parsers.

Every record is an immutable value object built fresh for one response.
Listing entries keep the line they were decoded from (raw_text) and the
ordered header names they were decoded against (field_names). The
raw_fields side map holds header-name -> text pairs when requested, so
callers that looked fields up by header name keep working while the
typed attributes stay the primary interface.

Example:
    >>> entry = DatasetEntry(name="USER.CNTL", is_migrated=False, extents=3)
    >>> entry.to_dict()["extents"]
    3
"""

import re
from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from mf_ftp.core.base import FileType


REFERRED_DATE_PATTERN = re.compile(r"^(\d{4})/(\d{2})/(\d{2})$")


def _freeze(fields: Mapping[str, str]) -> Mapping[str, str]:
    """Return a read-only copy of a raw_fields map."""
    return MappingProxyType(dict(fields))


@dataclass(frozen=True)
class Entry:
    """
    Common provenance carried by every listing entry.

    Attributes:
        raw_text: Original response line
        field_names: Ordered header names the line was decoded against
        raw_fields: Optional header name -> decoded text map, read-only
    """
    raw_text: str = ""
    field_names: tuple[str, ...] = ()
    raw_fields: Mapping[str, str] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "raw_fields", _freeze(self.raw_fields))

    @property
    def is_decoded(self) -> bool:
        """Check if the line was split into named fields."""
        return len(self.field_names) > 0

    def _base_dict(self) -> dict[str, Any]:
        return {
            "raw_text": self.raw_text,
            "field_names": list(self.field_names),
            "raw_fields": dict(self.raw_fields),
        }


@dataclass(frozen=True)
class DatasetEntry(Entry):
    """
    One row of an MVS dataset listing.

    A migrated dataset carries only its name; every attribute below is
    None for it. VSAM clusters carry the attributes the listing shows.

    Attributes:
        name: Dataset name without quotes
        is_migrated: Whether the dataset was moved to lower-tier storage
        volume: Volume serial
        unit: Device type (e.g. "3390")
        referred: Last-referenced date or sentinel such as "**NONE**"
        extents: Number of extents
        used_tracks: Used tracks
        record_format: RECFM (FB, VB, U, ...)
        record_length: LRECL
        block_size: BLKSIZE
        ds_org: Dataset organization (PS, PO, VSAM, ...)
    """
    name: str = ""
    is_migrated: bool = False
    volume: Optional[str] = None
    unit: Optional[str] = None
    referred: Optional[str] = None
    extents: Optional[int] = None
    used_tracks: Optional[int] = None
    record_format: Optional[str] = None
    record_length: Optional[int] = None
    block_size: Optional[int] = None
    ds_org: Optional[str] = None

    @property
    def referred_date(self) -> Optional[date]:
        """Last-referenced date, or None for sentinels and blanks."""
        if not self.referred:
            return None
        match = REFERRED_DATE_PATTERN.match(self.referred)
        if not match:
            return None
        year, month, day = (int(part) for part in match.groups())
        return date(year, month, day)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data = self._base_dict()
        data.update({
            "name": self.name,
            "is_migrated": self.is_migrated,
            "volume": self.volume,
            "unit": self.unit,
            "referred": self.referred,
            "extents": self.extents,
            "used_tracks": self.used_tracks,
            "record_format": self.record_format,
            "record_length": self.record_length,
            "block_size": self.block_size,
            "ds_org": self.ds_org,
        })
        return data


@dataclass(frozen=True)
class DatasetMemberEntry(Entry):
    """
    One member of a partitioned dataset (ISPF statistics).

    Attributes:
        name: Member name
        version: Version and modification level ("vv.mm")
        created: Creation date
        changed: Last change date and time
        size: Current size in lines
        init_lines: Size in lines at creation
        modified_lines: Lines modified
        user_id: ID of the user who last changed the member
    """
    name: str = ""
    version: Optional[str] = None
    created: Optional[str] = None
    changed: Optional[str] = None
    size: Optional[int] = None
    init_lines: Optional[int] = None
    modified_lines: Optional[int] = None
    user_id: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data = self._base_dict()
        data.update({
            "name": self.name,
            "version": self.version,
            "created": self.created,
            "changed": self.changed,
            "size": self.size,
            "init_lines": self.init_lines,
            "modified_lines": self.modified_lines,
            "user_id": self.user_id,
        })
        return data


@dataclass(frozen=True)
class LoadLibMemberEntry(Entry):
    """
    One member of a load library.

    Attributes:
        name: Member name
        size: Module size in bytes (listed in hexadecimal)
        ttr: Track/record address, kept as the listed hex string
        alias_of: Name of the member this one aliases, or ""
        ac: Authorization code (0 or 1)
        attributes: Free-form link-edit attributes
        amode: Addressing mode
        rmode: Residency mode
    """
    name: str = ""
    size: Optional[int] = None
    ttr: Optional[str] = None
    alias_of: Optional[str] = None
    ac: Optional[int] = None
    attributes: Optional[str] = None
    amode: Optional[str] = None
    rmode: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data = self._base_dict()
        data.update({
            "name": self.name,
            "size": self.size,
            "ttr": self.ttr,
            "alias_of": self.alias_of,
            "ac": self.ac,
            "attributes": self.attributes,
            "amode": self.amode,
            "rmode": self.rmode,
        })
        return data


@dataclass(frozen=True)
class USSEntry(Entry):
    """
    One entry of a Unix-subsystem directory listing.

    Attributes:
        name: File name
        file_type: FILE, DIRECTORY or LINK
        permissions: Mode string (e.g. "drwxr-xr-x")
        links: Hard link count
        owner: Owning user
        group: Owning group
        size: Size in bytes
        last_modified: Modification date
        link_to: Link target, only for LINK entries
    """
    name: str = ""
    file_type: FileType = FileType.FILE
    permissions: str = ""
    links: Optional[int] = None
    owner: str = ""
    group: str = ""
    size: Optional[int] = None
    last_modified: Optional[date] = None
    link_to: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data = self._base_dict()
        data.update({
            "name": self.name,
            "file_type": self.file_type.value,
            "permissions": self.permissions,
            "links": self.links,
            "owner": self.owner,
            "group": self.group,
            "size": self.size,
            "last_modified": self.last_modified.isoformat() if self.last_modified else None,
            "link_to": self.link_to,
        })
        return data


@dataclass(frozen=True)
class SpoolFile:
    """
    One row of a job's spool file table.

    Attributes:
        id: Spool file index within the job
        step_name: Job step name
        proc_step: Procedure step name
        spool_class: Output class
        dd_name: DD name (JESMSGLG, JESJCL, ...)
        byte_count: Size in bytes
        raw_fields: Optional lower-cased header -> text map, read-only
    """
    id: int = -1
    step_name: Optional[str] = None
    proc_step: Optional[str] = None
    spool_class: Optional[str] = None
    dd_name: Optional[str] = None
    byte_count: Optional[int] = None
    raw_fields: Mapping[str, str] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "raw_fields", _freeze(self.raw_fields))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "step_name": self.step_name,
            "proc_step": self.proc_step,
            "class": self.spool_class,
            "dd_name": self.dd_name,
            "byte_count": self.byte_count,
        }


@dataclass(frozen=True)
class NumericRC:
    """Numeric job return code."""
    value: int

    @property
    def is_zero(self) -> bool:
        return self.value == 0

    def render(self) -> str:
        return f"RC {self.value:04d}"

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class SymbolicRC:
    """Symbolic failure code such as "ABEND S222", "JCL ERROR" or "SEC ERROR"."""
    code: str

    @property
    def is_zero(self) -> bool:
        return False

    def render(self) -> str:
        return self.code

    def __str__(self) -> str:
        return self.code


ReturnCode = Union[NumericRC, SymbolicRC]


@dataclass(frozen=True)
class Job:
    """
    One job summary line of a JES listing.

    Attributes:
        job_name: Job name
        job_id: JES job ID (JOBnnnnn, TSUnnnnn, STCnnnnn)
        owner: Job owner
        status: Raw JES status token (INPUT, ACTIVE, OUTPUT, ...)
        job_class: Job class, None when the line omits it
        extra: Trailing free text, e.g. "RC=0000 3 spool files"
    """
    job_name: str
    job_id: str
    owner: str
    status: str
    job_class: Optional[str] = None
    extra: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "job_name": self.job_name,
            "job_id": self.job_id,
            "owner": self.owner,
            "status": self.status,
            "class": self.job_class,
            "extra": self.extra,
        }


@dataclass(frozen=True)
class JobStatus(Job):
    """
    Detailed status of one job.

    Attributes:
        rc: Return code, None when it cannot be determined
        retcode: Human-readable rendering ("RC 0000", "ABEND 622", ...)
        spool_files: Spool files listed for the job
    """
    rc: Optional[ReturnCode] = None
    retcode: Optional[str] = None
    spool_files: tuple[SpoolFile, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data = super().to_dict()
        rc_value: Union[int, str, None] = None
        if isinstance(self.rc, NumericRC):
            rc_value = self.rc.value
        elif isinstance(self.rc, SymbolicRC):
            rc_value = self.rc.code
        data.update({
            "rc": rc_value,
            "retcode": self.retcode,
            "spool_files": [s.to_dict() for s in self.spool_files],
        })
        return data
