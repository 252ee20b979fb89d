"""
File Utilities.

Provides file and directory helpers for saved listings and exports.

Example:
    >>> from mf_ftp.utils import ensure_directory, read_report
    >>> lines = read_report("datasets.txt")
    >>> ensure_directory("output/datasets")
"""

import json
import os
from pathlib import Path

from mf_ftp.core.base import split_report_lines
from mf_ftp.utils.encoding import decode_text


def ensure_directory(path: str) -> None:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path: Path to the directory
    """
    os.makedirs(path, exist_ok=True)


def read_text(filepath: str, encoding: str = "utf-8") -> str:
    """
    Read a saved report or job log.

    Args:
        filepath: Path to the file
        encoding: Codec name or CCSID of the file content

    Returns:
        File content as text

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Report not found: {filepath}")
    return decode_text(path.read_bytes(), encoding)


def read_report(filepath: str, encoding: str = "utf-8") -> list[str]:
    """
    Read a saved report as a list of lines.

    Args:
        filepath: Path to the file
        encoding: Codec name or CCSID of the file content

    Returns:
        Report lines without trailing blank lines
    """
    return split_report_lines(read_text(filepath, encoding))


def save_manifest(
    filepath: str,
    data: dict,
    indent: int = 2,
) -> None:
    """
    Save a manifest/metadata file in JSON format.

    Args:
        filepath: Path to the manifest file
        data: Dictionary to save
        indent: JSON indentation level
    """
    with open(filepath, "w") as f:
        json.dump(data, f, indent=indent, default=str)


def load_manifest(filepath: str) -> dict:
    """
    Load a manifest/metadata file.

    Args:
        filepath: Path to the manifest file

    Returns:
        Dictionary with manifest data
    """
    with open(filepath, "r") as f:
        return json.load(f)
