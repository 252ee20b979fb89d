"""
Job Log Encoding Utilities.

Spool files fetched in ASCII mode arrive already translated, but logs
retrieved in binary mode keep the host code page. This module decodes
either form to text.

Example:
    >>> decode_text(b"\\xc8\\x85\\x93\\x93\\x96", "37")
    'Hello'
    >>> decode_text("already text")
    'already text'
"""

from typing import Union


# CCSID (Coded Character Set Identifier) to Python codec mapping
CCSID_CODECS = {
    # US/English EBCDIC
    37: "cp037",
    # International EBCDIC
    500: "cp500",
    # Open Systems EBCDIC (Unix compatible)
    1047: "cp1047",
    # US EBCDIC with Euro
    1140: "cp1140",
    # Unicode encodings
    1200: "utf-16",
    1208: "utf-8",
    # European EBCDIC
    273: "cp273",     # German
    284: "cp284",     # Spanish
    285: "cp285",     # UK
    297: "cp297",     # French
    # ASCII code pages
    819: "latin-1",
    850: "cp850",
}


def resolve_codec(encoding: str) -> str:
    """
    Map a CCSID number to its Python codec name.

    Args:
        encoding: Codec name (e.g. 'cp037') or CCSID as a string

    Returns:
        Python codec name; unknown CCSIDs are returned unchanged
    """
    if encoding.isdigit():
        return CCSID_CODECS.get(int(encoding), encoding)
    return encoding


def decode_text(
    data: Union[bytes, str, None],
    encoding: str = "utf-8",
    errors: str = "replace",
) -> str:
    """
    Decode transport content to text.

    Args:
        data: Bytes, text, or None
        encoding: Codec name or CCSID
        errors: Error handling ('strict', 'replace', 'ignore')

    Returns:
        Decoded string
    """
    if data is None:
        return ""
    if isinstance(data, str):
        return data
    return data.decode(resolve_codec(encoding), errors=errors)
