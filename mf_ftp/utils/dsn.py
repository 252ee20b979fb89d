"""
Dataset Name Utilities.

MVS dataset names are fully qualified when wrapped in single quotes;
otherwise the remote side prefixes them with the user's high-level
qualifier. USS paths start with "/" and are never quoted.

Example:
    >>> ensure_fully_qualified("USER.CNTL")
    "'USER.CNTL'"
    >>> strip_quotes("'USER.CNTL'")
    'USER.CNTL'
"""

QUOTE = "'"


def is_fully_qualified(dsn: str) -> bool:
    """Check if a name is wrapped in single quotes."""
    return len(dsn) >= 2 and dsn[0] == QUOTE and dsn[-1] == QUOTE


def strip_quotes(dsn: str) -> str:
    """Remove the surrounding quotes of a fully qualified name."""
    if is_fully_qualified(dsn):
        return dsn[1:-1]
    return dsn


def ensure_fully_qualified(dsn: str) -> str:
    """Quote a dataset name unless it is a USS path or already quoted."""
    if not dsn.startswith("/") and not is_fully_qualified(dsn):
        return f"{QUOTE}{dsn}{QUOTE}"
    return dsn


def remove_quotes(dsn: str) -> str:
    """Drop a leading and/or trailing quote independently."""
    if dsn.startswith(QUOTE):
        dsn = dsn[1:]
    if dsn.endswith(QUOTE):
        dsn = dsn[:-1]
    return dsn
