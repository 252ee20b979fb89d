"""
Configuration Module.

Provides configuration management for report parsing and export.

Example:
    >>> from mf_ftp.config import ParserConfig
    >>> config = ParserConfig.from_file("mf_ftp.json")
    >>> print(config.default_owner)
"""

from mf_ftp.config.settings import ParserConfig

__all__ = [
    "ParserConfig",
]
