"""
Configuration Settings.

Provides the configuration class shared by the accessor, the parsers and
the CLI.

Example:
    >>> config = ParserConfig(keep_raw_fields=True, default_owner="USER1")
    >>> config.save("mf_ftp.json")
    >>> ParserConfig.from_file("mf_ftp.json").default_owner
    'USER1'
"""

from dataclasses import dataclass
from typing import Optional
import codecs
import json
import logging

from mf_ftp.core.base import OutputFormat
from mf_ftp.utils.encoding import resolve_codec


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class ParserConfig:
    """
    Configuration for report parsing and export.

    Attributes:
        keep_raw_fields: Fill each entry's raw_fields map with the
            header name -> text pairs it was decoded from
        current_year: Year given to USS entries listed with a time of day;
            None uses the current year
        default_owner: JES owner filter when a query names none
        log_encoding: Codec name or CCSID for job log bytes
        log_level: Logging level name used by the CLI
        spark_app_name: Name for Spark application
        spark_master: Spark master URL
        output_dir: Directory for exported listings
        output_format: Export format (json, parquet, csv)
    """
    keep_raw_fields: bool = False
    current_year: Optional[int] = None
    default_owner: str = "*"
    log_encoding: str = "utf-8"
    log_level: str = "INFO"
    spark_app_name: str = "MainframeListingExport"
    spark_master: str = "local[*]"
    output_dir: str = "output"
    output_format: str = "json"

    @classmethod
    def from_file(cls, filepath: str) -> "ParserConfig":
        """
        Load configuration from a JSON file.

        Args:
            filepath: Path to the configuration file

        Returns:
            ParserConfig instance
        """
        with open(filepath, "r") as f:
            data = json.load(f)
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict) -> "ParserConfig":
        """
        Create configuration from a dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            ParserConfig instance
        """
        return cls(
            keep_raw_fields=data.get("keep_raw_fields", False),
            current_year=data.get("current_year"),
            default_owner=data.get("default_owner") or "*",
            log_encoding=data.get("log_encoding", "utf-8"),
            log_level=data.get("log_level", "INFO"),
            spark_app_name=data.get("spark_app_name", "MainframeListingExport"),
            spark_master=data.get("spark_master", "local[*]"),
            output_dir=data.get("output_dir", "output"),
            output_format=data.get("output_format", "json"),
        )

    def to_dict(self) -> dict:
        """Convert configuration to dictionary."""
        return {
            "keep_raw_fields": self.keep_raw_fields,
            "current_year": self.current_year,
            "default_owner": self.default_owner,
            "log_encoding": self.log_encoding,
            "log_level": self.log_level,
            "spark_app_name": self.spark_app_name,
            "spark_master": self.spark_master,
            "output_dir": self.output_dir,
            "output_format": self.output_format,
        }

    def save(self, filepath: str) -> None:
        """
        Save configuration to a JSON file.

        Args:
            filepath: Path to save the configuration
        """
        with open(filepath, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for log_level."""
        return getattr(logging, self.log_level.upper(), logging.INFO)

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the configuration.

        Returns:
            Tuple of (is_valid, error_messages)
        """
        errors = []

        valid_formats = [fmt.value for fmt in OutputFormat]
        if self.output_format not in valid_formats:
            errors.append(f"Invalid output format: {self.output_format}")

        try:
            codecs.lookup(resolve_codec(self.log_encoding))
        except LookupError:
            errors.append(f"Unknown log encoding: {self.log_encoding}")

        if self.log_level.upper() not in LOG_LEVELS:
            errors.append(f"Invalid log level: {self.log_level}")

        if self.current_year is not None and not 1900 <= self.current_year <= 9999:
            errors.append(f"Year out of range: {self.current_year}")

        if not self.default_owner:
            errors.append("Default owner must not be empty")

        return len(errors) == 0, errors
