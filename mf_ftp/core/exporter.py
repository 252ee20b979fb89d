"""
Listing Exporter.

Writes parsed listings (datasets, members, USS files, jobs) through Spark
so an inventory of a mainframe system can be analysed with DataFrame
tooling.

Example:
    >>> exporter = ListingExporter(ParserConfig(output_dir="output"))
    >>> result = exporter.export(entries, "datasets", OutputFormat.PARQUET)
    >>> result.record_count
    45
    >>> exporter.stop()
"""

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from mf_ftp.config.settings import ParserConfig
from mf_ftp.core.base import OutputFormat
from mf_ftp.utils.file_utils import ensure_directory, save_manifest

logger = logging.getLogger(__name__)


@dataclass
class ExportResult:
    """
    Result of one listing export.

    Attributes:
        name: Export name (output subdirectory)
        record_type: Record class name
        record_count: Number of records written
        output_path: Directory written to
        output_format: Format written
    """
    name: str
    record_type: str
    record_count: int
    output_path: str
    output_format: OutputFormat

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "record_type": self.record_type,
            "record_count": self.record_count,
            "output_path": self.output_path,
            "output_format": self.output_format.value,
        }


class ListingExporter:
    """
    Writes record lists to JSON, Parquet or CSV with Spark.

    The Spark session is created on the first export and reused until
    stop() is called.

    Attributes:
        config: Parser configuration (output directory, format, Spark)
    """

    # Columns CSV cannot hold
    NESTED_COLUMNS = ("field_names", "raw_fields", "spool_files")

    MANIFEST_NAME = "export_manifest.json"

    def __init__(self, config: Optional[ParserConfig] = None, session_manager: Any = None):
        self.config = config or ParserConfig()
        self._session_manager = session_manager
        self.results: list[ExportResult] = []

    def _get_session(self) -> Any:
        if self._session_manager is None:
            from mf_ftp.core.session import SparkSessionManager

            self._session_manager = SparkSessionManager(
                app_name=self.config.spark_app_name,
                master=self.config.spark_master,
            )
        return self._session_manager.get_or_create()

    def export(
        self,
        records: list[Any],
        name: str,
        output_format: Optional[OutputFormat] = None,
    ) -> ExportResult:
        """
        Export records of one type.

        Args:
            records: Parsed records, all of the same class
            name: Output subdirectory under config.output_dir
            output_format: Format to write; defaults to config.output_format

        Returns:
            ExportResult describing what was written

        Raises:
            ValueError: If records is empty or mixes record types
        """
        from mf_ftp.converters.spark_schema import RecordSchemaConverter

        if not records:
            raise ValueError(f"No records to export for {name}")
        record_type = type(records[0])
        if any(type(record) is not record_type for record in records):
            raise ValueError(f"Mixed record types in export {name}")

        output_format = output_format or OutputFormat(self.config.output_format)
        output_path = os.path.join(self.config.output_dir, name)

        converter = RecordSchemaConverter()
        schema = converter.schema_for(record_type)
        rows = [converter.to_row(record) for record in records]

        spark = self._get_session()
        df = spark.createDataFrame(rows, schema)
        logger.info(
            "Exporting %d %s records to %s as %s",
            len(rows), record_type.__name__, output_path, output_format.value,
        )
        self._write_output(df, output_path, output_format)

        result = ExportResult(
            name=name,
            record_type=record_type.__name__,
            record_count=len(rows),
            output_path=output_path,
            output_format=output_format,
        )
        self.results.append(result)
        return result

    def _write_output(self, df: Any, output_path: str, output_format: OutputFormat) -> None:
        """
        Write DataFrame to output.

        Args:
            df: DataFrame to write
            output_path: Output path
            output_format: Format to write
        """
        writer = df.coalesce(1)

        if output_format == OutputFormat.JSON:
            writer.write.mode("overwrite").json(output_path)
        elif output_format == OutputFormat.PARQUET:
            writer.write.mode("overwrite").parquet(output_path)
        elif output_format == OutputFormat.CSV:
            flat = writer.drop(*[c for c in self.NESTED_COLUMNS if c in df.columns])
            flat.write.mode("overwrite").option("header", True).csv(output_path)

    def save_manifest(self) -> str:
        """
        Save a manifest of every export made so far.

        Returns:
            Path of the manifest file
        """
        ensure_directory(self.config.output_dir)
        manifest_path = os.path.join(self.config.output_dir, self.MANIFEST_NAME)
        save_manifest(manifest_path, {
            "created": datetime.now().isoformat(),
            "exports": [result.to_dict() for result in self.results],
        })
        return manifest_path

    def stop(self) -> None:
        """Stop the Spark session if one was started."""
        if self._session_manager is not None:
            self._session_manager.stop()
