"""
Record Converters Module.

Converts parsed records to PySpark schemas and rows.

Example:
    >>> from mf_ftp.converters import RecordSchemaConverter
    >>> schema = RecordSchemaConverter().schema_for(DatasetEntry)
"""

from mf_ftp.converters.spark_schema import RecordSchemaConverter

__all__ = [
    "RecordSchemaConverter",
]
