"""
Record to Spark Schema Converter.

Derives a Spark StructType from the record dataclasses in
mf_ftp.core.models and converts records to rows matching it, so parsed
listings can be loaded into a DataFrame.

Example:
    >>> converter = RecordSchemaConverter()
    >>> schema = converter.schema_for(DatasetEntry)
    >>> schema["extents"].dataType
    LongType()
    >>> rows = [converter.to_row(e) for e in entries]
"""

import dataclasses
import typing
from collections.abc import Mapping
from datetime import date
from enum import Enum
from typing import Any, Union

from pyspark.sql.types import (
    ArrayType,
    BooleanType,
    DataType,
    DateType,
    LongType,
    MapType,
    StringType,
    StructField,
    StructType,
)


class RecordSchemaConverter:
    """
    Converts record dataclasses to Spark schemas and rows.

    Python annotations map to Spark types:

        str, Enum, return codes  -> StringType
        int                      -> LongType
        bool                     -> BooleanType
        date                     -> DateType
        tuple[X, ...]            -> ArrayType(X)
        Mapping[str, str]        -> MapType(StringType, StringType)
        nested record            -> StructType

    Optional[X] fields are nullable; every other field is not.
    """

    SCALAR_TYPES: dict[type, DataType] = {
        str: StringType(),
        int: LongType(),
        bool: BooleanType(),
        date: DateType(),
    }

    def schema_for(self, record_type: type) -> StructType:
        """
        Build the schema of a record dataclass.

        Args:
            record_type: Dataclass type from mf_ftp.core.models

        Returns:
            StructType with one field per dataclass field

        Raises:
            TypeError: If record_type is not a dataclass
        """
        if not dataclasses.is_dataclass(record_type):
            raise TypeError(f"Not a record type: {record_type!r}")

        hints = typing.get_type_hints(record_type)
        return StructType([
            StructField(f.name, *self._spark_type(hints[f.name]))
            for f in dataclasses.fields(record_type)
        ])

    def _spark_type(self, annotation: Any) -> tuple[DataType, bool]:
        """Return (spark type, nullable) for an annotation."""
        origin = typing.get_origin(annotation)
        args = typing.get_args(annotation)

        if origin is Union:
            members = [arg for arg in args if arg is not type(None)]
            nullable = len(members) < len(args)
            if len(members) == 1:
                data_type, _ = self._spark_type(members[0])
                return data_type, nullable
            # Tagged unions such as ReturnCode are rendered as text
            return StringType(), nullable

        if origin is tuple:
            element_type, _ = self._spark_type(args[0])
            return ArrayType(element_type), False

        if origin in (dict, Mapping):
            return MapType(StringType(), StringType()), False

        if isinstance(annotation, type):
            if issubclass(annotation, Enum):
                return StringType(), False
            if dataclasses.is_dataclass(annotation):
                return self.schema_for(annotation), False
            for python_type, data_type in self.SCALAR_TYPES.items():
                if annotation is python_type:
                    return data_type, False

        raise TypeError(f"No Spark type for annotation {annotation!r}")

    def to_row(self, record: Any) -> dict[str, Any]:
        """
        Convert a record to a row dictionary matching schema_for().

        Args:
            record: Record dataclass instance

        Returns:
            Field name -> Spark-compatible value
        """
        return {
            f.name: self._row_value(getattr(record, f.name))
            for f in dataclasses.fields(record)
        }

    def _row_value(self, value: Any) -> Any:
        if value is None or isinstance(value, (str, bool, int, date)):
            return value
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, Mapping):
            return dict(value)
        if isinstance(value, tuple):
            return [self._row_value(item) for item in value]
        if dataclasses.is_dataclass(value) and hasattr(value, "render"):
            return str(value)
        if dataclasses.is_dataclass(value):
            return self.to_row(value)
        return str(value)
