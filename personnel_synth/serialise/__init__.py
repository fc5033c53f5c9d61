"""
Avro serialisation of personnel records.
"""

from .avro_schema import SEPARATOR_TOKEN, build_record_schema, build_schema
from .avro_serialiser import AvroSerialiser, person_to_datum
from .reader import iter_records, load_dataframe, read_metadata, read_schema

__all__ = [
    "SEPARATOR_TOKEN",
    "build_record_schema",
    "build_schema",
    "AvroSerialiser",
    "person_to_datum",
    "iter_records",
    "load_dataframe",
    "read_metadata",
    "read_schema",
]
