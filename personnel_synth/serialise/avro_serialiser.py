"""
AvroSerialiser: Write a lazy stream of records to an Avro container file.
"""

import logging
from dataclasses import fields, is_dataclass
from datetime import date
from enum import Enum
from typing import Any, BinaryIO, Dict, Iterable, Iterator, Optional, Union

from fastavro import writer

from ..errors import GenerationError, SerialisationError
from ..synthetic.models import Person, RecordKind
from .avro_schema import build_schema, record_field_names

logger = logging.getLogger(__name__)


def to_avro_value(value: Any) -> Any:
    """Convert model values to Avro-friendly primitives."""
    if is_dataclass(value):
        return {f.name: to_avro_value(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [to_avro_value(item) for item in value]
    return value


def person_to_datum(person: Person) -> Dict[str, Any]:
    """Avro datum for a record, restricted to the fields of its kind."""
    return {
        name: to_avro_value(getattr(person, name))
        for name in record_field_names(person.kind)
    }


class AvroSerialiser:
    """
    Serialises Person records of one kind.

    With with_separator=True, plain strings in the stream (the separator
    token) are written as string datums next to the records.
    """

    def __init__(
        self,
        kind: RecordKind,
        with_separator: bool = False,
        codec: str = "null",
        sync_marker: Optional[bytes] = None,
    ):
        self.kind = kind
        self.with_separator = with_separator
        self.codec = codec
        self.sync_marker = sync_marker
        self.schema = build_schema(kind, with_separator=with_separator)

    def _datums(self, records: Iterable[Union[Person, str]]) -> Iterator[Any]:
        records = iter(records)
        while True:
            try:
                record = next(records)
            except StopIteration:
                return
            except (ValueError, TypeError) as e:
                raise GenerationError(f"Failed to generate {self.kind.value} record: {e}") from e

            if isinstance(record, str):
                if not self.with_separator:
                    raise SerialisationError(
                        f"Separator token {record!r} not allowed without a separator schema"
                    )
                yield record
            elif record.kind != self.kind:
                raise SerialisationError(
                    f"Expected {self.kind.value} record, got {record.kind.value}"
                )
            else:
                yield person_to_datum(record)

    def serialise(self, records: Iterable[Union[Person, str]], out: BinaryIO) -> None:
        """
        Write records to out, pulling them one at a time.

        Raises:
            SerialisationError: If a record does not fit the schema
            GenerationError: If producing the next record fails
            OSError: If writing to out fails
        """
        try:
            writer(
                out,
                self.schema,
                self._datums(records),
                codec=self.codec,
                sync_marker=self.sync_marker,
            )
        except (ValueError, TypeError) as e:
            raise SerialisationError(f"Failed to encode {self.kind.value} record: {e}") from e
