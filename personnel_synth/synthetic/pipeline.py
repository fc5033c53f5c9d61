"""
Pipeline: Generate N personnel records and stream them to an Avro file.

Records are produced lazily and pulled by the serialiser one at a time, so
memory stays flat regardless of the requested count.
"""

import logging
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

from ..errors import ConfigError, PersonnelSynthError
from ..serialise.avro_schema import SEPARATOR_TOKEN
from ..serialise.avro_serialiser import AvroSerialiser
from ..utils.config import GeneratorConfig
from .models import Person, RecordKind
from .person_factory import PersonFactory
from .rng import RandomSource

logger = logging.getLogger(__name__)


class PipelineState(Enum):
    """Lifecycle of one generation run."""
    INIT = "init"
    FIRST_RECORD_GENERATED = "first_record_generated"
    STREAMING_REMAINDER = "streaming_remainder"
    SERIALIZED = "serialized"
    CLOSED = "closed"
    FAILED = "failed"


class GenerationPipeline:
    """Generates records of one kind and writes them to a single file."""

    def __init__(
        self,
        count: int,
        seed: int,
        output_path: Union[str, Path],
        kind: Union[RecordKind, str] = RecordKind.EMPLOYEE,
        config: Optional[GeneratorConfig] = None,
    ):
        if count < 1:
            raise ConfigError(f"count must be at least 1, got {count}")

        self.count = count
        self.seed = seed
        self.output_path = Path(output_path)
        self.kind = kind if isinstance(kind, RecordKind) else RecordKind.parse(kind)
        self.config = config or GeneratorConfig()
        self.today = self.config.reference_date or date.today()

        self.factory = PersonFactory(config=self.config, today=self.today)
        self.is_delimited_output = self._is_delimited(self.output_path)

        self.state = PipelineState.INIT
        self.history: List[PipelineState] = [PipelineState.INIT]
        self.records_generated = 0
        self.separators_written = 0

    def _is_delimited(self, path: Path) -> bool:
        """Whether the path extension marks delimited-text output."""
        extension = path.suffix.lower().lstrip(".")
        return extension in {ext.lower() for ext in self.config.delimited_extensions}

    def _transition(self, state: PipelineState) -> None:
        self.state = state
        self.history.append(state)

    def stream_records(self, source: Optional[RandomSource] = None) -> Iterator[Union[Person, str]]:
        """
        Yield the first record, then the separator (delimited output only),
        then the remaining count - 1 records.

        The first record is built eagerly with its top manager anchored to
        the configured uid.
        """
        if source is None:
            source = RandomSource.from_seed(self.seed, self.config.locale)
        self.records_generated = 0
        self.separators_written = 0

        first = self.factory.generate_anchored(source, self.kind)
        self._record_generated()
        self._transition(PipelineState.FIRST_RECORD_GENERATED)
        yield first

        if self.count == 1:
            return

        if self.is_delimited_output:
            self.separators_written += 1
            yield SEPARATOR_TOKEN

        self._transition(PipelineState.STREAMING_REMAINDER)
        logger.info("Generating %d %s records", self.count, self.kind.value.lower())
        for _ in range(self.count - 1):
            record = self.factory.generate(source, self.kind)
            self._record_generated()
            yield record

    def _record_generated(self) -> None:
        self.records_generated += 1
        if self.records_generated % self.config.progress_interval == 0:
            logger.info("Processing %d of %d", self.records_generated, self.count)

    def _ensure_parent_dir(self) -> None:
        parent = self.output_path.parent
        if parent.exists():
            return
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning("Failed to create parent directory %s: %s", parent, e)

    def run(self) -> bool:
        """
        Generate and write all records.

        Returns:
            True when every record was written and the file closed cleanly,
            False on any I/O, generation or encoding failure (logged with its cause)
        """
        self._ensure_parent_dir()

        try:
            source = RandomSource.from_seed(self.seed, self.config.locale)
            serialiser = AvroSerialiser(
                kind=self.kind,
                with_separator=self.is_delimited_output,
                codec=self.config.codec,
                sync_marker=source.sync_marker(),
            )
            with open(self.output_path, "wb") as out:
                serialiser.serialise(self.stream_records(source), out)
                self._transition(PipelineState.SERIALIZED)
        except (OSError, PersonnelSynthError) as e:
            logger.error(
                "Failed to write %s records to %s: %s",
                self.kind.value.lower(),
                self.output_path,
                e,
            )
            self._transition(PipelineState.FAILED)
            return False

        self._transition(PipelineState.CLOSED)
        logger.info(
            "Wrote %d %s records to %s",
            self.records_generated,
            self.kind.value.lower(),
            self.output_path,
        )
        return True

    def get_stats(self) -> Dict[str, Any]:
        """Counters for the last run."""
        return {
            "kind": self.kind.value,
            "seed": self.seed,
            "requested_records": self.count,
            "records_generated": self.records_generated,
            "separators_written": self.separators_written,
            "output_path": str(self.output_path),
            "state": self.state.value,
        }


def create_data_file(
    count: int,
    seed: int,
    output_path: Union[str, Path],
    kind: Union[RecordKind, str] = RecordKind.EMPLOYEE,
    config: Optional[GeneratorConfig] = None,
) -> bool:
    """Convenience function to run the full pipeline."""
    pipeline = GenerationPipeline(
        count=count,
        seed=seed,
        output_path=output_path,
        kind=kind,
        config=config,
    )
    return pipeline.run()
