"""
Synthetic personnel record generator.

Generates employees, teachers and professors with manager chains and
streams them to Avro container files.
"""

from .errors import (
    ConfigError,
    GenerationError,
    PersonnelSynthError,
    SerialisationError,
)
from .synthetic.models import Person, RecordKind
from .synthetic.pipeline import GenerationPipeline, PipelineState, create_data_file
from .utils.config import GeneratorConfig, load_config

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "GenerationError",
    "PersonnelSynthError",
    "SerialisationError",
    "Person",
    "RecordKind",
    "GenerationPipeline",
    "PipelineState",
    "create_data_file",
    "GeneratorConfig",
    "load_config",
]
