"""
Exceptions raised by personnel_synth.
"""


class PersonnelSynthError(Exception):
    """Base exception for generation failures."""
    pass


class ConfigError(PersonnelSynthError):
    """Raised when generator settings or caller inputs are invalid."""
    pass


class SerialisationError(PersonnelSynthError):
    """Raised when the encoder rejects a record."""
    pass


class GenerationError(PersonnelSynthError):
    """Raised when a record cannot be generated from the current settings."""
    pass
