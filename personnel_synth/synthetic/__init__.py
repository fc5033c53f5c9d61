"""
Record generation: seeded random source, field generators, manager chains
and per-kind record builders.

The streaming pipeline lives in .pipeline and is exported from the package
root.
"""

from .models import (
    Address,
    BankDetails,
    EmergencyContact,
    Manager,
    Person,
    PhoneNumber,
    RecordKind,
    Sex,
    WorkLocation,
)
from .rng import RandomSource, seed_to_bytes
from .manager_chain import ManagerChainGenerator, override_top_uid
from .person_factory import PersonFactory

__all__ = [
    # Models
    "Address",
    "BankDetails",
    "EmergencyContact",
    "Manager",
    "Person",
    "PhoneNumber",
    "RecordKind",
    "Sex",
    "WorkLocation",
    # Random state
    "RandomSource",
    "seed_to_bytes",
    # Builders
    "ManagerChainGenerator",
    "override_top_uid",
    "PersonFactory",
]
