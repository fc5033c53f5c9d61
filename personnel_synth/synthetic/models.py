"""
Data models for synthetic personnel records.

Employees, teachers and professors share one Person type tagged with a
RecordKind; the few kind-specific fields are left as None where a kind
does not carry them.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional

from ..errors import ConfigError


class RecordKind(Enum):
    """Which record variant to generate."""
    EMPLOYEE = "Employee"
    TEACHER = "Teacher"
    PROFESSOR = "Professor"

    @classmethod
    def parse(cls, value: str) -> "RecordKind":
        """Parse a kind from its name, value or single-letter code (E/T/P)."""
        text = str(value).strip()
        for kind in cls:
            if text.upper() in (kind.name, kind.value.upper(), kind.name[0]):
                return kind
        options = ", ".join(kind.value for kind in cls)
        raise ConfigError(f"Unknown record kind: {value!r}. Available: {options}")


class Sex(Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"


@dataclass(frozen=True)
class PhoneNumber:
    type: str  # Home, Work, Mobile, ...
    number: str


@dataclass(frozen=True)
class EmergencyContact:
    name: str
    relation: str
    contact_numbers: List[PhoneNumber] = field(default_factory=list)


@dataclass(frozen=True)
class Address:
    street_address_number: str
    street_name: str
    city: str
    postcode: str


@dataclass(frozen=True)
class WorkLocation:
    location_name: str
    address: Address


@dataclass(frozen=True)
class BankDetails:
    sort_code: str
    account_number: str


@dataclass(frozen=True)
class Manager:
    """
    One superior in a manager chain.

    Carries the demographic fields of a person but never a chain of its own.
    """
    uid: str
    name: str
    date_of_birth: date
    contact_numbers: List[PhoneNumber]
    emergency_contacts: List[EmergencyContact]
    address: Address
    nationality: str
    hire_date: date
    sex: Sex


@dataclass(frozen=True)
class Person:
    """
    A generated personnel record.

    managers is ordered top of chain first. subject is set for teachers only;
    grade, bank_details and tax_code for employees only.
    """
    kind: RecordKind
    uid: str
    name: str
    date_of_birth: date
    contact_numbers: List[PhoneNumber]
    emergency_contacts: List[EmergencyContact]
    address: Address
    nationality: str
    managers: List[Manager]
    hire_date: date
    department: str
    salary_amount: int
    salary_bonus: int
    work_location: WorkLocation
    sex: Sex

    # Kind-specific payload
    subject: Optional[str] = None
    grade: Optional[str] = None
    bank_details: Optional[BankDetails] = None
    tax_code: Optional[str] = None

    @property
    def top_manager(self) -> Optional[Manager]:
        return self.managers[0] if self.managers else None
