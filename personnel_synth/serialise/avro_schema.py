"""
Avro schemas for personnel records.

One record schema per RecordKind. Nested types (PhoneNumber, Address, ...)
are defined inline at first use and referenced by full name afterwards,
as Avro requires.
"""

from typing import Any, Dict, List, Set, Union

from fastavro import parse_schema

from ..synthetic.models import RecordKind, Sex

NAMESPACE = "personnel_synth.types"

# Written after the first record when the output path is flagged as delimited text
SEPARATOR_TOKEN = ";"

# Fields present on every kind, in schema order
COMMON_FIELDS = [
    "uid",
    "name",
    "date_of_birth",
    "contact_numbers",
    "emergency_contacts",
    "address",
    "nationality",
    "managers",
    "hire_date",
    "department",
    "salary_amount",
    "salary_bonus",
    "work_location",
    "sex",
]

VARIANT_FIELDS: Dict[RecordKind, List[str]] = {
    RecordKind.EMPLOYEE: ["grade", "bank_details", "tax_code"],
    RecordKind.TEACHER: ["subject"],
    RecordKind.PROFESSOR: [],
}

MANAGER_FIELDS = [
    "uid",
    "name",
    "date_of_birth",
    "contact_numbers",
    "emergency_contacts",
    "address",
    "nationality",
    "hire_date",
    "sex",
]


def record_field_names(kind: RecordKind) -> List[str]:
    """Field names written for a kind, in schema order."""
    return COMMON_FIELDS + VARIANT_FIELDS[kind]


class _SchemaBuilder:
    """Tracks which named types are already defined within one schema."""

    def __init__(self):
        self.defined: Set[str] = set()

    def named(self, name: str, definition: Dict[str, Any]) -> Union[str, Dict[str, Any]]:
        full_name = f"{NAMESPACE}.{name}"
        if full_name in self.defined:
            return full_name
        self.defined.add(full_name)
        return {"name": name, "namespace": NAMESPACE, **definition}

    def phone_number(self):
        return self.named("PhoneNumber", {
            "type": "record",
            "fields": [
                {"name": "type", "type": "string"},
                {"name": "number", "type": "string"},
            ],
        })

    def emergency_contact(self):
        return self.named("EmergencyContact", {
            "type": "record",
            "fields": [
                {"name": "name", "type": "string"},
                {"name": "relation", "type": "string"},
                {"name": "contact_numbers", "type": {"type": "array", "items": self.phone_number()}},
            ],
        })

    def address(self):
        return self.named("Address", {
            "type": "record",
            "fields": [
                {"name": "street_address_number", "type": "string"},
                {"name": "street_name", "type": "string"},
                {"name": "city", "type": "string"},
                {"name": "postcode", "type": "string"},
            ],
        })

    def sex(self):
        return self.named("Sex", {
            "type": "enum",
            "symbols": [sex.value for sex in Sex],
        })

    def work_location(self):
        return self.named("WorkLocation", {
            "type": "record",
            "fields": [
                {"name": "location_name", "type": "string"},
                {"name": "address", "type": self.address()},
            ],
        })

    def bank_details(self):
        return self.named("BankDetails", {
            "type": "record",
            "fields": [
                {"name": "sort_code", "type": "string"},
                {"name": "account_number", "type": "string"},
            ],
        })

    def manager(self):
        return self.named("Manager", {
            "type": "record",
            "fields": [self.field(name) for name in MANAGER_FIELDS],
        })

    def field(self, name: str) -> Dict[str, Any]:
        """Schema entry for a record field."""
        simple = {
            "uid": "string",
            "name": "string",
            "date_of_birth": "string",
            "nationality": "string",
            "hire_date": "string",
            "department": "string",
            "salary_amount": "long",
            "salary_bonus": "long",
            "subject": "string",
            "grade": "string",
            "tax_code": "string",
        }
        if name in simple:
            return {"name": name, "type": simple[name]}

        if name == "contact_numbers":
            field_type = {"type": "array", "items": self.phone_number()}
        elif name == "emergency_contacts":
            field_type = {"type": "array", "items": self.emergency_contact()}
        elif name == "address":
            field_type = self.address()
        elif name == "managers":
            field_type = {"type": "array", "items": self.manager()}
        elif name == "work_location":
            field_type = self.work_location()
        elif name == "bank_details":
            field_type = self.bank_details()
        elif name == "sex":
            field_type = self.sex()
        else:
            raise KeyError(f"No schema for field: {name}")
        return {"name": name, "type": field_type}


def build_record_schema(kind: RecordKind) -> Dict[str, Any]:
    """Unparsed Avro record schema for a kind."""
    builder = _SchemaBuilder()
    return {
        "type": "record",
        "name": kind.value,
        "namespace": NAMESPACE,
        "doc": f"Synthetic {kind.value.lower()} record",
        "fields": [builder.field(name) for name in record_field_names(kind)],
    }


def build_schema(kind: RecordKind, with_separator: bool = False):
    """
    Parsed schema for a container file of the given kind.

    Args:
        kind: Record kind stored in the file
        with_separator: Wrap the record in a union with "string" so a
            literal separator token can sit between records

    Returns:
        Schema parsed by fastavro
    """
    record_schema = build_record_schema(kind)
    if with_separator:
        return parse_schema([record_schema, "string"])
    return parse_schema(record_schema)
