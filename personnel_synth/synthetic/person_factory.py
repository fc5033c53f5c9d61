"""
PersonFactory: Assemble complete Employee, Teacher and Professor records.

Field generation order is part of the output format: reordering draws
changes every record produced for a given seed, so each builder below
keeps its order fixed.
"""

from dataclasses import replace
from datetime import date
from typing import Optional

from ..utils.config import GeneratorConfig
from . import field_generators as fields
from .manager_chain import ManagerChainGenerator, override_top_uid
from .models import Person, RecordKind
from .rng import RandomSource


class PersonFactory:
    """Factory for generating personnel records of each kind."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        today: Optional[date] = None,
    ):
        self.config = config or GeneratorConfig()
        self.today = today or self.config.reference_date or date.today()
        self.latest_date_of_birth = fields.latest_date_of_birth(
            self.today, self.config.min_working_age
        )
        self.manager_chain = ManagerChainGenerator.from_config(self.config, self.today)

        self._builders = {
            RecordKind.EMPLOYEE: self.generate_employee,
            RecordKind.TEACHER: self.generate_teacher,
            RecordKind.PROFESSOR: self.generate_professor,
        }

    def generate(self, source: RandomSource, kind: RecordKind) -> Person:
        """Generate one record of the given kind."""
        return self._builders[kind](source)

    def generate_employee(self, source: RandomSource) -> Person:
        cfg = self.config
        uid = fields.generate_uid(source)
        name = fields.generate_name(source)
        date_of_birth = fields.generate_date_of_birth(source, self.latest_date_of_birth)
        contact_numbers = self._phone_numbers(source)
        emergency_contacts = self._emergency_contacts(source)
        address = fields.generate_address(source)
        bank_details = fields.generate_bank_details(source)
        nationality = fields.generate_nationality(source)
        managers = self.manager_chain.generate(source)
        hire_date = self._hire_date(source, date_of_birth)
        grade = fields.generate_grade(source)
        department = fields.generate_department(source)
        salary_amount = fields.generate_salary_amount(
            source, cfg.min_salary, cfg.extra_salary_range
        )
        salary_bonus = fields.generate_salary_bonus(source, cfg.salary_bonus_range)
        work_location = fields.generate_work_location(source)
        sex = fields.generate_sex(source)

        return Person(
            kind=RecordKind.EMPLOYEE,
            uid=uid,
            name=name,
            date_of_birth=date_of_birth,
            contact_numbers=contact_numbers,
            emergency_contacts=emergency_contacts,
            address=address,
            nationality=nationality,
            managers=managers,
            hire_date=hire_date,
            department=department,
            salary_amount=salary_amount,
            salary_bonus=salary_bonus,
            work_location=work_location,
            sex=sex,
            grade=grade,
            bank_details=bank_details,
            tax_code=fields.TAX_CODE,
        )

    def generate_teacher(self, source: RandomSource) -> Person:
        cfg = self.config
        uid = fields.generate_uid(source)
        name = fields.generate_name(source)
        date_of_birth = fields.generate_date_of_birth(source, self.latest_date_of_birth)
        contact_numbers = self._phone_numbers(source)
        emergency_contacts = self._emergency_contacts(source)
        address = fields.generate_address(source)
        nationality = fields.generate_nationality(source)
        subject = fields.generate_subject(source)
        department = fields.generate_department(source)
        managers = self.manager_chain.generate(source)
        hire_date = self._hire_date(source, date_of_birth)
        salary_amount = fields.generate_salary_amount(
            source, cfg.min_salary, cfg.extra_salary_range
        )
        salary_bonus = fields.generate_salary_bonus(source, cfg.salary_bonus_range)
        work_location = fields.generate_work_location(source)
        sex = fields.generate_sex(source)

        return Person(
            kind=RecordKind.TEACHER,
            uid=uid,
            name=name,
            date_of_birth=date_of_birth,
            contact_numbers=contact_numbers,
            emergency_contacts=emergency_contacts,
            address=address,
            nationality=nationality,
            managers=managers,
            hire_date=hire_date,
            department=department,
            salary_amount=salary_amount,
            salary_bonus=salary_bonus,
            work_location=work_location,
            sex=sex,
            subject=subject,
        )

    def generate_professor(self, source: RandomSource) -> Person:
        cfg = self.config
        uid = fields.generate_uid(source)
        name = fields.generate_name(source)
        date_of_birth = fields.generate_date_of_birth(source, self.latest_date_of_birth)
        contact_numbers = self._phone_numbers(source)
        emergency_contacts = self._emergency_contacts(source)
        address = fields.generate_address(source)
        nationality = fields.generate_nationality(source)
        managers = self.manager_chain.generate(source)
        hire_date = self._hire_date(source, date_of_birth)
        department = fields.generate_department(source)
        salary_amount = fields.generate_salary_amount(
            source, cfg.min_salary, cfg.extra_salary_range
        )
        salary_bonus = fields.generate_salary_bonus(source, cfg.salary_bonus_range)
        work_location = fields.generate_work_location(source)
        sex = fields.generate_sex(source)

        return Person(
            kind=RecordKind.PROFESSOR,
            uid=uid,
            name=name,
            date_of_birth=date_of_birth,
            contact_numbers=contact_numbers,
            emergency_contacts=emergency_contacts,
            address=address,
            nationality=nationality,
            managers=managers,
            hire_date=hire_date,
            department=department,
            salary_amount=salary_amount,
            salary_bonus=salary_bonus,
            work_location=work_location,
            sex=sex,
        )

    def generate_anchored(
        self,
        source: RandomSource,
        kind: RecordKind,
        top_manager_uid: Optional[str] = None,
    ) -> Person:
        """Generate a record whose top manager carries a well-known uid."""
        person = self.generate(source, kind)
        uid = top_manager_uid or self.config.top_manager_uid
        return replace(person, managers=override_top_uid(person.managers, uid))

    def _phone_numbers(self, source: RandomSource):
        return fields.generate_phone_numbers(source, self.config.max_phone_numbers)

    def _emergency_contacts(self, source: RandomSource):
        return fields.generate_emergency_contacts(
            source,
            self.config.max_emergency_contacts,
            self.config.max_phone_numbers,
        )

    def _hire_date(self, source: RandomSource, date_of_birth: date) -> date:
        return fields.generate_hire_date(
            source, date_of_birth, self.today, self.config.min_working_age
        )
