"""
Field generators for personnel records.

Each generator draws from a RandomSource only, so calling them in a fixed
order reproduces the same values for the same seed. Names, addresses,
nationality and phone numbers come from Faker bound to the same random state.
"""

from datetime import date, timedelta
from typing import List

from ..errors import ConfigError
from ..utils.config import LATEST_DATE_OF_BIRTH
from .models import (
    Address,
    BankDetails,
    EmergencyContact,
    PhoneNumber,
    Sex,
    WorkLocation,
)
from .rng import RandomSource

EARLIEST_DATE_OF_BIRTH = date(1940, 1, 1)

MIN_WORKING_AGE = 18
MIN_SALARY = 20_000
EXTRA_SALARY_RANGE = 100_000
SALARY_BONUS_RANGE = 10_000
MAX_PHONE_NUMBERS = 3
MAX_EMERGENCY_CONTACTS = 3
TAX_CODE = "11500L"

PHONE_TYPES = ["Home", "Work", "Mobile", "Work Mobile"]

RELATIONS = [
    "Mother", "Father", "Sister", "Brother", "Wife", "Husband", "Partner",
    "Daughter", "Son", "Aunt", "Uncle", "Cousin", "Friend", "Neighbour",
]

NATIONALITIES = [
    "British", "Irish", "French", "German", "Spanish", "Portuguese",
    "Italian", "Dutch", "Belgian", "Danish", "Swedish", "Norwegian",
    "Finnish", "Polish", "Czech", "Austrian", "Swiss", "Greek", "Romanian",
    "Hungarian", "American", "Canadian", "Mexican", "Brazilian",
    "Argentinian", "Chilean", "Australian", "New Zealander", "Japanese",
    "Chinese", "Korean", "Indian", "Pakistani", "Bangladeshi", "Nigerian",
    "Kenyan", "Ghanaian", "South African", "Egyptian", "Turkish",
]

DEPARTMENTS = [
    "Administration", "Estates", "Finance", "Human Resources",
    "Information Technology", "Legal", "Operations", "Procurement",
    "Research", "Security", "Strategy", "Student Services",
]

SUBJECTS = [
    "Art", "Biology", "Chemistry", "Computer Science", "Drama",
    "Economics", "English", "French", "Geography", "German", "History",
    "Mathematics", "Music", "Physical Education", "Physics",
    "Religious Studies", "Spanish",
]

GRADES = ["AA", "AO", "EO", "HEO", "SEO", "G7", "G6", "SCS1", "SCS2"]

WORK_LOCATION_NAMES = [
    "Head Office", "Regional Office", "Data Centre", "Training Centre",
    "Main Campus", "North Campus", "South Campus", "Remote",
]


def add_years(day: date, years: int) -> date:
    """Shift a date by whole years; 29 February moves to 1 March."""
    try:
        return day.replace(year=day.year + years)
    except ValueError:
        return day.replace(year=day.year + years, month=3, day=1)


def random_date(source: RandomSource, start: date, end: date) -> date:
    """Uniformly random date in [start, end]."""
    span = (end - start).days
    return start + timedelta(days=source.random.randint(0, span))


def generate_uid(source: RandomSource) -> str:
    """Random non-negative 31-bit integer as a string. Not guaranteed unique."""
    return str(source.random.randrange(2**31 - 1))


def generate_name(source: RandomSource) -> str:
    return f"{source.faker.first_name()} {source.faker.last_name()}"


def subtract_years(day: date, years: int) -> date:
    """Shift a date back by whole years; 29 February moves to 28 February."""
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return day.replace(year=day.year - years, day=28)


def latest_date_of_birth(today: date, min_working_age: int = MIN_WORKING_AGE) -> date:
    """
    Latest date of birth that still leaves room for a hire date by today.

    Raises:
        ConfigError: If nobody in the date-of-birth range can be hired by today
    """
    latest = min(LATEST_DATE_OF_BIRTH, subtract_years(today, min_working_age))
    if latest < EARLIEST_DATE_OF_BIRTH:
        raise ConfigError(
            f"min_working_age {min_working_age} leaves no valid date of birth before {today}"
        )
    return latest


def generate_date_of_birth(
    source: RandomSource,
    latest: date = LATEST_DATE_OF_BIRTH,
) -> date:
    return random_date(source, EARLIEST_DATE_OF_BIRTH, latest)


def generate_hire_date(
    source: RandomSource,
    date_of_birth: date,
    today: date,
    min_working_age: int = MIN_WORKING_AGE,
) -> date:
    """
    Random hire date between the minimum working age and today.

    Args:
        source: Random source
        date_of_birth: The person's date of birth
        today: Latest allowed hire date
        min_working_age: Age in years the person must have reached

    Returns:
        A date in [date_of_birth + min_working_age years, today]
    """
    earliest = add_years(date_of_birth, min_working_age)
    if earliest > today:
        raise ValueError(
            f"No valid hire date: {date_of_birth} + {min_working_age} years is after {today}"
        )
    return random_date(source, earliest, today)


def generate_phone_number(source: RandomSource) -> PhoneNumber:
    phone_type = source.random.choice(PHONE_TYPES)
    return PhoneNumber(type=phone_type, number=source.faker.phone_number())


def generate_phone_numbers(
    source: RandomSource,
    max_count: int = MAX_PHONE_NUMBERS,
) -> List[PhoneNumber]:
    """Generate 1..max_count phone numbers."""
    count = 1 + source.random.randrange(max_count)
    return [generate_phone_number(source) for _ in range(count)]


def generate_emergency_contact(
    source: RandomSource,
    max_phone_numbers: int = MAX_PHONE_NUMBERS,
) -> EmergencyContact:
    name = generate_name(source)
    relation = source.random.choice(RELATIONS)
    numbers = generate_phone_numbers(source, max_phone_numbers)
    return EmergencyContact(name=name, relation=relation, contact_numbers=numbers)


def generate_emergency_contacts(
    source: RandomSource,
    max_count: int = MAX_EMERGENCY_CONTACTS,
    max_phone_numbers: int = MAX_PHONE_NUMBERS,
) -> List[EmergencyContact]:
    """Generate 1..max_count emergency contacts."""
    count = 1 + source.random.randrange(max_count)
    return [
        generate_emergency_contact(source, max_phone_numbers)
        for _ in range(count)
    ]


def generate_address(source: RandomSource) -> Address:
    fake = source.faker
    return Address(
        street_address_number=fake.building_number(),
        street_name=fake.street_name(),
        city=fake.city(),
        postcode=fake.postcode(),
    )


def generate_nationality(source: RandomSource) -> str:
    return source.faker.random_element(NATIONALITIES)


def generate_department(source: RandomSource) -> str:
    return source.random.choice(DEPARTMENTS)


def generate_subject(source: RandomSource) -> str:
    return source.random.choice(SUBJECTS)


def generate_grade(source: RandomSource) -> str:
    return source.random.choice(GRADES)


def generate_salary_amount(
    source: RandomSource,
    min_salary: int = MIN_SALARY,
    extra_range: int = EXTRA_SALARY_RANGE,
) -> int:
    """Uniform in [min_salary, min_salary + extra_range)."""
    return min_salary + source.random.randrange(extra_range)


def generate_salary_bonus(
    source: RandomSource,
    bonus_range: int = SALARY_BONUS_RANGE,
) -> int:
    """Uniform in [0, bonus_range)."""
    return source.random.randrange(bonus_range)


def generate_work_location(source: RandomSource) -> WorkLocation:
    location_name = source.random.choice(WORK_LOCATION_NAMES)
    return WorkLocation(location_name=location_name, address=generate_address(source))


def generate_sex(source: RandomSource) -> Sex:
    return source.random.choice(list(Sex))


def generate_bank_details(source: RandomSource) -> BankDetails:
    """UK-style sort code (12-34-56) and 8-digit account number."""
    pairs = [f"{source.random.randrange(100):02d}" for _ in range(3)]
    account = f"{source.random.randrange(10**8):08d}"
    return BankDetails(sort_code="-".join(pairs), account_number=account)
