"""
ManagerChainGenerator: Build the chain of superiors attached to a record.

The chain is a flat list ordered top of chain first. Depth is drawn
uniformly from [min_depth, min_depth + extra_depth_range).
"""

from dataclasses import replace
from datetime import date
from typing import List, Optional

from ..errors import ConfigError
from ..utils.config import GeneratorConfig
from . import field_generators as fields
from .models import Manager
from .rng import RandomSource


class ManagerChainGenerator:
    """Generates manager chains of randomized depth."""

    def __init__(
        self,
        min_depth: int = 2,
        extra_depth_range: int = 3,
        today: Optional[date] = None,
        config: Optional[GeneratorConfig] = None,
    ):
        if min_depth < 1:
            raise ConfigError(f"min_depth must be at least 1, got {min_depth}")
        if extra_depth_range < 1:
            raise ConfigError(
                f"extra_depth_range must be at least 1, got {extra_depth_range}"
            )
        self.min_depth = min_depth
        self.extra_depth_range = extra_depth_range
        self.today = today or date.today()
        self.config = config or GeneratorConfig()
        self.latest_date_of_birth = fields.latest_date_of_birth(
            self.today, self.config.min_working_age
        )

    @classmethod
    def from_config(cls, config: GeneratorConfig, today: date) -> "ManagerChainGenerator":
        return cls(
            min_depth=config.min_manager_depth,
            extra_depth_range=config.extra_manager_depth_range,
            today=today,
            config=config,
        )

    def sample_depth(self, source: RandomSource) -> int:
        return self.min_depth + source.random.randrange(self.extra_depth_range)

    def generate(self, source: RandomSource) -> List[Manager]:
        """Generate a chain, top of chain first."""
        depth = self.sample_depth(source)
        return [self.generate_manager(source) for _ in range(depth)]

    def generate_manager(self, source: RandomSource) -> Manager:
        """Generate a single manager with full demographic fields."""
        cfg = self.config
        uid = fields.generate_uid(source)
        name = fields.generate_name(source)
        date_of_birth = fields.generate_date_of_birth(source, self.latest_date_of_birth)
        contact_numbers = fields.generate_phone_numbers(source, cfg.max_phone_numbers)
        emergency_contacts = fields.generate_emergency_contacts(
            source, cfg.max_emergency_contacts, cfg.max_phone_numbers
        )
        address = fields.generate_address(source)
        nationality = fields.generate_nationality(source)
        hire_date = fields.generate_hire_date(
            source, date_of_birth, self.today, cfg.min_working_age
        )
        sex = fields.generate_sex(source)

        return Manager(
            uid=uid,
            name=name,
            date_of_birth=date_of_birth,
            contact_numbers=contact_numbers,
            emergency_contacts=emergency_contacts,
            address=address,
            nationality=nationality,
            hire_date=hire_date,
            sex=sex,
        )


def override_top_uid(chain: List[Manager], uid: str) -> List[Manager]:
    """Return a copy of chain with the top manager's uid replaced."""
    if not chain:
        return []
    return [replace(chain[0], uid=uid)] + list(chain[1:])
