"""
RandomSource: seed-reproducible random state shared by every generator.

A single random.Random drives both the direct draws (salaries, dates,
departments) and the Faker provider, so one integer seed fixes the whole
output sequence.
"""

import hashlib
import random
from dataclasses import dataclass

from faker import Faker

from ..errors import ConfigError

DEFAULT_LOCALE = "en_GB"


def seed_to_bytes(seed: int) -> bytes:
    """
    Encode a seed as signed big-endian bytes.

    Ordinary seeds occupy 8 bytes, like a 64-bit long; larger magnitudes
    widen so the mapping stays lossless. Negative seeds are accepted.
    """
    length = max(8, (seed.bit_length() + 8) // 8)
    return seed.to_bytes(length, "big", signed=True)


@dataclass
class RandomSource:
    """Random state plus the fake-data provider bound to it."""

    seed: int
    random: random.Random
    faker: Faker

    @classmethod
    def from_seed(cls, seed: int, locale: str = DEFAULT_LOCALE) -> "RandomSource":
        """Create a source whose whole output sequence is fixed by seed."""
        rng = random.Random(seed_to_bytes(seed))
        try:
            fake = Faker(locale)
        except AttributeError as e:
            raise ConfigError(f"Unsupported locale: {locale}") from e
        fake.random = rng
        return cls(seed=seed, random=rng, faker=fake)

    def sync_marker(self) -> bytes:
        """16-byte container sync marker derived from the seed."""
        return hashlib.md5(seed_to_bytes(self.seed)).digest()
