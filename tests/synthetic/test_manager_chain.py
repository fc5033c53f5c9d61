"""
Tests for manager chain generation.
"""

from datetime import date

import pytest

from personnel_synth.errors import ConfigError
from personnel_synth.synthetic.field_generators import add_years
from personnel_synth.synthetic.manager_chain import ManagerChainGenerator, override_top_uid
from personnel_synth.synthetic.rng import RandomSource

TODAY = date(2024, 6, 1)


def _make_generator(**kwargs) -> ManagerChainGenerator:
    return ManagerChainGenerator(today=TODAY, **kwargs)


def test_default_depth_in_two_to_four():
    generator = _make_generator()
    depths = set()
    for seed in range(60):
        chain = generator.generate(RandomSource.from_seed(seed))
        depths.add(len(chain))
        assert 2 <= len(chain) < 5
    assert depths == {2, 3, 4}


def test_single_value_range_gives_fixed_depth():
    generator = _make_generator(min_depth=3, extra_depth_range=1)
    source = RandomSource.from_seed(0)
    assert all(len(generator.generate(source)) == 3 for _ in range(10))


@pytest.mark.parametrize("kwargs", [{"min_depth": 0}, {"extra_depth_range": 0}])
def test_invalid_depth_settings_raise(kwargs):
    with pytest.raises(ConfigError):
        _make_generator(**kwargs)


def test_managers_have_full_demographics():
    chain = _make_generator().generate(RandomSource.from_seed(9))
    for manager in chain:
        assert manager.uid.isdigit()
        assert manager.name
        assert manager.contact_numbers
        assert manager.emergency_contacts
        assert add_years(manager.date_of_birth, 18) <= manager.hire_date <= TODAY
        assert not hasattr(manager, "managers")


def test_chain_is_reproducible():
    a = _make_generator().generate(RandomSource.from_seed(11))
    b = _make_generator().generate(RandomSource.from_seed(11))
    assert a == b


def test_override_top_uid_returns_copy():
    chain = _make_generator().generate(RandomSource.from_seed(3))
    original_uid = chain[0].uid

    anchored = override_top_uid(chain, "Bob")

    assert anchored[0].uid == "Bob"
    assert anchored[1:] == chain[1:]
    assert chain[0].uid == original_uid
    assert anchored[0].name == chain[0].name


def test_override_top_uid_on_empty_chain():
    assert override_top_uid([], "Bob") == []
