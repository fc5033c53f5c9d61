"""
Tests for generator configuration loading and validation.
"""

from datetime import date
from pathlib import Path

import pytest

from personnel_synth.errors import ConfigError
from personnel_synth.utils.config import GeneratorConfig, config_from_dict, load_config

PROJECT_ROOT = Path(__file__).parent.parent


def test_defaults_match_original_constants():
    config = GeneratorConfig()
    assert config.min_manager_depth == 2
    assert config.extra_manager_depth_range == 3
    assert config.min_salary == 20_000
    assert config.extra_salary_range == 100_000
    assert config.salary_bonus_range == 10_000
    assert config.progress_interval == 100_000
    assert config.top_manager_uid == "Bob"
    assert config.delimited_extensions == ("csv",)
    assert config.reference_date is None


@pytest.mark.parametrize(
    "overrides",
    [
        {"min_manager_depth": 0},
        {"extra_manager_depth_range": -1},
        {"progress_interval": 0},
        {"min_salary": -5},
        {"top_manager_uid": ""},
        {"codec": "snappy-ish"},
        {"reference_date": date(2010, 1, 1)},
        {"locale": "zz_ZZ"},
        {"locale": None},
        {"min_salary": 2**63},
        {"salary_bonus_range": 2**63 + 1},
    ],
)
def test_invalid_values_raise(overrides):
    with pytest.raises(ConfigError):
        GeneratorConfig(**overrides)


def test_with_overrides_validates():
    config = GeneratorConfig().with_overrides(min_salary=30_000)
    assert config.min_salary == 30_000
    with pytest.raises(ConfigError):
        config.with_overrides(max_phone_numbers=0)


def test_config_from_dict_normalizes_extensions():
    config = config_from_dict({"delimited_extensions": [".CSV", "tsv"]})
    assert config.delimited_extensions == ("csv", "tsv")

    single = config_from_dict({"delimited_extensions": "txt"})
    assert single.delimited_extensions == ("txt",)


def test_config_from_dict_parses_reference_date_string():
    config = config_from_dict({"reference_date": "2024-01-15"})
    assert config.reference_date == date(2024, 1, 15)

    with pytest.raises(ConfigError):
        config_from_dict({"reference_date": "not a date"})


def test_unknown_keys_raise():
    with pytest.raises(ConfigError, match="surprise"):
        config_from_dict({"surprise": 1})


def test_load_config_with_generator_section(tmp_path):
    path = tmp_path / "gen.yaml"
    path.write_text(
        "generator:\n"
        "  locale: en_US\n"
        "  min_manager_depth: 3\n"
        "  reference_date: 2024-03-01\n"
    )
    config = load_config(path)
    assert config.locale == "en_US"
    assert config.min_manager_depth == 3
    assert config.reference_date == date(2024, 3, 1)


def test_load_config_top_level_mapping(tmp_path):
    path = tmp_path / "gen.yaml"
    path.write_text("top_manager_uid: Alice\n")
    assert load_config(path).top_manager_uid == "Alice"


def test_load_config_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == GeneratorConfig()


@pytest.mark.parametrize("content", ["- a\n- b\n", "key: [unclosed\n", "generator: 5\n"])
def test_load_config_rejects_bad_files(tmp_path, content):
    path = tmp_path / "bad.yaml"
    path.write_text(content)
    with pytest.raises(ConfigError):
        load_config(path)


def test_load_config_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yaml")


def test_shipped_example_config_loads():
    config = load_config(PROJECT_ROOT / "config" / "synthetic" / "generator.yaml")
    assert config == GeneratorConfig()


def test_salary_bounds_fit_avro_long():
    config = GeneratorConfig(min_salary=2**63 - 100, extra_salary_range=100)
    assert config.min_salary + config.extra_salary_range - 1 == 2**63 - 1


def test_locale_accepts_hyphenated_form():
    assert GeneratorConfig(locale="en-US").locale == "en-US"
