"""Tests for configuration loading."""

import json
from pathlib import Path

import pytest
from returns.result import Failure

from fpplayground.config import PlaygroundConfig
from fpplayground.core.pairing import PairingStrategy


def test_defaults():
    config = PlaygroundConfig()
    assert config.log_level == "info"
    assert config.pairing is PairingStrategy.ZIP
    assert config.keep_empty_diffs is False
    assert config.country_aliases == {}


def test_dict_round_trip():
    config = PlaygroundConfig(
        log_level="debug",
        log_json=True,
        pairing_strategy="fold",
        keep_empty_diffs=True,
        country_aliases={"Polska": "Poland"},
    )
    assert PlaygroundConfig.from_dict(config.to_dict()) == config


def test_unknown_strategy_is_rejected():
    with pytest.raises(ValueError, match="Unknown pairing strategy"):
        PlaygroundConfig.from_dict({"pairing_strategy": "spiral"})


def test_overrides_skip_none():
    config = PlaygroundConfig(pairing_strategy="index").with_overrides(
        pairing_strategy=None,
        keep_empty_diffs=True,
    )
    assert config.pairing is PairingStrategy.INDEX
    assert config.keep_empty_diffs is True


def test_overrides_return_a_new_config():
    config = PlaygroundConfig()
    config.with_overrides(log_level="debug")
    assert config.log_level == "info"


def test_from_file(tmp_path: Path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"pairing_strategy": "index", "country_aliases": {"Polska": "Poland"}}))

    config = PlaygroundConfig.from_file(path).unwrap()

    assert config.pairing is PairingStrategy.INDEX
    assert config.country_aliases == {"Polska": "Poland"}
    assert config.log_level == "info"


def test_from_file_missing(tmp_path: Path):
    result = PlaygroundConfig.from_file(tmp_path / "missing.json")
    assert isinstance(result, Failure)


def test_from_file_rejects_bad_values(tmp_path: Path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"pairing_strategy": "spiral"}))
    result = PlaygroundConfig.from_file(path)
    assert isinstance(result, Failure)
    assert "spiral" in result.failure()


def test_from_file_requires_an_object(tmp_path: Path):
    path = tmp_path / "config.json"
    path.write_text("[]")
    assert isinstance(PlaygroundConfig.from_file(path), Failure)


def test_log_level_is_case_insensitive():
    assert PlaygroundConfig.from_dict({"log_level": "DEBUG"}).log_level == "debug"


@pytest.mark.parametrize("level", [5, "verbose", None])
def test_unknown_log_level_is_rejected(level):
    with pytest.raises(ValueError, match="Unknown log level"):
        PlaygroundConfig.from_dict({"log_level": level})


@pytest.mark.parametrize("name", ["log_json", "keep_empty_diffs"])
def test_flags_are_not_coerced(name: str):
    with pytest.raises(TypeError, match=f"{name} must be true or false"):
        PlaygroundConfig.from_dict({name: "false"})


@pytest.mark.parametrize("aliases", [["Polska", "Poland"], {"Polska": 1}])
def test_country_aliases_must_map_names(aliases):
    with pytest.raises(TypeError, match="country_aliases"):
        PlaygroundConfig.from_dict({"country_aliases": aliases})


def test_from_file_reports_wrong_types(tmp_path: Path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"log_level": 5}))
    result = PlaygroundConfig.from_file(path)
    assert result == Failure(f"Invalid config {path}: Unknown log level: 5")
