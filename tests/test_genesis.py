from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path

import pytest

from inflation.params.codec import genesis_to_json, genesis_to_yaml, params_to_dict
from inflation.params.dec import Dec
from inflation.params.errors import DistributionNotNormalized, InvalidDenom, InvalidGenesis, ParamsDecodeError
from inflation.params.genesis import GenesisState, default_genesis_state, validate_genesis
from inflation.params.loader import load_genesis, read_genesis_file
from inflation.params.params import default_params


def test_default_genesis_is_valid() -> None:
    gs = default_genesis_state()
    validate_genesis(gs)
    assert gs.period == 0
    assert gs.epoch_identifier == "day"
    assert gs.epochs_per_period == 365
    assert gs.skipped_epochs == 0


def test_genesis_rejects_invalid_params() -> None:
    p = replace(default_params(), mint_denom="")
    with pytest.raises(InvalidDenom):
        validate_genesis(GenesisState(params=p))


def test_genesis_epoch_fields() -> None:
    base = default_genesis_state()
    for bad, field in (
        (replace(base, epoch_identifier="  "), "epoch_identifier"),
        (replace(base, epochs_per_period=0), "epochs_per_period"),
        (replace(base, epochs_per_period=-1), "epochs_per_period"),
        (replace(base, period=-1), "period"),
        (replace(base, skipped_epochs=-1), "skipped_epochs"),
        (replace(base, epochs_per_period=True), "epochs_per_period"),
    ):
        with pytest.raises(InvalidGenesis) as ei:
            validate_genesis(bad)
        assert ei.value.field == field


def test_load_genesis_json(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "genesis.json"
    path.write_text(genesis_to_json(default_genesis_state()), encoding="utf-8")

    with caplog.at_level(logging.INFO, logger="inflation.genesis"):
        gs = load_genesis(str(path))

    assert gs == default_genesis_state()
    events = [json.loads(r.getMessage()) for r in caplog.records if r.name == "inflation.genesis"]
    assert events and events[-1]["event"] == "inflation_genesis_loaded"
    assert events[-1]["mint_denom"] == "aevmos"


def test_load_genesis_yaml(tmp_path: Path) -> None:
    path = tmp_path / "genesis.yaml"
    path.write_text(genesis_to_yaml(default_genesis_state()), encoding="utf-8")
    assert load_genesis(str(path)) == default_genesis_state()


def test_load_genesis_rejects_whole_file(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    params = params_to_dict(default_params())
    params["inflation_distribution"]["staking_rewards"] = "0.533333333"
    path = tmp_path / "genesis.json"
    path.write_text(json.dumps({"params": params}), encoding="utf-8")

    # shape is fine; semantics are not
    assert read_genesis_file(str(path)).params.inflation_distribution.total() == Dec.from_str("0.999999999")

    with caplog.at_level(logging.INFO, logger="inflation.genesis"):
        with pytest.raises(DistributionNotNormalized):
            load_genesis(str(path))

    rejected = [json.loads(r.getMessage()) for r in caplog.records if r.levelno == logging.WARNING]
    assert rejected and rejected[-1]["event"] == "inflation_genesis_rejected"
    assert rejected[-1]["code"] == "distribution_not_normalized"


def test_load_genesis_malformed_and_missing(tmp_path: Path) -> None:
    path = tmp_path / "genesis.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ParamsDecodeError):
        load_genesis(str(path))

    with pytest.raises(FileNotFoundError):
        load_genesis(str(tmp_path / "missing.json"))


def test_load_genesis_rejects_non_utf8(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "genesis.json"
    path.write_bytes(b"\xff\xfe{}")

    with caplog.at_level(logging.INFO, logger="inflation.genesis"):
        with pytest.raises(ParamsDecodeError) as ei:
            load_genesis(str(path))
    assert ei.value.reason == "genesis file is not valid UTF-8"

    rejected = [json.loads(r.getMessage()) for r in caplog.records if r.levelno == logging.WARNING]
    assert rejected and rejected[-1]["event"] == "inflation_genesis_rejected"
    assert rejected[-1]["code"] == "decode_error"
