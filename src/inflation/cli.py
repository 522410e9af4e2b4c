# src/inflation/cli.py
from __future__ import annotations

"""Operator CLI.

  inflation-params defaults [--format json|yaml]
  inflation-params validate [PATH]
  inflation-params check KEY VALUE
"""

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from inflation.config import load_config
from inflation.env import load_dotenv_if_present
from inflation.params.codec import (
    exponential_calculation_from_json,
    genesis_to_dict,
    genesis_to_yaml,
    inflation_distribution_from_json,
)
from inflation.params.errors import ParamsDecodeError, ParamValidationError
from inflation.params.genesis import default_genesis_state
from inflation.params.key_table import param_key_table
from inflation.params.loader import load_genesis
from inflation.params.params import (
    PARAM_STORE_KEY_EXPONENTIAL_CALCULATION,
    PARAM_STORE_KEY_INFLATION_DISTRIBUTION,
)
from inflation.structured_logging import configure_structured_logging, log_event

_LOG = logging.getLogger("inflation.cli")


def _decode_value(key: str, raw: str) -> Any:
    # Only the struct keys take JSON; the denom (and unknown keys) stay raw strings.
    if key == PARAM_STORE_KEY_EXPONENTIAL_CALCULATION:
        return exponential_calculation_from_json(raw)
    if key == PARAM_STORE_KEY_INFLATION_DISTRIBUTION:
        return inflation_distribution_from_json(raw)
    return raw


def _cmd_defaults(args: argparse.Namespace, fmt: str) -> int:
    gs = default_genesis_state()
    if (args.format or fmt) == "yaml":
        sys.stdout.write(genesis_to_yaml(gs))
    else:
        sys.stdout.write(json.dumps(genesis_to_dict(gs), indent=2, sort_keys=True) + "\n")
    return 0


def _cmd_validate(args: argparse.Namespace, default_path: Optional[str]) -> int:
    path = args.path or default_path
    if not path:
        print("error: no genesis path given and INFLATION_GENESIS_PATH is unset", file=sys.stderr)
        return 2
    try:
        load_genesis(path)
    except FileNotFoundError:
        print(f"error: genesis file not found: {path}", file=sys.stderr)
        return 2
    print(f"ok: {path}")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    table = param_key_table()
    value = _decode_value(args.key, args.value)
    table.validate(args.key, value)
    log_event(_LOG, "inflation_param_update_checked", key=args.key)
    print(f"ok: {args.key}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="inflation-params", description="Inflation parameter tooling")
    sub = ap.add_subparsers(dest="command", required=True)

    p_def = sub.add_parser("defaults", help="Print the default inflation genesis state")
    p_def.add_argument("--format", choices=["json", "yaml"], default=None)

    p_val = sub.add_parser("validate", help="Validate an inflation genesis file")
    p_val.add_argument("path", nargs="?", default=None, help="Path to genesis (.json/.yaml)")

    p_chk = sub.add_parser("check", help="Validate a single-key parameter update")
    p_chk.add_argument("key", help="Param store key, e.g. ParamStoreKeyInflationDistribution")
    p_chk.add_argument("value", help="New value: JSON for the struct keys, taken verbatim for the denom")

    return ap


def main(argv: Optional[List[str]] = None) -> int:
    # Load .env early so INFLATION_* vars exist before config is read.
    load_dotenv_if_present()
    cfg = load_config()
    configure_structured_logging(cfg.log_level)

    args = build_parser().parse_args(argv)

    try:
        if args.command == "defaults":
            return _cmd_defaults(args, cfg.output_format)
        if args.command == "validate":
            return _cmd_validate(args, cfg.genesis_path)
        return _cmd_check(args)
    except ParamsDecodeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except ParamValidationError as e:
        print(f"invalid: {e.code}:{e.reason}", file=sys.stderr)
        return 1
