"""Delivery check orchestration: JSON text in, validation result out."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ...models.domain import ValidationResult, ValidationSuccess
from ...persistence.filesystem import FileStorage
from ..outputs.formatter import result_to_json, steps_to_csv
from .validator import parse_failure, validate_deliveries


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unexpected token {name} in JSON")


def _parse_json(text: str) -> Any:
    return json.loads(text, parse_constant=_reject_constant)


def check_deliveries(deliveries_text: str, path_text: str) -> ValidationResult:
    """Parse the serialized deliveries and path and validate them."""
    try:
        deliveries = _parse_json(deliveries_text)
        path = _parse_json(path_text)
    except (ValueError, RecursionError) as exc:
        logging.warning(f"Could not parse delivery check input: {exc}")
        return parse_failure(exc)
    return run_check(deliveries, path)


def run_check(deliveries: Any, path: Any) -> ValidationResult:
    result = validate_deliveries(deliveries, path)
    if isinstance(result, ValidationSuccess):
        logging.info(f"Delivery check passed with {len(result.steps)} steps")
    else:
        logging.info(f"Delivery check failed: {result.code.value}: {result.message}")
    return result


def save_check_outputs(result: ValidationResult, storage: FileStorage | None = None) -> Path:
    """Write ``summary.json`` (and ``steps.csv`` for a passing check) into a fresh run directory."""
    storage = storage or FileStorage()
    run_dir = storage.make_run_directory(prefix="check")
    storage.write_summary(run_dir, result_to_json(result))
    if isinstance(result, ValidationSuccess):
        storage.write_steps(run_dir, steps_to_csv(result))
    logging.info(f"Saved delivery check outputs to {run_dir}")
    return run_dir
