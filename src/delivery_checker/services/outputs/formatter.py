"""Serializers for delivery check outputs."""

from __future__ import annotations

import csv
import io
import json

from ...models.domain import ValidationResult, ValidationSuccess, normalize_address
from ...schemas.deliveries import DeliveryCheckError, DeliveryCheckResponse, DeliveryCheckSuccess, StepModel


def result_to_response(result: ValidationResult) -> DeliveryCheckResponse:
    if isinstance(result, ValidationSuccess):
        return DeliveryCheckSuccess(
            steps=[StepModel(address=normalize_address(step.address), action=step.action) for step in result.steps]
        )
    return DeliveryCheckError(error_code=result.code, error_message=result.message)


def result_to_json(result: ValidationResult) -> dict:
    return result_to_response(result).model_dump(mode="json")


def render_json(document: dict, *, indent: int | None = 2) -> str:
    """Dump ``document`` as text; ``indent=None`` gives the compact single-line form."""
    if indent is None:
        return json.dumps(document, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(document, ensure_ascii=False, indent=indent)


def steps_to_csv(result: ValidationSuccess) -> str:
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=["sequence", "address", "action"])
    writer.writeheader()
    for sequence, step in enumerate(result.steps):
        writer.writerow(
            {
                "sequence": sequence,
                "address": normalize_address(step.address),
                "action": step.action.value if step.action else "",
            }
        )
    return buffer.getvalue()
