"""Delivery check endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Response, status

from ...schemas.deliveries import DeliveryCheckRequest, DeliveryCheckResponse
from ...services.outputs.formatter import result_to_response
from ...services.validation.service import run_check, save_check_outputs

router = APIRouter(prefix="/deliveries", tags=["deliveries"])


@router.post("/check", response_model=DeliveryCheckResponse, status_code=status.HTTP_200_OK)
def check(payload: DeliveryCheckRequest, response: Response) -> DeliveryCheckResponse:
    """Validate deliveries against the path; check failures are returned as error documents."""
    try:
        result = run_check(payload.deliveries, payload.path)
    except Exception as exc:
        logging.exception(f"Error checking deliveries: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to check deliveries: {str(exc)}"
        ) from exc

    if payload.persist:
        try:
            run_dir = save_check_outputs(result)
            response.headers["X-Run-Directory"] = run_dir.name
        except OSError as exc:
            logging.error(f"Failed to save delivery check outputs: {exc}")

    return result_to_response(result)
