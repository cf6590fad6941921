"""Delivery check request/response schemas."""

from __future__ import annotations

from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from ..models.domain import Action, ErrorCode


class DeliveryCheckRequest(BaseModel):
    deliveries: Any = Field(..., description="List of [pickup, dropoff] address pairs.")
    path: Any = Field(..., description="Ordered list of addresses visited by the vehicle.")
    persist: bool = Field(default=False, description="Store the check outputs under the data root.")


class StepModel(BaseModel):
    address: Any
    action: Optional[Action]


class DeliveryCheckSuccess(BaseModel):
    status: Literal["success"] = "success"
    steps: List[StepModel]


class DeliveryCheckError(BaseModel):
    status: Literal["error"] = "error"
    error_code: ErrorCode
    error_message: str


DeliveryCheckResponse = Union[DeliveryCheckSuccess, DeliveryCheckError]
