"""Validate pickup/dropoff deliveries against an ordered path of addresses."""

from .models.domain import (
    Action,
    Delivery,
    ErrorCode,
    Step,
    ValidationFailure,
    ValidationResult,
    ValidationSuccess,
)
from .services.validation import check_deliveries, validate_deliveries

__version__ = "1.0.0"

__all__ = [
    "Action",
    "Delivery",
    "ErrorCode",
    "Step",
    "ValidationFailure",
    "ValidationResult",
    "ValidationSuccess",
    "check_deliveries",
    "validate_deliveries",
]
