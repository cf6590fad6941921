"""Domain models for deliveries, annotated steps and check outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple, Union

Address = Union[str, int, float, bool, None]

_MAX_PLAIN_NUMBER = 1e21


class Action(str, Enum):
    PICKUP = "pickup"
    DROPOFF = "dropoff"


class ErrorCode(str, Enum):
    """Error codes reported in the ``error_code`` field of a failed check."""

    INVALID_ARGUMENTS = "invalid_arguments"
    INVALID_INPUT = "invalid_input"
    DELIVERY_ADDRESS_NOT_IN_PATH = "delivery_address_not_in_path"
    DELIVERY_DROPOFF_BEFORE_PICKUP = "delivery_dropoff_before_pickup"


@dataclass(slots=True, frozen=True)
class Delivery:
    """A single pickup/dropoff pair."""

    pickup: Address
    dropoff: Address


@dataclass(slots=True, frozen=True)
class Step:
    """One path position annotated with the action performed there (``None`` when idle)."""

    address: Any
    action: Optional[Action]


@dataclass(slots=True, frozen=True)
class ValidationSuccess:
    steps: Tuple[Step, ...]

    @property
    def ok(self) -> bool:
        return True


@dataclass(slots=True, frozen=True)
class ValidationFailure:
    code: ErrorCode
    message: str

    @property
    def ok(self) -> bool:
        return False


ValidationResult = Union[ValidationSuccess, ValidationFailure]


def normalize_address(address: Any) -> Any:
    """Return integral floats below 1e21 as ints so ``1.0`` is written back as ``1``."""
    if isinstance(address, float) and address.is_integer() and abs(address) < _MAX_PLAIN_NUMBER:
        return int(address)
    return address
