"""Pickup/dropoff validation against a fixed route and step annotation."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence, Tuple

from ...models.domain import (
    Action,
    Address,
    Delivery,
    ErrorCode,
    Step,
    ValidationFailure,
    ValidationResult,
    ValidationSuccess,
    normalize_address,
)

_SCALAR_TYPES = (str, int, float, bool, type(None))


class InvalidInputError(ValueError):
    """Raised when the deliveries or path do not have the expected shape."""


class InvalidInputFormat(InvalidInputError):
    def __init__(self) -> None:
        super().__init__("Invalid input format")


class InvalidDeliveryFormat(InvalidInputError):
    def __init__(self) -> None:
        super().__init__("Invalid delivery format")


class InvalidAddressFormat(InvalidInputError):
    def __init__(self) -> None:
        super().__init__("Invalid address format")


def parse_failure(reason: object) -> ValidationFailure:
    return ValidationFailure(code=ErrorCode.INVALID_INPUT, message=f"Failed to parse input: {reason}")


def format_address(address: Address) -> str:
    """Render an address the way JSON renders the scalar (``null``, ``true``, ``1`` for ``1.0``)."""
    if address is None:
        return "null"
    if isinstance(address, bool):
        return "true" if address else "false"
    return str(normalize_address(address))


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_scalar(value: Any) -> bool:
    return isinstance(value, _SCALAR_TYPES)


def _address_key(address: Address) -> Tuple[bool, Address]:
    # bool is an int subclass; true/false must not match 1/0
    return (isinstance(address, bool), address)


def _check_address(value: Any) -> Address:
    if not _is_scalar(value):
        raise InvalidAddressFormat()
    return value


def _coerce_deliveries(deliveries: Any, path: Any) -> List[Delivery]:
    if not _is_sequence(deliveries) or not _is_sequence(path):
        raise InvalidInputFormat()
    coerced: List[Delivery] = []
    for entry in deliveries:
        if not _is_sequence(entry) or len(entry) != 2:
            raise InvalidDeliveryFormat()
        pickup, dropoff = entry
        coerced.append(Delivery(pickup=_check_address(pickup), dropoff=_check_address(dropoff)))
    return coerced


def validate_deliveries(deliveries: Sequence[Any], path: Sequence[Any]) -> ValidationResult:
    """Check every delivery against ``path`` and annotate the path with actions.

    Structural problems are reported as ``invalid_input``; delivery addresses
    must be JSON scalars. Addresses compare by value, except that booleans
    never match numbers. Addresses missing from the path are collected and
    reported together (pickups first, then dropoffs, in first-seen order). A
    dropoff placed before its pickup fails on the first offending delivery.
    When a pickup address is shared by several deliveries only the last one's
    dropoff is ordered against it, and an address repeated in the path is
    positioned at its last occurrence. Non-scalar path entries cannot match a
    delivery and are annotated with no action.
    """
    try:
        parsed = _coerce_deliveries(deliveries, path)
    except InvalidInputError as exc:
        return parse_failure(exc)

    # dict keys keep first-insertion order; plain assignment keeps the last dropoff.
    pickups: Dict[Tuple[bool, Address], Address] = {}
    dropoffs: Dict[Tuple[bool, Address], Address] = {}
    delivery_map: Dict[Tuple[bool, Address], Tuple[bool, Address]] = {}
    for delivery in parsed:
        pickup_key, dropoff_key = _address_key(delivery.pickup), _address_key(delivery.dropoff)
        pickups.setdefault(pickup_key, delivery.pickup)
        dropoffs.setdefault(dropoff_key, delivery.dropoff)
        delivery_map[pickup_key] = dropoff_key

    positions: Dict[Tuple[bool, Address], int] = {}
    for index, address in enumerate(path):
        if _is_scalar(address):
            positions[_address_key(address)] = index

    missing = [address for key, address in pickups.items() if key not in positions]
    missing += [address for key, address in dropoffs.items() if key not in positions]
    if missing:
        # null entries render blank in the joined list
        listed = ", ".join("" if address is None else format_address(address) for address in missing)
        return ValidationFailure(
            code=ErrorCode.DELIVERY_ADDRESS_NOT_IN_PATH,
            message=f"The following delivery addresses are not in the path: {listed}",
        )

    for pickup_key, dropoff_key in delivery_map.items():
        if positions[dropoff_key] < positions[pickup_key]:
            return ValidationFailure(
                code=ErrorCode.DELIVERY_DROPOFF_BEFORE_PICKUP,
                message=(
                    f"Dropoff at address {format_address(dropoffs[dropoff_key])} comes before "
                    f"pickup at address {format_address(pickups[pickup_key])} in the path"
                ),
            )

    steps = []
    for address in path:
        key = _address_key(address) if _is_scalar(address) else None
        if key in pickups:
            action = Action.PICKUP
        elif key in dropoffs:
            action = Action.DROPOFF
        else:
            action = None
        steps.append(Step(address=address, action=action))
    return ValidationSuccess(steps=tuple(steps))
