"""Delivery validation service exports."""

from .service import check_deliveries, run_check, save_check_outputs
from .validator import validate_deliveries

__all__ = ["check_deliveries", "run_check", "save_check_outputs", "validate_deliveries"]
