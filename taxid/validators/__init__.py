"""Per-country tax ID validators."""
from taxid.validators.registry import VALIDATORS, get_validator

__all__ = ["VALIDATORS", "get_validator"]
