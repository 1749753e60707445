# -*- coding: utf-8 -*-
"""
Public exports for the business objects layer.
"""

from .errors import ContractViolationError, SchemaError, StateValidationError
from .items import ArmorItem

__all__ = [
    # errors
    "SchemaError",
    "StateValidationError",
    "ContractViolationError",
    # core models
    "ArmorItem",
]
