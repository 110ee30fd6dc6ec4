"""
CategoryDesk Client - Validation Package

Rule engine and the form schemas built on it.

Author: CategoryDesk Project
"""

from .rules import (
    Rule,
    ValidationErrors,
    ValidationSchema,
    contains,
    is_date,
    matches,
    min_length,
    required,
    resolve_path
)
from .schemas import LOGIN_SCHEMA, REGISTRATION_SCHEMA, EMAIL_PATTERN, PASSWORD_SYMBOLS

__all__ = [
    'Rule',
    'ValidationErrors',
    'ValidationSchema',
    'contains',
    'is_date',
    'matches',
    'min_length',
    'required',
    'resolve_path',
    'LOGIN_SCHEMA',
    'REGISTRATION_SCHEMA',
    'EMAIL_PATTERN',
    'PASSWORD_SYMBOLS'
]
