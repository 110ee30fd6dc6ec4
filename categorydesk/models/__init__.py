"""
CategoryDesk Client - Models Package

Contains data models and enumerations used by the client.

Author: CategoryDesk Project
"""

from .category import Category, CategoryDraft
from .auth import LoginDraft, LoginResponse, AuthenticatedUser
from .registration import AddressDraft, RegistrationDraft
from .submission_state import SubmissionStatus, SubmissionState, SubmissionOutcome

__all__ = [
    'Category',
    'CategoryDraft',
    'LoginDraft',
    'LoginResponse',
    'AuthenticatedUser',
    'AddressDraft',
    'RegistrationDraft',
    'SubmissionStatus',
    'SubmissionState',
    'SubmissionOutcome'
]
