"""
CategoryDesk Client - Operations Package

Contains the category list synchronizer and the form controllers.

Author: CategoryDesk Project
"""

from .category_sync import CategorySynchronizer, EditCursor
from .form_controller import (
    FormController,
    LoginFormController,
    SignupFormController,
    REGISTERED_MESSAGE
)

__all__ = [
    'CategorySynchronizer',
    'EditCursor',
    'FormController',
    'LoginFormController',
    'SignupFormController',
    'REGISTERED_MESSAGE'
]
