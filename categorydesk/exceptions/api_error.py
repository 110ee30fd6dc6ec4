"""
CategoryDesk Client - API Error Exception

Base exception class for all API-related errors.

Author: CategoryDesk Project
"""


class CategoryDeskAPIError(Exception):
    """Base exception for API errors."""
    pass
