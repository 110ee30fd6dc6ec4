"""
CategoryDesk Client - Validation Error Exception

Exception form of a failed local validation, for callers that prefer
raising over inspecting the returned error set.

Author: CategoryDesk Project
"""

from .api_error import CategoryDeskAPIError


class CategoryDeskValidationError(CategoryDeskAPIError):
    """Exception carrying the ValidationErrors of a rejected draft."""

    def __init__(self, errors):
        self.errors = errors
        super().__init__("; ".join(errors.messages()))
