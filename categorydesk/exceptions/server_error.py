"""
CategoryDesk Client - Server Error Exception

Exception raised when a request cannot be completed or the server
answers with a non-success status.

Author: CategoryDesk Project
"""

from typing import Any, Optional

from .api_error import CategoryDeskAPIError


class CategoryDeskServerError(CategoryDeskAPIError):
    """
    Exception for server errors.

    Attributes:
        status_code: HTTP status of the failed response (None if no response arrived)
        payload: Decoded failure body - a string, a dict, or None
    """

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload
