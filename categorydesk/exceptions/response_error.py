"""
CategoryDesk Client - Response Error Exception

Exception raised when a success response has an unexpected body shape.
Subclasses the server error so both are handled by the same catch.

Author: CategoryDesk Project
"""

from .server_error import CategoryDeskServerError


class CategoryDeskResponseError(CategoryDeskServerError):
    """Exception for malformed server responses."""
    pass
