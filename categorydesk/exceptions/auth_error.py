"""
CategoryDesk Client - Authentication Error Exception

Exception raised when the server rejects a login.

Author: CategoryDesk Project
"""

from .server_error import CategoryDeskServerError


class CategoryDeskAuthError(CategoryDeskServerError):
    """Exception for authentication errors."""
    pass
