"""
CategoryDesk Client - Exceptions Package

Contains all exception classes for the CategoryDesk client.

Author: CategoryDesk Project
"""

from typing import Any

from .api_error import CategoryDeskAPIError
from .server_error import CategoryDeskServerError
from .auth_error import CategoryDeskAuthError
from .response_error import CategoryDeskResponseError
from .validation_error import CategoryDeskValidationError

GENERIC_ERROR_MESSAGE = "An error occurred. Please try again."


def server_message(payload: Any, fallback: str = GENERIC_ERROR_MESSAGE) -> str:
    """
    Pick the message to show for a failed request.

    Args:
        payload: Decoded failure body
        fallback: Message used when the payload carries no usable text

    Returns:
        The payload itself if it is a non-empty string, its "message"
        field if that is a non-empty string, otherwise the fallback
    """
    if isinstance(payload, str) and payload.strip():
        return payload
    if isinstance(payload, dict):
        message = payload.get("message")
        if isinstance(message, str) and message.strip():
            return message
    return fallback


__all__ = [
    'CategoryDeskAPIError',
    'CategoryDeskServerError',
    'CategoryDeskAuthError',
    'CategoryDeskResponseError',
    'CategoryDeskValidationError',
    'GENERIC_ERROR_MESSAGE',
    'server_message'
]
