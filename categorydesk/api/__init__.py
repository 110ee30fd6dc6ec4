"""
CategoryDesk Client - API Package

This package contains the API communication classes.
"""

from .categorydesk_api import CategoryDeskAPI, CATEGORIES_ENDPOINT

__all__ = ['CategoryDeskAPI', 'CATEGORIES_ENDPOINT']
