"""
CategoryDesk Client

Desktop client for managing categories on a CategoryDesk server:
session-gated category list with create/update/delete, plus login
and signup forms validated before submission.
"""

from .version import VERSION

__version__ = VERSION
