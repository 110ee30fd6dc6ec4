"""
CategoryDesk Client - Managers Package

Contains manager classes for configuration and the session credential.

Author: CategoryDesk Project
"""

from .config_manager import ConfigManager, DEFAULT_CONFIG, get_base_dir
from .session_manager import (
    SessionManager,
    SessionStorage,
    GateDecision,
    ACCESS_TOKEN_KEY,
    LOGIN_ROUTE
)

__all__ = [
    'ConfigManager',
    'DEFAULT_CONFIG',
    'get_base_dir',
    'SessionManager',
    'SessionStorage',
    'GateDecision',
    'ACCESS_TOKEN_KEY',
    'LOGIN_ROUTE'
]
