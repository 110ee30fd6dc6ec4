"""
CategoryDesk Client - GUI Package

This package contains the GUI components for the CategoryDesk client.
"""

from .categorydesk_gui import CategoryDeskGUI, launch_gui
from .settings_dialog import SettingsDialog
from .log_handler import GUILogHandler, setup_gui_logging

__all__ = [
    'CategoryDeskGUI',
    'SettingsDialog',
    'GUILogHandler',
    'setup_gui_logging',
    'launch_gui'
]
