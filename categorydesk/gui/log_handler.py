"""
CategoryDesk Client - GUI Log Handler Module

Implements logging for GUI mode with custom handler and utilities.

Author: CategoryDesk Project
"""

import tkinter as tk
import logging
from pathlib import Path
from typing import Optional

from ..managers import ConfigManager
from ..log_files import LOG_FORMAT, configured_level, new_log_file


class GUILogHandler(logging.Handler):
    """
    Custom logging handler that writes to GUI log panel.

    This handler is thread-safe and uses tkinter's after() method
    to safely update the GUI from any thread.
    """

    def __init__(self, log_widget, root_widget):
        """
        Initialize the GUI log handler.

        Args:
            log_widget: The scrolledtext widget to write logs to
            root_widget: The root tkinter window for thread-safe updates
        """
        super().__init__()
        self.log_widget = log_widget
        self.root_widget = root_widget

    def emit(self, record):
        """
        Emit a log record to the GUI log panel.

        Args:
            record: LogRecord to emit
        """
        try:
            msg = self.format(record)
            # Use after() for thread-safe GUI update
            self.root_widget.after(0, lambda: self._append_log(msg))
        except Exception:
            self.handleError(record)

    def _append_log(self, message: str):
        try:
            self.log_widget.config(state=tk.NORMAL)
            self.log_widget.insert(tk.END, message + "\n")
            self.log_widget.see(tk.END)  # Auto-scroll to bottom
            self.log_widget.config(state=tk.DISABLED)
        except tk.TclError:
            pass  # Widget may be destroyed


def setup_gui_logging(config_manager: ConfigManager, log_widget, root_widget,
                      log_dir: Optional[Path] = None) -> Path:
    """
    Setup logging for GUI mode with both file and GUI panel output.

    Creates log file with format: categorydesk-gui-YYYY-MM-DD-HH-MM-SS.log

    Args:
        config_manager: ConfigManager instance for log settings
        log_widget: The scrolledtext widget for GUI logging
        root_widget: The root tkinter window
        log_dir: Override for the log directory

    Returns:
        Path to the created log file
    """
    level = configured_level(config_manager)
    log_file = new_log_file("gui", log_dir)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    gui_handler = GUILogHandler(log_widget, root_widget)
    gui_handler.setLevel(level)
    gui_handler.setFormatter(formatter)
    root_logger.addHandler(gui_handler)

    logger = logging.getLogger(__name__)
    logger.info("=" * 60)
    logger.info(f"CategoryDesk GUI Mode - Log file: {log_file}")
    logger.info(f"Log level: {logging.getLevelName(level)}")
    logger.info("=" * 60)

    return log_file
