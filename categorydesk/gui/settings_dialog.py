"""
CategoryDesk Client - Settings Dialog Module

Implements the Settings dialog window with tabbed interface.

Author: CategoryDesk Project
"""

import tkinter as tk
from tkinter import ttk, messagebox

from ..managers import ConfigManager


class SettingsDialog:
    """
    Settings dialog window with tabbed interface.

    Tabs: Connection (server URL, port, SSL, timeout) and
    Logging (level, retention, delete confirmation).
    """

    def __init__(self, parent, config_mgr: ConfigManager, on_saved=None):
        """
        Initialize settings dialog.

        Args:
            parent: Parent tkinter window
            config_mgr: Configuration manager instance
            on_saved: Callback invoked after settings are written
        """
        self.parent = parent
        self.config_mgr = config_mgr
        self.on_saved = on_saved

        self.dialog = tk.Toplevel(parent)
        self.dialog.title("Settings")
        self.dialog.geometry("420x330")

        # Make dialog modal
        self.dialog.transient(parent)
        self.dialog.grab_set()

        self.fields = {}

        # Buttons first so they stay visible at the bottom
        self.create_buttons()
        self.create_tabs()
        self.load_config()

    def create_tabs(self):
        """Create tabbed notebook interface."""
        self.notebook = ttk.Notebook(self.dialog)
        self.notebook.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        conn_frame = ttk.Frame(self.notebook, padding=20)
        self.notebook.add(conn_frame, text="Connection")
        self._add_entry(conn_frame, 0, "Server URL:", "server_url")
        self._add_entry(conn_frame, 2, "Server Port:", "server_port")
        self._add_entry(conn_frame, 4, "Request Timeout (seconds, blank = none):", "request_timeout")
        self.fields['verify_ssl'] = tk.BooleanVar()
        ttk.Checkbutton(conn_frame, text="Verify SSL certificates",
                        variable=self.fields['verify_ssl']).grid(row=6, column=0, sticky=tk.W)

        log_frame = ttk.Frame(self.notebook, padding=20)
        self.notebook.add(log_frame, text="Logging")
        ttk.Label(log_frame, text="Log Level:").grid(row=0, column=0, sticky=tk.W)
        self.fields['log_level'] = tk.StringVar()
        ttk.Combobox(log_frame, textvariable=self.fields['log_level'], state="readonly",
                     values=["DEBUG", "INFO", "WARNING", "ERROR"]).grid(row=1, column=0, sticky=tk.W, pady=(0, 10))
        self._add_entry(log_frame, 2, "Log Retention (days):", "log_retention_days")
        self.fields['confirm_before_delete'] = tk.BooleanVar()
        ttk.Checkbutton(log_frame, text="Confirm before deleting a category",
                        variable=self.fields['confirm_before_delete']).grid(row=4, column=0, sticky=tk.W)

    def _add_entry(self, frame, row: int, label: str, key: str):
        ttk.Label(frame, text=label).grid(row=row, column=0, sticky=tk.W)
        self.fields[key] = tk.StringVar()
        ttk.Entry(frame, textvariable=self.fields[key], width=40).grid(
            row=row + 1, column=0, sticky=tk.W + tk.E, pady=(0, 10))

    def create_buttons(self):
        button_frame = ttk.Frame(self.dialog)
        button_frame.pack(side=tk.BOTTOM, fill=tk.X, padx=10, pady=10)
        ttk.Button(button_frame, text="Cancel", command=self.dialog.destroy).pack(side=tk.RIGHT)
        ttk.Button(button_frame, text="Save", command=self.save).pack(side=tk.RIGHT, padx=(0, 5))

    def load_config(self):
        """Load current configuration values into the fields."""
        for key, var in self.fields.items():
            value = self.config_mgr.get(key)
            if isinstance(var, tk.BooleanVar):
                var.set(bool(value))
            else:
                var.set("" if value is None else str(value))

    def save(self):
        """Validate and write the settings."""
        try:
            port = int(self.fields['server_port'].get())
            retention = int(self.fields['log_retention_days'].get())
            timeout_text = self.fields['request_timeout'].get().strip()
            timeout = float(timeout_text) if timeout_text else None
        except ValueError:
            messagebox.showerror("Invalid Settings", "Port and retention must be whole numbers; "
                                 "timeout must be a number or blank.", parent=self.dialog)
            return

        server_url = self.fields['server_url'].get().strip().rstrip("/")
        if not server_url:
            messagebox.showerror("Invalid Settings", "Server URL is required.", parent=self.dialog)
            return

        self.config_mgr.update({
            "server_url": server_url,
            "server_port": port,
            "request_timeout": timeout,
            "verify_ssl": self.fields["verify_ssl"].get(),
            "log_level": self.fields["log_level"].get() or "INFO",
            "log_retention_days": retention,
            "confirm_before_delete": self.fields["confirm_before_delete"].get()
        })

        if self.on_saved:
            self.on_saved()
        self.dialog.destroy()
