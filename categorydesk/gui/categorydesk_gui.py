"""
CategoryDesk Client - Main GUI Module

Implements the main CategoryDeskGUI class and launch function.

The tkinter main loop is the only thread that touches widgets or
navigates. Network work runs on daemon threads and posts its result
back with root.after(0, ...).

Author: CategoryDesk Project
"""

import tkinter as tk
from tkinter import ttk, scrolledtext, messagebox
import threading
import logging
from typing import Callable, Optional

from ..managers import ConfigManager, SessionManager
from ..api import CategoryDeskAPI
from ..app_shell import AppShell, Route
from ..log_files import apply_log_level, cleanup_old_logs
from ..version import VERSION
from .log_handler import setup_gui_logging
from .settings_dialog import SettingsDialog
from .login_view import LoginView
from .signup_view import SignupView
from .category_view import CategoryView

logger = logging.getLogger(__name__)


class CategoryDeskGUI:
    """
    Main GUI window for CategoryDesk client.

    Layout includes:
    - Content area showing the view for the current route
    - Toggleable log panel
    - Status bar at bottom
    - Menu bar with Settings, Logout and Exit
    """

    def __init__(self):
        """Initialize the GUI window and components."""
        self.root = tk.Tk()
        self.root.title("CategoryDesk")
        self.root.geometry("720x620")
        self.root.minsize(560, 480)

        self.log_panel_visible = False
        self.config_mgr = ConfigManager()
        self.config_mgr.load_config()

        self.session = SessionManager()
        self.api = CategoryDeskAPI.from_config(self.config_mgr, token_provider=self.session.get_credential)
        self.shell = AppShell(self.api, self.session, dispatch=self.run_in_background)
        self.shell.add_route_listener(self.on_route_changed)
        self.shell.synchronizer.on_change = lambda: self.root.after(0, self.category_view.refresh)

        self.create_menu_bar()
        self.content = ttk.Frame(self.root)
        self.content.pack(fill=tk.BOTH, expand=True)
        self.create_log_panel()
        self.create_status_bar()

        self.views = {
            Route.LOGIN: LoginView(self.content, self),
            Route.SIGNUP: SignupView(self.content, self),
            Route.CATEGORIES: CategoryView(self.content, self)
        }
        self.category_view = self.views[Route.CATEGORIES]
        self.current_view: Optional[ttk.Frame] = None

        # Setup logging after log panel is created
        self.log_file = setup_gui_logging(self.config_mgr, self.log_text, self.root)
        cleanup_old_logs(self.config_mgr, self.log_file)
        if self.config_mgr.get("show_log_on_startup"):
            self.toggle_log_panel()

        self.shell.start()

    def create_menu_bar(self):
        """Create the menu bar."""
        menubar = tk.Menu(self.root)
        self.root.config(menu=menubar)

        file_menu = tk.Menu(menubar, tearoff=0)
        menubar.add_cascade(label="File", menu=file_menu)
        file_menu.add_command(label="Settings", command=self.show_settings)
        file_menu.add_command(label="Logout", command=self.logout)
        file_menu.add_separator()
        file_menu.add_command(label="Exit", command=self.root.quit)

        view_menu = tk.Menu(menubar, tearoff=0)
        menubar.add_cascade(label="View", menu=view_menu)
        view_menu.add_command(label="Toggle Log Panel", command=self.toggle_log_panel)

        help_menu = tk.Menu(menubar, tearoff=0)
        menubar.add_cascade(label="Help", menu=help_menu)
        help_menu.add_command(label="About", command=self.show_about)

    def create_log_panel(self):
        """Create the toggleable log panel (hidden by default)."""
        self.log_frame = tk.Frame(self.root)
        tk.Label(self.log_frame, text="Log:", font=("Arial", 10, "bold")).pack(anchor=tk.W, padx=5, pady=(5, 0))
        self.log_text = scrolledtext.ScrolledText(self.log_frame, height=8, font=("Courier", 9),
                                                  wrap=tk.WORD, state=tk.DISABLED)
        self.log_text.pack(fill=tk.BOTH, expand=True, padx=5, pady=5)

    def create_status_bar(self):
        """Create the status bar at the bottom."""
        status_frame = tk.Frame(self.root, bd=1, relief=tk.SUNKEN)
        status_frame.pack(side=tk.BOTTOM, fill=tk.X)
        self.status_label = tk.Label(status_frame, text="Ready", font=("Arial", 9), anchor=tk.W)
        self.status_label.pack(side=tk.LEFT, fill=tk.X, expand=True, padx=5, pady=2)

    def update_status_bar(self, message: str):
        self.status_label.config(text=message)

    def toggle_log_panel(self):
        """Toggle the visibility of the log panel."""
        if self.log_panel_visible:
            self.log_frame.pack_forget()
            self.log_panel_visible = False
        else:
            self.log_frame.pack(fill=tk.BOTH, padx=10, pady=(0, 5))
            self.log_panel_visible = True

    # ==================== Threading ====================

    def run_in_background(self, work: Callable[[], object],
                          on_done: Optional[Callable[[object], None]] = None):
        """
        Run network-bound work on a daemon thread.

        The result is handed to on_done on the tkinter thread.
        """
        def runner():
            try:
                result = work()
            except Exception as e:
                logger.exception(f"Background operation failed: {e}")
                self.root.after(0, lambda: messagebox.showerror("Error", f"Unexpected error:\n{e}"))
                return
            if on_done:
                self.root.after(0, lambda: on_done(result))

        threading.Thread(target=runner, daemon=True).start()

    # ==================== Navigation ====================

    def on_route_changed(self, route: str):
        # Navigation may be triggered from a worker thread (after login)
        self.root.after(0, lambda: self.show_view(route))

    def show_view(self, route: str):
        view = self.views[route]
        if self.current_view is view:
            return
        if self.current_view is not None:
            self.current_view.pack_forget()
        if route == Route.CATEGORIES:
            view.refresh()
            self.update_status_bar("Logged in")
        else:
            view.render_state()
            self.update_status_bar("Ready")
        view.pack(fill=tk.BOTH, expand=True)
        self.current_view = view

    def logout(self):
        if self.shell.is_authenticated():
            self.shell.logout()
            self.views[Route.LOGIN].reset()

    # ==================== Dialogs ====================

    def show_settings(self):
        SettingsDialog(self.root, self.config_mgr, on_saved=self.apply_settings)

    def apply_settings(self):
        self.api.reconfigure(
            self.config_mgr.get("server_url"),
            self.config_mgr.get("server_port"),
            self.config_mgr.get("verify_ssl", False),
            self.config_mgr.get("request_timeout")
        )
        apply_log_level(self.config_mgr)
        self.update_status_bar("Settings saved")

    def show_about(self):
        messagebox.showinfo("About CategoryDesk",
                            f"CategoryDesk\nCategory Management Client\n\nVersion: {VERSION}")

    def run(self):
        """Start the GUI main loop."""
        self.root.mainloop()
        self.api.close()


def launch_gui():
    """Launch the CategoryDesk GUI application."""
    app = CategoryDeskGUI()
    app.run()
