"""
CategoryDesk Client - Login View

Author: CategoryDesk Project
"""

import tkinter as tk
from tkinter import ttk, messagebox

from ..models import SubmissionStatus
from .form_widgets import LabelledEntry, show_field_errors


class LoginView(ttk.Frame):
    """Email/password form; links to the signup view."""

    def __init__(self, parent, gui):
        super().__init__(parent, padding=30)
        self.gui = gui
        self.controller = gui.shell.login_form

        ttk.Label(self, text="Login", font=("Arial", 18, "bold")).pack(pady=(0, 10))

        self.entries = {
            "email": LabelledEntry(self, "Email"),
            "password": LabelledEntry(self, "Password", show="*")
        }

        self.submit_button = tk.Button(self, text="Sign In", width=15, command=self.on_submit)
        self.submit_button.pack(pady=(15, 5))

        ttk.Label(self, text="Don't have an account?", foreground="gray").pack(pady=(10, 0))
        ttk.Button(self, text="Sign Up", command=gui.shell.show_signup).pack()

    def reset(self):
        for entry in self.entries.values():
            entry.set("")
            entry.show_error()
        self.render_state()

    def render_state(self):
        self.submit_button.config(state=tk.NORMAL if self.controller.can_submit else tk.DISABLED)

    def on_submit(self):
        if not self.controller.can_submit:
            return
        draft = self.controller.draft
        draft.email = self.entries["email"].get()
        draft.password = self.entries["password"].get()

        self.submit_button.config(state=tk.DISABLED)
        self.gui.run_in_background(self.controller.submit, self.on_submitted)

    def on_submitted(self, outcome):
        show_field_errors(self.entries, outcome.errors)
        if outcome.status == SubmissionStatus.FAILED:
            self.gui.update_status_bar("Login failed")
            messagebox.showerror("Login Error", outcome.message)
            self.controller.dismiss_error()
        self.render_state()
