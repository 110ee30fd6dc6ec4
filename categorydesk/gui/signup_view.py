"""
CategoryDesk Client - Signup View

Author: CategoryDesk Project
"""

import tkinter as tk
from tkinter import ttk, messagebox

from ..models import SubmissionStatus
from .form_widgets import LabelledEntry, show_field_errors


class SignupView(ttk.Frame):
    """
    Registration form.

    Field keys follow the registration payload so validation errors map
    straight onto the entries.
    """

    def __init__(self, parent, gui):
        super().__init__(parent, padding=30)
        self.gui = gui
        self.controller = gui.shell.signup_form

        ttk.Label(self, text="Sign Up", font=("Arial", 18, "bold")).pack(pady=(0, 10))

        self.entries = {
            "fullName": LabelledEntry(self, "Full Name"),
            "email": LabelledEntry(self, "Email"),
            "dateOfBirth": LabelledEntry(self, "Date of Birth (YYYY-MM-DD)"),
            "address.street": LabelledEntry(self, "Address"),
            "address.city": LabelledEntry(self, "City"),
            "address.state": LabelledEntry(self, "State"),
            "address.zipCode": LabelledEntry(self, "Post Code"),
            "password": LabelledEntry(self, "Password", show="*")
        }

        self.submit_button = tk.Button(self, text="Sign Up", width=15, command=self.on_submit)
        self.submit_button.pack(pady=(15, 5))

        ttk.Label(self, text="Already have an account?", foreground="gray").pack(pady=(10, 0))
        ttk.Button(self, text="Login", command=gui.shell.show_login).pack()

    def reset(self):
        for entry in self.entries.values():
            entry.set("")
            entry.show_error()
        self.render_state()

    def render_state(self):
        self.submit_button.config(state=tk.NORMAL if self.controller.can_submit else tk.DISABLED)

    def _read_draft(self):
        draft = self.controller.draft
        draft.full_name = self.entries["fullName"].get()
        draft.email = self.entries["email"].get()
        draft.date_of_birth = self.entries["dateOfBirth"].get()
        draft.address.street = self.entries["address.street"].get()
        draft.address.city = self.entries["address.city"].get()
        draft.address.state = self.entries["address.state"].get()
        draft.address.zip_code = self.entries["address.zipCode"].get()
        draft.password = self.entries["password"].get()

    def on_submit(self):
        if not self.controller.can_submit:
            return
        self._read_draft()
        self.submit_button.config(state=tk.DISABLED)
        self.gui.run_in_background(self.controller.submit, self.on_submitted)

    def on_submitted(self, outcome):
        show_field_errors(self.entries, outcome.errors)
        if outcome.status == SubmissionStatus.FAILED:
            messagebox.showerror("Registration Error", outcome.message)
            self.controller.dismiss_error()
        elif outcome.status == SubmissionStatus.SUCCEEDED:
            self.reset()
            messagebox.showinfo("User Registered", outcome.message)
            self.controller.acknowledge()
        self.render_state()
