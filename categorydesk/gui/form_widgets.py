"""
CategoryDesk Client - Form Widgets

Labelled entry with an inline error line, used by the login and
signup views.

Author: CategoryDesk Project
"""

import tkinter as tk
from tkinter import ttk


class LabelledEntry:
    """Label, entry and a red error line stacked in a parent frame."""

    def __init__(self, parent, label: str, show: str = ""):
        self.var = tk.StringVar()
        ttk.Label(parent, text=label, font=("Arial", 10, "bold")).pack(anchor=tk.W, pady=(8, 2))
        self.entry = ttk.Entry(parent, textvariable=self.var, width=40, show=show)
        self.entry.pack(fill=tk.X)
        self.error_label = tk.Label(parent, text="", font=("Arial", 8), fg="#c0392b", anchor=tk.W)
        self.error_label.pack(fill=tk.X)

    def get(self) -> str:
        return self.var.get()

    def set(self, value: str):
        self.var.set(value)

    def show_error(self, message: str = ""):
        self.error_label.config(text=message)


def show_field_errors(entries, errors):
    """Show the first message of each failing field; clear the others."""
    for field_name, entry in entries.items():
        entry.show_error(errors[field_name] if field_name in errors else "")
