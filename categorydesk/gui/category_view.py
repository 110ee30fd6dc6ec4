"""
CategoryDesk Client - Category View

Protected view: the category list with Edit/Delete, a single
Add/Update form, and Logout.

Author: CategoryDesk Project
"""

import tkinter as tk
from tkinter import ttk, messagebox


class CategoryView(ttk.Frame):
    """Renders the synchronizer's list and forwards user actions to it."""

    def __init__(self, parent, gui):
        super().__init__(parent, padding=20)
        self.gui = gui
        self.sync = gui.shell.synchronizer

        ttk.Label(self, text="Category", font=("Arial", 18, "bold")).pack(pady=(0, 10))

        list_frame = ttk.Frame(self)
        list_frame.pack(fill=tk.BOTH, expand=True)
        self.listbox = tk.Listbox(list_frame, height=10, font=("Arial", 10), activestyle="none")
        self.listbox.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        scrollbar = ttk.Scrollbar(list_frame, orient=tk.VERTICAL, command=self.listbox.yview)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        self.listbox.config(yscrollcommand=scrollbar.set)

        row_buttons = ttk.Frame(self)
        row_buttons.pack(fill=tk.X, pady=(5, 10))
        ttk.Button(row_buttons, text="Edit", command=self.on_edit).pack(side=tk.LEFT, padx=(0, 5))
        ttk.Button(row_buttons, text="Delete", command=self.on_delete).pack(side=tk.LEFT)

        form = ttk.Frame(self)
        form.pack(fill=tk.X)
        form.columnconfigure(0, weight=1)
        form.columnconfigure(1, weight=1)

        ttk.Label(form, text="Name").grid(row=0, column=0, sticky=tk.W)
        ttk.Label(form, text="Description").grid(row=0, column=1, sticky=tk.W)
        self.name_var = tk.StringVar()
        self.description_var = tk.StringVar()
        # The draft mirrors the entries field by field
        self.name_var.trace_add("write", lambda *_: setattr(self.sync.draft, "name", self.name_var.get()))
        self.description_var.trace_add(
            "write", lambda *_: setattr(self.sync.draft, "description", self.description_var.get()))
        ttk.Entry(form, textvariable=self.name_var).grid(row=1, column=0, sticky="ew", padx=(0, 5))
        ttk.Entry(form, textvariable=self.description_var).grid(row=1, column=1, sticky="ew", padx=(0, 5))

        self.save_button = tk.Button(form, text="Add Category", width=15, command=self.on_save)
        self.save_button.grid(row=1, column=2)
        self.cancel_button = ttk.Button(form, text="Cancel", command=self.on_cancel)

        ttk.Button(self, text="Logout", command=gui.logout).pack(anchor=tk.W, pady=(15, 0))

    def refresh(self):
        """Redraw the list and form from the synchronizer state."""
        self.listbox.delete(0, tk.END)
        for category in self.sync.categories:
            self.listbox.insert(tk.END, f"{category.name}: {category.description}")

        if self.name_var.get() != self.sync.draft.name:
            self.name_var.set(self.sync.draft.name)
        if self.description_var.get() != self.sync.draft.description:
            self.description_var.set(self.sync.draft.description)

        if self.sync.is_editing:
            self.save_button.config(text="Update Category")
            self.cancel_button.grid(row=1, column=3, padx=(5, 0))
        else:
            self.save_button.config(text="Add Category")
            self.cancel_button.grid_remove()

    def _selected_position(self):
        selection = self.listbox.curselection()
        return selection[0] if selection else None

    def on_edit(self):
        position = self._selected_position()
        if position is not None:
            self.sync.begin_edit(position)

    def on_cancel(self):
        self.sync.cancel_edit()

    def on_save(self):
        self.gui.run_in_background(self.sync.save, self.on_operation_done)

    def on_delete(self):
        position = self._selected_position()
        categories = self.sync.categories
        if position is None or position >= len(categories):
            return
        category = categories[position]

        if self.gui.config_mgr.get("confirm_before_delete", True):
            if not messagebox.askyesno("Delete Category", f"Delete category '{category.name}'?"):
                return

        self.gui.run_in_background(lambda: self.sync.delete(category.id), self.on_operation_done)

    def on_operation_done(self, success: bool):
        if success:
            self.gui.update_status_bar("Saved")
        else:
            self.gui.update_status_bar("Operation failed - see log")
            messagebox.showerror("Category Error", self.sync.last_error)
        self.refresh()
