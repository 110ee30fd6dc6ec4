"""
CategoryDesk Client - Category Models

Contains the Category record as returned by the server and the
editable draft backing the add/update form.

Author: CategoryDesk Project
"""

from dataclasses import dataclass
from typing import Dict

from pydantic import BaseModel


class Category(BaseModel):
    """Category record; the id is assigned by the server"""
    id: int
    name: str
    description: str


@dataclass
class CategoryDraft:
    """
    Unsaved name/description values of the category form.

    Reset to empty after a successful add or update, otherwise kept
    so the user can correct and retry.
    """
    name: str = ""
    description: str = ""

    def to_payload(self) -> Dict[str, str]:
        """Body sent for both create and update requests."""
        return {"name": self.name, "description": self.description}

    def reset(self):
        self.name = ""
        self.description = ""
