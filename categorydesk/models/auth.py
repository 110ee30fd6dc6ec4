"""
CategoryDesk Client - Authentication Models

Login form draft and the response of the login endpoint.

Author: CategoryDesk Project
"""

from dataclasses import dataclass
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


@dataclass
class LoginDraft:
    """Field values of the login form."""
    email: str = ""
    password: str = ""

    def to_payload(self) -> Dict[str, str]:
        return {"email": self.email, "password": self.password}

    def reset(self):
        self.email = ""
        self.password = ""


class AuthenticatedUser(BaseModel):
    """User summary returned alongside the access token"""
    email: str
    id: int


class LoginResponse(BaseModel):
    """Response model for the login endpoint"""
    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(alias="accessToken", min_length=1)
    user: AuthenticatedUser
