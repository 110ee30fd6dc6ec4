"""
CategoryDesk Client - Registration Models

Signup form draft, including the nested postal address.

Author: CategoryDesk Project
"""

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class AddressDraft:
    """Postal address block of the signup form."""
    street: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""

    def to_payload(self) -> Dict[str, str]:
        return {
            "street": self.street,
            "city": self.city,
            "state": self.state,
            "zipCode": self.zip_code
        }


@dataclass
class RegistrationDraft:
    """
    Field values of the signup form.

    to_payload() produces the exact body posted to /register, which is
    also the shape the validation schema reads (dotted paths for the
    address fields).
    """
    full_name: str = ""
    email: str = ""
    date_of_birth: str = ""
    address: AddressDraft = field(default_factory=AddressDraft)
    password: str = ""

    def to_payload(self) -> Dict[str, Any]:
        return {
            "fullName": self.full_name,
            "email": self.email,
            "dateOfBirth": self.date_of_birth,
            "address": self.address.to_payload(),
            "password": self.password
        }

    def reset(self):
        self.full_name = ""
        self.email = ""
        self.date_of_birth = ""
        self.address = AddressDraft()
        self.password = ""
