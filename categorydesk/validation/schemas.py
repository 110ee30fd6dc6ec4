"""
CategoryDesk Client - Form Schemas

Rule sets for the login and signup forms.

Author: CategoryDesk Project
"""

import re

from .rules import ValidationSchema, contains, is_date, matches, min_length, required

EMAIL_PATTERN = r"[\w.-]+@([\w-]+\.)+[\w-]{2,4}"
PASSWORD_SYMBOLS = '!@#$%^&*(),.?":{}|<>'
PASSWORD_MIN_LENGTH = 8


def _email_rules():
    return [
        required("Email is required"),
        matches(EMAIL_PATTERN, "Invalid email format")
    ]


LOGIN_SCHEMA = ValidationSchema({
    "email": _email_rules(),
    "password": [required("Password is required")]
})

REGISTRATION_SCHEMA = ValidationSchema({
    "fullName": [required("Full Name is required")],
    "email": _email_rules(),
    "dateOfBirth": [
        required("Date of Birth is required"),
        is_date("Date of Birth must be a valid date")
    ],
    "address.street": [required("Address is required")],
    "address.city": [required("City is required")],
    "address.state": [required("State is required")],
    "address.zipCode": [required("Post Code is required")],
    "password": [
        required("Password is required"),
        min_length(PASSWORD_MIN_LENGTH, "Password must be at least 8 characters long"),
        contains(r"[A-Z]", "Password must contain at least one uppercase letter"),
        contains(r"[a-z]", "Password must contain at least one lowercase letter"),
        contains(r"\d", "Password must contain at least one number"),
        contains("[" + re.escape(PASSWORD_SYMBOLS) + "]",
                 "Password must contain at least one special character")
    ]
})
