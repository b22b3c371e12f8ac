# src/taskpad/auth/validation.py

"""
Form validation done at the UI boundary, before the core is called.

Each validator returns {field: message}; an empty dict means valid.
"""

from __future__ import annotations

import re

EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,6}$")

# digit, lower, upper, one of !@#$%^&+=, no whitespace, 8+ chars
PASSWORD_RE = re.compile(r"^(?=.*[0-9])(?=.*[a-z])(?=.*[A-Z])(?=.*[!@#$%^&+=])(?=\S+$).{8,}$")

PASSWORD_RULES = (
    "Password must be at least 8 characters, with 1 uppercase, "
    "1 lowercase, 1 digit, and 1 special character."
)


def validate_sign_up(email: str, password: str, confirm: str) -> dict[str, str]:
    errors: dict[str, str] = {}
    email = email.strip()
    password = password.strip()
    confirm = confirm.strip()

    if not email:
        errors["email"] = "Email is required"
    elif not EMAIL_RE.match(email):
        errors["email"] = "Enter a valid email address (e.g., user@example.com)"

    if not password:
        errors["password"] = "Password is required"
    elif not PASSWORD_RE.match(password):
        errors["password"] = PASSWORD_RULES

    if password != confirm:
        errors["confirm"] = "Passwords do not match"

    return errors


def validate_login(email: str, password: str) -> dict[str, str]:
    if not email.strip() or not password.strip():
        return {"form": "Please enter email and password"}
    return {}


def validate_title(title: str) -> dict[str, str]:
    if not title.strip():
        return {"title": "Task title cannot be empty"}
    return {}
