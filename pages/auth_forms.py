"""Sign-in / sign-up form validation.  Errors are keyed by field; ``submit``
holds the backend's verdict."""

import re
from dataclasses import dataclass, field
from typing import Dict, Mapping

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

SIGNUP_SUCCESS = "Account created successfully! Please sign in."


@dataclass
class SignInForm:
    username: str = ""
    password: str = ""
    errors:   Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_form(cls, form: Mapping[str, str]) -> "SignInForm":
        return cls(username=form.get("username", "").strip(), password=form.get("password", ""))

    def validate(self) -> bool:
        self.errors = {}
        if not self.username:
            self.errors["username"] = "Username is required"
        if not self.password:
            self.errors["password"] = "Password is required"
        return not self.errors


@dataclass
class SignUpForm:
    username:         str = ""
    email:            str = ""
    password:         str = ""
    confirm_password: str = ""
    errors:           Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_form(cls, form: Mapping[str, str]) -> "SignUpForm":
        return cls(
            username=form.get("username", "").strip(),
            email=form.get("email", "").strip(),
            password=form.get("password", ""),
            confirm_password=form.get("confirm_password", ""),
        )

    def validate(self) -> bool:
        errors = {}
        if not self.username:
            errors["username"] = "Username is required"
        elif len(self.username) < 3:
            errors["username"] = "Username must be at least 3 characters"

        if not self.email:
            errors["email"] = "Email is required"
        elif not EMAIL_RE.match(self.email):
            errors["email"] = "Please enter a valid email address"

        if not self.password:
            errors["password"] = "Password is required"
        elif len(self.password) < 6:
            errors["password"] = "Password must be at least 6 characters"

        if not self.confirm_password:
            errors["confirm_password"] = "Please confirm your password"
        elif self.confirm_password != self.password:
            errors["confirm_password"] = "Passwords do not match"

        self.errors = errors
        return not errors
