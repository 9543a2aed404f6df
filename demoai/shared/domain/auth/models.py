"""Auth value objects."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AuthMode(str, Enum):
    LOGIN = "login"
    SIGN_UP = "signup"


class AuthAttempt(BaseModel):
    """One form submission. Never stored."""

    model_config = ConfigDict(frozen=True)

    email: str
    password: str = Field(repr=False)
    confirm_password: Optional[str] = Field(default=None, repr=False)
    mode: AuthMode = AuthMode.LOGIN


class UserIdentity(BaseModel):
    model_config = ConfigDict(frozen=True)

    email: str

    @property
    def display_name(self) -> str:
        return self.email.split("@", 1)[0]
