from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class RegisterUserInput(BaseModel):
    name: str = Field(min_length=3, max_length=128)
    email: str = Field(pattern=_EMAIL_PATTERN, max_length=254)
    password: str = Field(min_length=8, max_length=128)
    # Equality with password is a business rule checked by the use case.
    password_confirmation: str = Field(min_length=8, max_length=128)

    model_config = ConfigDict(frozen=True)


class LoginUserInput(BaseModel):
    email: str = Field(pattern=_EMAIL_PATTERN, max_length=254)
    password: str = Field(min_length=1, max_length=128)

    model_config = ConfigDict(frozen=True)
