# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class UserProfile:
    """User as exposed to callers: no password hash, no access token."""

    id: int
    name: str
    email: str
    username: str
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    name: str
    email: str
    username: str
    password_hash: str
    created_at: datetime
    updated_at: datetime
    access_token: str | None = None

    def profile(self) -> UserProfile:
        return UserProfile(
            id=self.id,
            name=self.name,
            email=self.email,
            username=self.username,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def claims(self) -> TokenClaims:
        return TokenClaims(id=self.id, name=self.name, email=self.email)


@dataclass(slots=True, frozen=True)
class TokenClaims:

    id: int
    name: str
    email: str


@dataclass(slots=True, frozen=True)
class AuthResult:

    user: UserProfile
    token: str


def username_from_email(email: str) -> str:
    return email.split("@", 1)[0]
