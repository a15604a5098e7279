# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed bearer tokens (JWT, HS256) carrying the user's id, name and email."""

from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

import jwt

from storefront.domain.users.entities import TokenClaims
from storefront.domain.users.repositories import TokenCodec
from storefront.shared.config import JwtConfig, TokenLifetime
from storefront.shared.errors.base import InvalidTokenError
from storefront.shared.logging import logger


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenCodec(TokenCodec):
    algorithm = "HS256"

    def __init__(
        self,
        *,
        secret: str,
        lifetime: TokenLifetime,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._secret = secret
        self._lifetime = lifetime
        self._clock = clock

    @classmethod
    def from_config(cls, config: JwtConfig) -> JwtTokenCodec:
        return cls(secret=config.secret, lifetime=config.expires_in)

    @property
    def lifetime(self) -> TokenLifetime:
        return self._lifetime

    def issue(self, claims: TokenClaims) -> str:
        now = self._clock()
        payload: dict[str, Any] = {
            "id": claims.id,
            "name": claims.name,
            "email": claims.email,
            "iat": now,
            "exp": now + self._lifetime.delta,
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        # exp is checked against the codec clock; a future iat is accepted.
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={
                    "require": ["exp", "iat"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
            expires_at = int(payload["exp"])
        except jwt.InvalidTokenError as exc:
            logger.debug(f"token.verify: rejected ({type(exc).__name__})")
            raise InvalidTokenError(context={"reason": "invalid"}) from exc
        except (TypeError, ValueError) as exc:
            logger.debug("token.verify: rejected (malformed exp)")
            raise InvalidTokenError(context={"reason": "invalid"}) from exc

        if expires_at <= self._clock().timestamp():
            logger.debug("token.verify: expired")
            raise InvalidTokenError(context={"reason": "expired"})

        try:
            return TokenClaims(
                id=int(payload["id"]),
                name=str(payload["name"]),
                email=str(payload["email"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidTokenError(context={"reason": "missing_claims"}) from exc


__all__ = ["JwtTokenCodec"]
