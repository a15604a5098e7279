"""Use-case resolving a bearer token to the user it was issued for."""

from __future__ import annotations

from storefront.domain.users.entities import UserProfile
from storefront.domain.users.exceptions import UserNotFoundError
from storefront.domain.users.repositories import TokenCodec, UserRepository


class IdentifyUserUseCase:
    def __init__(self, *, users: UserRepository, tokens: TokenCodec) -> None:
        self._users = users
        self._tokens = tokens

    def execute(self, token: str) -> UserProfile:
        claims = self._tokens.verify(token)
        user = self._users.find_by_id(claims.id)
        if user is None:
            raise UserNotFoundError(claims.id)
        return user.profile()
