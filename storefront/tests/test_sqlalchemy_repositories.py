from __future__ import annotations

from datetime import UTC, datetime

import pytest
from sqlalchemy.exc import IntegrityError

from storefront.application.dto.auth import RegisterUserInput
from storefront.application.dto.catalog import CreateProductInput
from storefront.application.services.product_cache import ProductCache
from storefront.application.services.token_codec import JwtTokenCodec
from storefront.application.use_cases.catalog.create_product import CreateProductUseCase
from storefront.application.use_cases.users.register_user import RegisterUserUseCase
from storefront.domain.catalog.entities import NewProduct
from storefront.domain.catalog.exceptions import DuplicateSlugError
from storefront.domain.users.entities import User
from storefront.domain.users.exceptions import UserAlreadyExistsError
from storefront.infrastructure.cache import InMemoryTTLCache
from storefront.infrastructure.db import (
    create_engine_from_config,
    create_session_factory,
    init_db,
)
from storefront.infrastructure.repositories.catalog.sqlalchemy_product_repository import (
    SqlAlchemyProductRepository,
)
from storefront.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from storefront.shared.config import DatabaseConfig
from storefront.shared.errors.base import ConflictError

from conftest import DeterministicHasher, product_payload


@pytest.fixture()
def session_factory():
    engine = create_engine_from_config(DatabaseConfig(url="sqlite://"))
    init_db(engine)
    yield create_session_factory(engine)
    engine.dispose()


def _new_user(email: str = "a@b.com") -> User:
    now = datetime.now(UTC)
    return User(
        id=0,
        name="Alice",
        email=email,
        username=email.split("@")[0],
        password_hash="hash",
        created_at=now,
        updated_at=now,
    )


def _new_product(slug: str = "mug", price: int = 1299) -> NewProduct:
    return NewProduct(
        name="Mug",
        slug=slug,
        description="Ceramic mug",
        price=price,
        image="https://cdn.example.com/mug.jpg",
    )


def test_user_add_and_find(session_factory) -> None:
    repo = SqlAlchemyUserRepository(session_factory)

    created = repo.add(_new_user())

    assert created.id > 0
    assert repo.find_by_email("a@b.com") == repo.find_by_id(created.id)
    assert repo.find_by_email("A@b.com") is None
    assert repo.find_by_id(created.id + 100) is None


def test_user_access_token_updates(session_factory) -> None:
    repo = SqlAlchemyUserRepository(session_factory)
    created = repo.add(_new_user())

    repo.update_access_token(created.id, "token-value")
    assert repo.find_by_id(created.id).access_token == "token-value"

    repo.update_access_token(created.id, None)
    assert repo.find_by_id(created.id).access_token is None


def test_user_email_unique_constraint_maps_to_conflict(session_factory) -> None:
    repo = SqlAlchemyUserRepository(session_factory)
    repo.add(_new_user())

    with pytest.raises(UserAlreadyExistsError) as exc_info:
        repo.add(_new_user())

    assert isinstance(exc_info.value, ConflictError)
    assert isinstance(exc_info.value.__cause__, IntegrityError)
    assert repo.find_by_email("a@b.com").id == 1


def test_product_crud(session_factory) -> None:
    repo = SqlAlchemyProductRepository(session_factory)

    mug = repo.add(_new_product())
    plate = repo.add(_new_product("plate", 899))

    assert [p.slug for p in repo.list_all()] == ["mug", "plate"]
    assert repo.find_by_slug("mug") == mug
    assert repo.find_by_slug("cup") is None

    updated = repo.update_by_slug("plate", {"price": 999, "name": "Plate"})
    assert (updated.id, updated.price, updated.name) == (plate.id, 999, "Plate")
    assert repo.update_by_slug("cup", {"price": 1}) is None

    assert repo.delete_by_slug("mug") is True
    assert repo.delete_by_slug("mug") is False
    assert [p.slug for p in repo.list_all()] == ["plate"]


def test_product_update_rejects_unknown_fields(session_factory) -> None:
    repo = SqlAlchemyProductRepository(session_factory)
    repo.add(_new_product())

    with pytest.raises(ValueError):
        repo.update_by_slug("mug", {"id": 42})


def test_file_database_uses_pool_settings(tmp_path) -> None:
    url = f"sqlite:///{tmp_path / 'shop.db'}"
    engine = create_engine_from_config(DatabaseConfig(url=url, pool_size=3))
    try:
        init_db(engine)
        repo = SqlAlchemyProductRepository(create_session_factory(engine))
        repo.add(_new_product())
        assert engine.pool.size() == 3
    finally:
        engine.dispose()



def test_product_slug_unique_constraint_maps_to_conflict(session_factory) -> None:
    repo = SqlAlchemyProductRepository(session_factory)
    repo.add(_new_product())
    repo.add(_new_product("plate"))

    with pytest.raises(DuplicateSlugError) as exc_info:
        repo.add(_new_product())
    assert exc_info.value.context == {"slug": "mug"}

    with pytest.raises(DuplicateSlugError) as exc_info:
        repo.update_by_slug("plate", {"slug": "mug"})
    assert exc_info.value.context == {"slug": "mug"}
    assert repo.find_by_slug("plate") is not None


class _StaleUserRepository(SqlAlchemyUserRepository):
    """Never sees the competing insert, like the loser of a concurrent register."""

    def find_by_email(self, email: str) -> User | None:
        return None


class _StaleProductRepository(SqlAlchemyProductRepository):
    def find_by_slug(self, slug: str):
        return None


def test_concurrent_registration_surfaces_conflict(
    session_factory, token_codec: JwtTokenCodec
) -> None:
    use_case = RegisterUserUseCase(
        users=_StaleUserRepository(session_factory),
        tokens=token_codec,
        password_hasher=DeterministicHasher(),
    )
    data = RegisterUserInput(
        name="Alice", email="a@b.com", password="pw123456", password_confirmation="pw123456"
    )
    use_case.execute(data)

    with pytest.raises(UserAlreadyExistsError) as exc_info:
        use_case.execute(data)

    assert exc_info.value.message == "User with this email already exists"


def test_concurrent_product_create_surfaces_conflict(session_factory) -> None:
    products = _StaleProductRepository(session_factory)
    use_case = CreateProductUseCase(
        products=products,
        cache=ProductCache(cache=InMemoryTTLCache(), products=products),
    )
    data = CreateProductInput(**product_payload("mug"))
    use_case.execute(data)

    with pytest.raises(ConflictError) as exc_info:
        use_case.execute(data)

    assert exc_info.value.code == "duplicate_slug"
