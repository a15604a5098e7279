from __future__ import annotations

from http import HTTPStatus

import pytest

from storefront.application.dto.catalog import UpdateProductInput
from storefront.domain import InvariantViolation, NewProduct
from storefront.domain.users.entities import username_from_email
from storefront.shared.errors.base import AppError


@pytest.mark.parametrize(
    ("email", "expected"),
    [("alice@example.com", "alice"), ("a.b+c@example.com", "a.b+c"), ("A@b.com", "A")],
)
def test_username_is_local_part(email: str, expected: str) -> None:
    assert username_from_email(email) == expected


@pytest.mark.parametrize(
    ("slug", "price", "field"),
    [("", 100, "slug"), ("mug", -1, "price")],
)
def test_new_product_invariants(slug: str, price: int, field: str) -> None:
    with pytest.raises(InvariantViolation) as exc_info:
        NewProduct(name="Mug", slug=slug, description="d", price=price, image="i")

    assert exc_info.value.field == field


def test_update_input_keeps_only_supplied_fields() -> None:
    patch = UpdateProductInput(price=250, description=None)

    assert patch.changes() == {"price": 250}
    assert UpdateProductInput().changes() == {}


def test_invariant_violation_follows_app_error_contract() -> None:
    with pytest.raises(AppError) as exc_info:
        NewProduct(name="Mug", slug="", description="d", price=1, image="i")

    error = exc_info.value
    assert error.status == HTTPStatus.UNPROCESSABLE_ENTITY
    assert error.to_dict() == {
        "error": "invariant_violation",
        "message": "slug must not be empty",
        "context": {"field": "slug"},
    }
    assert str(error) == "slug: slug must not be empty"
