from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from storefront.domain.catalog.entities import NewProduct


class CreateProductInput(BaseModel):
    name: str = Field(min_length=1, max_length=256)
    slug: str = Field(min_length=1, max_length=256)
    description: str = Field(min_length=1)
    price: int = Field(gt=0, description="Price in cents")
    image: str = Field(min_length=1, max_length=2048)

    model_config = ConfigDict(frozen=True)

    def to_entity(self) -> NewProduct:
        return NewProduct(**self.model_dump())


class UpdateProductInput(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=256)
    slug: str | None = Field(None, min_length=1, max_length=256)
    description: str | None = Field(None, min_length=1)
    price: int | None = Field(None, gt=0)
    image: str | None = Field(None, min_length=1, max_length=2048)

    model_config = ConfigDict(frozen=True)

    def changes(self) -> dict[str, Any]:
        """Fields the caller supplied, with explicit nulls dropped."""

        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }
