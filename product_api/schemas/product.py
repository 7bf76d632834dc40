"""Product Schemas — Pydantic models for serialization and API documentation.

Invariants:
    - ProductResponse is the only serializer for Product records
    - Timestamps serialize as createdAt / updatedAt
    - ProductCreate / ProductUpdate document the request bodies; the
      field-level checks themselves live in core/validation.py
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ProductResponse(BaseModel):
    """Product response — public-facing product data."""
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="The Product ID", examples=[1])
    name: str = Field(
        description="The Product name", examples=["Monitor curvo de 49 Pulgadas"],
    )
    price: float = Field(description="The Product price", examples=[300])
    availability: bool = Field(
        description="The Product availability", examples=[True],
    )
    created_at: datetime | None = Field(None, serialization_alias="createdAt")
    updated_at: datetime | None = Field(None, serialization_alias="updatedAt")


class ProductCreate(BaseModel):
    """Body accepted by POST /api/products."""
    name: str = Field(examples=["Mouse inalambrico"])
    price: float = Field(gt=0, examples=[150])


class ProductUpdate(ProductCreate):
    """Body accepted by PUT /api/products/{id}."""
    availability: bool = Field(examples=[True])


# --- Envelopes -----------------------------------------------------------------

class ProductEnvelope(BaseModel):
    data: ProductResponse


class ProductListEnvelope(BaseModel):
    data: list[ProductResponse]


class MessageEnvelope(BaseModel):
    data: str = Field(examples=["Producto eliminado"])


class ErrorEnvelope(BaseModel):
    error: str = Field(examples=["Producto no encontrado"])


class FieldErrorItem(BaseModel):
    type: str = "field"
    field: str
    location: str
    value: Any = None
    msg: str
    message: str


class ValidationErrorEnvelope(BaseModel):
    errors: list[FieldErrorItem]


def serialize_product(product: Any) -> dict:
    """Product record (ORM or any ProductLike) → JSON-safe dict."""
    return ProductResponse.model_validate(product).model_dump(
        mode="json", by_alias=True,
    )
