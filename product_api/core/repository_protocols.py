"""Boundary Protocols — contracts between handlers and persistence.

Invariants:
    - Handlers NEVER import the ORM session — they receive a ProductRepository
    - A lookup miss returns None, never raises
    - Implementations provided by the shell via dependency injection
      (SqlProductRepository in production, in-memory doubles in tests)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
"""

from datetime import datetime
from typing import Protocol


class ProductLike(Protocol):
    """Structural contract for Product records handed to handlers."""
    id: int
    name: str
    price: float
    availability: bool
    created_at: datetime | None
    updated_at: datetime | None


class ProductRepository(Protocol):
    """Contract for product persistence — implemented by shell."""
    async def list_by_price(self) -> list[ProductLike]: ...
    async def get(self, product_id: int) -> ProductLike | None: ...
    async def create(self, name: str, price: float) -> ProductLike: ...
    async def save(self, product: ProductLike) -> ProductLike: ...
    async def delete(self, product: ProductLike) -> None: ...
