"""Handler test fixtures — in-memory ProductRepository double.

Invariants:
    - The double satisfies the ProductRepository protocol structurally
    - Ids are assigned sequentially from 1 and never reused
    - Every call is recorded so tests can assert read/write counts
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

import pytest

from product_api.api.pipeline import RequestContext


@dataclass
class ProductRecord:
    id: int
    name: str
    price: float
    availability: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class InMemoryProductRepository:
    """Dict-backed ProductRepository."""

    def __init__(self):
        self.rows: dict[int, ProductRecord] = {}
        self.calls: list[str] = []
        self._next_id = 1

    def add(self, name: str, price: float, availability: bool = True) -> ProductRecord:
        record = ProductRecord(self._next_id, name, price, availability)
        self.rows[record.id] = record
        self._next_id += 1
        return record

    async def list_by_price(self):
        self.calls.append("list_by_price")
        return sorted(self.rows.values(), key=lambda p: (p.price, p.id))

    async def get(self, product_id: int):
        self.calls.append("get")
        return self.rows.get(product_id)

    async def create(self, name: str, price: float):
        self.calls.append("create")
        return self.add(name, price)

    async def save(self, product):
        self.calls.append("save")
        product.updated_at = datetime.now(timezone.utc)
        self.rows[product.id] = product
        return product

    async def delete(self, product):
        self.calls.append("delete")
        del self.rows[product.id]


@pytest.fixture
def products():
    return InMemoryProductRepository()


@pytest.fixture
def make_ctx():
    """Build a RequestContext the way the pipeline would."""
    def _make(params: dict | None = None, body: dict | None = None) -> RequestContext:
        return RequestContext(
            method="GET", path="/api/products",
            params=params or {}, body=body or {},
        )
    return _make
