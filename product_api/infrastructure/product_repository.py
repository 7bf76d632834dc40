"""SQL Product Repository — ProductRepository backed by an AsyncSession.

Invariants:
    - One commit per write; reads never commit
    - Written records are refreshed so server-side values (id, timestamps)
      are populated before they are serialized
    - get() returns None on a miss, including ids the id column cannot hold
"""

import logging

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from product_api.core.repository_protocols import ProductRepository
from product_api.infrastructure.database import get_db
from product_api.models.product import ID_MAX, Product

logger = logging.getLogger(__name__)


class SqlProductRepository:
    """Product persistence through SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_by_price(self) -> list[Product]:
        result = await self.db.execute(
            select(Product).order_by(Product.price.asc(), Product.id.asc()),
        )
        return list(result.scalars().all())

    async def get(self, product_id: int) -> Product | None:
        if not 1 <= product_id <= ID_MAX:
            return None
        return await self.db.get(Product, product_id)

    async def create(self, name: str, price: float) -> Product:
        product = Product(name=name, price=price, availability=True)
        self.db.add(product)
        await self.db.commit()
        await self.db.refresh(product)
        logger.info(
            f"Product created: {product.name}",
            extra={"product_id": product.id},
        )
        return product

    async def save(self, product: Product) -> Product:
        await self.db.commit()
        await self.db.refresh(product)
        return product

    async def delete(self, product: Product) -> None:
        product_id = product.id
        await self.db.delete(product)
        await self.db.commit()
        logger.info("Product deleted", extra={"product_id": product_id})


async def get_product_repository(
    db: AsyncSession = Depends(get_db),
) -> ProductRepository:
    """FastAPI dependency providing the persistence capability to handlers."""
    return SqlProductRepository(db)
