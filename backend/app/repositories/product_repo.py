from typing import Any, Dict, List, Optional

from app.models.product import Product
from sqlalchemy import delete, insert, select, update
from sqlalchemy.orm import Session

# Column order used for insert and update
WRITABLE_FIELDS = ("name", "price", "discount", "review_count", "image_url")


class ProductRepository:
    """
    Thin data access for the products table.

    Every method issues exactly one bound-parameter statement and commits
    its own work; nothing is cached between calls.
    """

    def __init__(self, db: Session):
        self.db = db

    def _values(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        # absent fields are written as NULL, unknown keys are ignored
        return {name: fields.get(name) for name in WRITABLE_FIELDS}

    def list(self) -> List[Product]:
        return list(self.db.execute(select(Product)).scalars().all())

    def get_by_id(self, product_id: int) -> List[Product]:
        stmt = select(Product).where(Product.id == product_id)
        return list(self.db.execute(stmt).scalars().all())

    def create(self, fields: Dict[str, Any]) -> Optional[int]:
        result = self.db.execute(insert(Product).values(**self._values(fields)))
        self.db.commit()
        pk = result.inserted_primary_key
        return pk[0] if pk else None

    def update(self, product_id: int, fields: Dict[str, Any]) -> int:
        """Overwrite every writable column of the row. Returns the driver's rowcount."""
        stmt = (
            update(Product)
            .where(Product.id == product_id)
            .values(**self._values(fields))
            .execution_options(synchronize_session=False)
        )
        result = self.db.execute(stmt)
        self.db.commit()
        return result.rowcount

    def delete(self, product_id: int) -> int:
        stmt = (
            delete(Product)
            .where(Product.id == product_id)
            .execution_options(synchronize_session=False)
        )
        result = self.db.execute(stmt)
        self.db.commit()
        return result.rowcount
