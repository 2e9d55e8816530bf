"""SQLAlchemy-backed implementation of ProductRepository.

Categories are held as a real ``list[str]`` on the domain object and as a
JSON array string in a single text column; ``encode_categories`` and
``decode_categories`` are the only place that crosses between the two.
"""

from __future__ import annotations

import json
import uuid
from datetime import datetime, timezone

from sqlalchemy import func, select

from storefront.domain.exceptions import StorageError
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.database import Database, as_utc
from storefront.infrastructure.persistence.records import ProductRecord


def encode_categories(categories: list[str]) -> str:
    return json.dumps(list(categories), ensure_ascii=False)


def decode_categories(raw: str) -> list[str]:
    try:
        value = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as exc:
        raise StorageError(f"Stored categories are not valid JSON: {raw!r}") from exc
    if not isinstance(value, list) or not all(isinstance(c, str) for c in value):
        raise StorageError(f"Stored categories are not a list of strings: {raw!r}")
    return value


class SqlProductRepository(ProductRepository):

    def __init__(self, database: Database) -> None:
        self._db = database

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        with self._db.unit_of_work() as session:
            record = session.get(ProductRecord, product_id)
            return self._to_domain(record) if record is not None else None

    def search_by_name(self, fragment: str) -> list[Product]:
        with self._db.unit_of_work() as session:
            records = session.scalars(
                select(ProductRecord)
                .where(func.lower(ProductRecord.name).contains(fragment.lower(), autoescape=True))
                .order_by(ProductRecord.name.asc())
            ).all()
            return [self._to_domain(r) for r in records]

    def list_all(self) -> list[Product]:
        with self._db.unit_of_work() as session:
            records = session.scalars(
                select(ProductRecord).order_by(ProductRecord.created_at)
            ).all()
            return [self._to_domain(r) for r in records]

    def save(self, product: Product) -> Product:
        product_id = product.id or str(uuid.uuid4())

        with self._db.unit_of_work() as session:
            record = session.get(ProductRecord, product_id)
            if record is None:
                record = ProductRecord(
                    id=product_id,
                    created_at=product.created_at or datetime.now(timezone.utc),
                )
                session.add(record)

            record.name = product.name
            record.description = product.description
            record.price = product.price
            record.categories = encode_categories(product.categories)
            created_at = record.created_at

        product.id = product_id
        product.created_at = as_utc(created_at)
        return product

    def delete(self, product: Product) -> None:
        if product.id is None:
            return
        with self._db.unit_of_work() as session:
            record = session.get(ProductRecord, product.id)
            if record is not None:
                session.delete(record)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(record: ProductRecord) -> Product:
        return Product(
            id=record.id,
            name=record.name,
            description=record.description,
            price=record.price,
            categories=decode_categories(record.categories),
            created_at=as_utc(record.created_at),
        )
