"""SQLAlchemy-backed implementation of OrderRepository.

An order and its items are written in one transaction. IDs and the
creation timestamp are only copied onto the domain object after the
transaction commits, so a failed save leaves the caller's order untouched.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.database import Database, as_utc
from storefront.infrastructure.persistence.records import OrderItemRecord, OrderRecord


class SqlOrderRepository(OrderRepository):

    def __init__(self, database: Database) -> None:
        self._db = database

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: str) -> Order | None:
        with self._db.unit_of_work() as session:
            record = session.scalars(
                select(OrderRecord)
                .options(selectinload(OrderRecord.items))
                .where(OrderRecord.id == order_id)
            ).first()
            return self._to_domain(record) if record is not None else None

    def list_all(self) -> list[Order]:
        with self._db.unit_of_work() as session:
            records = session.scalars(
                select(OrderRecord)
                .options(selectinload(OrderRecord.items))
                .order_by(OrderRecord.created_at)
            ).all()
            return [self._to_domain(r) for r in records]

    def find_by_product_id(self, product_id: str) -> list[Order]:
        with self._db.unit_of_work() as session:
            records = session.scalars(
                select(OrderRecord)
                .options(selectinload(OrderRecord.items))
                .where(OrderRecord.items.any(OrderItemRecord.product_id == product_id))
                .order_by(OrderRecord.created_at)
            ).all()
            return [self._to_domain(r) for r in records]

    def save(self, order: Order) -> Order:
        order_id = order.id or str(uuid.uuid4())
        item_ids = [item.id or str(uuid.uuid4()) for item in order.order_items]

        with self._db.unit_of_work() as session:
            record = session.get(
                OrderRecord, order_id, options=[selectinload(OrderRecord.items)]
            )
            if record is None:
                record = OrderRecord(
                    id=order_id,
                    created_at=order.created_at or datetime.now(timezone.utc),
                )
                session.add(record)

            record.delivery_address = order.delivery_address
            self._sync_items(record, order, item_ids)
            created_at = as_utc(record.created_at)

        order.id = order_id
        order.created_at = created_at
        for item, item_id in zip(order.order_items, item_ids):
            item.id = item_id
            item.order = order
        return order

    def delete(self, order: Order) -> None:
        if order.id is None:
            return
        with self._db.unit_of_work() as session:
            record = session.get(
                OrderRecord, order.id, options=[selectinload(OrderRecord.items)]
            )
            if record is not None:
                session.delete(record)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _sync_items(record: OrderRecord, order: Order, item_ids: list[str]) -> None:
        """Make ``record.items`` mirror ``order.order_items``, keeping row IDs.

        Rows no longer present are removed by the delete-orphan cascade.
        """
        existing = {item.id: item for item in record.items}
        rows: list[OrderItemRecord] = []
        for position, (item, item_id) in enumerate(zip(order.order_items, item_ids)):
            row = existing.get(item_id) or OrderItemRecord(id=item_id)
            row.product_id = item.product_id
            row.quantity = item.quantity.value
            row.price = item.price
            row.position = position
            rows.append(row)
        record.items = rows

    @staticmethod
    def _to_domain(record: OrderRecord) -> Order:
        order = Order(
            id=record.id,
            delivery_address=record.delivery_address,
            created_at=as_utc(record.created_at),
        )
        for row in record.items:
            order.add_order_item(
                OrderItem(
                    id=row.id,
                    product_id=row.product_id,
                    quantity=Quantity(row.quantity),
                    price=row.price,
                )
            )
        return order
