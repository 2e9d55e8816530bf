"""Tests for the order read, update and delete use cases."""

import pytest

from storefront.application.delete_order import DeleteOrderHandler
from storefront.application.search_orders import SearchOrdersByProductHandler
from storefront.application.show_order import ListOrdersHandler, ShowOrderHandler
from storefront.application.update_order import UpdateDeliveryAddressHandler
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.value_objects import Quantity
from tests.fakes import FakeOrderRepository

P1 = "123e4567-e89b-12d3-a456-426614174001"
P2 = "123e4567-e89b-12d3-a456-426614174002"
P3 = "123e4567-e89b-12d3-a456-426614174003"
UNKNOWN_ORDER = "00000000-0000-4000-8000-000000000000"


def _order(repo: FakeOrderRepository, *product_ids: str, address: str = "10 Main Street") -> Order:
    order = Order.create(address)
    for pid in product_ids:
        order.add_order_item(OrderItem(product_id=pid, quantity=Quantity(1), price=500))
    return repo.save(order)


class TestShowOrder:

    def test_show_existing(self):
        repo = FakeOrderRepository()
        order = _order(repo, P1)
        dto = ShowOrderHandler(repo).handle(order.id)
        assert dto.id == order.id
        assert dto.items[0].product_id == P1

    def test_missing_order(self):
        with pytest.raises(EntityNotFoundError, match=UNKNOWN_ORDER):
            ShowOrderHandler(FakeOrderRepository()).handle(UNKNOWN_ORDER)

    def test_malformed_id(self):
        with pytest.raises(ValidationError, match="Malformed order ID"):
            ShowOrderHandler(FakeOrderRepository()).handle("42")

    def test_list_all(self):
        repo = FakeOrderRepository()
        _order(repo, P1)
        _order(repo, P2)
        assert len(ListOrdersHandler(repo).handle()) == 2


class TestSearchOrdersByProduct:

    def test_no_match(self):
        repo = FakeOrderRepository()
        _order(repo, P1)
        assert SearchOrdersByProductHandler(repo).handle(P3) == []

    def test_single_match(self):
        repo = FakeOrderRepository()
        first = _order(repo, P1)
        _order(repo, P2)
        result = SearchOrdersByProductHandler(repo).handle(P1)
        assert [o.id for o in result] == [first.id]

    def test_many_matches_each_order_once(self):
        repo = FakeOrderRepository()
        a = _order(repo, P1, P1, P2)
        b = _order(repo, P2, P1)
        _order(repo, P3)
        result = SearchOrdersByProductHandler(repo).handle(P1)
        assert sorted(o.id for o in result) == sorted([a.id, b.id])

    def test_malformed_product_id(self):
        with pytest.raises(ValidationError):
            SearchOrdersByProductHandler(FakeOrderRepository()).handle("nope")


class TestUpdateDeliveryAddress:

    def test_changes_only_address(self):
        repo = FakeOrderRepository()
        order = _order(repo, P1, P2)
        dto = UpdateDeliveryAddressHandler(repo).handle(order.id, "22 Side Road")
        assert dto.delivery_address == "22 Side Road"
        assert [i.product_id for i in dto.items] == [P1, P2]
        assert dto.created_at == order.created_at

    def test_invalid_address(self):
        repo = FakeOrderRepository()
        order = _order(repo, P1)
        with pytest.raises(ValidationError):
            UpdateDeliveryAddressHandler(repo).handle(order.id, "abc")
        assert repo.get_by_id(order.id).delivery_address == "10 Main Street"

    def test_missing_order(self):
        with pytest.raises(EntityNotFoundError):
            UpdateDeliveryAddressHandler(FakeOrderRepository()).handle(UNKNOWN_ORDER, "22 Side Road")


class TestDeleteOrder:

    def test_delete(self):
        repo = FakeOrderRepository()
        order = _order(repo, P1)
        DeleteOrderHandler(repo).handle(order.id)
        assert repo.get_by_id(order.id) is None

    def test_delete_missing(self):
        with pytest.raises(EntityNotFoundError):
            DeleteOrderHandler(FakeOrderRepository()).handle(UNKNOWN_ORDER)
