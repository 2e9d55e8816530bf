import pytest

from storefront.infrastructure.persistence.database import Database
from storefront.infrastructure.persistence.records import OrderBase, ProductBase
from storefront.infrastructure.persistence.sql_order_repository import SqlOrderRepository
from storefront.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)


@pytest.fixture
def order_database():
    database = Database("sqlite://", OrderBase.metadata)
    database.create_all()
    yield database
    database.drop_all()
    database.engine.dispose()


@pytest.fixture
def product_database():
    database = Database("sqlite://", ProductBase.metadata)
    database.create_all()
    yield database
    database.drop_all()
    database.engine.dispose()


@pytest.fixture
def order_repo(order_database):
    return SqlOrderRepository(order_database)


@pytest.fixture
def product_repo(product_database):
    return SqlProductRepository(product_database)
