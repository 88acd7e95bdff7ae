import pytest
from fastapi.testclient import TestClient
from storefront.app import create_app
from storefront.catalogue.product import ProductCatalog
from storefront.config import StorefrontConfig
from storefront.domain import Storefront
from storefront.service import StorefrontService


@pytest.fixture()
def catalog():
    return ProductCatalog.default()


@pytest.fixture()
def storefront(catalog):
    engine = Storefront(config=StorefrontConfig(environment="test", nth_order_for_discount=3), catalog=catalog)
    yield engine
    engine._data_reset()


@pytest.fixture()
def service(storefront):
    return StorefrontService(storefront)


@pytest.fixture()
def client(storefront):
    return TestClient(create_app(storefront))
