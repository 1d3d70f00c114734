import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from storefront.core.config import get_settings
from storefront.database import build_engine, get_session
from storefront.main import app
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.product_repo import ProductRepository
from storefront.services.cart_service import CartService
from storefront.services.product_service import ProductService

SEED_SIZE = 59


@pytest.fixture(name="engine")
def engine_fixture():
    engine = build_engine("sqlite://")
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        ProductService(ProductRepository()).seed_catalog(
            session, get_settings().SEED_PRODUCTS_PATH
        )
    yield engine
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="product_repo")
def product_repo_fixture():
    return ProductRepository()


@pytest.fixture(name="cart_service")
def cart_service_fixture(product_repo):
    return CartService(CartRepository(), product_repo)


@pytest.fixture(name="client")
def client_fixture(engine):
    def get_session_override():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
