import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from unittest import mock

import pytest
import requests
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api import create_app
from app.api.routers.products import get_inventory_client
from app.data.database import Base, get_db
from app.data.models.product import ProductModel
from app.services.inventory_client import InventoryClient, InventoryConfig


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def laptop(db):
    product = ProductModel(
        nombre="Laptop Dell",
        descripcion="Laptop Dell Inspiron 15",
        precio=799.99,
        categoria="Electrónicos",
    )
    db.add(product)
    db.commit()
    db.refresh(product)
    return product


@pytest.fixture
def json_response():
    def build(payload, status_code=200):
        resp = mock.Mock(spec=requests.Response)
        resp.status_code = status_code
        resp.json.return_value = payload
        if status_code >= 400:
            resp.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
        else:
            resp.raise_for_status.return_value = None
        return resp

    return build


@pytest.fixture
def http_session():
    return mock.Mock(spec=requests.Session)


@pytest.fixture
def inventory_config():
    return InventoryConfig(base_url="http://inventory.test")


@pytest.fixture
def inventory_client(inventory_config, http_session):
    return InventoryClient(config=inventory_config, session=http_session)


@pytest.fixture
def client(session_factory, inventory_client):
    app = create_app()

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_inventory_client] = lambda: inventory_client

    with TestClient(app) as test_client:
        yield test_client
