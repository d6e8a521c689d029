import os
import tempfile

# Point the app at a throwaway database and uploads dir before it is imported
_TMP_DIR = tempfile.mkdtemp(prefix="catalog-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'catalog.db')}"
os.environ["UPLOADS_DIR"] = os.path.join(_TMP_DIR, "uploads")
os.environ.pop("LOG_DIR", None)

import pytest
from fastapi.testclient import TestClient

from app import app
from database import SessionLocal
from models import Product


@pytest.fixture(autouse=True)
def clean_db():
    db = SessionLocal()
    try:
        db.query(Product).delete()
        db.commit()
    finally:
        db.close()
    yield


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def product_payload():
    return {
        "name": "Bamboo Toothbrush",
        "category": "Personal Care",
        "description": "Biodegradable bamboo handle with plant-based bristles",
        "sustainabilityScore": 90,
        "price": 4.99,
    }


@pytest.fixture
def create_product(client, product_payload):
    def _create(**overrides):
        payload = {**product_payload, **overrides}
        r = client.post("/api/products", json=payload)
        assert r.status_code == 201, r.text
        return r.json()
    return _create
