# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - An in-memory stand-in for a MongoDB collection, so no server is needed
# - Validated test settings and a FastAPI TestClient wired to them
# =============================================================================

import copy
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo import ReturnDocument

from app.config import validate_settings
from app.main import create_app
from lib.mongo_client import MongoClientError

AUTH_HEADERS = {"Authorization": "Bearer test-token"}


# =============================================================================
# In-memory MongoDB doubles
# =============================================================================

class FakeCollection:
    """
    Dict-backed collection implementing the calls the services make.

    Every call is recorded in `calls` so tests can assert that a request
    never reached the database.
    """

    def __init__(self, name: str = "collection"):
        self.name = name
        self.documents: dict[ObjectId, dict] = {}
        self.calls: list[str] = []

    def insert_one(self, document: dict):
        self.calls.append("insert_one")
        document.setdefault("_id", ObjectId())
        self.documents[document["_id"]] = copy.deepcopy(document)
        return SimpleNamespace(inserted_id=document["_id"])

    def find(self, query: dict | None = None):
        self.calls.append("find")
        return iter([copy.deepcopy(d) for d in self.documents.values()])

    def find_one(self, query: dict):
        self.calls.append("find_one")
        document = self.documents.get(query["_id"])
        return copy.deepcopy(document) if document is not None else None

    def find_one_and_update(self, query: dict, update: dict, return_document=ReturnDocument.BEFORE):
        self.calls.append("find_one_and_update")
        document = self.documents.get(query["_id"])
        if document is None:
            return None
        before = copy.deepcopy(document)
        document.update(update.get("$set", {}))
        for key in update.get("$unset", {}):
            document.pop(key, None)
        return copy.deepcopy(document) if return_document == ReturnDocument.AFTER else before

    def find_one_and_delete(self, query: dict):
        self.calls.append("find_one_and_delete")
        return self.documents.pop(query["_id"], None)


class FakeDatabase:
    """Stand-in for lib.mongo_client.MongoDatabase."""

    def __init__(self):
        self.collections: dict[str, FakeCollection] = {}
        self.reachable = True
        self.closed = False

    def collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection(name))

    def ping(self) -> bool:
        if not self.reachable:
            raise MongoClientError("server selection timeout", code="PING_FAILED")
        return True

    def close(self) -> None:
        self.closed = True


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings():
    """Validated settings for the "test" mode."""
    return validate_settings(
        {"MONGODB_URI": "mongodb://localhost:27017/test"},
        mode="test",
    )


@pytest.fixture
def database():
    return FakeDatabase()


@pytest.fixture
def products_collection(database):
    return database.collection("products")


@pytest.fixture
def app(settings, database):
    return create_app(settings, database=database)


@pytest.fixture
def client(app):
    """Client that sends a credential header with every request."""
    return TestClient(app, headers=AUTH_HEADERS)


@pytest.fixture
def anonymous_client(app):
    """Client that sends no credential header."""
    return TestClient(app)


@pytest.fixture
def laptop():
    """Sample product payload."""
    return {
        "name": "Laptop",
        "price": 999.99,
        "description": "High-performance laptop",
        "category": "Electronics",
    }
