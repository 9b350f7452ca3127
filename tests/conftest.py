"""
Shared fixtures: an in-memory stand-in for the parts of the motor API the
maintenance services use
"""
import copy
from types import SimpleNamespace

import pytest
from bson import ObjectId
from pymongo.errors import OperationFailure


def _matches_value(value, condition):
    if isinstance(condition, dict) and any(key.startswith("$") for key in condition):
        for operator, operand in condition.items():
            if operator == "$ne" and value == operand:
                return False
            if operator == "$in" and value not in operand:
                return False
            if operator == "$elemMatch":
                if not isinstance(value, list):
                    return False
                if not any(isinstance(element, dict) and matches(element, operand) for element in value):
                    return False
        return True
    return value == condition


def matches(document, query):
    """Minimal MongoDB query matcher; a missing field compares equal to None"""
    return all(_matches_value(document.get(field), condition) for field, condition in query.items())


class FakeCursor:
    def __init__(self, documents):
        self.documents = documents

    async def to_list(self, length):
        return self.documents if length is None else self.documents[:length]


class FakeCollection:
    def __init__(self, documents=None):
        self.documents = [copy.deepcopy(document) for document in documents or []]
        self.fail_on = set()
        self.update_calls = 0

    def _check(self, operation):
        if operation in self.fail_on:
            raise OperationFailure(f"{operation} failed")

    def find(self, query=None, projection=None):
        self._check("find")
        return FakeCursor([copy.deepcopy(d) for d in self.documents if matches(d, query or {})])

    async def find_one(self, query=None, projection=None):
        self._check("find_one")
        for document in self.documents:
            if matches(document, query or {}):
                return copy.deepcopy(document)
        return None

    async def insert_one(self, document):
        self._check("insert_one")
        document = copy.deepcopy(document)
        document.setdefault("_id", ObjectId())
        self.documents.append(document)
        return SimpleNamespace(inserted_id=document["_id"])

    async def update_one(self, query, update):
        self._check("update_one")
        self.update_calls += 1
        for document in self.documents:
            if matches(document, query):
                document.update(copy.deepcopy(update["$set"]))
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)

    async def delete_one(self, query):
        self._check("delete_one")
        for document in self.documents:
            if matches(document, query):
                self.documents.remove(document)
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    async def delete_many(self, query):
        self._check("delete_many")
        kept = [d for d in self.documents if not matches(d, query)]
        deleted = len(self.documents) - len(kept)
        self.documents = kept
        return SimpleNamespace(deleted_count=deleted)

    async def count_documents(self, query):
        return len([d for d in self.documents if matches(d, query)])


class FakeDatabase:
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection())

    def seed(self, name, documents):
        collection = self[name]
        collection.documents = [copy.deepcopy(document) for document in documents]
        return collection


@pytest.fixture
def db():
    return FakeDatabase()


@pytest.fixture
def user_id():
    return ObjectId()
