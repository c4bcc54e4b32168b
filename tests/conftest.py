"""Shared fixtures: a mocked Elasticsearch client and error builders."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from elasticsearch import ApiError

from esstore import DocumentStore


def make_api_error(status, body=None, cls=ApiError, message="ApiError"):
    """Build a client ApiError the way the transport raises it."""
    return cls(message=message, meta=SimpleNamespace(status=status), body=body)


def head_response(status):
    """Stand-in for HeadApiResponse returned by ``exists``."""
    return SimpleNamespace(meta=SimpleNamespace(status=status))


def hits(*sources):
    return {"hits": {"total": {"value": len(sources)}, "hits": [{"_id": str(i), "_source": s} for i, s in enumerate(sources)]}}


@pytest.fixture
def es():
    client = MagicMock(name="Elasticsearch")
    client.options.return_value = client
    return client


@pytest.fixture
def store(es):
    return DocumentStore(es, "test_doc")
