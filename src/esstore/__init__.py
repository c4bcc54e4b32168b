"""Elasticsearch 문서 저장소 (Store + Repository Layer).

인덱스 하나에 묶인 타입 안전한 CRUD 및 검색 기능을 제공합니다.

주요 컴포넌트:
    - DocumentStore: 인덱스 단위 CRUD/검색 어댑터
    - QueryDoc / QueryItem: bool 쿼리 기술 → Query DSL
    - PlanetRepository: DocumentStore를 조합한 예시 리포지토리

Usage:
    >>> from esstore import ESConfig, create_es_client, DocumentStore
    >>> from esstore import QueryDoc, QueryItem, QueryType
    >>> from esstore.repository import Planet
    >>>
    >>> es = create_es_client(ESConfig())
    >>> store = DocumentStore(es, "planet")
    >>> store.create_wait_for_refresh(Planet(planet_id="111", name="Earth"))
    >>> store.search(QueryDoc(and_=[QueryItem("planet_id", "111", QueryType.MATCH)]), Planet)
"""

from esstore.client import check_connection, create_es_client
from esstore.config import ESConfig
from esstore.documents import Document, DocumentModel, from_source, to_source
from esstore.exceptions import (
    DeserializationError,
    DocumentConflictError,
    DocumentNotFoundError,
    DocumentStoreError,
    DocumentWriteError,
    IndexOperationError,
    QueryError,
    SerializationError,
    ServerError,
    TransportError,
    UnexpectedStatusError,
)
from esstore.query import QueryDoc, QueryItem, QueryType
from esstore.store import DocumentStore

__all__ = [
    # Config
    "ESConfig",
    # Client
    "create_es_client",
    "check_connection",
    # Documents
    "Document",
    "DocumentModel",
    "to_source",
    "from_source",
    # Query
    "QueryDoc",
    "QueryItem",
    "QueryType",
    # Store
    "DocumentStore",
    # Errors
    "DocumentStoreError",
    "TransportError",
    "SerializationError",
    "DeserializationError",
    "ServerError",
    "IndexOperationError",
    "DocumentWriteError",
    "DocumentConflictError",
    "QueryError",
    "UnexpectedStatusError",
    "DocumentNotFoundError",
]
