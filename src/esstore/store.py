"""Index-scoped document store over the Elasticsearch client.

Each method issues exactly one request: serialize the document, call the
client, interpret the status, decode the result. Nothing is cached or
retried, and the store holds no state besides ``(es, index_name)``, so a
single instance may be shared freely between threads.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Any, TypeVar

from elasticsearch import ApiError, Elasticsearch, NotFoundError
from elasticsearch import SerializationError as ClientSerializationError
from elasticsearch import TransportError as ClientTransportError

from .documents import Document, from_source, to_source
from .exceptions import (
    DeserializationError,
    DocumentConflictError,
    DocumentNotFoundError,
    DocumentWriteError,
    IndexOperationError,
    QueryError,
    SerializationError,
    ServerError,
    TransportError,
    UnexpectedStatusError,
)
from .query import QueryDoc

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _refresh(refresh: bool) -> str | bool:
    return "wait_for" if refresh else False


@dataclass(frozen=True)
class DocumentStore:
    """한 인덱스에 묶인 문서 CRUD/검색.

    모든 메서드는 ``timeout``(초)을 받아 해당 요청에만 적용합니다.

    Attributes:
        es: 공유 Elasticsearch 클라이언트
        index_name: 대상 인덱스명
    """

    es: Elasticsearch
    index_name: str

    # =========================================================================
    # Internals
    # =========================================================================

    def _client(self, timeout: float | None) -> Elasticsearch:
        if timeout is None:
            return self.es
        return self.es.options(request_timeout=timeout)

    @contextmanager
    def _translate(self, op: str, error_cls: type[ServerError]) -> Iterator[None]:
        """클라이언트 예외를 esstore 예외로 변환."""
        try:
            yield
        except ApiError as e:
            status = e.meta.status
            if error_cls is DocumentWriteError and status == 409:
                error_cls = DocumentConflictError
            err = error_cls.from_body(status, e.body, fallback=e.message)
            logger.warning("%s on '%s' failed: %s", op, self.index_name, err)
            raise err from e
        except ClientSerializationError as e:
            raise SerializationError(f"{op} on '{self.index_name}': {e}") from e
        except ClientTransportError as e:
            logger.warning("%s on '%s' transport failure: %s", op, self.index_name, e)
            raise TransportError(f"{op} on '{self.index_name}': {e}") from e

    # =========================================================================
    # Index
    # =========================================================================

    def create_index(self, mapping: dict[str, Any] | str | None = None, *, timeout: float | None = None) -> None:
        """인덱스 생성.

        Args:
            mapping: settings/mappings를 담은 바디 (dict 또는 JSON 문자열). 비어 있으면 기본값.
        """
        if isinstance(mapping, str):
            try:
                mapping = json.loads(mapping) if mapping.strip() else None
            except json.JSONDecodeError as e:
                raise SerializationError(f"invalid index mapping: {e}") from e

        logger.debug("create index '%s'", self.index_name)
        with self._translate("create_index", IndexOperationError):
            if mapping:
                self._client(timeout).indices.create(index=self.index_name, body=mapping)
            else:
                self._client(timeout).indices.create(index=self.index_name)

    def delete_index(self, *, timeout: float | None = None) -> None:
        """인덱스 전체 삭제."""
        logger.debug("delete index '%s'", self.index_name)
        with self._translate("delete_index", IndexOperationError):
            self._client(timeout).indices.delete(index=self.index_name)

    # =========================================================================
    # Writes
    # =========================================================================

    def create(self, doc: Document, *, refresh: bool = False, timeout: float | None = None) -> None:
        """문서 생성. 같은 ID가 이미 있으면 DocumentConflictError."""
        source = to_source(doc)
        doc_id = doc.document_id()
        logger.debug("create '%s/%s'", self.index_name, doc_id)
        with self._translate("create", DocumentWriteError):
            self._client(timeout).create(
                index=self.index_name,
                id=doc_id,
                document=source,
                refresh=_refresh(refresh),
            )

    def create_wait_for_refresh(self, doc: Document, *, timeout: float | None = None) -> None:
        """문서 생성 후 검색에 보일 때까지 대기 (read-after-write)."""
        self.create(doc, refresh=True, timeout=timeout)

    def update(self, doc: Document, *, refresh: bool = False, timeout: float | None = None) -> None:
        """부분 업데이트. 문서가 없으면 DocumentWriteError(404)."""
        self._update(doc, upsert=False, refresh=refresh, timeout=timeout)

    def upsert(self, doc: Document, *, refresh: bool = False, timeout: float | None = None) -> None:
        """부분 업데이트, 문서가 없으면 생성 (doc_as_upsert)."""
        self._update(doc, upsert=True, refresh=refresh, timeout=timeout)

    def _update(self, doc: Document, *, upsert: bool, refresh: bool, timeout: float | None) -> None:
        partial = to_source(doc, partial=True)
        doc_id = doc.document_id()
        kwargs: dict[str, Any] = {"doc": partial}
        if upsert:
            kwargs["doc_as_upsert"] = True

        op = "upsert" if upsert else "update"
        logger.debug("%s '%s/%s'", op, self.index_name, doc_id)
        with self._translate(op, DocumentWriteError):
            self._client(timeout).update(
                index=self.index_name,
                id=doc_id,
                refresh=_refresh(refresh),
                **kwargs,
            )

    # =========================================================================
    # Reads / deletes
    # =========================================================================

    def exists(self, doc_id: str, *, timeout: float | None = None) -> bool:
        """200이면 True, 404면 False."""
        with self._translate("exists", UnexpectedStatusError):
            try:
                resp = self._client(timeout).exists(index=self.index_name, id=doc_id)
            except NotFoundError:
                return False

        status = resp.meta.status
        if status == 200:
            return True
        if status == 404:
            return False
        raise UnexpectedStatusError(status)

    def delete(self, doc_id: str, *, refresh: bool = False, timeout: float | None = None) -> bool:
        """삭제했으면 True, 원래 없었으면 False."""
        logger.debug("delete '%s/%s'", self.index_name, doc_id)
        with self._translate("delete", UnexpectedStatusError):
            try:
                self._client(timeout).delete(
                    index=self.index_name,
                    id=doc_id,
                    refresh=_refresh(refresh),
                )
            except NotFoundError:
                return False
        return True

    def find_one(self, doc_id: str, result_type: type[T], *, timeout: float | None = None) -> T:
        """ID로 단일 문서 조회.

        Raises:
            DocumentNotFoundError: 문서(또는 인덱스)가 없는 경우.
            ServerError: 그 밖의 오류 응답.
        """
        with self._translate("find_one", ServerError):
            try:
                resp = self._client(timeout).get(index=self.index_name, id=doc_id)
            except NotFoundError as e:
                raise DocumentNotFoundError(self.index_name, doc_id) from e

        try:
            source = resp["_source"]
        except (KeyError, TypeError) as e:
            raise DeserializationError(f"get '{self.index_name}/{doc_id}': no _source in response") from e
        return from_source(result_type, source)

    def search(self, query: QueryDoc, result_type: type[T], *, timeout: float | None = None) -> list[T]:
        """쿼리 실행 후 hits를 ``result_type`` 리스트로 반환. 결과가 없으면 빈 리스트."""
        query = replace(query, index=self.index_name)
        try:
            body = query.to_dsl()
        except ValueError as e:
            raise SerializationError(f"search on '{self.index_name}': {e}") from e

        logger.debug("search '%s': %s", self.index_name, body)
        with self._translate("search", QueryError):
            resp = self._client(timeout).search(index=query.index, body=body)

        try:
            hits = resp["hits"]["hits"]
        except (KeyError, TypeError) as e:
            raise DeserializationError(f"search on '{self.index_name}': malformed hit envelope") from e

        out: list[T] = []
        for hit in hits:
            try:
                source = hit["_source"]
            except (KeyError, TypeError) as e:
                raise DeserializationError(f"search on '{self.index_name}': hit without _source") from e
            out.append(from_source(result_type, source))
        return out

    def count(self, *, timeout: float | None = None) -> int:
        """인덱스 내 총 문서 수."""
        with self._translate("count", QueryError):
            resp = self._client(timeout).count(index=self.index_name)
        return int(resp["count"])
