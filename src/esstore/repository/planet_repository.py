"""Planet document repository."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from elasticsearch import Elasticsearch
from pydantic import BaseModel, Field

from ..documents import DocumentModel
from ..query import QueryDoc, QueryItem, QueryType
from ..store import DocumentStore

DEFAULT_INDEX = "planet"


class BanInfo(BaseModel):
    begin_time: datetime
    end_time: datetime
    reason: str


class Planet(DocumentModel):
    planet_id: str
    name: str = Field(default="", alias="planet_name")
    stage: str = ""
    status: str = ""

    # optional
    ban_info: BanInfo | None = None

    def document_id(self) -> str:
        return self.planet_id


def planet_index_mapping(shards: int = 1, replicas: int = 0) -> dict[str, Any]:
    """Planet 인덱스 매핑.

    Fields:
        - planet_id: 고유 식별자 (keyword)
        - planet_name: 이름 (text + keyword)
        - stage, status: 상태 값 (keyword)
        - ban_info: 제재 정보 (object: begin_time, end_time, reason)
    """
    return {
        "settings": {
            "number_of_shards": shards,
            "number_of_replicas": replicas,
        },
        "mappings": {
            "properties": {
                "planet_id": {"type": "keyword"},
                "planet_name": {
                    "type": "text",
                    "fields": {"keyword": {"type": "keyword", "ignore_above": 256}},
                },
                "stage": {"type": "keyword"},
                "status": {"type": "keyword"},
                "ban_info": {
                    "properties": {
                        "begin_time": {"type": "date"},
                        "end_time": {"type": "date"},
                        "reason": {"type": "text"},
                    }
                },
            }
        },
    }


class PlanetRepository:
    """Planet 문서 CRUD 리포지토리.

    DocumentStore를 상속하지 않고 명시적으로 들고 있으며,
    도메인 이름의 메서드로 위임합니다. ``timeout``(초)은 그대로 store에 전달됩니다.
    """

    def __init__(self, store: DocumentStore):
        self.store = store

    @classmethod
    def from_client(cls, es: Elasticsearch, index_name: str = DEFAULT_INDEX) -> PlanetRepository:
        return cls(DocumentStore(es, index_name))

    @property
    def index_name(self) -> str:
        return self.store.index_name

    # Index
    def create_index(self, mapping: dict[str, Any] | None = None, *, timeout: float | None = None) -> None:
        """인덱스 생성. mapping이 없으면 planet_index_mapping() 사용."""
        if mapping is None:
            mapping = planet_index_mapping()
        self.store.create_index(mapping, timeout=timeout)

    def drop_index(self, *, timeout: float | None = None) -> None:
        self.store.delete_index(timeout=timeout)

    # Writes
    def add(self, planet: Planet, *, timeout: float | None = None) -> None:
        """새 Planet 저장. 이미 있으면 DocumentConflictError."""
        self.store.create(planet, timeout=timeout)

    def add_and_refresh(self, planet: Planet, *, timeout: float | None = None) -> None:
        """새 Planet 저장 후 바로 검색 가능할 때까지 대기."""
        self.store.create_wait_for_refresh(planet, timeout=timeout)

    def save(self, planet: Planet, refresh: bool = False, *, timeout: float | None = None) -> None:
        """지정한 필드만 병합 저장. 없으면 생성."""
        self.store.upsert(planet, refresh=refresh, timeout=timeout)

    def update(self, planet: Planet, refresh: bool = False, *, timeout: float | None = None) -> None:
        self.store.update(planet, refresh=refresh, timeout=timeout)

    def remove(self, planet_id: str, refresh: bool = False, *, timeout: float | None = None) -> bool:
        return self.store.delete(planet_id, refresh=refresh, timeout=timeout)

    # Reads
    def get(self, planet_id: str, *, timeout: float | None = None) -> Planet:
        return self.store.find_one(planet_id, Planet, timeout=timeout)

    def exists(self, planet_id: str, *, timeout: float | None = None) -> bool:
        return self.store.exists(planet_id, timeout=timeout)

    def search(self, query: QueryDoc, *, timeout: float | None = None) -> list[Planet]:
        return self.store.search(query, Planet, timeout=timeout)

    def find_by_id_field(self, planet_id: str, *, timeout: float | None = None) -> list[Planet]:
        """``planet_id`` 필드 매칭 검색 (``_id`` 조회가 아닌 색인 필드 검색)."""
        return self.search(
            QueryDoc(and_=[QueryItem("planet_id", planet_id, QueryType.MATCH)]), timeout=timeout
        )

    def find_by_name(self, name: str, *, timeout: float | None = None) -> list[Planet]:
        return self.search(
            QueryDoc(and_=[QueryItem("planet_name", name, QueryType.MATCH)]), timeout=timeout
        )

    def find_by_status(
        self, status: str, size: int | None = None, *, timeout: float | None = None
    ) -> list[Planet]:
        """상태가 정확히 일치하는 Planet 목록."""
        return self.search(
            QueryDoc(size=size, filter=[QueryItem("status", status, QueryType.TERM)]),
            timeout=timeout,
        )
