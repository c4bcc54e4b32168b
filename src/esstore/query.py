"""검색 쿼리 기술(description) → Elasticsearch Query DSL 변환.

field/value/type 항목들을 bool 쿼리의 must(AND), should(OR), must_not(NOT),
filter 절로 조합합니다. 인프라에 의존하지 않으므로 어디서든 import할 수 있습니다.

Example:
    >>> q = QueryDoc(and_=[QueryItem("doc_id", "111", QueryType.MATCH)])
    >>> q.to_dsl()
    {'query': {'bool': {'must': [{'match': {'doc_id': '111'}}]}}}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class QueryType(str, Enum):
    """QueryItem 매칭 방식."""

    MATCH = "match"
    MATCH_PHRASE = "match_phrase"
    TERM = "term"
    TERMS = "terms"
    RANGE = "range"
    PREFIX = "prefix"
    WILDCARD = "wildcard"
    EXISTS = "exists"
    QUERY_STRING = "query_string"


@dataclass
class QueryItem:
    """단일 조건. RANGE의 value는 ``{"gte": ..., "lt": ...}`` 형태의 dict."""

    field: str
    value: Any = None
    type: QueryType = QueryType.MATCH

    def to_dsl(self) -> dict[str, Any]:
        if self.type is QueryType.EXISTS:
            return {"exists": {"field": self.field}}
        if self.type is QueryType.QUERY_STRING:
            return {"query_string": {"query": self.value, "default_field": self.field}}
        if self.type is QueryType.TERMS:
            values = self.value if isinstance(self.value, (list, tuple)) else [self.value]
            return {"terms": {self.field: list(values)}}
        if self.type is QueryType.RANGE and not isinstance(self.value, dict):
            raise ValueError(f"range value for '{self.field}' must be a dict, got {self.value!r}")
        return {self.type.value: {self.field: self.value}}


@dataclass
class QueryDoc:
    """bool 쿼리 기술.

    Attributes:
        index: 대상 인덱스 (DocumentStore가 검색 직전에 채움)
        size: 반환 결과 수 (None이면 서버 기본값)
        from_: 시작 offset
        sort: 정렬 조건 (예: ``[{"create_at": "desc"}]``)
        search_after: 이전 페이지 마지막 hit의 sort 값
        and_: 모두 만족해야 하는 조건 (must)
        or_: 하나 이상 만족 (should)
        not_: 만족하면 제외 (must_not)
        filter: 점수에 영향 없는 필터 (filter)
    """

    index: str | None = None
    size: int | None = None
    from_: int | None = None
    sort: list[dict[str, Any]] = field(default_factory=list)
    search_after: list[Any] = field(default_factory=list)
    and_: list[QueryItem] = field(default_factory=list)
    or_: list[QueryItem] = field(default_factory=list)
    not_: list[QueryItem] = field(default_factory=list)
    filter: list[QueryItem] = field(default_factory=list)

    def to_dsl(self) -> dict[str, Any]:
        """검색 요청 바디 생성. 조건이 하나도 없으면 match_all."""
        clauses = {
            "must": self.and_,
            "should": self.or_,
            "must_not": self.not_,
            "filter": self.filter,
        }
        bool_query = {k: [item.to_dsl() for item in items] for k, items in clauses.items() if items}

        body: dict[str, Any] = {"query": {"bool": bool_query} if bool_query else {"match_all": {}}}
        if self.size is not None:
            body["size"] = self.size
        if self.from_ is not None:
            body["from"] = self.from_
        if self.sort:
            body["sort"] = self.sort
        if self.search_after:
            body["search_after"] = self.search_after
        return body
