"""Document contract and JSON (de)serialization.

Any type that reports its id via ``document_id()`` can be stored. The JSON
shape comes from pydantic, so both ``BaseModel`` subclasses and plain
dataclasses work; field aliases are the JSON names stored in the index.
"""

from __future__ import annotations

from abc import abstractmethod
from functools import lru_cache
from typing import Any, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from .exceptions import DeserializationError, SerializationError

T = TypeVar("T")


@runtime_checkable
class Document(Protocol):
    """ES에 저장 가능한 문서. ID는 항상 클라이언트가 정합니다."""

    def document_id(self) -> str: ...


class DocumentModel(BaseModel):
    """pydantic 기반 문서 베이스.

    alias(JSON 필드명)와 파이썬 필드명 둘 다로 생성할 수 있습니다.
    document_id()를 구현하지 않은 서브클래스는 생성 시점에 TypeError.
    """

    model_config = ConfigDict(populate_by_name=True)

    @abstractmethod
    def document_id(self) -> str:
        """문서 ID. 서브클래스가 반드시 구현."""
        ...


@lru_cache(maxsize=None)
def _adapter(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)


def to_source(doc: Any, *, partial: bool = False) -> dict[str, Any]:
    """문서를 ES ``_source`` dict로 변환.

    None 값은 넣지 않습니다. ``partial=True``이면 호출자가 명시적으로
    지정하지 않은 필드도 제외하여 부분 업데이트가 지정 필드만 병합되도록 합니다.
    """
    try:
        if isinstance(doc, BaseModel):
            data = doc.model_dump(mode="json", by_alias=True, exclude_none=True, exclude_unset=partial)
        else:
            data = _adapter(type(doc)).dump_python(doc, mode="json", by_alias=True, exclude_none=True)
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise SerializationError(f"cannot serialize {type(doc).__name__}: {e}") from e

    if not isinstance(data, dict):
        raise SerializationError(f"{type(doc).__name__} does not serialize to a JSON object")
    return data


def from_source(result_type: type[T], source: Any) -> T:
    """ES ``_source``를 ``result_type`` 인스턴스로 변환."""
    try:
        return _adapter(result_type).validate_python(source)
    except (ValidationError, TypeError) as e:
        name = getattr(result_type, "__name__", repr(result_type))
        raise DeserializationError(f"cannot decode {name}: {e}") from e
