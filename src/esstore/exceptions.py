"""Errors raised by DocumentStore operations."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any


def _status_text(status: int) -> str:
    try:
        return f"{status} {HTTPStatus(status).phrase}"
    except ValueError:
        return str(status)


class DocumentStoreError(Exception):
    """Base exception for document store errors"""


class TransportError(DocumentStoreError):
    """Raised when the request never got a response (connection, timeout, TLS)"""


class SerializationError(DocumentStoreError):
    """Raised when a document or query cannot be encoded to JSON"""


class DeserializationError(DocumentStoreError):
    """Raised when a response body cannot be decoded into the requested type"""


class ServerError(DocumentStoreError):
    """Non-2xx response from Elasticsearch.

    The message follows the ``[<status> <phrase>] <type>: <reason>`` layout
    of the server's error envelope. When the body carries no error envelope
    only the status part is rendered.
    """

    def __init__(self, status: int, error_type: str | None = None, reason: str | None = None):
        self.status = status
        self.error_type = error_type
        self.reason = reason
        message = f"[{_status_text(status)}]"
        if error_type and reason:
            message += f" {error_type}: {reason}"
        elif error_type or reason:
            message += f" {error_type or reason}"
        super().__init__(message)

    @classmethod
    def from_body(cls, status: int, body: Any, fallback: str | None = None) -> ServerError:
        """Build from an Elasticsearch response body (``{"error": {"type", "reason"}}``).

        ``fallback`` is only used for a non-empty body. HEAD responses have no
        body and the client then reports its message as the string ``"None"``.
        """
        error_type, reason = parse_error_body(body)
        if error_type is None and reason is None and body and fallback and fallback != "None":
            error_type = fallback
        return cls(status, error_type, reason)


class IndexOperationError(ServerError):
    """Raised when index creation or deletion is rejected"""


class DocumentWriteError(ServerError):
    """Raised when create/update/upsert is rejected"""


class DocumentConflictError(DocumentWriteError):
    """Raised when a create hits an existing id or a version conflict (409)"""


class QueryError(ServerError):
    """Raised when a search request is rejected"""


class UnexpectedStatusError(ServerError):
    """Raised when exists/delete gets a status other than 200 or 404"""


class DocumentNotFoundError(ServerError):
    """Raised when find_one gets a 404"""

    def __init__(self, index: str, doc_id: str):
        self.index = index
        self.doc_id = doc_id
        super().__init__(404, "not_found", f"document '{doc_id}' not found in '{index}'")


def parse_error_body(body: Any) -> tuple[str | None, str | None]:
    """Extract ``(type, reason)`` from an Elasticsearch error body.

    Handles the regular envelope, the bare-string form (``{"error": "..."}``)
    and bodies that are not JSON objects at all.
    """
    if not isinstance(body, dict):
        return None, (str(body) if body else None)

    error = body.get("error")
    if isinstance(error, dict):
        return error.get("type"), error.get("reason")
    if isinstance(error, str):
        return None, error
    return None, None
