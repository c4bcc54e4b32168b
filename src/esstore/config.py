"""Elasticsearch 설정 관리.

환경변수(.env 포함)로 연결 및 인덱스 설정을 관리합니다.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _env_list(name: str) -> list[str] | None:
    """콤마로 구분된 환경변수를 리스트로 변환. 비어 있으면 None."""
    raw = os.getenv(name, "")
    items = [s.strip() for s in raw.split(",") if s.strip()]
    return items or None


@dataclass(frozen=True)
class ESConfig:
    """Elasticsearch 연결 설정.

    Attributes:
        es_url: 단일 노드 URL (예: http://127.0.0.1:9200)
        es_nodes: 클러스터 노드 목록 (설정 시 es_url 무시)
        es_username: HTTP Basic Auth 사용자명 (선택)
        es_password: HTTP Basic Auth 비밀번호 (선택)
        verify_certs: SSL 인증서 검증 여부
        request_timeout_s: 요청 타임아웃 (초)
        connections_per_node: 노드당 커넥션 풀 크기
        ssl_min_version: 최소 TLS 버전 (ssl.TLSVersion 이름, 기본 TLSv1_2)
    """

    # Connection
    es_url: str = field(default_factory=lambda: os.getenv("ES_URL", "http://127.0.0.1:9200"))
    es_nodes: list[str] | None = field(default_factory=lambda: _env_list("ES_NODES"))
    es_username: str | None = field(default_factory=lambda: os.getenv("ES_USERNAME"))
    es_password: str | None = field(default_factory=lambda: os.getenv("ES_PASSWORD"))

    verify_certs: bool = field(
        default_factory=lambda: os.getenv("ES_VERIFY_CERTS", "true").lower() == "true"
    )
    request_timeout_s: float = field(
        default_factory=lambda: float(os.getenv("ES_REQUEST_TIMEOUT_S", "1"))
    )

    # Transport pool / TLS
    connections_per_node: int = field(
        default_factory=lambda: int(os.getenv("ES_CONNECTIONS_PER_NODE", "10"))
    )
    ssl_min_version: str = field(
        default_factory=lambda: os.getenv("ES_SSL_MIN_VERSION", "TLSv1_2")
    )

    @property
    def hosts(self) -> list[str]:
        """클라이언트에 넘길 호스트 목록."""
        return list(self.es_nodes) if self.es_nodes else [self.es_url]
