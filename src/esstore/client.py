"""Elasticsearch 클라이언트 팩토리."""

from __future__ import annotations

import logging
import ssl
from typing import Any

from elasticsearch import Elasticsearch

from .config import ESConfig

logger = logging.getLogger(__name__)


def _tls_version(name: str) -> ssl.TLSVersion:
    try:
        return ssl.TLSVersion[name]
    except KeyError:
        raise ValueError(f"지원하지 않는 TLS 버전입니다: {name}") from None


def create_es_client(cfg: ESConfig | None = None) -> Elasticsearch:
    """Elasticsearch 클라이언트 생성.

    커넥션 풀 크기, 요청 타임아웃, 최소 TLS 버전은 여기서 한 번만 설정합니다.
    DocumentStore는 만들어진 클라이언트를 그대로 공유합니다.

    Args:
        cfg: ES 설정. None이면 환경변수 기반 기본 설정 사용.

    Returns:
        Elasticsearch 클라이언트 인스턴스.

    Raises:
        ValueError: 호스트가 비어 있거나 TLS 버전 이름이 잘못된 경우.
    """
    if cfg is None:
        cfg = ESConfig()

    hosts = cfg.hosts
    if not hosts or not all(hosts):
        raise ValueError("ES_URL 또는 ES_NODES 환경변수를 설정하세요.")

    kwargs: dict[str, Any] = {
        "hosts": hosts,
        "verify_certs": cfg.verify_certs,
        "request_timeout": cfg.request_timeout_s,
        "connections_per_node": cfg.connections_per_node,
    }

    # Basic Auth 사용
    if cfg.es_username and cfg.es_password:
        kwargs["basic_auth"] = (cfg.es_username, cfg.es_password)

    # TLS 옵션은 https 노드에만 적용 가능
    if any(h.startswith("https://") for h in hosts):
        kwargs["ssl_version"] = _tls_version(cfg.ssl_min_version)

    logger.debug("Elasticsearch client: hosts=%s", hosts)
    return Elasticsearch(**kwargs)


def check_connection(es: Elasticsearch) -> bool:
    """ES 연결 상태 확인.

    Returns:
        연결 성공 여부.
    """
    try:
        return bool(es.ping())
    except Exception:
        logger.warning("Elasticsearch ping failed", exc_info=True)
        return False
