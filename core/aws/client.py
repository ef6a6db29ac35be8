"""
core/aws/client.py - boto3 client 생성 헬퍼

Retry + 타임아웃 + 연결 풀이 설정된 boto3 client를 생성합니다.
리소스 리스터 자체는 재시도하지 않으며, 전송 계층의 재시도/타임아웃은
여기서 만든 client 설정을 따릅니다.

Example:
    from core.aws.client import get_client

    # 기본 설정 (standard retry, max 5회)
    waf = get_client(session, "waf", region_name="us-east-1")

    # 커스텀 설정
    waf = get_client(session, "waf", max_attempts=1, connect_timeout=5)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal, cast

from botocore.config import Config

from core.config import settings

if TYPE_CHECKING:
    import boto3

# Retry mode 타입 (botocore TypedDict와 호환)
RetryMode = Literal["legacy", "standard", "adaptive"]

DEFAULT_MAX_ATTEMPTS = settings.API_MAX_ATTEMPTS
DEFAULT_RETRY_MODE: RetryMode = "standard"
DEFAULT_CONNECT_TIMEOUT = settings.API_CONNECT_TIMEOUT  # 초
DEFAULT_READ_TIMEOUT = settings.API_READ_TIMEOUT  # 초
DEFAULT_MAX_POOL_CONNECTIONS = 10  # 순차 실행이므로 작게 유지


def build_config(
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    retry_mode: RetryMode = DEFAULT_RETRY_MODE,
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: int = DEFAULT_READ_TIMEOUT,
    max_pool_connections: int = DEFAULT_MAX_POOL_CONNECTIONS,
) -> Config:
    """botocore Config 생성"""
    return Config(
        retries={"max_attempts": max_attempts, "mode": retry_mode},  # pyright: ignore[reportArgumentType]
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
        max_pool_connections=max_pool_connections,
    )


def get_client(
    session: boto3.Session,
    service_name: str,
    region_name: str | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    retry_mode: RetryMode = DEFAULT_RETRY_MODE,
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: int = DEFAULT_READ_TIMEOUT,
    max_pool_connections: int = DEFAULT_MAX_POOL_CONNECTIONS,
    **kwargs: Any,
) -> Any:
    """설정이 적용된 boto3 client 생성

    Args:
        session: boto3 Session
        service_name: AWS 서비스 이름 (waf, sts 등)
        region_name: 리전 (None이면 세션 기본값)
        max_attempts: 최대 시도 횟수 (기본: 5)
        retry_mode: 재시도 모드 ('standard', 'adaptive', 'legacy')
        connect_timeout: 연결 타임아웃 (초)
        read_timeout: 읽기 타임아웃 (초)
        max_pool_connections: HTTP 연결 풀 크기
        **kwargs: session.client()에 전달할 추가 인자

    Returns:
        boto3 client
    """
    config = build_config(
        max_attempts=max_attempts,
        retry_mode=retry_mode,
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
        max_pool_connections=max_pool_connections,
    )

    # 기존 config가 있으면 병합 (호출자 값 우선)
    if "config" in kwargs:
        existing = kwargs.pop("config")
        config = config.merge(existing)

    # cast to Any to bypass boto3-stubs Literal type requirements
    return session.client(  # pyright: ignore[reportCallIssue]
        cast(Any, service_name),
        region_name=region_name,
        config=config,
        **kwargs,
    )
