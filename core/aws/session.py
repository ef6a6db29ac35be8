"""
core/aws/session.py - boto3 Session 생성

프로파일/리전으로 boto3 Session을 만들고 호출자 계정을 확인합니다.
"""

from __future__ import annotations

import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError, ProfileNotFound

from core.exceptions import APICallError, ConfigError

from .client import get_client

logger = logging.getLogger(__name__)


def create_session(profile: str | None = None, region: str | None = None) -> boto3.Session:
    """boto3 Session 생성

    Args:
        profile: AWS 프로파일 이름 (None이면 기본 자격 증명 체인)
        region: 기본 리전

    Returns:
        boto3 Session

    Raises:
        ConfigError: 프로파일이 존재하지 않는 경우
    """
    try:
        session = boto3.Session(profile_name=profile, region_name=region)
    except ProfileNotFound as e:
        raise ConfigError("profile", f"프로파일을 찾을 수 없습니다: {profile}", cause=e) from e

    logger.debug("Session created: profile=%s region=%s", profile or "(default)", session.region_name)
    return session


def get_account_id(session: boto3.Session, region: str | None = None) -> str:
    """STS get_caller_identity로 계정 ID 조회

    Raises:
        APICallError: STS 호출 실패 시
    """
    sts = get_client(session, "sts", region_name=region or session.region_name)
    try:
        identity = sts.get_caller_identity()
    except (ClientError, BotoCoreError) as e:
        raise APICallError.from_client_error("sts", "get_caller_identity", e) from e
    return identity["Account"]
