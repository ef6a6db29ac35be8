"""
tests/conftest.py - pytest 공통 픽스처

AWS API 모킹과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(mock_boto3_session, waf_client):
        # mock_boto3_session: boto3.Session 모킹
        # waf_client: 12종 list API 응답이 설정된 WAF client 모킹
        pass
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict
from unittest.mock import MagicMock, patch

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """테스트 환경 설정 (실제 계정 접근 방지)"""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.delenv("AWS_PROFILE", raising=False)
    monkeypatch.delenv("AWS_REGION", raising=False)
    monkeypatch.delenv("TFI_VERBOSE", raising=False)
    # 로컬 ~/.aws 설정이 섞이지 않도록
    monkeypatch.setenv("AWS_CONFIG_FILE", os.devnull)
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", os.devnull)


# =============================================================================
# AWS 모킹 픽스처
# =============================================================================


@pytest.fixture
def mock_boto3_session():
    """boto3.Session 모킹"""
    with patch("boto3.Session") as mock_session_class:
        mock_session = MagicMock()
        mock_session_class.return_value = mock_session

        mock_session.client.return_value = MagicMock()
        mock_session.region_name = "us-east-1"

        yield mock_session


# 수집 순서대로의 list API 기본 응답
WAF_LIST_RESPONSES: Dict[str, Dict[str, Any]] = {
    "list_web_acls": {"WebACLs": [{"WebACLId": "abcd1234ef", "Name": "myacl"}]},
    "list_byte_match_sets": {
        "ByteMatchSets": [
            {"ByteMatchSetId": "11111111-aaaa-bbbb-cccc-000000000001", "Name": "bad-bots"},
            {"ByteMatchSetId": "11111111-aaaa-bbbb-cccc-000000000002", "Name": "admin-path"},
        ]
    },
    "list_geo_match_sets": {"GeoMatchSets": [{"GeoMatchSetId": "22222222-0000", "Name": "blocked-countries"}]},
    "list_ip_sets": {"IPSets": [{"IPSetId": "33333333-0000", "Name": "office"}]},
    "list_rate_based_rules": {"Rules": [{"RuleId": "44444444-0000", "Name": "ratelimit"}]},
    "list_regex_match_sets": {"RegexMatchSets": []},
    "list_regex_pattern_sets": {"RegexPatternSets": [{"RegexPatternSetId": "55555555-0000", "Name": "ua"}]},
    "list_rules": {"Rules": [{"RuleId": "66666666-0000", "Name": "block-ip"}]},
    "list_rule_groups": {"RuleGroups": [{"RuleGroupId": "77777777-0000", "Name": "common"}]},
    "list_size_constraint_sets": {"SizeConstraintSets": [{"SizeConstraintSetId": "88888888-0000", "Name": "body"}]},
    "list_sql_injection_match_sets": {
        "SqlInjectionMatchSets": [{"SqlInjectionMatchSetId": "99999999-0000", "Name": "sqli"}]
    },
    "list_xss_match_sets": {"XssMatchSets": [{"XssMatchSetId": "aaaaaaaa-0000", "Name": "xss"}]},
}


@pytest.fixture
def waf_client():
    """12종 list API 응답이 설정된 WAF client 모킹"""
    client = MagicMock()
    for operation, response in WAF_LIST_RESPONSES.items():
        getattr(client, operation).return_value = response
    return client


@pytest.fixture
def moto_session():
    """moto를 사용한 boto3 Session"""
    with mock_aws():
        yield boto3.Session(region_name="us-east-1")


# =============================================================================
# 유틸리티 함수
# =============================================================================


def create_mock_client_error(
    error_code: str,
    error_message: str = "Test error",
    operation_name: str = "TestOperation",
) -> ClientError:
    """ClientError 생성 헬퍼"""
    return ClientError(
        {
            "Error": {
                "Code": error_code,
                "Message": error_message,
            }
        },
        operation_name,
    )


@pytest.fixture
def client_error():
    """ClientError 생성 함수 픽스처"""
    return create_mock_client_error
