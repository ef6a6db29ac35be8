"""
core/generators/waf.py - WAF (Classic) 리소스 수집

WAF Classic의 12종 리소스를 list API로 조회해 TerraformResource로 변환합니다.

수집 순서:
    Web ACL → Byte Match Set → Geo Match Set → IP Set → Rate-based Rule →
    Regex Match Set → Regex Pattern Set → Rule → Rule Group →
    Size Constraint Set → SQL Injection Match Set → XSS Match Set

각 리스터는 필터/페이지네이션 인자 없이 한 번만 호출하며, 호출이 실패하면
재시도 없이 즉시 APICallError로 실패합니다. 전체 수집은 첫 실패에서 중단되고
부분 결과를 반환하지 않습니다.

Example:
    >>> from core.generators.waf import collect_waf_resources
    >>> waf = get_client(session, "waf", region_name="us-east-1")
    >>> resources = collect_waf_resources(waf)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from core.exceptions import APICallError
from core.terraform import TerraformResource, build_resource_name, new_simple_resource

from .base import BaseGenerator

logger = logging.getLogger(__name__)

SERVICE_NAME = "waf"
PROVIDER = "aws"

# 태그는 비어 있어도 출력에서 생략하지 않음
WAF_ALLOW_EMPTY_VALUES = ("tags.",)


@dataclass(frozen=True)
class ListerSpec:
    """list API 하나를 리소스 타입 하나에 매핑

    Attributes:
        operation: boto3 client 메서드 이름 (예: list_web_acls)
        response_key: 응답에서 요약 목록이 담긴 키 (예: WebACLs)
        id_field: 요약 항목의 ID 필드 (예: WebACLId)
        resource_type: Terraform 리소스 타입 (예: aws_waf_web_acl)
        name_field: 요약 항목의 이름 필드
    """

    operation: str
    response_key: str
    id_field: str
    resource_type: str
    name_field: str = "Name"


WEB_ACL = ListerSpec("list_web_acls", "WebACLs", "WebACLId", "aws_waf_web_acl")
BYTE_MATCH_SET = ListerSpec("list_byte_match_sets", "ByteMatchSets", "ByteMatchSetId", "aws_waf_byte_match_set")
GEO_MATCH_SET = ListerSpec("list_geo_match_sets", "GeoMatchSets", "GeoMatchSetId", "aws_waf_geo_match_set")
IP_SET = ListerSpec("list_ip_sets", "IPSets", "IPSetId", "aws_waf_ipset")
RATE_BASED_RULE = ListerSpec("list_rate_based_rules", "Rules", "RuleId", "aws_waf_rate_based_rule")
REGEX_MATCH_SET = ListerSpec("list_regex_match_sets", "RegexMatchSets", "RegexMatchSetId", "aws_waf_regex_match_set")
REGEX_PATTERN_SET = ListerSpec(
    "list_regex_pattern_sets", "RegexPatternSets", "RegexPatternSetId", "aws_waf_regex_pattern_set"
)
RULE = ListerSpec("list_rules", "Rules", "RuleId", "aws_waf_rule")
RULE_GROUP = ListerSpec("list_rule_groups", "RuleGroups", "RuleGroupId", "aws_waf_rule_group")
SIZE_CONSTRAINT_SET = ListerSpec(
    "list_size_constraint_sets", "SizeConstraintSets", "SizeConstraintSetId", "aws_waf_size_constraint_set"
)
SQL_INJECTION_MATCH_SET = ListerSpec(
    "list_sql_injection_match_sets",
    "SqlInjectionMatchSets",
    "SqlInjectionMatchSetId",
    "aws_waf_sql_injection_match_set",
)
XSS_MATCH_SET = ListerSpec("list_xss_match_sets", "XssMatchSets", "XssMatchSetId", "aws_waf_xss_match_set")

# 수집 순서 (출력 순서를 고정)
WAF_LISTERS: tuple[ListerSpec, ...] = (
    WEB_ACL,
    BYTE_MATCH_SET,
    GEO_MATCH_SET,
    IP_SET,
    RATE_BASED_RULE,
    REGEX_MATCH_SET,
    REGEX_PATTERN_SET,
    RULE,
    RULE_GROUP,
    SIZE_CONSTRAINT_SET,
    SQL_INJECTION_MATCH_SET,
    XSS_MATCH_SET,
)


def list_resources(client: Any, spec: ListerSpec) -> list[TerraformResource]:
    """list API 한 번을 호출해 TerraformResource 목록으로 변환합니다.

    Args:
        client: boto3 waf client
        spec: 호출할 API와 리소스 타입 매핑

    Returns:
        응답 항목 순서대로의 TerraformResource 목록

    Raises:
        APICallError: API 호출 실패 시 (원인 예외 체이닝)
        KeyError: 응답 항목에 ID/이름 필드가 없는 경우
    """
    try:
        response = getattr(client, spec.operation)()
    except (ClientError, BotoCoreError) as e:
        raise APICallError.from_client_error(SERVICE_NAME, spec.operation, e) from e

    resources = []
    for item in response.get(spec.response_key, []):
        resource_id = item[spec.id_field]
        resources.append(
            new_simple_resource(
                resource_id,
                build_resource_name(item[spec.name_field], resource_id),
                spec.resource_type,
                PROVIDER,
                WAF_ALLOW_EMPTY_VALUES,
            )
        )

    logger.debug("%s.%s: %d개", SERVICE_NAME, spec.operation, len(resources))
    return resources


def load_web_acls(client: Any) -> list[TerraformResource]:
    return list_resources(client, WEB_ACL)


def load_byte_match_sets(client: Any) -> list[TerraformResource]:
    return list_resources(client, BYTE_MATCH_SET)


def load_geo_match_sets(client: Any) -> list[TerraformResource]:
    return list_resources(client, GEO_MATCH_SET)


def load_ip_sets(client: Any) -> list[TerraformResource]:
    return list_resources(client, IP_SET)


def load_rate_based_rules(client: Any) -> list[TerraformResource]:
    return list_resources(client, RATE_BASED_RULE)


def load_regex_match_sets(client: Any) -> list[TerraformResource]:
    return list_resources(client, REGEX_MATCH_SET)


def load_regex_pattern_sets(client: Any) -> list[TerraformResource]:
    return list_resources(client, REGEX_PATTERN_SET)


def load_rules(client: Any) -> list[TerraformResource]:
    return list_resources(client, RULE)


def load_rule_groups(client: Any) -> list[TerraformResource]:
    return list_resources(client, RULE_GROUP)


def load_size_constraint_sets(client: Any) -> list[TerraformResource]:
    return list_resources(client, SIZE_CONSTRAINT_SET)


def load_sql_injection_match_sets(client: Any) -> list[TerraformResource]:
    return list_resources(client, SQL_INJECTION_MATCH_SET)


def load_xss_match_sets(client: Any) -> list[TerraformResource]:
    return list_resources(client, XSS_MATCH_SET)


def collect_waf_resources(client: Any) -> list[TerraformResource]:
    """WAF Classic 리소스 12종을 고정 순서로 수집합니다.

    첫 번째 실패에서 중단하며 이후 리스터는 실행하지 않습니다.

    Args:
        client: boto3 waf client

    Returns:
        수집 순서대로 이어 붙인 TerraformResource 목록

    Raises:
        APICallError: list API 호출이 하나라도 실패한 경우
    """
    resources: list[TerraformResource] = []
    for spec in WAF_LISTERS:
        resources.extend(list_resources(client, spec))

    logger.info("WAF 리소스 %d개 수집 완료", len(resources))
    return resources


class WafGenerator(BaseGenerator):
    """WAF (Classic) 리소스 생성기"""

    service = SERVICE_NAME

    def collect(self, client: Any) -> list[TerraformResource]:
        return collect_waf_resources(client)
