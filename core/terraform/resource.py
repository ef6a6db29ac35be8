"""
core/terraform/resource.py - 임포트 대상 리소스 디스크립터

Terraform으로 가져올(import) 리소스 하나를 표현하는 데이터 클래스.
HCL/State 파일 생성은 이 디스크립터를 받는 쪽의 책임입니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

NAME_ID_PREFIX_LENGTH = 8


@dataclass(frozen=True)
class TerraformResource:
    """임포트 대상 리소스 정보

    Attributes:
        id: 프로바이더가 부여한 리소스 ID (변환 없이 그대로 사용)
        name: Terraform 리소스 이름 (예: myacl_abcd1234)
        resource_type: Terraform 리소스 타입 (예: aws_waf_web_acl)
        provider: 프로바이더 이름 (예: aws)
        allow_empty_values: 빈 값이어도 생략하지 않을 속성 이름 접두사 목록
        additional_fields: 속성에 추가로 기록할 필드
        ignore_keys: 직렬화 시 무시할 속성 키 패턴
    """

    id: str
    name: str
    resource_type: str
    provider: str
    allow_empty_values: tuple[str, ...] = ()
    additional_fields: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)
    ignore_keys: tuple[str, ...] = ()

    @property
    def address(self) -> str:
        """Terraform 리소스 주소 (<type>.<name>)"""
        return f"{self.resource_type}.{self.name}"

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (JSON 출력용)"""
        return {
            "id": self.id,
            "name": self.name,
            "resource_type": self.resource_type,
            "provider": self.provider,
            "allow_empty_values": list(self.allow_empty_values),
            "additional_fields": dict(self.additional_fields),
            "ignore_keys": list(self.ignore_keys),
        }


def build_resource_name(name: str, resource_id: str) -> str:
    """<이름>_<ID 앞 8자> 형식의 리소스 이름 생성

    ID가 8자보다 짧으면 ID 전체를 사용합니다.
    """
    return f"{name}_{resource_id[:NAME_ID_PREFIX_LENGTH]}"


def new_simple_resource(
    resource_id: str,
    name: str,
    resource_type: str,
    provider: str,
    allow_empty_values: list[str] | tuple[str, ...] = (),
) -> TerraformResource:
    """ID/이름/타입만으로 TerraformResource 생성"""
    return TerraformResource(
        id=resource_id,
        name=name,
        resource_type=resource_type,
        provider=provider,
        allow_empty_values=tuple(allow_empty_values),
    )
