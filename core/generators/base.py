"""
core/generators/base.py - 리소스 생성기 베이스

서비스별 생성기는 ``init_resources()``에서 AWS 리소스를 조회해
``TerraformResource`` 목록을 만들고, ``get_resources()``로 돌려줍니다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from core.aws.client import get_client
from core.config import settings

if TYPE_CHECKING:
    import boto3

    from core.terraform import TerraformResource


class BaseGenerator(ABC):
    """AWS 서비스 리소스 생성기 베이스

    Attributes:
        service: boto3 서비스 이름
        session: boto3 Session
        region: 조회 리전
        resources: 마지막으로 성공한 조회 결과
    """

    service: str = ""

    def __init__(self, session: boto3.Session, region: str | None = None):
        self.session = session
        self.region = region or session.region_name or settings.DEFAULT_REGION
        self.resources: list[TerraformResource] = []

    def create_client(self, **kwargs: Any) -> Any:
        """서비스 client 생성"""
        return get_client(self.session, self.service, region_name=self.region, **kwargs)

    @abstractmethod
    def collect(self, client: Any) -> list[TerraformResource]:
        """client로 리소스를 조회해 목록 반환"""

    def init_resources(self) -> list[TerraformResource]:
        """리소스를 조회해 ``resources``에 저장

        조회가 실패하면 ``resources``는 비운 채로 예외를 다시 발생시킵니다.
        """
        self.resources = []
        client = self.create_client()
        resources = self.collect(client)
        self.resources = resources
        return resources

    def get_resources(self) -> list[TerraformResource]:
        return list(self.resources)
