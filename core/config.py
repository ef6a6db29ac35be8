"""
core/config.py - 전역 설정

버전 정보, 기본 리전/프로파일, 실행 설정을 제공합니다.

환경 변수:
    AWS_PROFILE: 기본 AWS 프로파일
    AWS_REGION / AWS_DEFAULT_REGION: 기본 리전 (기본: us-east-1)
    TFI_VERBOSE: 상세 로그 출력 여부 (1/true/yes)

Usage:
    from core.config import ImporterConfig, get_version

    config = ImporterConfig.from_env()
    print(get_version(), config.region)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from core.exceptions import ConfigError


@dataclass(frozen=True)
class Settings:
    """불변 전역 설정값"""

    # WAF Classic은 글로벌 서비스이며 us-east-1 엔드포인트를 사용
    DEFAULT_REGION: str = "us-east-1"
    PROVIDER: str = "aws"
    API_CONNECT_TIMEOUT: int = 10
    API_READ_TIMEOUT: int = 30
    API_MAX_ATTEMPTS: int = 5


settings = Settings()

OUTPUT_FORMATS = ("console", "json")

_TRUE_VALUES = {"1", "true", "yes", "on"}


def get_project_root() -> Path:
    """프로젝트 루트 경로 반환"""
    return Path(__file__).resolve().parent.parent


def get_version() -> str:
    """version.txt 파일에서 버전 문자열을 읽어옵니다.

    파일이 없으면 "0.0.0"을 반환합니다.
    """
    version_file = get_project_root() / "version.txt"
    if not version_file.exists():
        return "0.0.0"
    return version_file.read_text(encoding="utf-8").strip() or "0.0.0"


def get_env_bool(name: str, default: bool = False) -> bool:
    """환경 변수를 bool로 해석"""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


def get_default_profile() -> str | None:
    """환경 변수의 기본 프로파일 (없으면 None)"""
    return os.environ.get("AWS_PROFILE") or None


def get_default_region() -> str:
    """환경 변수의 기본 리전 (없으면 Settings.DEFAULT_REGION)"""
    return os.environ.get("AWS_REGION") or os.environ.get("AWS_DEFAULT_REGION") or settings.DEFAULT_REGION


@dataclass(frozen=True)
class ImporterConfig:
    """임포터 실행 설정

    Attributes:
        profile: AWS 프로파일 (None이면 기본 자격 증명 체인)
        region: AWS 리전
        format: 출력 형식 (console, json)
        output: 출력 파일 경로 (None이면 표준 출력)
        verbose: 상세 로그 출력 여부
    """

    profile: str | None = None
    region: str = settings.DEFAULT_REGION
    format: str = "console"
    output: str | None = None
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.format not in OUTPUT_FORMATS:
            raise ConfigError("format", f"지원하지 않는 출력 형식: {self.format} (가능: {', '.join(OUTPUT_FORMATS)})")
        if not self.region:
            raise ConfigError("region", "리전이 비어 있습니다")

    @classmethod
    def from_env(cls) -> ImporterConfig:
        """환경 변수로부터 설정 생성"""
        return cls(
            profile=get_default_profile(),
            region=get_default_region(),
            verbose=get_env_bool("TFI_VERBOSE"),
        )

    def merge(self, **overrides) -> ImporterConfig:
        """None이 아닌 값만 덮어쓴 새 설정 반환"""
        values = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **values)
