"""
core/generators - 서비스별 리소스 생성기 레지스트리

서비스 이름으로 생성기 클래스를 찾습니다.

Example:
    from core.generators import get_generator

    generator = get_generator("waf")(session)
    resources = generator.init_resources()
"""

from __future__ import annotations

from core.exceptions import ConfigError

from .base import BaseGenerator
from .waf import WafGenerator, collect_waf_resources

GENERATORS: dict[str, type[BaseGenerator]] = {
    "waf": WafGenerator,
}


def list_services() -> list[str]:
    """등록된 서비스 이름 목록 (정렬)"""
    return sorted(GENERATORS)


def get_generator(service: str) -> type[BaseGenerator]:
    """서비스 이름에 해당하는 생성기 클래스 반환

    Raises:
        ConfigError: 등록되지 않은 서비스
    """
    try:
        return GENERATORS[service]
    except KeyError as e:
        raise ConfigError("service", f"지원하지 않는 서비스: {service} (가능: {', '.join(list_services())})") from e


__all__ = [
    "GENERATORS",
    "BaseGenerator",
    "WafGenerator",
    "collect_waf_resources",
    "get_generator",
    "list_services",
]
