"""
cli/ui/console.py - Rich 콘솔 유틸리티

일관된 콘솔 출력과 logger 설정을 위한 함수들
"""

import logging
import platform

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from core.terraform import TerraformResource

# botocore 노이즈 로그 제한
logging.getLogger("botocore.httpchecksum").setLevel(logging.WARNING)
logging.getLogger("botocore.credentials").setLevel(logging.WARNING)
logging.getLogger("botocore.loaders").setLevel(logging.WARNING)
logging.getLogger("botocore.session").setLevel(logging.WARNING)


def get_console(stderr: bool = False) -> Console:
    """Rich Console 인스턴스를 생성하고 반환합니다."""
    is_windows = platform.system().lower() == "windows"

    return Console(
        stderr=stderr,
        color_system="auto",
        highlight=False,
        soft_wrap=True,
        markup=True,
        emoji=not is_windows,
    )


# 전역 콘솔 인스턴스
console = get_console()
error_console = get_console(stderr=True)


def get_logger(name: str = "core", level: int = logging.INFO) -> logging.Logger:
    """Rich 핸들러가 설정된 logger를 반환합니다.

    Args:
        name: logger 이름 (기본값: "core")
        level: 로그 레벨

    Returns:
        logging.Logger: 설정된 logger 인스턴스
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # 이미 핸들러가 설정되어 있으면 반환
    if logger.handlers:
        return logger

    handler = RichHandler(console=error_console, rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.propagate = False

    return logger


# =============================================================================
# 표준 출력 스타일
# =============================================================================

SYMBOL_SUCCESS = "✓"
SYMBOL_ERROR = "✗"
SYMBOL_INFO = "•"


def print_success(message: str) -> None:
    """성공 메시지 출력 (초록색 체크마크)"""
    console.print(f"[green]{SYMBOL_SUCCESS} {escape(message)}[/green]")


def print_error(message: str) -> None:
    """에러 메시지 출력 (빨간색 X, stderr)"""
    error_console.print(f"[red]{SYMBOL_ERROR} {escape(message)}[/red]")


def print_info(message: str) -> None:
    """정보 메시지 출력 (파란색 정보)"""
    console.print(f"[blue]{SYMBOL_INFO} {escape(message)}[/blue]")


def print_resources_table(resources: list[TerraformResource], title: str | None = None) -> None:
    """리소스 목록을 테이블로 출력합니다.

    Args:
        resources: 출력할 TerraformResource 목록 (순서 유지)
        title: 테이블 제목 (선택)
    """
    table = Table(title=escape(title) if title else None, show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Type", style="cyan")
    table.add_column("Name")
    table.add_column("ID", style="dim")

    # 이름/ID는 AWS가 반환한 임의 문자열이므로 markup으로 해석하지 않음
    for idx, resource in enumerate(resources, 1):
        table.add_row(str(idx), resource.resource_type, escape(resource.name), escape(resource.id))

    console.print(table)
