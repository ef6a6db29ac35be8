# cli/ui - 콘솔 출력 컴포넌트 (rich)
"""
콘솔 출력 모듈

CLI 전용 출력 헬퍼 (메시지, 리소스 테이블, logger)
"""

from .console import (
    SYMBOL_ERROR,
    SYMBOL_INFO,
    SYMBOL_SUCCESS,
    console,
    error_console,
    get_console,
    get_logger,
    print_error,
    print_info,
    print_resources_table,
    print_success,
)

__all__ = [
    "SYMBOL_ERROR",
    "SYMBOL_INFO",
    "SYMBOL_SUCCESS",
    "console",
    "error_console",
    "get_console",
    "get_logger",
    "print_error",
    "print_info",
    "print_resources_table",
    "print_success",
]
