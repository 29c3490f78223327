# cli/ui - 콘솔 출력 컴포넌트 (rich)
"""
콘솔 출력 모듈

CLI 전용 UI 컴포넌트들 (콘솔 출력, 테이블 등)
"""

from .console import (
    SYMBOL_ERROR,
    SYMBOL_SUCCESS,
    console,
    get_console,
    get_logger,
    print_error,
    print_success,
    print_table,
)

__all__ = [
    "SYMBOL_ERROR",
    "SYMBOL_SUCCESS",
    "console",
    "get_console",
    "get_logger",
    "print_error",
    "print_success",
    "print_table",
]
