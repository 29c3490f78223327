"""
core/exceptions.py - 통합 예외 계층 구조

XCF 내부에서 직접 발생시키는 예외 클래스들을 정의합니다.
openpyxl이 발생시키는 예외(잘못된 범위, 아이콘 세트 이름, 색상 등)는
감싸지 않고 그대로 전파합니다.

예외 계층 구조:
    XCFError (베이스)
    ├── ParameterConflictError (상호 배타 파라미터 충돌)
    ├── AddressError (워크시트/범위 도출 실패)
    └── ConfigError (설정 관련)

Usage:
    from core.exceptions import ParameterConflictError

    try:
        add_conditional_formatting("A1:A10", ws, rule_type="GreaterThan", data_bar_color="Blue")
    except ParameterConflictError as e:
        print(e.parameters)
"""

from typing import Any, Dict, List, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class XCFError(Exception):
    """XCF 기본 예외 클래스

    모든 커스텀 예외의 베이스 클래스입니다.

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# 파라미터 관련 예외
# =============================================================================


class ParameterConflictError(XCFError):
    """상호 배타적인 파라미터가 함께 지정되었거나 하나도 지정되지 않음"""

    def __init__(self, parameters: List[str], reason: str):
        if parameters:
            message = f"파라미터 충돌 [{', '.join(parameters)}]: {reason}"
        else:
            message = f"파라미터 누락: {reason}"
        super().__init__(message)
        self.parameters = parameters
        self.reason = reason
        self.details["parameters"] = parameters


class AddressError(XCFError):
    """주소에서 워크시트 또는 범위를 도출할 수 없음"""

    def __init__(self, address: Any, reason: str):
        super().__init__(f"주소 해석 실패 [{address!r}]: {reason}")
        self.address = address
        self.reason = reason
        self.details["address"] = repr(address)


# =============================================================================
# 설정 관련 예외
# =============================================================================


class ConfigError(XCFError):
    """설정 관련 예외"""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause)
        self.config_key = config_key
        if config_key:
            self.details["config_key"] = config_key
