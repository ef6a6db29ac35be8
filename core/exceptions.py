"""
core/exceptions.py - 통합 예외 계층 구조

임포터 전체에서 사용되는 예외 클래스들을 정의합니다.
일관된 예외 처리와 에러 메시지를 제공합니다.

예외 계층 구조:
    ImporterError (베이스)
    ├── APICallError (AWS list API 호출 실패)
    └── ConfigError (설정 관련)

Usage:
    from core.exceptions import APICallError

    try:
        response = waf.list_web_acls()
    except ClientError as e:
        raise APICallError.from_client_error("waf", "list_web_acls", e) from e
"""

from typing import Any, Dict, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class ImporterError(Exception):
    """임포터 기본 예외 클래스

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
# AWS API 호출 관련 예외
# =============================================================================


class APICallError(ImporterError):
    """AWS API 호출 관련 예외

    boto3/botocore의 ClientError를 래핑하여 일관된 예외 처리를 제공합니다.
    list 호출이 실패하면 리스터는 이 예외 하나로만 실패합니다.
    """

    def __init__(
        self,
        service: str,
        operation: str,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        message = f"{service}.{operation}"
        if error_code:
            message = f"{message} 실패 ({error_code})"
        else:
            message = f"{message} 실패"
        if error_message:
            message = f"{message}: {error_message}"

        super().__init__(message, cause)
        self.service = service
        self.operation = operation
        self.error_code = error_code
        self.error_message = error_message
        self.details.update(
            {
                "service": service,
                "operation": operation,
                "error_code": error_code,
            }
        )

    def __str__(self) -> str:
        # error_message가 이미 원인 메시지를 담고 있으면 cause를 덧붙이지 않음
        if self.error_message or not self.cause:
            return self.message
        return f"{self.message}: {self.cause}"

    @classmethod
    def from_client_error(
        cls,
        service: str,
        operation: str,
        client_error: Exception,
    ) -> "APICallError":
        """botocore 예외로부터 생성

        ClientError는 응답의 에러 코드/메시지를 파싱하고,
        BotoCoreError(연결 실패 등)는 코드 없이 원인만 보존합니다.

        Args:
            service: AWS 서비스 이름
            operation: API 작업 이름
            client_error: botocore 예외

        Returns:
            APICallError 인스턴스
        """
        error_code = None
        error_message = None

        # ClientError 형식 파싱
        if hasattr(client_error, "response"):
            error_info = client_error.response.get("Error", {})
            error_code = error_info.get("Code")
            error_message = error_info.get("Message")

        return cls(
            service=service,
            operation=operation,
            error_code=error_code,
            error_message=error_message,
            cause=client_error,
        )


# =============================================================================
# 설정 관련 예외
# =============================================================================


class ConfigError(ImporterError):
    """설정 관련 예외"""

    def __init__(
        self,
        key: str,
        message: str,
        cause: Optional[Exception] = None,
    ):
        full_message = f"설정 오류 [{key}]: {message}"
        super().__init__(full_message, cause)
        self.config_key = key
        self.details["config_key"] = key


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================

ACCESS_DENIED_CODES = frozenset(
    {
        "AccessDenied",
        "AccessDeniedException",
        "UnauthorizedAccess",
    }
)

THROTTLING_CODES = frozenset(
    {
        "Throttling",
        "ThrottlingException",
        "RequestLimitExceeded",
        "TooManyRequestsException",
        "RateExceeded",
    }
)


def _error_code(error: Exception) -> Optional[str]:
    if isinstance(error, APICallError):
        return error.error_code

    # botocore ClientError 직접 확인
    if hasattr(error, "response"):
        return error.response.get("Error", {}).get("Code", "")

    return None


def is_access_denied(error: Exception) -> bool:
    """액세스 거부 오류인지 확인

    Args:
        error: 확인할 예외

    Returns:
        액세스 거부 오류이면 True
    """
    return _error_code(error) in ACCESS_DENIED_CODES


def is_throttling(error: Exception) -> bool:
    """스로틀링 오류인지 확인

    Args:
        error: 확인할 예외

    Returns:
        스로틀링 오류이면 True
    """
    return _error_code(error) in THROTTLING_CODES


# 사용자 친화적 메시지 매핑
FRIENDLY_MESSAGES = {
    "AccessDenied": "권한이 없습니다. IAM 정책을 확인하세요.",
    "AccessDeniedException": "권한이 없습니다. IAM 정책을 확인하세요.",
    "ExpiredToken": "인증 토큰이 만료되었습니다. 다시 로그인하세요.",
    "InvalidClientTokenId": "잘못된 자격 증명입니다.",
    "UnrecognizedClientException": "잘못된 자격 증명입니다.",
    "Throttling": "요청이 너무 많습니다. 잠시 후 다시 시도하세요.",
    "ThrottlingException": "요청이 너무 많습니다. 잠시 후 다시 시도하세요.",
}


def format_error_for_user(error: Exception) -> str:
    """사용자에게 표시할 에러 메시지 포맷팅

    Args:
        error: 예외

    Returns:
        사용자 친화적인 에러 메시지
    """
    if isinstance(error, APICallError) and error.error_code in FRIENDLY_MESSAGES:
        return f"{error.service}.{error.operation}: {FRIENDLY_MESSAGES[error.error_code]}"

    if isinstance(error, ImporterError):
        # 커스텀 예외는 이미 포맷팅됨
        return str(error)

    # boto3 ClientError
    if hasattr(error, "response"):
        error_info = error.response.get("Error", {})
        code = error_info.get("Code", "UnknownError")
        message = error_info.get("Message", str(error))
        return FRIENDLY_MESSAGES.get(code, f"{code}: {message}")

    return str(error)
