"""
core/aws - boto3 Session/Client 헬퍼

주요 구성 요소:
- get_client: 타임아웃/전송 재시도가 설정된 boto3 client 생성
- create_session: 프로파일/리전 기반 Session 생성
- get_account_id: STS로 호출자 계정 ID 조회
"""

from .client import build_config, get_client
from .session import create_session, get_account_id

__all__: list[str] = [
    "build_config",
    "get_client",
    "create_session",
    "get_account_id",
]
