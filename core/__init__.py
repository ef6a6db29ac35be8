# core/__init__.py
"""
core - AWS 리소스 → Terraform 임포트 대상 변환 인프라

아키텍처:
    core/
    ├── aws/            # boto3 Session/Client 헬퍼
    ├── generators/     # 서비스별 리소스 생성기 (waf)
    ├── terraform/      # 임포트 대상 리소스 모델
    ├── config.py       # 중앙 설정 관리
    └── exceptions.py   # 통합 예외 계층

Usage:
    from core.aws import create_session, get_client
    from core.generators import collect_waf_resources

    session = create_session(region="us-east-1")
    resources = collect_waf_resources(get_client(session, "waf"))
"""
