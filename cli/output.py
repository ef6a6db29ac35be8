"""
cli/output.py - 결과 직렬화/파일 저장
"""

import json
from pathlib import Path
from typing import Union

from core.terraform import TerraformResource


def to_json(resources: list[TerraformResource]) -> str:
    """리소스 목록을 JSON 문자열로 변환 (순서 유지)"""
    return json.dumps([r.to_dict() for r in resources], indent=2, ensure_ascii=False)


def write_json(filepath: Union[str, Path], resources: list[TerraformResource]) -> Path:
    """리소스 목록을 JSON 파일로 저장

    Args:
        filepath: 파일 경로 (상위 디렉토리는 자동 생성)
        resources: 저장할 리소스 목록

    Returns:
        저장된 파일 경로
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    filepath.write_text(to_json(resources) + "\n", encoding="utf-8")
    return filepath
