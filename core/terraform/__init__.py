"""
core/terraform - Terraform 임포트 리소스 모델
"""

from .resource import NAME_ID_PREFIX_LENGTH, TerraformResource, build_resource_name, new_simple_resource

__all__ = [
    "NAME_ID_PREFIX_LENGTH",
    "TerraformResource",
    "build_resource_name",
    "new_simple_resource",
]
