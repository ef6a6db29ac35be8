"""
tests/test_core_config.py - core/config.py 테스트
"""

import pytest

from core.config import (
    ImporterConfig,
    Settings,
    get_default_profile,
    get_default_region,
    get_env_bool,
    get_project_root,
    get_version,
    settings,
)
from core.exceptions import ConfigError


class TestSettings:
    """Settings 데이터클래스 테스트"""

    def test_settings_is_frozen(self):
        """설정이 불변인지 확인"""
        with pytest.raises(Exception):  # FrozenInstanceError
            settings.DEFAULT_REGION = "ap-northeast-2"

    def test_default_values(self):
        assert settings.DEFAULT_REGION == "us-east-1"
        assert settings.PROVIDER == "aws"
        assert Settings().API_MAX_ATTEMPTS == 5


class TestVersion:
    def test_project_root_has_version_file(self):
        assert (get_project_root() / "version.txt").exists()

    def test_version_format(self):
        """x.y.z 형식"""
        parts = get_version().split(".")
        assert len(parts) >= 2
        assert all(part.isdigit() for part in parts)


class TestEnvHelpers:
    """환경 변수 헬퍼 테스트"""

    @pytest.mark.parametrize("value", ["1", "true", "YES", "on"])
    def test_get_env_bool_true(self, monkeypatch, value):
        monkeypatch.setenv("TFI_TEST_FLAG", value)
        assert get_env_bool("TFI_TEST_FLAG") is True

    def test_get_env_bool_false(self, monkeypatch):
        monkeypatch.setenv("TFI_TEST_FLAG", "0")
        assert get_env_bool("TFI_TEST_FLAG", default=True) is False

    def test_get_env_bool_default(self):
        assert get_env_bool("TFI_NOT_SET", default=True) is True

    def test_default_profile(self, monkeypatch):
        assert get_default_profile() is None
        monkeypatch.setenv("AWS_PROFILE", "dev")
        assert get_default_profile() == "dev"

    def test_default_region_priority(self, monkeypatch):
        """AWS_REGION > AWS_DEFAULT_REGION > 기본값"""
        monkeypatch.delenv("AWS_DEFAULT_REGION", raising=False)
        assert get_default_region() == "us-east-1"
        monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-west-1")
        assert get_default_region() == "eu-west-1"
        monkeypatch.setenv("AWS_REGION", "ap-northeast-2")
        assert get_default_region() == "ap-northeast-2"


class TestImporterConfig:
    """ImporterConfig 테스트"""

    def test_defaults(self):
        config = ImporterConfig()
        assert config.profile is None
        assert config.region == "us-east-1"
        assert config.format == "console"
        assert config.output is None
        assert config.verbose is False

    def test_invalid_format(self):
        with pytest.raises(ConfigError):
            ImporterConfig(format="xml")

    def test_empty_region(self):
        with pytest.raises(ConfigError):
            ImporterConfig(region="")

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("AWS_PROFILE", "prod")
        monkeypatch.setenv("AWS_REGION", "eu-central-1")
        monkeypatch.setenv("TFI_VERBOSE", "true")

        config = ImporterConfig.from_env()

        assert config.profile == "prod"
        assert config.region == "eu-central-1"
        assert config.verbose is True

    def test_merge_ignores_none(self):
        config = ImporterConfig(profile="dev", region="eu-west-1")

        merged = config.merge(profile=None, region="us-west-2", format="json")

        assert merged.profile == "dev"
        assert merged.region == "us-west-2"
        assert merged.format == "json"
        # 원본은 그대로
        assert config.region == "eu-west-1"
