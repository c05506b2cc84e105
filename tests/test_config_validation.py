"""이 파일은 .py 테스트 모듈로 체커 설정 스키마를 검증합니다."""

import pytest

from aes_inspector.checkers import CryptoLibraryChecker, OsSignalChecker
from aes_inspector.core.config_validation import apply_config_schema
from aes_inspector.core.errors import CheckerConfigError


def test_apply_config_schema_defaults() -> None:
    result = apply_config_schema(CryptoLibraryChecker.CONFIG_SCHEMA, {})
    assert result["search_depth"] == 8
    assert result["security_file_name"] == "java.security"
    assert result["package_queries"][0] == ["dpkg", "-s", "libnss3"]


def test_apply_config_schema_copies_list_defaults() -> None:
    first = apply_config_schema(OsSignalChecker.CONFIG_SCHEMA, {})
    first["crypto_drivers"].append("extra")
    second = apply_config_schema(OsSignalChecker.CONFIG_SCHEMA, {})
    assert second["crypto_drivers"] == ["aesni_intel", "aes_x86_64"]


def test_apply_config_schema_type_error() -> None:
    with pytest.raises(CheckerConfigError) as excinfo:
        apply_config_schema(CryptoLibraryChecker.CONFIG_SCHEMA, {"search_depth": "deep"})
    assert "search_depth" in str(excinfo.value)


def test_apply_config_schema_bool_is_not_integer() -> None:
    with pytest.raises(CheckerConfigError):
        apply_config_schema(CryptoLibraryChecker.CONFIG_SCHEMA, {"search_depth": True})


def test_apply_config_schema_range_validation() -> None:
    with pytest.raises(CheckerConfigError) as excinfo:
        apply_config_schema(CryptoLibraryChecker.CONFIG_SCHEMA, {"search_depth": 0})
    assert ">= 1" in str(excinfo.value)


def test_apply_config_schema_array_items() -> None:
    with pytest.raises(CheckerConfigError) as excinfo:
        apply_config_schema(OsSignalChecker.CONFIG_SCHEMA, {"crypto_drivers": ["aesni_intel", 3]})
    assert "crypto_drivers[1]" in str(excinfo.value)


def test_apply_config_schema_min_items() -> None:
    with pytest.raises(CheckerConfigError):
        apply_config_schema(OsSignalChecker.CONFIG_SCHEMA, {"lscpu_command": []})


def test_apply_config_schema_rejects_non_mapping() -> None:
    with pytest.raises(CheckerConfigError):
        apply_config_schema(OsSignalChecker.CONFIG_SCHEMA, ["not", "a", "dict"])
