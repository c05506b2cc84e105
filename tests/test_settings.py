"""이 파일은 .py 테스트 모듈로 YAML 설정 파일 로딩을 검증합니다."""

import pytest

from aes_inspector.core.config import DEFAULT_SETTINGS_FILE
from aes_inspector.core.errors import CheckerConfigError
from aes_inspector.core.settings import load_settings


def test_bundled_settings_cover_every_checker() -> None:
    settings = load_settings(DEFAULT_SETTINGS_FILE)
    assert set(settings) == {"runtime", "os_signals", "crypto_library"}
    assert settings["os_signals"]["crypto_drivers"] == ["aesni_intel", "aes_x86_64"]


def test_load_settings_reads_checker_sections(tmp_path) -> None:
    path = tmp_path / "settings.yml"
    path.write_text("checkers:\n  os_signals:\n    crypto_drivers: [aes_ce_cipher]\n  runtime:\n")
    settings = load_settings(path)
    assert settings["os_signals"] == {"crypto_drivers": ["aes_ce_cipher"]}
    assert settings["runtime"] == {}


def test_load_settings_missing_file(tmp_path) -> None:
    with pytest.raises(CheckerConfigError):
        load_settings(tmp_path / "missing.yml")


def test_load_settings_invalid_yaml(tmp_path) -> None:
    path = tmp_path / "settings.yml"
    path.write_text("checkers: [unclosed\n")
    with pytest.raises(CheckerConfigError):
        load_settings(path)


def test_load_settings_rejects_non_mapping_section(tmp_path) -> None:
    path = tmp_path / "settings.yml"
    path.write_text("checkers:\n  os_signals: [1, 2]\n")
    with pytest.raises(CheckerConfigError) as excinfo:
        load_settings(path)
    assert "os_signals" in str(excinfo.value)
