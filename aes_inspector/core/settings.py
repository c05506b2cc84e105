"""이 파일은 .py 설정 파일 로더 모듈로 체커별 YAML 설정을 읽습니다."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .config import DEFAULT_SETTINGS_FILE
from .errors import CheckerConfigError

logger = logging.getLogger(__name__)


def load_settings(path: Optional[Path] = None) -> Dict[str, Dict[str, Any]]:
    # 경로가 지정되지 않았고 기본 파일도 없으면 스키마 기본값만 사용한다.
    if path is None:
        if not DEFAULT_SETTINGS_FILE.exists():
            logger.debug("Default settings file not found: %s", DEFAULT_SETTINGS_FILE)
            return {}
        path = DEFAULT_SETTINGS_FILE

    settings_path = Path(path)
    if not settings_path.is_file():
        raise CheckerConfigError(f"Settings file not found: {settings_path}")

    try:
        data = yaml.safe_load(settings_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise CheckerConfigError(f"Invalid settings file {settings_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise CheckerConfigError("Settings file must contain a mapping of checker ids")

    # checker id -> 설정 딕셔너리 구조만 허용한다.
    checkers = data.get("checkers", {}) or {}
    if not isinstance(checkers, dict):
        raise CheckerConfigError("'checkers' must be a mapping")
    for checker_id, checker_config in checkers.items():
        if checker_config is not None and not isinstance(checker_config, dict):
            raise CheckerConfigError(f"Settings for '{checker_id}' must be a mapping")

    logger.info("Loaded settings from %s", settings_path)
    return {str(key): value or {} for key, value in checkers.items()}
