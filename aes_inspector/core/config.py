"""이 파일은 .py 설정 모듈로 경로와 기본 위치를 정의합니다."""

import os
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parents[1]
DATA_DIR = PACKAGE_DIR / "data"
DEFAULT_SETTINGS_FILE = Path(
    os.getenv("AES_INSPECTOR_SETTINGS", str(DATA_DIR / "settings.yml"))
)
JAVA_HOME = os.getenv("JAVA_HOME", "")

BANNER = (
    "======================\n"
    "AES-NI Support Checker\n"
    "======================\n"
)
