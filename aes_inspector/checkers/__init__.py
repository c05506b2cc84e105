"""이 파일은 .py 체커 패키지 초기화 모듈로 고정된 실행 순서를 정의합니다."""

from .base import BaseChecker
from .crypto_library import CryptoLibraryChecker
from .os_signals import OsSignalChecker
from .runtime_env import RuntimeEnvironmentChecker

# 리포트 구조는 이 순서로 결정된다.
PIPELINE = (
    RuntimeEnvironmentChecker,
    OsSignalChecker,
    CryptoLibraryChecker,
)

__all__ = [
    "BaseChecker",
    "CryptoLibraryChecker",
    "OsSignalChecker",
    "PIPELINE",
    "RuntimeEnvironmentChecker",
]
