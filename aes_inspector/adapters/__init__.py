"""이 파일은 .py 어댑터 패키지 초기화 모듈로 명령 실행 어댑터를 노출합니다."""

from .base import CommandResult, CommandRunner
from .local import LocalRunner

__all__ = [
    "CommandResult",
    "CommandRunner",
    "LocalRunner",
]
