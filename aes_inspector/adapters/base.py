"""이 파일은 .py 외부 명령 어댑터 베이스 모듈로 실행 인터페이스를 제공합니다."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence


@dataclass
class CommandResult:
    exit_code: int
    stdout: str
    stderr: str


class CommandRunner(ABC):
    @abstractmethod
    def run(self, command: Sequence[str]) -> CommandResult:
        """Run ``command`` to completion and capture its output.

        Raises AdapterError when the process cannot be started and
        ScanAborted when the wait is interrupted.
        """
        raise NotImplementedError
