"""이 파일은 .py 테스트 설정 모듈로 경로와 가짜 명령 실행기를 초기화합니다."""

import io
import sys
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from aes_inspector.adapters.base import CommandResult, CommandRunner  # noqa: E402
from aes_inspector.core.errors import AdapterError  # noqa: E402
from aes_inspector.core.report import ReportSink  # noqa: E402


class FakeRunner(CommandRunner):
    # 실제 프로세스 대신 명령 이름별로 준비된 결과를 돌려준다.
    def __init__(
        self,
        outputs: Optional[Dict[str, CommandResult]] = None,
        failures: Iterable[str] = (),
    ) -> None:
        self.outputs = outputs or {}
        self.failures = set(failures)
        self.calls: List[List[str]] = []

    def run(self, command: Sequence[str]) -> CommandResult:
        argv = list(command)
        self.calls.append(argv)
        if argv[0] in self.failures:
            raise AdapterError(f"{argv[0]} execution failed: No such file or directory")
        return self.outputs.get(argv[0], CommandResult(0, "", ""))


@pytest.fixture
def fake_runner():
    return FakeRunner


@pytest.fixture
def report():
    buffer = io.StringIO()
    return buffer, ReportSink(buffer)
