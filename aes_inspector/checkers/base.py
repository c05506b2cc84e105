"""이 파일은 .py 체커 베이스 모듈로 명령 실행/파일 읽기와 판정 기록 공통 로직을 제공합니다."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from aes_inspector.core.errors import AdapterError
from aes_inspector.core.report import ReportSink, ReportWriter
from aes_inspector.core.text import format_exception
from aes_inspector.core.types import CheckerContext, HeuristicResult

logger = logging.getLogger(__name__)


class BaseChecker(ABC):
    checker_id: str = ""
    CONFIG_SCHEMA: Optional[Dict[str, Any]] = None

    def __init__(self, context: CheckerContext, sink: ReportSink):
        self.context = context
        self.config = context.config
        self.runner = context.runner
        self.out = sink
        self.results: List[HeuristicResult] = []

    @abstractmethod
    def check(self) -> List[HeuristicResult]:
        raise NotImplementedError

    def add_result(self, name: str, label: str, verdict: bool, evidence: str = "") -> HeuristicResult:
        result = HeuristicResult(name=name, label=label, verdict=verdict, evidence=evidence)
        self.results.append(result)
        logger.info("%s: %s", label, verdict)
        return result

    def run_command(self, argv: Sequence[str], out: ReportWriter) -> Optional[str]:
        # 시작 실패는 리포트에 기록하고 None을 돌려준다.
        # 0이 아닌 종료 코드는 기록만 하고 이미 출력된 stdout은 그대로 사용한다.
        name = argv[0]
        try:
            result = self.runner.run(argv)
        except AdapterError as exc:
            logger.warning("Error running %s: %s", name, exc)
            out.line(f"Error running {name}:")
            out.write(format_exception(exc))
            return None
        if result.exit_code > 0:
            logger.warning("%s exited with code %d", name, result.exit_code)
            out.line(f"{name} exited with code {result.exit_code}")
        return result.stdout

    def read_file(self, path: str) -> str:
        # 열고, 전부 읽고, 예외 여부와 관계없이 닫는다.
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            return handle.read()
