"""이 파일은 .py 오케스트레이터 서비스 모듈로 고정된 체커 파이프라인 실행 흐름을 제공합니다."""

import logging
from typing import Dict, List, Optional, Sequence, Type

from aes_inspector.adapters.base import CommandRunner
from aes_inspector.adapters.local import LocalRunner
from aes_inspector.checkers import PIPELINE, BaseChecker
from aes_inspector.core.config import BANNER
from aes_inspector.core.config_validation import apply_config_schema
from aes_inspector.core.report import ReportSink
from aes_inspector.core.types import CheckerContext, HeuristicResult

logger = logging.getLogger(__name__)


class Orchestrator:
    def __init__(
        self,
        runner: Optional[CommandRunner] = None,
        settings: Optional[Dict[str, Dict]] = None,
        pipeline: Sequence[Type[BaseChecker]] = PIPELINE,
    ) -> None:
        self.runner = runner or LocalRunner()
        self.settings = settings or {}
        self.pipeline = pipeline

    def build_checkers(self, sink: ReportSink) -> List[BaseChecker]:
        # 설정 오류는 리포트에 아무것도 쓰기 전에 드러나야 한다.
        known = {checker_class.checker_id for checker_class in self.pipeline}
        for checker_id in sorted(set(self.settings) - known):
            logger.warning("Ignoring settings for unknown checker: %s", checker_id)

        checkers: List[BaseChecker] = []
        for checker_class in self.pipeline:
            config = apply_config_schema(
                checker_class.CONFIG_SCHEMA,
                self.settings.get(checker_class.checker_id, {}),
            )
            context = CheckerContext(runner=self.runner, config=config)
            checkers.append(checker_class(context, sink))
        return checkers

    def run(self, sink: ReportSink) -> List[HeuristicResult]:
        checkers = self.build_checkers(sink)
        sink.write(BANNER)

        results: List[HeuristicResult] = []
        for checker in checkers:
            logger.info("Running checker %s", checker.checker_id)
            results.extend(checker.check())
        sink.flush()
        logger.info("Completed %d checkers with %d verdicts", len(checkers), len(results))
        return results
