"""이 파일은 .py 코어 패키지 초기화 모듈로 주요 심볼을 재노출합니다."""

from .config import DEFAULT_SETTINGS_FILE
from .errors import AdapterError, CheckerConfigError, ReportWriteError, ScanAborted
from .logging import setup_logging
from .report import ReportSection, ReportSink, ReportWriter
from .types import CheckerContext, HeuristicResult

__all__ = [
    "AdapterError",
    "CheckerConfigError",
    "CheckerContext",
    "DEFAULT_SETTINGS_FILE",
    "HeuristicResult",
    "ReportSection",
    "ReportSink",
    "ReportWriter",
    "ReportWriteError",
    "ScanAborted",
    "setup_logging",
]
