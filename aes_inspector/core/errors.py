"""이 파일은 .py 공통 예외 모듈로 오류 유형을 표준화합니다."""


class CheckerConfigError(ValueError):
    """체커 설정 검증 실패 시 사용합니다."""


class AdapterError(RuntimeError):
    """외부 명령을 시작하지 못했을 때 사용합니다."""


class ScanAborted(RuntimeError):
    """명령 대기 중 인터럽트가 들어와 점검을 중단할 때 사용합니다."""


class ReportWriteError(OSError):
    """리포트 파일을 열거나 기록하지 못했을 때 사용합니다."""
