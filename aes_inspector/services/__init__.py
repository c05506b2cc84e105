"""이 파일은 .py 서비스 패키지 초기화 모듈로 핵심 서비스를 노출합니다."""

from .orchestrator import Orchestrator

__all__ = ["Orchestrator"]
