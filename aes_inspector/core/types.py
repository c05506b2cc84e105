"""이 파일은 .py 타입 정의 모듈로 체커 컨텍스트와 판정 결과 모델을 제공합니다."""

from dataclasses import dataclass, field
from typing import Dict

from aes_inspector.adapters.base import CommandRunner


@dataclass
class CheckerContext:
    # 체커가 실행될 때 전달되는 공통 컨텍스트이다.
    runner: CommandRunner
    # CONFIG_SCHEMA로 검증된 설정값을 전달한다.
    config: Dict = field(default_factory=dict)


@dataclass(frozen=True)
class HeuristicResult:
    # name은 JSON 요약에 쓰이는 식별자, label은 콘솔/리포트 문구이다.
    name: str
    label: str
    verdict: bool
    # evidence는 판정 근거가 된 리포트 원문 구간을 담는다.
    evidence: str = ""
