"""이 파일은 .py 리포트 모듈로 모든 체커가 공유하는 추가 전용 텍스트 출력을 제공합니다."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List, TextIO

from .errors import ReportWriteError


def format_bool(value: bool) -> str:
    # 리포트와 콘솔 모두 소문자 true/false로 표기한다.
    return "true" if value else "false"


class ReportWriter(ABC):
    """Shared helpers for the ``[[Start x]]`` / ``[[End x]]`` report layout."""

    @abstractmethod
    def write(self, text: str) -> "ReportWriter":
        raise NotImplementedError

    def line(self, text: str = "") -> "ReportWriter":
        return self.write(f"{text}\n")

    def lines(self, lines: Iterable[str]) -> "ReportWriter":
        for item in lines:
            self.line(item)
        return self

    def start(self, label: str) -> "ReportWriter":
        return self.line(f"[[Start {label}]]")

    def end(self, label: str, blank: bool = True) -> "ReportWriter":
        self.line(f"[[End {label}]]")
        if blank:
            self.line()
        return self

    def summary(self, description: str, value) -> "ReportWriter":
        if isinstance(value, bool):
            value = format_bool(value)
        return self.line(f"[[{description}: {value}]]")


class ReportSink(ReportWriter):
    """Append-only text stream shared by every checker.

    Nothing reads back from the sink; the order of writes is the order of the
    final report.
    """

    def __init__(self, handle: TextIO) -> None:
        self._handle = handle

    def write(self, text: str) -> "ReportSink":
        try:
            self._handle.write(text)
        except OSError as exc:
            raise ReportWriteError(f"Cannot write report: {exc}") from exc
        return self

    def flush(self) -> None:
        try:
            self._handle.flush()
        except OSError as exc:
            raise ReportWriteError(f"Cannot flush report: {exc}") from exc


class ReportSection(ReportWriter):
    # 한 판정의 근거 구간을 모아 두었다가 싱크에 한 번에 기록한다.
    def __init__(self) -> None:
        self._parts: List[str] = []

    def write(self, text: str) -> "ReportSection":
        self._parts.append(text)
        return self

    @property
    def text(self) -> str:
        return "".join(self._parts)
