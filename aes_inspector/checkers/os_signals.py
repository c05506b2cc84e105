"""이 파일은 .py OS 체커 모듈로 CPU/커널 수준의 AES-NI 지원 신호를 세 가지 방법으로 점검합니다."""

from __future__ import annotations

import logging
import os
from typing import Dict, Iterable, List, Sequence, Tuple

from aes_inspector.core.report import ReportSection, format_bool
from aes_inspector.core.text import split_lines, substring_after
from aes_inspector.core.types import HeuristicResult

from .base import BaseChecker

logger = logging.getLogger(__name__)

AES_FLAG = "aes"
DEFAULT_RELEASE_FILES = [
    "/etc/lsb-release",
    "/etc/redhat-release",
    "/etc/centos-release",
    "/etc/debian_version",
    "/etc/issue",
    "/etc/os-release",
]
# aarch64 커널은 flags 대신 Features 라인을 사용한다.
DEFAULT_FLAG_PREFIXES = ["flags", "Features"]
DEFAULT_CRYPTO_DRIVERS = ["aesni_intel", "aes_x86_64"]


def count_aes_cpus(lines: Iterable[str], prefixes: Sequence[str] = ("flags",)) -> Tuple[int, int]:
    # CPU마다 한 줄씩 있는 flags 라인을 세고, 그중 aes 토큰이 있는 줄을 센다.
    total = 0
    with_aes = 0
    for line in lines:
        if not line.startswith(tuple(prefixes)):
            continue
        total += 1
        if AES_FLAG in substring_after(line, ":").split():
            with_aes += 1
    return total, with_aes


def all_cpus_support_aes(total: int, with_aes: int) -> bool:
    # 일부 CPU만 지원하는 경우는 지원하지 않는 것으로 본다.
    return with_aes > 0 and with_aes == total


def lscpu_reports_aes(lines: Iterable[str]) -> bool:
    for line in lines:
        if line.startswith("Flags:") and AES_FLAG in line.split():
            return True
    return False


def find_crypto_drivers(lines: Iterable[str], drivers: Sequence[str]) -> Dict[str, bool]:
    # /proc/crypto의 "driver : <이름>" 라인 끝에서 드라이버 이름을 찾는다.
    found = {driver: False for driver in drivers}
    suffixes = {driver: f": {driver}" for driver in drivers}
    for line in lines:
        for driver, suffix in suffixes.items():
            if line.endswith(suffix):
                found[driver] = True
    return found


class OsSignalChecker(BaseChecker):
    checker_id = "os_signals"
    CONFIG_SCHEMA = {
        "properties": {
            "release_files": {
                "type": "array",
                "items": {"type": "string"},
                "default": DEFAULT_RELEASE_FILES,
            },
            "uname_command": {
                "type": "array",
                "items": {"type": "string"},
                "min_items": 1,
                "default": ["uname", "-a"],
            },
            "cpuinfo_path": {"type": "string", "min_length": 1, "default": "/proc/cpuinfo"},
            "cpu_flag_prefixes": {
                "type": "array",
                "items": {"type": "string"},
                "min_items": 1,
                "default": DEFAULT_FLAG_PREFIXES,
            },
            "lscpu_command": {
                "type": "array",
                "items": {"type": "string"},
                "min_items": 1,
                "default": ["lscpu"],
            },
            "crypto_path": {"type": "string", "min_length": 1, "default": "/proc/crypto"},
            "crypto_drivers": {
                "type": "array",
                "items": {"type": "string"},
                "min_items": 1,
                "default": DEFAULT_CRYPTO_DRIVERS,
            },
        }
    }

    def check(self) -> List[HeuristicResult]:
        self.log_uname()
        for path in self.config.get("release_files", DEFAULT_RELEASE_FILES):
            self.log_file_if_exists(path)

        # 세 가지 방법은 서로 독립적이며 결합 판정은 만들지 않는다.
        for result in (
            self.detect_by_cpuinfo(),
            self.detect_by_lscpu(),
            self.detect_by_crypto(),
        ):
            self.out.summary(result.label, result.verdict)
        self.out.line()
        return self.results

    def log_uname(self) -> None:
        argv = self.config.get("uname_command", ["uname", "-a"])
        label = f"{' '.join(argv)} output"
        self.out.start(label)
        stdout = self.run_command(argv, self.out)
        if stdout:
            self.out.lines(split_lines(stdout))
        self.out.end(label)

    def log_file_if_exists(self, path: str) -> None:
        # 없거나 읽을 수 없는 식별 파일은 조용히 건너뛴다.
        if not (os.path.isfile(path) and os.access(path, os.R_OK)):
            logger.debug("Skipping missing release file %s", path)
            return
        try:
            text = self.read_file(path)
        except OSError as exc:
            logger.warning("Cannot read %s: %s", path, exc)
            return
        self.out.start(path)
        self.out.lines(split_lines(text))
        self.out.end(path)

    def detect_by_cpuinfo(self) -> HeuristicResult:
        path = self.config.get("cpuinfo_path", "/proc/cpuinfo")
        prefixes = self.config.get("cpu_flag_prefixes", DEFAULT_FLAG_PREFIXES)
        section = ReportSection()
        section.start(path)

        try:
            lines = split_lines(self.read_file(path))
        except OSError as exc:
            logger.warning("Could not find cpuinfo data at path: %s", path)
            section.line(f"Could not find cpuinfo data at path: {path} ({exc.strerror or exc})")
            section.end(path)
            return self._finish("proc_cpuinfo", path, False, section)

        section.lines(lines)
        total, with_aes = count_aes_cpus(lines, prefixes)
        section.end(path, blank=False)
        section.line(f"[[ cpus: {total} cpus with aes: {with_aes}]]")
        section.line()
        return self._finish("proc_cpuinfo", path, all_cpus_support_aes(total, with_aes), section)

    def detect_by_lscpu(self) -> HeuristicResult:
        argv = self.config.get("lscpu_command", ["lscpu"])
        name = argv[0]
        label = f"{name} output"
        section = ReportSection()
        section.start(label)

        stdout = self.run_command(argv, section)
        if stdout is None:
            section.end(label)
            return self._finish(name, name, False, section)

        lines = split_lines(stdout)
        section.lines(lines)
        detected = lscpu_reports_aes(lines)
        section.end(label, blank=False)
        section.summary(f"{name} detected aes", detected)
        section.line()
        return self._finish(name, name, detected, section)

    def detect_by_crypto(self) -> HeuristicResult:
        path = self.config.get("crypto_path", "/proc/crypto")
        drivers = self.config.get("crypto_drivers", DEFAULT_CRYPTO_DRIVERS)
        section = ReportSection()
        section.start(path)

        try:
            lines = split_lines(self.read_file(path))
        except OSError as exc:
            logger.warning("Could not find crypto data at path: %s", path)
            section.line(f"Could not find crypto data at path: {path} ({exc.strerror or exc})")
            section.end(path)
            return self._finish("proc_crypto", path, False, section)

        section.lines(lines)
        found = find_crypto_drivers(lines, drivers)
        section.end(path, blank=False)
        flags = " ".join(f"{driver}: {format_bool(found[driver])}" for driver in drivers)
        section.line(f"[[ {flags}]]")
        section.line()
        return self._finish("proc_crypto", path, all(found.values()), section)

    def _finish(self, name: str, source: str, verdict: bool, section: ReportSection) -> HeuristicResult:
        self.out.write(section.text)
        return self.add_result(name, f"AES support shown in {source}", verdict, section.text)
