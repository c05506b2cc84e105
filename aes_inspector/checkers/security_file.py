"""이 파일은 .py java.security 파서 모듈로 PKCS#11 프로바이더 라인과 NSS 우선순위를 판정합니다."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from aes_inspector.adapters.base import CommandRunner
from aes_inspector.core.report import ReportWriter
from aes_inspector.core.text import format_exception, is_comment

from .nss_config import DEFAULT_DEPENDENCY_COMMAND, DEFAULT_LIBRARY_FILENAME, LibraryConfig

logger = logging.getLogger(__name__)

PROVIDER_PREFIX = "security.provider."
DEFAULT_PROVIDER_MARKER = "sun.security.pkcs11.SunPKCS11"


@dataclass(frozen=True)
class ProviderLine:
    rank: int
    provider_class_name: str
    config_path: Optional[str] = None

    @classmethod
    def parse(cls, line: str) -> "ProviderLine":
        """Parse ``security.provider.<rank>=<class> [<config>]``.

        Only this one shape is understood; quoting and escaping are not.
        """
        _, sep, after_prefix = line.partition(PROVIDER_PREFIX)
        if not sep:
            raise ValueError(f"Missing '{PROVIDER_PREFIX}' prefix: {line!r}")
        rank_text, eq, value = after_prefix.partition("=")
        if not eq:
            raise ValueError(f"Missing '=' in provider line: {line!r}")
        rank = int(rank_text)

        parts = value.strip().split(None, 1)
        if not parts:
            raise ValueError(f"Missing provider class name: {line!r}")
        config_path = parts[1].strip() if len(parts) > 1 else ""
        return cls(rank=rank, provider_class_name=parts[0], config_path=config_path or None)


@dataclass
class ProviderScanState:
    # found: 가장 최근에 파싱된 NSS 설정의 설치 여부
    # best_rank: 설치가 확인된 첫 프로바이더의 순위
    found: bool = False
    best_rank: Optional[int] = None

    def record(self, rank: int, installed: bool) -> None:
        self.found = installed
        if installed and self.best_rank is None:
            self.best_rank = rank

    def reset(self) -> None:
        # 설정 경로가 없는 프로바이더 라인은 found만 되돌리고 best_rank는 유지한다.
        self.found = False

    @property
    def verdict(self) -> bool:
        return self.found and self.best_rank == 1


@dataclass
class SecurityFileScan:
    state: ProviderScanState = field(default_factory=ProviderScanState)
    library_configs: List[LibraryConfig] = field(default_factory=list)

    @property
    def verdict(self) -> bool:
        return self.state.verdict


def scan_security_lines(
    lines: Iterable[str],
    out: ReportWriter,
    runner: CommandRunner,
    provider_marker: str = DEFAULT_PROVIDER_MARKER,
    library_filename: str = DEFAULT_LIBRARY_FILENAME,
    dependency_command: Sequence[str] = DEFAULT_DEPENDENCY_COMMAND,
) -> SecurityFileScan:
    # 모든 라인을 원문 그대로 기록하고, 한 라인의 오류가 나머지 점검을 막지 않는다.
    scan = SecurityFileScan()
    for line in lines:
        out.line(line)

        if is_comment(line) or provider_marker not in line:
            continue

        try:
            provider = ProviderLine.parse(line)
        except ValueError as exc:
            logger.warning("Problem parsing provider line %r: %s", line, exc)
            out.line("Problem parsing provider")
            out.write(format_exception(exc))
            continue

        if not provider.config_path:
            scan.state.reset()
            continue

        try:
            config = LibraryConfig.parse_from_path(
                provider.config_path, runner, library_filename, dependency_command
            )
        except (OSError, ValueError) as exc:
            logger.warning("Error parsing NSS config file %s: %s", provider.config_path, exc)
            out.line("Error parsing NSS config file")
            out.write(format_exception(exc))
            continue

        scan.library_configs.append(config)
        scan.state.record(provider.rank, config.is_installed)
    return scan


def find_security_file(base: Path, filename: str, max_depth: int = 8) -> Optional[Path]:
    # base를 깊이 0으로 보고 max_depth 깊이의 항목까지 정확한 파일 이름을 찾는다.
    base = Path(base)
    if not base.is_dir():
        return None
    base_depth = len(base.parts)
    for root, dirs, files in os.walk(base):
        dirs.sort()
        depth = len(Path(root).parts) - base_depth
        if filename in files:
            candidate = Path(root) / filename
            if not candidate.is_dir():
                return candidate
        if depth + 1 >= max_depth:
            dirs[:] = []
    return None
