"""이 파일은 .py libnss 체커 모듈로 패키지 정보와 java.security의 NSS 프로바이더 설정을 점검합니다."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

from aes_inspector.core.config import JAVA_HOME
from aes_inspector.core.report import ReportSection
from aes_inspector.core.text import split_lines
from aes_inspector.core.types import HeuristicResult

from .base import BaseChecker
from .nss_config import DEFAULT_LIBRARY_FILENAME, LibraryConfig
from .security_file import DEFAULT_PROVIDER_MARKER, find_security_file, scan_security_lines

logger = logging.getLogger(__name__)

VERDICT_LABEL = "Libnss configured in java security settings"
DEFAULT_PACKAGE_QUERIES = [
    ["dpkg", "-s", "libnss3"],
    ["yum", "info", "nss", "binutils"],
]


class CryptoLibraryChecker(BaseChecker):
    checker_id = "crypto_library"
    CONFIG_SCHEMA = {
        "properties": {
            "package_queries": {
                "type": "array",
                "items": {"type": "array"},
                "default": DEFAULT_PACKAGE_QUERIES,
            },
            # 비어 있으면 JAVA_HOME 환경 변수를 사용한다.
            "security_home": {"type": "string", "default": ""},
            "security_file_name": {"type": "string", "min_length": 1, "default": "java.security"},
            "search_depth": {"type": "integer", "min": 1, "max": 32, "default": 8},
            "provider_marker": {"type": "string", "min_length": 1, "default": DEFAULT_PROVIDER_MARKER},
            "library_filename": {"type": "string", "min_length": 1, "default": DEFAULT_LIBRARY_FILENAME},
            "dependency_command": {
                "type": "array",
                "items": {"type": "string"},
                "min_items": 1,
                "default": ["ldd"],
            },
        }
    }

    def check(self) -> List[HeuristicResult]:
        self.log_package_details()
        section = ReportSection()
        verdict = self.detect_libnss_in_security_settings(section)
        section.summary(VERDICT_LABEL, verdict)
        section.line()
        self.out.write(section.text)
        self.add_result("libnss_java_security", VERDICT_LABEL, verdict, section.text)
        return self.results

    def log_package_details(self) -> None:
        # 첫 명령을 시작하지 못한 경우에만 다음 패키지 관리자로 넘어간다.
        label = "libnss package details"
        self.out.start(label)
        for argv in self.config.get("package_queries", DEFAULT_PACKAGE_QUERIES):
            if not argv:
                continue
            stdout = self.run_command([str(part) for part in argv], self.out)
            if stdout is not None:
                self.out.lines(split_lines(stdout))
                break
        self.out.end(label)

    def detect_libnss_in_security_settings(self, section: ReportSection) -> bool:
        label = "security settings file"
        filename = self.config.get("security_file_name", "java.security")
        section.start(label)

        home = self.config.get("security_home") or JAVA_HOME
        if not home:
            logger.warning("JAVA_HOME is not set; cannot locate %s", filename)
            section.line(f"Couldn't find {filename} file: JAVA_HOME is not set")
            section.end(label)
            return False

        settings_path = find_security_file(Path(home), filename, self.config.get("search_depth", 8))
        if settings_path is None:
            section.line(f"Couldn't find {filename} file under {home}")
            section.end(label)
            return False
        if not os.access(settings_path, os.R_OK):
            section.line(f"Can't read: {settings_path}")
            section.end(label)
            return False

        try:
            lines = split_lines(self.read_file(str(settings_path)))
        except OSError as exc:
            logger.warning("Cannot read %s: %s", settings_path, exc)
            section.line(f"Can't read: {settings_path} ({exc})")
            section.end(label)
            return False

        scan = scan_security_lines(
            lines,
            section,
            self.runner,
            provider_marker=self.config.get("provider_marker", DEFAULT_PROVIDER_MARKER),
            library_filename=self.config.get("library_filename", DEFAULT_LIBRARY_FILENAME),
            dependency_command=self.config.get("dependency_command", ["ldd"]),
        )
        section.end(label, blank=False)
        section.summary("Security settings file path", settings_path)
        section.line()

        for config in scan.library_configs:
            self.log_library_config(section, config)
        return scan.verdict

    def log_library_config(self, section: ReportSection, config: LibraryConfig) -> None:
        section.start(f"nss config: {config.source_path}")
        section.lines(split_lines(config.raw_contents))
        section.end("nss config", blank=False)
        section.start(f"nss config detail: {config.source_path}")
        section.line(f"name: {config.declared_name or ''}")
        section.line(f"nssLibraryDirectory: {config.library_directory or ''}")
        section.summary("nss library installed", config.is_installed)
        section.line()
        section.line("NSS library information:")
        section.line()
        section.write(config.resolution_detail)
        if config.resolution_detail and not config.resolution_detail.endswith("\n"):
            section.line()
        section.end(f"nss config detail: {config.source_path}")
