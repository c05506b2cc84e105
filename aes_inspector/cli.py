"""이 파일은 .py CLI 모듈로 리포트 파일 경로를 받아 전체 점검 파이프라인을 실행합니다."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from aes_inspector.core.errors import CheckerConfigError, ScanAborted
from aes_inspector.core.logging import setup_logging
from aes_inspector.core.report import ReportSink
from aes_inspector.core.settings import load_settings
from aes_inspector.services.orchestrator import Orchestrator
from aes_inspector.services.reporting import format_console_lines, write_summary_json

logger = logging.getLogger("aes_inspector.cli")

MISSING_OUTPUT_MESSAGE = "Debug output file path must be specified as first argument"
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_ABORTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aes-inspector",
        description="Collect evidence of AES-NI hardware acceleration and append it to a report file",
    )
    parser.add_argument("output", nargs="?", help="Report file (opened in append mode)")
    parser.add_argument("--settings", type=Path, help="YAML settings file (default: bundled settings.yml)")
    parser.add_argument("--summary-json", type=Path, help="Also write verdicts as JSON to this file")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for diagnostics on stderr",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if not args.output:
        print(MISSING_OUTPUT_MESSAGE, file=sys.stderr)
        return EXIT_FAILURE

    setup_logging(args.log_level)

    try:
        settings = load_settings(args.settings)
        orchestrator = Orchestrator(settings=settings)
        with open(args.output, "a", encoding="utf-8", errors="surrogateescape") as handle:
            results = orchestrator.run(ReportSink(handle))
    except CheckerConfigError as exc:
        logger.error("Invalid settings: %s", exc)
        return EXIT_FAILURE
    except ScanAborted as exc:
        # 인터럽트는 여기서만 종료 코드로 바뀐다.
        logger.error("Scan aborted: %s", exc)
        return EXIT_ABORTED
    except OSError as exc:
        logger.error("Cannot write report %s: %s", args.output, exc)
        return EXIT_FAILURE

    for line in format_console_lines(results):
        print(line)

    if args.summary_json:
        try:
            write_summary_json(args.summary_json, results)
        except OSError as exc:
            logger.error("Cannot write summary %s: %s", args.summary_json, exc)
            return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
