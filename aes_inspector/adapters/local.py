"""이 파일은 .py 로컬 명령 어댑터로 subprocess 실행을 래핑합니다."""

from __future__ import annotations

import logging
import subprocess
from typing import Sequence

from aes_inspector.core.errors import AdapterError, ScanAborted

from .base import CommandResult, CommandRunner

logger = logging.getLogger(__name__)


class LocalRunner(CommandRunner):
    def run(self, command: Sequence[str]) -> CommandResult:
        # 타임아웃 없이 명령 종료까지 대기한다.
        argv = list(command)
        logger.debug("Running command: %s", " ".join(argv))
        try:
            result = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="surrogateescape",
                check=False,
            )
        except KeyboardInterrupt as exc:
            raise ScanAborted(f"Interrupted while waiting for {argv[0]}") from exc
        except OSError as exc:
            raise AdapterError(f"{argv[0]} execution failed: {exc}") from exc

        return CommandResult(result.returncode, result.stdout, result.stderr)
