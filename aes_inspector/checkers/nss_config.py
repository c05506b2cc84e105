"""이 파일은 .py NSS 설정 파서 모듈로 nss.cfg 파일과 libnss3 설치 상태를 확인합니다."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple

from aes_inspector.adapters.base import CommandRunner
from aes_inspector.core.errors import AdapterError
from aes_inspector.core.text import format_exception, parse_kv_line, split_lines

DEFAULT_LIBRARY_FILENAME = "libnss3.so"
DEFAULT_DEPENDENCY_COMMAND = ("ldd",)


def check_library_installed(
    directory: str,
    runner: CommandRunner,
    library_filename: str = DEFAULT_LIBRARY_FILENAME,
    dependency_command: Sequence[str] = DEFAULT_DEPENDENCY_COMMAND,
) -> Tuple[bool, str]:
    """Validate an NSS library directory and resolve the library's dependencies.

    The checks run in a fixed order and stop at the first failure, whose
    reason becomes the detail text. When every check passes the output of the
    dependency query is the detail.
    """
    lib_dir = Path(directory)
    if not lib_dir.exists():
        return False, f"{directory} does not exist\n"
    if not os.access(lib_dir, os.R_OK):
        return False, f"Can't read: {directory}\n"

    lib_path = lib_dir / library_filename
    if not lib_path.exists():
        return False, f"{lib_path} does not exist\n"
    if not os.access(lib_path, os.R_OK):
        return False, f"Can't read: {lib_path}\n"

    argv = [*dependency_command, str(lib_path)]
    try:
        result = runner.run(argv)
    except AdapterError as exc:
        return False, f"Error running {argv[0]}:\n{format_exception(exc)}"

    detail = ""
    if result.exit_code > 0:
        detail += f"{argv[0]} exited with code {result.exit_code}\n"
    detail += result.stdout
    return True, detail


@dataclass(frozen=True)
class LibraryConfig:
    source_path: str
    declared_name: Optional[str]
    library_directory: Optional[str]
    raw_contents: str
    resolution_detail: str
    is_installed: bool

    @classmethod
    def parse_from_path(
        cls,
        path: str,
        runner: CommandRunner,
        library_filename: str = DEFAULT_LIBRARY_FILENAME,
        dependency_command: Sequence[str] = DEFAULT_DEPENDENCY_COMMAND,
    ) -> "LibraryConfig":
        # 파일을 읽지 못하면 OSError가 그대로 올라간다.
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            raw = handle.read()

        declared_name: Optional[str] = None
        library_directory: Optional[str] = None
        for line in split_lines(raw):
            pair = parse_kv_line(line)
            if pair is None:
                continue
            key, value = pair
            if key == "name":
                declared_name = value
            elif key == "nssLibraryDirectory":
                library_directory = value

        # 디렉터리 항목이 없으면 추가 I/O 없이 미설치로 본다.
        if not library_directory:
            installed, detail = False, ""
        else:
            installed, detail = check_library_installed(
                library_directory, runner, library_filename, dependency_command
            )

        return cls(
            source_path=path,
            declared_name=declared_name,
            library_directory=library_directory,
            raw_contents=raw,
            resolution_detail=detail,
            is_installed=installed,
        )
