"""이 파일은 .py 테스트 모듈로 NSS 설정 파일 파싱과 라이브러리 설치 확인을 검증합니다."""

import pytest

from aes_inspector.adapters.base import CommandResult
from aes_inspector.checkers.nss_config import LibraryConfig, check_library_installed


def _write_cfg(tmp_path, body):
    cfg = tmp_path / "nss.cfg"
    cfg.write_text(body)
    return str(cfg)


def test_parse_reads_name_and_directory(tmp_path, fake_runner) -> None:
    lib_dir = tmp_path / "lib"
    lib_dir.mkdir()
    (lib_dir / "libnss3.so").write_bytes(b"\x7fELF")
    body = f"name = NSS\n\nnssLibraryDirectory = {lib_dir}  \nnssDbMode = noDb\n"
    runner = fake_runner({"ldd": CommandResult(0, "\tlinux-vdso.so.1\n", "")})

    config = LibraryConfig.parse_from_path(_write_cfg(tmp_path, body), runner)

    assert config.declared_name == "NSS"
    assert config.library_directory == str(lib_dir)
    assert config.raw_contents == body
    assert config.is_installed is True
    assert config.resolution_detail == "\tlinux-vdso.so.1\n"
    assert runner.calls == [["ldd", str(lib_dir / "libnss3.so")]]


def test_parse_without_directory_does_no_io(tmp_path, fake_runner) -> None:
    runner = fake_runner()
    config = LibraryConfig.parse_from_path(_write_cfg(tmp_path, "name = NSS\nnssLibraryDirectory =   \n"), runner)
    assert config.library_directory == ""
    assert config.is_installed is False
    assert config.resolution_detail == ""
    assert runner.calls == []


def test_parse_missing_file_raises(tmp_path, fake_runner) -> None:
    with pytest.raises(OSError):
        LibraryConfig.parse_from_path(str(tmp_path / "missing.cfg"), fake_runner())


def test_parse_keeps_value_after_first_equals(tmp_path, fake_runner) -> None:
    config = LibraryConfig.parse_from_path(_write_cfg(tmp_path, "name = a=b\n"), fake_runner())
    assert config.declared_name == "a=b"


def test_missing_directory(tmp_path, fake_runner) -> None:
    installed, detail = check_library_installed(str(tmp_path / "nope"), fake_runner())
    assert installed is False
    assert detail == f"{tmp_path / 'nope'} does not exist\n"


def test_missing_library_file(tmp_path, fake_runner) -> None:
    installed, detail = check_library_installed(str(tmp_path), fake_runner())
    assert installed is False
    assert detail == f"{tmp_path / 'libnss3.so'} does not exist\n"


def test_custom_library_filename(tmp_path, fake_runner) -> None:
    (tmp_path / "libsoftokn3.so").write_bytes(b"")
    installed, _ = check_library_installed(str(tmp_path), fake_runner(), library_filename="libsoftokn3.so")
    assert installed is True


def test_ldd_start_failure_is_not_installed(tmp_path, fake_runner) -> None:
    (tmp_path / "libnss3.so").write_bytes(b"")
    installed, detail = check_library_installed(str(tmp_path), fake_runner(failures=["ldd"]))
    assert installed is False
    assert detail.startswith("Error running ldd:\n")


def test_ldd_nonzero_exit_is_still_installed(tmp_path, fake_runner) -> None:
    (tmp_path / "libnss3.so").write_bytes(b"")
    runner = fake_runner({"ldd": CommandResult(1, "\tnot a dynamic executable\n", "")})
    installed, detail = check_library_installed(str(tmp_path), runner)
    assert installed is True
    assert detail == "ldd exited with code 1\n\tnot a dynamic executable\n"
