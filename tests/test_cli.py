"""이 파일은 .py 테스트 모듈로 CLI 인자 처리와 종료 코드를 검증합니다."""

import json
import os

from aes_inspector import cli
from aes_inspector.core.errors import ScanAborted


def test_missing_output_argument(capsys) -> None:
    assert cli.main([]) == 1
    assert cli.MISSING_OUTPUT_MESSAGE in capsys.readouterr().err


def test_unwritable_output(tmp_path) -> None:
    assert cli.main([str(tmp_path / "missing-dir" / "report.txt")]) == 1


def test_invalid_settings_exit_code(tmp_path) -> None:
    settings = tmp_path / "settings.yml"
    settings.write_text("checkers:\n  crypto_library:\n    search_depth: 0\n")
    output = tmp_path / "report.txt"
    assert cli.main([str(output), "--settings", str(settings)]) == 1
    assert not output.exists() or output.read_text() == ""


def test_report_is_appended(tmp_path, monkeypatch, fake_runner, capsys) -> None:
    monkeypatch.setattr(cli, "Orchestrator", _orchestrator_with(fake_runner()))
    output = tmp_path / "report.txt"
    output.write_text("previous run\n")
    summary = tmp_path / "summary.json"

    assert cli.main([str(output), "--summary-json", str(summary)]) == 0

    text = output.read_text()
    assert text.startswith("previous run\n======================\nAES-NI Support Checker\n")
    payload = json.loads(summary.read_text())
    assert [item["name"] for item in payload["verdicts"]][-1] == "libnss_java_security"
    assert "Libnss configured in java security settings:" in capsys.readouterr().out


def test_abort_exit_code(tmp_path, monkeypatch) -> None:
    class AbortingOrchestrator:
        def __init__(self, settings=None):
            pass

        def run(self, sink):
            raise ScanAborted("Interrupted while waiting for lscpu")

    monkeypatch.setattr(cli, "Orchestrator", AbortingOrchestrator)
    assert cli.main([str(tmp_path / "report.txt")]) == 130


def test_non_utf8_environment_does_not_stop_the_run(tmp_path, monkeypatch, fake_runner) -> None:
    monkeypatch.setitem(os.environb, b"AES_INSPECTOR_LATIN1", b"caf\xe9")
    monkeypatch.setattr(cli, "Orchestrator", _orchestrator_with(fake_runner(), include_environment=True))
    output = tmp_path / "report.txt"

    assert cli.main([str(output)]) == 0

    data = output.read_bytes()
    assert b"AES_INSPECTOR_LATIN1 : caf\xe9\n" in data
    assert b"[[Libnss configured in java security settings: false]]" in data


def _orchestrator_with(runner, include_environment=False):
    from aes_inspector.services.orchestrator import Orchestrator

    def factory(settings=None):
        settings = dict(settings or {})
        settings["runtime"] = {"include_environment": include_environment}
        settings["os_signals"] = {"release_files": [], "cpuinfo_path": "/nonexistent/cpuinfo", "crypto_path": "/nonexistent/crypto"}
        settings["crypto_library"] = {"security_home": "/nonexistent/jdk"}
        return Orchestrator(runner=runner, settings=settings)

    return factory
