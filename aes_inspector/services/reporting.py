"""이 파일은 .py 리포팅 모듈로 판정 요약과 JSON 요약 파일 생성을 제공합니다."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

from aes_inspector.core.report import format_bool
from aes_inspector.core.types import HeuristicResult


def summarize_results(results: List[HeuristicResult]) -> Dict[str, bool]:
    # 판정 이름별 결과를 모은다.
    return {result.name: result.verdict for result in results}


def format_console_lines(results: List[HeuristicResult]) -> List[str]:
    return [f"{result.label}: {format_bool(result.verdict)}" for result in results]


def build_summary_payload(results: List[HeuristicResult], generated_at: datetime) -> Dict[str, Any]:
    return {
        "generated_at": generated_at.isoformat(),
        "verdicts": [
            {
                "name": result.name,
                "label": result.label,
                "verdict": result.verdict,
                "evidence_chars": len(result.evidence),
            }
            for result in results
        ],
        "summary": summarize_results(results),
    }


def write_summary_json(file_path: Path, results: List[HeuristicResult]) -> None:
    payload = build_summary_payload(results, datetime.now(timezone.utc))
    Path(file_path).write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
