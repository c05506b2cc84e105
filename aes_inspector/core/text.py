"""이 파일은 .py 텍스트 유틸 모듈로 설정 라인 파싱 헬퍼를 제공합니다."""

import re
import traceback
from typing import List, Optional, Tuple

_KEY_VALUE = re.compile(r"^([A-Za-z0-9_.-]+)\s*=(.*)$")


def is_comment(line: str) -> bool:
    return line.startswith("#")


def substring_after(text: str, separator: str) -> str:
    # 구분자가 없으면 빈 문자열을 돌려준다.
    _, sep, rest = text.partition(separator)
    return rest if sep else ""


def parse_kv_line(line: str) -> Optional[Tuple[str, str]]:
    # key = value 형식만 인식하고 값은 첫 '=' 이후 전체를 trim 한다.
    m = _KEY_VALUE.match(line)
    if not m:
        return None
    return m.group(1), m.group(2).strip()


def split_lines(text: str) -> List[str]:
    # splitlines와 달리 '\n'에서만 자르고 '\r' 등은 원문 그대로 유지한다.
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def format_exception(exc: BaseException) -> str:
    # 리포트에 그대로 붙일 수 있는 스택 트레이스 문자열을 만든다.
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
