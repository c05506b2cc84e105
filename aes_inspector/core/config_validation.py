"""이 파일은 .py 체커 설정 스키마 검증 모듈입니다."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from .errors import CheckerConfigError


_TYPE_MAP = {
    # 스키마 타입을 파이썬 타입으로 매핑한다.
    "string": str,
    "integer": int,
    "boolean": bool,
    "object": dict,
    "array": list,
}


def _check_type(key: str, expected: str, value: Any, errors: List[str]) -> bool:
    expected_type = _TYPE_MAP.get(expected)
    if expected_type is None:
        errors.append(f"Unsupported type in schema: {expected}")
        return False
    # bool은 int의 하위 타입이므로 integer 검증에서 예외 처리한다.
    if expected == "integer" and isinstance(value, bool):
        errors.append(f"Config '{key}' must be integer")
        return False
    if not isinstance(value, expected_type):
        errors.append(f"Config '{key}' must be {expected}")
        return False
    return True


def apply_config_schema(schema: Optional[Dict[str, Any]], config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    # 스키마가 없으면 전달된 설정을 그대로 반환한다.
    if not schema:
        return config or {}
    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise CheckerConfigError("Checker config must be an object")

    props = schema.get("properties", {})
    errors: List[str] = []
    result = dict(config)

    for key, spec in props.items():
        # default가 명시된 항목은 값이 없을 때 자동 주입한다.
        # 리스트 기본값은 체커 간에 공유되지 않도록 복사한다.
        if key not in result and "default" in spec:
            default = spec["default"]
            result[key] = list(default) if isinstance(default, list) else default

    for key, value in result.items():
        spec = props.get(key)
        if not spec:
            continue
        expected = spec.get("type")
        if expected and not _check_type(key, expected, value, errors):
            continue
        if isinstance(value, int) and not isinstance(value, bool):
            if "min" in spec and value < spec["min"]:
                errors.append(f"Config '{key}' must be >= {spec['min']}")
            if "max" in spec and value > spec["max"]:
                errors.append(f"Config '{key}' must be <= {spec['max']}")
        if isinstance(value, str):
            if "min_length" in spec and len(value) < spec["min_length"]:
                errors.append(f"Config '{key}' length must be >= {spec['min_length']}")
        if isinstance(value, list):
            if "min_items" in spec and len(value) < spec["min_items"]:
                errors.append(f"Config '{key}' must have >= {spec['min_items']} items")
            # 배열 원소 타입은 items.type으로 검사한다.
            item_type = (spec.get("items") or {}).get("type")
            if item_type:
                for index, item in enumerate(value):
                    _check_type(f"{key}[{index}]", item_type, item, errors)

    if errors:
        # 누적된 오류를 하나의 예외로 전달한다.
        raise CheckerConfigError("; ".join(errors))

    return result
