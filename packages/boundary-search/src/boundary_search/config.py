from __future__ import annotations

from dataclasses import dataclass
import json
from pathlib import Path
from typing import Any, Union

import numpy as np


Number = Union[int, float]

_ALLOWED = {"values", "target", "first", "miss_index"}
_REQUIRED = {"values", "target"}


@dataclass(frozen=True, slots=True)
class LookupConfig:
    config_path: Path | None
    values: tuple[Number, ...]
    target: Number
    first: int = 0
    miss_index: int = -1


def _check_payload(payload: Any) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise ValueError("config must be an object")
    extra = sorted(set(payload) - _ALLOWED)
    if extra:
        raise ValueError(f"unknown keys in config: {extra}")
    missing = sorted(_REQUIRED - set(payload))
    if missing:
        raise ValueError(f"missing required keys in config: {missing}")
    return payload


def _is_number(raw: Any) -> bool:
    # bool is an int subclass; a JSON true/false here is a mistake
    return isinstance(raw, (int, float)) and not isinstance(raw, bool)


def _expect_int(raw: Any, where: str) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ValueError(f"{where} must be an integer")
    return int(raw)


def _has_nan(numbers: list[Number]) -> bool:
    floats = [v for v in numbers if isinstance(v, float)]
    return bool(floats) and bool(np.isnan(np.asarray(floats, dtype=np.float64)).any())


# Integers are kept exact; object arrays compare elements as Python numbers.
def _normalize_values(raw: Any) -> tuple[Number, ...]:
    if not isinstance(raw, (list, tuple)):
        raise ValueError("values must be a list of numbers")
    if any(isinstance(v, (list, tuple)) for v in raw):
        raise ValueError("values must be a flat list of numbers")
    if not all(_is_number(v) for v in raw):
        raise ValueError("values must be a list of numbers")
    values = list(raw)
    if _has_nan(values):
        raise ValueError("values must not contain NaN")
    if len(values) > 1:
        arr = np.asarray(values, dtype=object)
        if not bool(np.all(arr[1:] >= arr[:-1])):
            raise ValueError("values must be sorted ascending")
    return tuple(values)


def _normalize_target(raw: Any) -> Number:
    if not _is_number(raw):
        raise ValueError("target must be a number")
    if _has_nan([raw]):
        raise ValueError("target must not be NaN")
    return raw


def lookup_config_from_parts(
    *,
    values: Any,
    target: Any,
    first: Any = 0,
    miss_index: Any = -1,
    config_path: Path | None = None,
) -> LookupConfig:
    return LookupConfig(
        config_path=config_path,
        values=_normalize_values(values),
        target=_normalize_target(target),
        first=_expect_int(first, "first"),
        miss_index=_expect_int(miss_index, "miss_index"),
    )


def load_lookup_config(path: Path | str) -> LookupConfig:
    config_path = Path(path).resolve()
    if not config_path.exists():
        raise FileNotFoundError(f"config not found: {config_path}")

    payload = _check_payload(json.loads(config_path.read_text(encoding="utf-8")))
    return lookup_config_from_parts(
        values=payload["values"],
        target=payload["target"],
        first=payload.get("first", 0),
        miss_index=payload.get("miss_index", -1),
        config_path=config_path,
    )
