"""Lenient coercion helpers shared by the job and CV schemas."""

from __future__ import annotations

import math
from typing import Any


def coerce_number(value: Any) -> float:
    """Return ``value`` as a finite float, or 0.0 when it is not numeric."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip().replace(",", "")
        if not text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            return 0.0
    else:
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def coerce_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def coerce_label(value: Any) -> str | None:
    text = coerce_text(value)
    return text or None


def coerce_text_list(value: Any) -> list[str]:
    """Return the non-blank strings of ``value`` unchanged; scalars become one-item lists."""
    if value is None:
        return []
    if isinstance(value, str):
        items: list[Any] = [value]
    elif isinstance(value, (list, tuple, set, frozenset)):
        items = list(value)
    else:
        return []
    labels: list[str] = []
    for item in items:
        text = coerce_text(item)
        if text.strip():
            labels.append(text)
    return labels
