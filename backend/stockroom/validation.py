from __future__ import annotations

import math
from typing import Any, Mapping

from .errors import ValidationError


def read_payload(request) -> dict:
    """
    Body of a JSON or form-encoded request as a plain dict.

    Multipart bodies land in request.form as well.
    """
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def require_fields(payload: Mapping[str, Any], *names: str, message: str | None = None) -> tuple:
    """Return the stripped values of `names`, raising ValidationError if any is empty."""
    values = []
    missing = []
    for name in names:
        value = payload.get(name)
        if isinstance(value, str):
            value = value.strip()
        if value is None or value == "":
            missing.append(name)
        values.append(value)

    if missing:
        raise ValidationError(message or f"Missing required fields: {', '.join(missing)}")
    return tuple(values)


def coerce_integer(value: Any, field: str) -> int | None:
    """Strict integer coercion: rejects floats, decimals and scientific notation."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return None
        if "e" in stripped.lower():
            raise ValidationError(f"{field} must be a plain integer (scientific notation not allowed)")
        if "." in stripped:
            raise ValidationError(f"{field} must be an integer (no decimals)")
        try:
            return int(stripped)
        except ValueError:
            raise ValidationError(f"{field} must be an integer")
    if isinstance(value, float):
        raise ValidationError(f"{field} must be an integer, not a decimal")
    raise ValidationError(f"{field} must be an integer")


def coerce_number(value: Any, field: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number")
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            raise ValidationError(f"{field} must be a number")
    elif isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return None
        try:
            number = float(stripped)
        except ValueError:
            raise ValidationError(f"{field} must be a number")
    else:
        raise ValidationError(f"{field} must be a number")
    # inf and nan have no JSON encoding
    if not math.isfinite(number):
        raise ValidationError(f"{field} must be a number")
    return number
