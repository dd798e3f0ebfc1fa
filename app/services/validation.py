# app/services/validation.py
"""
Form field validators.

Each returns either the normalized value or a `ValidationError`; none of them
raise for bad input.
"""
import math
from typing import Any, Tuple

from starlette.datastructures import UploadFile

from ..core.errors import ValidationError
from ..utils.geo import within_bounds


def require_non_empty_string(value: Any, field_name: str) -> str | ValidationError:
    if not isinstance(value, str) or not value.strip():
        return ValidationError(f"{field_name} is required.")
    return value.strip()


def _parse_finite(raw: str) -> float | None:
    try:
        number = float(raw)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def validate_lat_long(lat_raw: Any, long_raw: Any) -> Tuple[float, float] | ValidationError:
    if not isinstance(lat_raw, str) or not isinstance(long_raw, str):
        return ValidationError("Location is required.")
    if not lat_raw.strip() or not long_raw.strip():
        return ValidationError("Location is required.")

    lat = _parse_finite(lat_raw)
    lon = _parse_finite(long_raw)
    if lat is None or lon is None:
        return ValidationError("Invalid location values.")

    if not within_bounds(lat, lon):
        return ValidationError("Location values are out of range.")

    return lat, lon


def validate_image(value: Any) -> UploadFile | ValidationError:
    if not isinstance(value, UploadFile):
        return ValidationError("Image file is required.")
    if not (value.content_type or "").startswith("image/"):
        return ValidationError("Only image uploads are allowed.")
    return value
