import math
from typing import Iterable
from pydantic import BaseModel
from ..errors import ValidationError


def missing_fields(data: BaseModel, fields: Iterable[str]) -> list:
    """Names of required fields that are absent, blank strings or non-finite numbers"""
    missing = []
    for field in fields:
        value = getattr(data, field, None)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(field)
        elif isinstance(value, float) and not math.isfinite(value):
            missing.append(field)
    return missing


def require_fields(data: BaseModel, fields: Iterable[str], message: str):
    if missing_fields(data, fields):
        raise ValidationError(message)
