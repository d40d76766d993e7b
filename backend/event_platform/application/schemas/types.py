"""Reusable constrained field types for request bodies."""

import re
from typing import Annotated

from pydantic import AfterValidator, HttpUrl, StringConstraints

_PHONE_RE = re.compile(r"^\+\d{2,15}$")


def _check_phone(value: str) -> str:
    value = value.strip()
    if not _PHONE_RE.match(value):
        raise ValueError("phone must be in E.164 format, e.g. +51987654321")
    return value


PersonName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=50)]
Phone = Annotated[str, AfterValidator(_check_phone)]
# Validated as an http(s) URL, carried as a plain string.
UrlStr = Annotated[HttpUrl, AfterValidator(str)]
