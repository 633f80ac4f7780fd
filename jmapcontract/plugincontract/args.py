"""Dynamic argument container carried between the core and method plugins."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def coerce_int(value: Any) -> tuple[int, bool]:
    """Normalize a JSON number to a 64-bit integer.

    Floats are truncated toward zero (3.9 -> 3, -3.9 -> -3). Booleans, NaN,
    infinities and values outside the signed 64-bit range are rejected.
    """
    if isinstance(value, bool):
        return 0, False
    if isinstance(value, int):
        n = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            return 0, False
        n = math.trunc(value)
    else:
        return 0, False
    if n < INT64_MIN or n > INT64_MAX:
        return 0, False
    return n, True


def coerce_float(value: Any) -> tuple[float, bool]:
    """Normalize a JSON number to a float; ints are widened with float()."""
    if isinstance(value, bool):
        return 0.0, False
    if isinstance(value, float):
        return value, True
    if isinstance(value, int):
        try:
            return float(value), True
        except OverflowError:
            return 0.0, False
    return 0.0, False


class Args(dict[str, Any]):
    """Method arguments or response data with failure-safe typed accessors.

    Every accessor returns ``(value, ok)``; ``ok`` is False when the key is
    missing or the stored value has the wrong type. The ``*_or`` variants
    return a caller-supplied default instead. Nothing here raises on
    malformed payloads.
    """

    @classmethod
    def of(cls, value: Any) -> "Args":
        """Wrap a decoded JSON value; None and non-mappings become an empty Args."""
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls(value)
        return cls()

    def has(self, key: str) -> bool:
        """True when the key is present, even if its value is None."""
        return key in self

    def get_string(self, key: str) -> tuple[str, bool]:
        value = self.get(key)
        if isinstance(value, str):
            return value, True
        return "", False

    def string_or(self, key: str, default: str) -> str:
        value, ok = self.get_string(key)
        return value if ok else default

    def get_int(self, key: str) -> tuple[int, bool]:
        if key not in self:
            return 0, False
        return coerce_int(self[key])

    def int_or(self, key: str, default: int) -> int:
        value, ok = self.get_int(key)
        return value if ok else default

    def get_float(self, key: str) -> tuple[float, bool]:
        if key not in self:
            return 0.0, False
        return coerce_float(self[key])

    def float_or(self, key: str, default: float) -> float:
        value, ok = self.get_float(key)
        return value if ok else default

    def get_bool(self, key: str) -> tuple[bool, bool]:
        value = self.get(key)
        if isinstance(value, bool):
            return value, True
        return False, False

    def bool_or(self, key: str, default: bool) -> bool:
        value, ok = self.get_bool(key)
        return value if ok else default

    def get_string_slice(self, key: str) -> tuple[list[str], bool]:
        """All-or-nothing: one non-string element invalidates the whole list."""
        value = self.get(key)
        if not isinstance(value, (list, tuple)):
            return [], False
        if not all(isinstance(item, str) for item in value):
            return [], False
        return list(value), True

    def string_slice_or(self, key: str, default: list[str]) -> list[str]:
        value, ok = self.get_string_slice(key)
        return value if ok else default

    def get_object(self, key: str) -> tuple["Args", bool]:
        value = self.get(key)
        if isinstance(value, Mapping):
            return Args.of(value), True
        return Args(), False

    def object_or(self, key: str, default: "Args") -> "Args":
        value, ok = self.get_object(key)
        return value if ok else default
