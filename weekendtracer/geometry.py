"""Detector geometry read from a JSON document."""

from __future__ import annotations

import json
import struct
from collections.abc import Mapping
from os import PathLike
from typing import Any, Union


def _as_float32(value: Any) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if not isinstance(value, (int, float)):
        raise TypeError(f"value {value!r} is not convertible to float")
    return struct.unpack("f", struct.pack("f", float(value)))[0]


class Geometry(Mapping):
    """A JSON object of named values, read as single-precision numbers."""

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._data = dict(data)

    @classmethod
    def load(cls, path: Union[str, PathLike]) -> "Geometry":
        """Read the geometry from a JSON file; OSError if the file cannot be opened."""
        with open(path, encoding="utf-8") as infile:
            data = json.load(infile)
        if not isinstance(data, dict):
            raise ValueError("the geometry document must be a JSON object")
        return cls(data)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def keys(self) -> list[str]:
        """The member names, sorted."""
        return sorted(self._data)

    def get_float(self, key: str) -> float:
        """The member as a float; a missing member reads as 0."""
        return _as_float32(self._data.get(key))

    def get_vector(self, key: str) -> list[float]:
        """The member's elements as floats; a missing member reads as empty."""
        value = self._data.get(key)
        if value is None:
            return []
        if isinstance(value, dict):
            value = value.values()
        elif not isinstance(value, list):
            raise TypeError(f"member {key!r} is not an array")
        return [_as_float32(item) for item in value]