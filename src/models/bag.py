"""Typed primitive readers over a receiver metadata bag."""

import json
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from src.exceptions import (
    MalformedArrayElementError,
    MissingKeyError,
    TypeMismatchError,
)
from src.utils.frozen import thaw

__all__ = ["MetadataBag"]

IMAGE_URL_KEY = "url"


@dataclass(frozen=True, slots=True, eq=False)
class MetadataBag(Mapping[str, Any]):
    """Read-only lens over a string-keyed, loosely typed metadata mapping.

    The bag never copies the mapping it wraps; callers are expected to hand
    it an immutable snapshot (see `src.utils.frozen.freeze`). A key holding
    JSON `null` is treated the same as an absent key.

    The mapping protocol (`bag[key]`, `key in bag`, iteration) is the escape
    hatch for receiver-specific keys that have no typed accessor.
    """

    raw: Mapping[str, Any]

    def __getitem__(self, key: str) -> Any:
        try:
            return self.raw[key]
        except KeyError:
            raise MissingKeyError(key) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self.raw)

    def __len__(self) -> int:
        return len(self.raw)

    def __repr__(self) -> str:
        return f"MetadataBag({dict(self.raw)!r})"

    def _require(self, key: str) -> Any:
        value = self.raw.get(key)
        if value is None:
            raise MissingKeyError(key)
        return value

    def get_string(self, key: str) -> str:
        """Read a value as a string, stringifying non-string values.

        Receivers are lenient about scalar types, so numbers and booleans are
        rendered the way they appear on the wire (`2`, `2.5`, `true`) and
        nested structures are rendered as JSON.

        Raises:
            MissingKeyError: If the key is absent.
        """
        value = self._require(key)
        if isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, bytes):
            return value.decode("utf-8", errors="replace")
        if isinstance(value, (Mapping, Sequence)):
            return json.dumps(thaw(value), separators=(",", ":"), default=str)
        return str(value)

    def get_int(self, key: str) -> int:
        """Read an integer-valued number.

        Floats without a fractional part (`3.0`) are accepted, since JSON
        decoders on some receivers emit every number as a double.

        Raises:
            MissingKeyError: If the key is absent.
            TypeMismatchError: If the value is not integer-valued.
        """
        value = self._require(key)
        if isinstance(value, bool):
            raise TypeMismatchError(key, "int", value)
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        raise TypeMismatchError(key, "int", value)

    def get_double(self, key: str) -> float:
        """Read a number as a float.

        Raises:
            MissingKeyError: If the key is absent.
            TypeMismatchError: If the value is not numeric.
        """
        value = self._require(key)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeMismatchError(key, "float", value)
        return float(value)

    def get_string_array(self, key: str) -> list[str]:
        """Read a sequence of `{"url": ...}` mappings as a list of url strings.

        This is the shape receivers use for image lists. Input order is kept.

        Raises:
            MissingKeyError: If the key is absent.
            TypeMismatchError: If the value is not a sequence.
            MalformedArrayElementError: If an element is not a mapping holding
                a string `url`.
        """
        value = self._require(key)
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            raise TypeMismatchError(key, "array", value)

        urls: list[str] = []
        for index, element in enumerate(value):
            url = element.get(IMAGE_URL_KEY) if isinstance(element, Mapping) else None
            if not isinstance(url, str):
                raise MalformedArrayElementError(key, index, element)
            urls.append(url)
        return urls
