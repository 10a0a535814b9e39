# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Encoding and decoding helpers shared by the legacy and modern document codecs.

Decoding is lenient: missing keys fall back to defaults and unknown enum
strings are kept as plain strings. Only a wrong shape is an error.
"""

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Type

from ..errors import DecodeError


def expect_mapping(value: Any, path: str) -> Mapping[str, Any]:
    """Return value as a mapping; None reads as an empty one."""
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise DecodeError(f"Expected an object at '{path}'", path=path, value=value)
    return value


def expect_list(value: Any, path: str) -> List[Any]:
    """Return a copy of value as a list; None reads as an empty one."""
    if value is None:
        return []
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise DecodeError(f"Expected a list at '{path}'", path=path, value=value)
    return list(value)


def get_value(data: Mapping[str, Any], key: str, default: Any) -> Any:
    """Look up key in data; a missing key and an explicit null both read as default."""
    value = data.get(key)
    if value is None:
        return default
    return value


def enum_from_value(enum_cls: Type[Enum], value: Any) -> Any:
    """
    Map a raw value onto a member of enum_cls.
    Values outside the enumeration pass through unchanged.
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return value


def enum_to_value(value: Any) -> Any:
    """Inverse of enum_from_value."""
    if isinstance(value, Enum):
        return value.value
    return value


def string_map(value: Any, path: str) -> Dict[str, str]:
    """Decode a string-to-string mapping, copying it."""
    return dict(expect_mapping(value, path))


def optional_object(value: Any, path: str) -> Optional[Mapping[str, Any]]:
    """Like expect_mapping, but keeps None so absent sub-objects stay absent."""
    if value is None:
        return None
    return expect_mapping(value, path)
