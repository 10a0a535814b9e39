# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Omission test for optional sub-structures.

A filled optional structure is dropped when every field holds its zero
value. Nested dataclasses are checked recursively, so a mode whose only
content is an unnamed header source is zero as well.
"""

import dataclasses
from collections.abc import Mapping, Sequence, Set
from enum import Enum
from typing import Any, Optional, TypeVar

T = TypeVar('T')


def is_zero(value: Any) -> bool:
    """Report whether value equals the zero value of its type."""
    if value is None:
        return True
    if isinstance(value, Enum):
        return is_zero(value.value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return all(is_zero(getattr(value, f.name)) for f in dataclasses.fields(value))
    if isinstance(value, (bool, int, float, complex)):
        return value == 0
    if isinstance(value, (str, bytes, Mapping, Sequence, Set)):
        return len(value) == 0
    return False


def should_omit(value: Any) -> bool:
    """Optional structures are omitted exactly when they are zero."""
    return is_zero(value)


def omit_if_zero(value: Optional[T]) -> Optional[T]:
    """Return None for a zero value, the value itself otherwise."""
    if should_omit(value):
        return None
    return value
