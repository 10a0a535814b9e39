# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Utility package providing helper functions for authdef.

This package includes:
- Encoding helpers used by the document codecs
- Configuration helpers for environment settings and definition files
"""

from .encoding import (
    expect_mapping, expect_list, enum_from_value,
    enum_to_value, get_value, string_map, optional_object
)
from .config import (
    get_config_value, get_int_config, detect_format,
    load_config_file, dump_config, save_config_file
)

__all__ = [
    # Encoding utilities
    'expect_mapping', 'expect_list', 'enum_from_value',
    'enum_to_value', 'get_value', 'string_map', 'optional_object',

    # Configuration utilities
    'get_config_value', 'get_int_config', 'detect_format',
    'load_config_file', 'dump_config', 'save_config_file'
]
