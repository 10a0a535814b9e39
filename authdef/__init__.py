# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
authdef Python Package

Bidirectional transcoder for API gateway authentication definitions
"""

__version__ = "0.1.0"
__author__ = "Mauricio Fernandez"
__email__ = "mauricio.fernandez@siemens.com"

from .apidef import APIDefinition, AuthConfig, AuthMode, AuthTypeEnum
from .oas import Authentication
from .convert import Direction, to_oas, to_legacy, convert_document
from .errors import AuthDefError, DecodeError, ConversionError, ConfigError

__all__ = [
    "APIDefinition",
    "AuthConfig",
    "AuthMode",
    "AuthTypeEnum",
    "Authentication",
    "Direction",
    "to_oas",
    "to_legacy",
    "convert_document",
    "AuthDefError",
    "DecodeError",
    "ConversionError",
    "ConfigError",
]
