# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Error types and error codes for authdef.

The transcoding core never raises: both conversion directions are total.
These errors belong to the layers around it (document decoding, the
conversion facade, configuration and file handling).
"""

from enum import Enum
from typing import Dict, Any, Optional


class ErrorCode(str, Enum):
    """Standard error codes used across authdef."""
    DECODE_FAILED = "decode_failed"
    UNSUPPORTED_DIRECTION = "unsupported_direction"
    CONFIGURATION_ERROR = "configuration_error"
    INTERNAL_ERROR = "internal_error"

    def __str__(self) -> str:
        return self.value


DECODE_FAILED = ErrorCode.DECODE_FAILED
UNSUPPORTED_DIRECTION = ErrorCode.UNSUPPORTED_DIRECTION
CONFIGURATION_ERROR = ErrorCode.CONFIGURATION_ERROR
INTERNAL_ERROR = ErrorCode.INTERNAL_ERROR


class AuthDefError(Exception):
    """Base exception for all authdef errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            'error': self.error_code.value,
            'message': self.message,
            'details': self.details
        }

        if self.cause:
            result['cause'] = str(self.cause)

        return result

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"


class DecodeError(AuthDefError):
    """Raised when a document does not have the shape of a definition."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, DECODE_FAILED, details)
        self.path = path
        self.value = value

        if path:
            self.details['path'] = path
        if value is not None:
            self.details['type'] = type(value).__name__


class ConversionError(AuthDefError):
    """Raised when a conversion is requested in an unknown direction."""

    def __init__(self, direction: Any, details: Optional[Dict[str, Any]] = None):
        message = f"Unsupported conversion direction: {direction}"
        super().__init__(message, UNSUPPORTED_DIRECTION, details)
        self.direction = direction


class ConfigError(AuthDefError):
    """Raised when there's a configuration error."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message, CONFIGURATION_ERROR, details, cause)
        self.config_key = config_key
        self.config_value = config_value

        if config_key:
            self.details['config_key'] = config_key
        if config_value is not None:
            self.details['config_value'] = str(config_value)
